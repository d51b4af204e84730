"""file_explorer package: interactive filesystem shell."""
