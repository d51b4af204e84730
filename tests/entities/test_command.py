from file_explorer.entities.command import CommandInvocation
from file_explorer.entities.outcome import CommandResult, ErrorKind, OutcomeStatus


def test_parse_splits_on_whitespace():
    inv = CommandInvocation.parse("  cp   a.txt\tb.txt ")

    assert inv is not None
    assert inv.keyword == "cp"
    assert inv.args == ("a.txt", "b.txt")


def test_parse_blank_line():
    assert CommandInvocation.parse("") is None
    assert CommandInvocation.parse("   ") is None


def test_has_required_args():
    inv = CommandInvocation.parse("chmod file.txt")

    assert inv is not None
    assert inv.with_arity(2).has_required_args() is False
    assert inv.with_arity(1).has_required_args() is True


def test_result_ok_flag():
    assert CommandResult.success("done").ok is True
    assert CommandResult.info("note").ok is True
    assert CommandResult.warning("careful").ok is True

    failed = CommandResult.error(ErrorKind.NOT_FOUND, "missing")
    assert failed.ok is False
    assert failed.status is OutcomeStatus.ERROR
    assert failed.kind is ErrorKind.NOT_FOUND
