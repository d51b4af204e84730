"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_explorer.container import DependencyContainer
from file_explorer.ui.console_renderer import ConsoleRenderer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Canonical path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)

        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(temp_directory, mock_logger):
    """
    Create a dependency container rooted at the temporary directory.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(start_directory=temp_directory)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def dispatcher(dependency_container):
    """Command dispatcher whose cursor starts in the temporary directory."""
    return dependency_container.get_command_dispatcher()


@pytest.fixture
def output():
    """In-memory buffer the renderer writes plain text to."""
    return io.StringIO()


@pytest.fixture
def renderer(output):
    """ConsoleRenderer writing uncolored text to the ``output`` buffer."""
    console = Console(file=output, width=120, color_system=None, highlight=False)
    return ConsoleRenderer(console)
