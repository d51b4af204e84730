"""
Interactive shell entry point.
"""

import logging
import sys
from collections.abc import Callable

from rich.console import Console
from rich.text import Text

from file_explorer.config.settings import Settings
from file_explorer.container import container
from file_explorer.ui.console_renderer import ConsoleRenderer
from file_explorer.use_cases.shell.command_dispatcher import CommandDispatcher

PROMPT = "explorer> "

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    if settings.log_file:
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, filename=settings.log_file)
    else:
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr)


def run(
    dispatcher: CommandDispatcher,
    renderer: ConsoleRenderer,
    read_line: Callable[[str], str] = input,
) -> int:
    """
    Read-dispatch-render loop.

    Runs until ``exit``/``quit``, end of input or Ctrl+C. Always returns 0.
    """
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            # Ctrl+D
            renderer.console.print()
            break
        except KeyboardInterrupt:
            renderer.console.print()
            renderer.console.print("Interrupted.")
            break

        result = dispatcher.dispatch(line)
        try:
            renderer.render(result)
        except Exception as e:
            logger.error(f"Error rendering result: {e}")
            renderer.console.print(Text(f"Error: cannot display result: {e}", style="bold red"))
        if result is not None and result.exit:
            break

    logger.info("Shell loop finished")
    return 0


def main() -> int:
    """Main application entry point."""
    settings = Settings()
    configure_logging(settings)

    renderer = ConsoleRenderer(Console(highlight=False, no_color=not settings.color))
    container.set_renderer(renderer)
    dispatcher = container.get_command_dispatcher()

    logger.info(f"Starting in {container.get_path_resolver().current()}")
    renderer.render_banner("File Explorer", "Type 'help' for commands")
    renderer.console.print()
    renderer.render(dispatcher.dispatch("help"))

    return run(dispatcher, container.get_renderer())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
