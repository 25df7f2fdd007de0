"""
Entry point for djset-cli. Runs the Typer app and turns anything that escapes
it into a short message and an exit code.
"""

import logging
import os
import sys

import typer
from rich.console import Console

from djset_cli.cli.app import app
from djset_cli.cli.formatters import format_error_with_suggestions
from djset_cli.exceptions import DjSetError

log = logging.getLogger("djset_cli")


def main() -> None:
    """Runs the CLI. Exit code 0 on success or cancellation, 1 on any error."""
    if os.name == "nt":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            sys.stderr.reconfigure(encoding="utf-8")
        except (TypeError, AttributeError):
            pass

    console = Console()

    try:
        app()
    except (typer.Exit, typer.Abort):
        pass
    except (KeyboardInterrupt, EOFError):
        console.print(
            "\n[yellow]Set planning cancelled. Unsaved tracks were dropped.[/yellow]"
        )
        sys.exit(0)
    except DjSetError as e:
        console.print()
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print()
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
