# src/todos/cli/main.py

"""
CLI entrypoint.

One invocation is one command: parse argv, open the store, run the command,
exit. Bad invocations are reported as "Command error: ...", failures while
running as "App error: ...", both with exit status 1.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import open_task_store
from ..cli.commands import parse_command, run_command
from ..config import get_settings
from ..errors import AppError, CommandError
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    if settings is None:
        settings = get_settings()

    console_level = level_from_name(getattr(settings, "log_level", "WARNING"))
    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    args = list(sys.argv[1:] if argv is None else argv)
    logger.debug("Starting %s args=%r", getattr(settings, "app_name", "todos"), args)

    try:
        command = parse_command(args)
    except CommandError as exc:
        logger.debug("Rejected invocation.", exc_info=True)
        print(f"Command error: {exc}", file=sys.stderr)
        return 1

    try:
        with open_task_store(settings=settings) as store:
            run_command(store, command, emit=print)
    except (AppError, OSError, UnicodeError) as exc:
        logger.debug("Command %s failed.", command.name, exc_info=True)
        print(f"App error: {exc}", file=sys.stderr)
        return 1

    return 0


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
