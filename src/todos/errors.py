# src/todos/errors.py

"""
Error taxonomy.

Two families, reported differently by the CLI entrypoint:
- CommandError: the invocation itself is wrong ("Command error: ...")
- AppError: something failed while executing it ("App error: ...")

File I/O failures are not wrapped: they surface as the builtin OSError and are
reported as app errors.
"""

from __future__ import annotations


class TodosError(Exception):
    """Base class for every error raised by todos."""


class CommandError(TodosError):
    """The command line could not be turned into a command."""


class MissingArgumentError(CommandError):
    pass


class InvalidNumberError(CommandError):
    pass


class UnsupportedCommandError(CommandError):
    pass


class AppError(TodosError):
    """A parsed command failed while running."""


class ParseError(AppError):
    """A line of the tasks file does not match the `<flag>|<name>` record format."""

    def __init__(self, message: str, *, line: str | None = None, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"{message} (line {line_no})"
        super().__init__(message)
        self.line = line
        self.line_no = line_no


class MissingTaskError(AppError):
    """A task number is outside the current list bounds."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__("Missing task")
        self.index = index
        self.size = size
