# src/todos/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import cast

from ..errors import InvalidNumberError, MissingArgumentError, UnsupportedCommandError
from ..tasks.task_codec import SEPARATOR, encode
from ..tasks.task_store import TaskStore

CommandEmitter = Callable[[str], None]

logger = logging.getLogger(__name__)


class ArgKind(StrEnum):
    """What the single positional argument of a command must be."""

    NONE = "none"
    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    text: str | None = None
    number: int | None = None


CommandHandler = Callable[[TaskStore, Command, CommandEmitter], None]


@dataclass(frozen=True, slots=True)
class _Entry:
    handler: CommandHandler
    arg: ArgKind
    missing: str


def parse_number(raw: str) -> int:
    """Parse a task number: a plain non-negative decimal integer."""
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidNumberError("Non-integer number")
    return int(raw)


class CommandRegistry:
    """Command-word registry: parses an argv tail into a Command and runs it."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        *,
        arg: ArgKind = ArgKind.NONE,
        missing: str = "Missing argument",
    ) -> None:
        self._entries[name.lower()] = _Entry(handler, arg, missing)

    def parse(self, args: Sequence[str]) -> Command:
        """
        Turn the arguments after the program name into a Command.

        Only the command word is case-folded. Arguments beyond the one a
        command consumes are ignored.
        """
        if not args:
            raise MissingArgumentError("Missing command")

        name = args[0].lower()
        entry = self._entries.get(name)
        if entry is None:
            raise UnsupportedCommandError("Unsupported command")

        if entry.arg is ArgKind.NONE:
            return Command(name)

        if len(args) < 2:
            raise MissingArgumentError(entry.missing)

        raw = args[1]
        if entry.arg is ArgKind.NUMBER:
            return Command(name, number=parse_number(raw))
        return Command(name, text=raw)

    def run(self, store: TaskStore, command: Command, emit: CommandEmitter) -> None:
        # Commands come from parse(), so the name is always registered.
        entry = self._entries[command.name]
        logger.debug("Running command %s", command)
        entry.handler(store, command, emit)


registry = CommandRegistry()


def cmd_add(store: TaskStore, command: Command, emit: CommandEmitter) -> None:
    text = cast(str, command.text)
    store.add(text)
    store.save()
    emit(f"Adding task: {text}")


def cmd_list(store: TaskStore, command: Command, emit: CommandEmitter) -> None:
    emit(f"#{SEPARATOR}C{SEPARATOR}Task")
    for index, task in enumerate(store):
        emit(f"{index}{SEPARATOR}{encode(task)}")


def cmd_complete(store: TaskStore, command: Command, emit: CommandEmitter) -> None:
    number = cast(int, command.number)
    store.complete(number)
    store.save()
    emit(f"Completing task: {number}")


def cmd_delete(store: TaskStore, command: Command, emit: CommandEmitter) -> None:
    number = cast(int, command.number)
    store.remove(number)
    store.save()
    emit(f"Deleting task: {number}")


registry.register("add", cmd_add, arg=ArgKind.TEXT, missing="Missing task")
registry.register("list", cmd_list)
registry.register("complete", cmd_complete, arg=ArgKind.NUMBER, missing="Missing task number")
registry.register("delete", cmd_delete, arg=ArgKind.NUMBER, missing="Missing task number")


def parse_command(args: Sequence[str]) -> Command:
    return registry.parse(args)


def run_command(store: TaskStore, command: Command, emit: CommandEmitter = print) -> None:
    registry.run(store, command, emit)
