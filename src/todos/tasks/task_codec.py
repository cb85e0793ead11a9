# src/todos/tasks/task_codec.py

"""
Single-line record codec for the tasks file.

A record is `<flag><SEPARATOR><name>`:
- flag is `1` for a completed task and `0` otherwise
- the name is written verbatim; a name containing SEPARATOR is not escaped and
  will fail to decode on the next load
- both `\n` and `\r\n` line endings are accepted, so a name ending in `\r`
  loses that `\r` on the next load

Decoding is lenient about the flag: any non-negative integer other than 1 reads
as "incomplete".
"""

from __future__ import annotations

from ..errors import ParseError
from .task_models import Task

SEPARATOR = "|"


def _is_number(raw: str) -> bool:
    return raw.isascii() and raw.isdigit()


def encode(task: Task) -> str:
    flag = 1 if task.completed else 0
    return f"{flag}{SEPARATOR}{task.name}"


def decode(line: str) -> Task:
    content = line.rstrip("\n")
    if content.endswith("\r"):
        content = content[:-1]

    parts = content.split(SEPARATOR)
    if len(parts) != 2:
        raise ParseError("Failed to parse Task", line=content)

    flag, name = parts
    if not _is_number(flag):
        raise ParseError("Failed to parse Task: flag is not a number", line=content)

    return Task(name=name, completed=int(flag) == 1)
