# src/todos/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import BinaryIO

from ..errors import MissingTaskError, ParseError
from .task_codec import decode, encode
from .task_models import Task

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class TaskStore:
    """
    Flat-file task store.

    Owns the ordered in-memory task list and the open file handle for the
    lifetime of one invocation:
    - the file is opened read+write (created if missing) and loaded on construction
    - every save() truncates the file and rewrites the whole list

    Positions are the only task identifiers; removing a task renumbers every
    task after it. There is no locking: two processes saving concurrently will
    race and the last rewrite wins.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._fh: BinaryIO | None = self._open(self._path)
        self._tasks: list[Task] = []
        try:
            self._tasks = self.load()
        except BaseException:
            self.close()
            raise
        logger.debug("TaskStore ready path=%s total=%s", self._path, len(self._tasks))

    @staticmethod
    def _open(path: Path) -> BinaryIO:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
        # Binary: each line is decoded on its own so a bad byte is reported with its line number.
        return open(fd, "r+b")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tasks(self) -> Sequence[Task]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _file(self) -> BinaryIO:
        if self._fh is None:
            raise ValueError(f"TaskStore for {self._path} is closed")
        return self._fh

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    # ---- persistence ----

    def load(self) -> list[Task]:
        """
        Read every record from the start of the file.

        The first undecodable line (bad record or invalid UTF-8) aborts the
        whole load with ParseError.
        An empty file is an empty list.
        """
        fh = self._file()
        fh.seek(0)

        tasks: list[Task] = []
        for line_no, raw in enumerate(fh, start=1):
            try:
                line = raw.decode(ENCODING)
            except UnicodeDecodeError as exc:
                raise ParseError("Failed to parse Task: invalid UTF-8", line_no=line_no) from exc
            try:
                tasks.append(decode(line))
            except ParseError as exc:
                raise ParseError(str(exc), line=exc.line, line_no=line_no) from exc

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self) -> None:
        """Truncate the file and rewrite the full list. Not crash-safe."""
        fh = self._file()
        # Encode everything first: a failure here must not leave the file truncated.
        payload = "".join(encode(task) + "\n" for task in self._tasks).encode(ENCODING)
        fh.truncate(0)
        fh.seek(0)
        fh.write(payload)
        fh.flush()
        logger.debug("Saved %d tasks to %s", len(self._tasks), self._path)

    # ---- list operations (in memory; callers save) ----

    def add(self, name: str) -> Task:
        """Append an incomplete task. Raises UnicodeEncodeError for names that cannot be stored."""
        name.encode(ENCODING)
        task = Task(name=name)
        self._tasks.append(task)
        return task

    def get(self, index: int) -> Task | None:
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

    def complete(self, index: int) -> Task:
        task = self.get(index)
        if task is None:
            raise MissingTaskError(index, len(self._tasks))
        task.complete()
        return task

    def remove(self, index: int) -> Task:
        if not 0 <= index < len(self._tasks):
            raise MissingTaskError(index, len(self._tasks))
        return self._tasks.pop(index)
