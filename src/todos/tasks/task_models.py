# src/todos/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    name: str
    completed: bool = False

    def complete(self) -> None:
        # No way back to incomplete from the CLI.
        self.completed = True
