# src/todos/tasks/__init__.py

from .task_codec import SEPARATOR, decode, encode
from .task_models import Task
from .task_store import TaskStore

__all__ = ["SEPARATOR", "Task", "TaskStore", "decode", "encode"]
