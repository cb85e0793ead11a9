# src/todos/__init__.py

"""todos - a minimal command-line task tracker backed by a flat text file."""

__version__ = "0.1.0"
