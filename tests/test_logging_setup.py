# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from todos.logging_setup import CONSOLE_HANDLER, FILE_HANDLER, level_from_name, setup_logging


def _ours() -> dict[str, logging.Handler]:
    return {
        h.get_name(): h
        for h in logging.getLogger().handlers
        if h.get_name() in (CONSOLE_HANDLER, FILE_HANDLER)
    }


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" INFO ") == logging.INFO
    assert level_from_name("nonsense") == logging.WARNING
    assert level_from_name("nonsense", default=logging.ERROR) == logging.ERROR


def test_console_only_by_default() -> None:
    setup_logging(console_level=logging.INFO)
    handlers = _ours()
    assert set(handlers) == {CONSOLE_HANDLER}
    assert handlers[CONSOLE_HANDLER].level == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers(tmp_path: Path) -> None:
    setup_logging(log_file=tmp_path / "a.log")
    setup_logging(log_file=tmp_path / "a.log")
    names = [h.get_name() for h in logging.getLogger().handlers]
    assert names.count(CONSOLE_HANDLER) == 1
    assert names.count(FILE_HANDLER) == 1


def test_console_filter_keeps_own_logs_and_drops_third_party_noise(capsys) -> None:
    setup_logging(console_level=logging.INFO)

    logging.getLogger("todos.tasks").info("own info")
    logging.getLogger("somelib").warning("library warning")
    logging.getLogger("somelib").error("library error")

    err = capsys.readouterr().err
    assert "own info" in err
    assert "library warning" not in err
    assert "library error" in err


def test_file_handler_gets_debug(tmp_path: Path) -> None:
    log_file = tmp_path / "sub" / "todos.log"
    setup_logging(log_file=log_file)

    logging.getLogger("todos.test").debug("deep detail")

    assert "deep detail" in log_file.read_text("utf-8")
