"""Tests for logger setup."""

import logging
import sys
from pathlib import Path

from plainassert.verbose import setup_logger


def test_logger_creates_debug_log(tmp_path: Path):
    """Logger should create the debug file when one is given."""
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_writes_to_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False)

    logger.debug("test message")

    content = debug_file.read_text()
    assert "test message" in content
    assert "[" in content  # timestamp


def test_child_module_loggers_propagate_to_file(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file=debug_file)

    logging.getLogger("plainassert.assertions.checks").debug("from child")

    assert "from child" in debug_file.read_text()


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    logger = setup_logger(debug_file=tmp_path / "debug.log", verbose=True)

    assert len(logger.handlers) == 2
    handler_types = [type(h).__name__ for h in logger.handlers]
    assert "StreamHandler" in handler_types
    assert "FileHandler" in handler_types


def test_no_debug_file_verbose_only(tmp_path: Path):
    logger = setup_logger(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr


def test_level_is_applied(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, level=logging.WARNING)

    logger.info("quiet")
    logger.warning("loud")

    content = debug_file.read_text()
    assert "quiet" not in content
    assert "loud" in content


def test_repeated_setup_replaces_handlers(tmp_path: Path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    setup_logger(debug_file=first)
    logger = setup_logger(debug_file=second)

    logger.debug("only second")

    assert len(logger.handlers) == 1
    assert "only second" not in first.read_text()
    assert "only second" in second.read_text()


def test_unique_logger_names_are_independent(tmp_path: Path):
    log1 = tmp_path / "one.log"
    log2 = tmp_path / "two.log"
    logger1 = setup_logger(log1, logger_name="plainassert_one")
    logger2 = setup_logger(log2, logger_name="plainassert_two")

    logger1.debug("message one")
    logger2.debug("message two")

    assert "message two" not in log1.read_text()
    assert "message one" not in log2.read_text()


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False)

    assert debug_file.exists()
