import logging
import os
import sys

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from nodechain.logger import LOG_FORMAT, setup_logger


def _close(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logger_console_only():
    logger = setup_logger("nodechain.test.console", level=logging.DEBUG)
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.handlers[0].formatter._fmt == LOG_FORMAT
    finally:
        _close(logger)


def test_setup_logger_does_not_duplicate_handlers():
    name = "nodechain.test.repeat"
    logger = setup_logger(name)
    try:
        again = setup_logger(name, level=logging.WARNING)
        assert again is logger
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING
    finally:
        _close(logger)


def test_setup_logger_writes_file(tmp_path):
    path = tmp_path / "nodechain.log"
    logger = setup_logger("nodechain.test.file", log_file=str(path))
    try:
        assert len(logger.handlers) == 2
        logger.info("hello file")
        for handler in logger.handlers:
            handler.flush()
        assert "hello file" in path.read_text(encoding="utf-8")
    finally:
        _close(logger)


def test_setup_logger_on_package_root_captures_list_debug(tmp_path):
    from nodechain import LinkedList, Node

    path = tmp_path / "package.log"
    logger = setup_logger("nodechain", log_file=str(path), level=logging.DEBUG)
    try:
        # NullHandler from the package plus the console and file handlers
        assert sum(not isinstance(h, logging.NullHandler) for h in logger.handlers) == 2

        assert LinkedList([1, 2]).remove_node(Node(1)) is None
        for handler in logger.handlers:
            handler.flush()
        assert "remove_node: handle Node(1) not found" in path.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            if not isinstance(handler, logging.NullHandler):
                handler.close()
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
