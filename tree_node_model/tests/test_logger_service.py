import logging

import pytest

from logger.logger_service import COLORS, configure_logging, console_formatter, get_logger


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)


def test_configure_logging_writes_to_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "tree.log"

    configure_logging("debug", log_file=log_file)
    get_logger("logger.tests").debug("recomputed keys")

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 2
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert "recomputed keys" in log_file.read_text()


def test_console_formatter_leaves_record_plain():
    record = logging.LogRecord("tree_node_model", logging.WARNING, __file__, 1, "msg", None, None)

    formatted = console_formatter.format(record)

    assert COLORS['RESET'] in formatted
    assert record.name == "tree_node_model"
    assert record.levelname == "WARNING"

