import logging
import logging.handlers

import pytest

from random_mdn import logging_setup


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    logging_setup._installed.clear()
    root.setLevel(level)


def _ours(root):
    return [h for h in root.handlers if h in logging_setup._installed]


def test_repeated_setup_keeps_one_stream_handler(root_logger):
    logging_setup.setup_logging("INFO", "")
    logging_setup.setup_logging("DEBUG", "")

    ours = _ours(root_logger)
    assert len(ours) == 1
    assert type(ours[0]) is logging.StreamHandler
    assert root_logger.level == logging.DEBUG


def test_file_handler_replaced_not_stacked(root_logger, tmp_path):
    log_file = tmp_path / "bot.log"
    logging_setup.setup_logging("INFO", str(log_file))
    logging_setup.setup_logging("INFO", str(log_file))

    ours = _ours(root_logger)
    assert len(ours) == 2
    assert sum(isinstance(h, logging.handlers.RotatingFileHandler) for h in ours) == 1

    logging.getLogger("random_mdn.test").info("hello file")
    for handler in ours:
        handler.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")


def test_noisy_libraries_quieted(root_logger):
    logging_setup.setup_logging("DEBUG", "")
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
