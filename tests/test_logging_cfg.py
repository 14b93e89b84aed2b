import logging

import pytest

from testlicense.logging_cfg import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    handlers, level, propagate = saved
    for h in handlers:
        logger.addHandler(h)
    logger.setLevel(level)
    logger.propagate = propagate


def test_root_logger_is_left_alone(monkeypatch):
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "2")
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    root_level = root.level
    try:
        logger = setup_logging()
        assert sentinel in root.handlers
        assert root.level == root_level
    finally:
        root.removeHandler(sentinel)
    assert logger.name == "testlicense"
    assert logger.level == logging.DEBUG
    assert not logger.propagate
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

def test_unknown_level_is_silent(monkeypatch):
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert setup_logging().level == logging.CRITICAL

def test_log_file_receives_package_records(monkeypatch, tmp_path):
    path = tmp_path / "testlicense.log"
    monkeypatch.setenv("LOG_FILE", str(path))
    monkeypatch.setenv("LOG_LEVEL", "1")
    setup_logging()
    logging.getLogger("testlicense.check").info("checking LICENSE against MIT")
    logging.getLogger("testlicense.scan").debug("hidden at INFO")
    logging.getLogger("someone.else").warning("not ours")
    for h in logging.getLogger(LOGGER_NAME).handlers:
        h.flush()
    text = path.read_text(encoding="utf-8")
    assert "INFO testlicense.check: checking LICENSE against MIT" in text
    assert "hidden at INFO" not in text
    assert "not ours" not in text

def test_repeated_setup_keeps_one_handler(monkeypatch):
    monkeypatch.delenv("LOG_FILE", raising=False)
    setup_logging()
    setup_logging()
    assert len(logging.getLogger(LOGGER_NAME).handlers) == 1
