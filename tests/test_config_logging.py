import logging

import structlog
from structlog.testing import capture_logs

from data_api.core.config import Settings
from data_api.core.logging import get_logger, setup_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("DATA_API_LOG_TAG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    cfg = Settings(_env_file=None)

    assert cfg.DATA_API_LOG_TAG == "[Data API]"
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.LOG_JSON is False


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "true")

    cfg = Settings(_env_file=None)

    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.LOG_JSON is True


def test_setup_logging_sets_level():
    setup_logging("debug", json_logs=True)
    try:
        assert logging.getLogger().level == logging.DEBUG
        assert structlog.is_configured()
    finally:
        setup_logging("INFO", json_logs=False)


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("INFO")
    before = len(root.handlers)
    setup_logging("INFO")

    assert len(root.handlers) == before


def test_get_logger_supports_key_values():
    logger = get_logger("tests")

    with capture_logs() as logs:
        logger.info("Record stored", collection="posts", record_id="ab12c")

    assert logs == [
        {
            "event": "Record stored",
            "collection": "posts",
            "record_id": "ab12c",
            "log_level": "info",
        }
    ]
