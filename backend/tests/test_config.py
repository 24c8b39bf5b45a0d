import logging

from src.config.logging_config import (
    NO_CORRELATION_ID,
    CorrelationIdFilter,
    SafeFormatter,
    correlation_id_var,
)
from src.config.settings import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)


def test_get_config_by_environment(monkeypatch):
    assert get_config("production") is ProductionConfig
    assert get_config("testing") is TestingConfig
    assert get_config("staging") is DevelopmentConfig

    monkeypatch.setenv("APP_ENV", "testing")
    assert get_config() is TestingConfig


def _record():
    return logging.LogRecord("src.test", logging.INFO, __file__, 1, "hello", None, None)


def test_correlation_id_filter_reads_context():
    token = correlation_id_var.set("req-42")
    try:
        record = _record()
        assert CorrelationIdFilter().filter(record)
        assert record.correlation_id == "req-42"
    finally:
        correlation_id_var.reset(token)


def test_safe_formatter_fills_missing_correlation_id():
    formatter = SafeFormatter("[%(correlation_id)s] %(message)s")
    assert formatter.format(_record()) == f"[{NO_CORRELATION_ID}] hello"
