from __future__ import annotations

import json
import logging

import pytest

from formguard.observability.logging import ExtrasFormatter, build_log_config, configure_logging


def make_record(data: object | None = None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="formguard.token_store",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="discarding unreadable token list",
        args=(),
        exc_info=None,
    )
    if data is not None:
        record.data = data
    return record


def test_formatter_appends_data_locally(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("K_SERVICE", raising=False)
    monkeypatch.delenv("KUBERNETES_SERVICE_HOST", raising=False)
    formatter = ExtrasFormatter("%(levelname)s %(name)s: %(message)s")

    rendered = formatter.format(make_record({"store": "csrf-lib", "context": ""}))

    assert rendered == (
        "WARNING formguard.token_store: discarding unreadable token list"
        ' | data={"context":"","store":"csrf-lib"}'
    )


def test_formatter_emits_json_in_kubernetes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KUBERNETES_SERVICE_HOST", "10.0.0.1")
    formatter = ExtrasFormatter("%(levelname)s %(name)s: %(message)s")

    payload = json.loads(formatter.format(make_record({"dropped": 3, "raw": b"abc"})))

    assert payload["message"] == "discarding unreadable token list"
    assert payload["severity"] == "WARNING"
    assert payload["logger"] == "formguard.token_store"
    assert payload["data"] == {"dropped": 3, "raw": "<bytes len=3>"}


def test_build_log_config_honours_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMGUARD_LOG_LEVEL", "debug")

    config = build_log_config(extra_loggers={"app": {"level": "ERROR"}})

    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["app"] == {"level": "ERROR"}
    assert "formguard.token_store" in config["loggers"]


def test_configure_logging_applies_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMGUARD_STORE_LOG_LEVEL", "WARNING")

    configure_logging(root_default="INFO")

    store_logger = logging.getLogger("formguard.token_store")
    assert store_logger.level == logging.WARNING
    assert store_logger.propagate is False
    assert isinstance(store_logger.handlers[0].formatter, ExtrasFormatter)
