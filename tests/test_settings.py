from __future__ import annotations

import logging

import pytest

from vultr_api import create_client
from vultr_api.config.settings import Settings
from vultr_api.exceptions.custom_exceptions import VultrError
from vultr_api.utils.constants import DEFAULT_API_BASE_URL


def test_defaults(monkeypatch):
    for key in ("APP_NAME", "LOG_LEVEL", "REQUEST_TIMEOUT_SECONDS", "VULTR_API_BASE_URL", "VULTR_API_KEY"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings.from_env()

    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.request_timeout_seconds == 60
    assert settings.log_level == "INFO"
    assert settings.api_key == ""


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "15")
    monkeypatch.setenv("VULTR_API_KEY", "abc123")

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.request_timeout_seconds == 15
    assert settings.api_key == "abc123"
    assert "abc123" not in repr(settings)


def test_bad_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "soon")

    assert Settings.from_env().request_timeout_seconds == 60


def test_create_client_wires_settings(monkeypatch):
    monkeypatch.setenv("VULTR_API_KEY", "from-env")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "9")

    client = create_client()

    assert client.api_key == "from-env"
    assert client.http.timeout_seconds == 9


def test_explicit_key_wins(monkeypatch):
    monkeypatch.setenv("VULTR_API_KEY", "from-env")

    assert create_client(api_key="explicit").api_key == "explicit"


def test_create_client_requires_key(monkeypatch):
    monkeypatch.delenv("VULTR_API_KEY", raising=False)

    with pytest.raises(VultrError):
        create_client()


def test_create_client_leaves_root_logger_alone(monkeypatch):
    monkeypatch.setenv("VULTR_API_KEY", "abc123")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    root = logging.getLogger()
    package_logger = logging.getLogger("vultr_api")
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(package_logger, "handlers", [])
    monkeypatch.setattr(root, "level", logging.WARNING)
    monkeypatch.setattr(package_logger, "level", logging.NOTSET)

    create_client()
    create_client()

    assert root.handlers == []
    assert root.level == logging.WARNING
    assert package_logger.level == logging.DEBUG
    assert [type(h) for h in package_logger.handlers] == [logging.NullHandler]
