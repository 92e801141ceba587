"""
Tests for Settings loading and validation.
"""

import pytest
from pydantic import ValidationError

from payara_admin.core.config import Settings
from payara_admin.core.exceptions import ConfigurationError


def test_defaults():
    settings = Settings()

    assert settings.host == "localhost"
    assert settings.admin_port == 4848
    assert settings.secure is False
    assert settings.base_url == "http://localhost:4848"
    assert settings.spool_max_memory_bytes == 16 * 1024 * 1024


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PAYARA_HOST", "das.internal")
    monkeypatch.setenv("PAYARA_ADMIN_PORT", "24848")
    monkeypatch.setenv("PAYARA_SECURE", "true")
    monkeypatch.setenv("PAYARA_LOG_FORMAT", "CONSOLE")

    settings = Settings()

    assert settings.admin_url("deploy") == "https://das.internal:24848/__asadmin/deploy"
    assert settings.log_format == "console"


def test_env_file(tmp_path):
    (tmp_path / ".env").write_text("PAYARA_ADMIN_PORT=5858\n")

    assert Settings().admin_port == 5858


@pytest.mark.parametrize("port", ["0", "65536", "-1", "abc"])
def test_invalid_port(monkeypatch, port):
    monkeypatch.setenv("PAYARA_ADMIN_PORT", port)

    with pytest.raises(ValidationError):
        Settings()


def test_invalid_log_format():
    with pytest.raises(ValidationError):
        Settings(log_format="xml")


def test_negative_spool_size():
    with pytest.raises(ValidationError):
        Settings(spool_max_memory_mb=-1)


def test_admin_url_requires_command():
    with pytest.raises(ConfigurationError):
        Settings().admin_url("")


def test_zero_spool_size_rejected(monkeypatch):
    monkeypatch.setenv("PAYARA_SPOOL_MAX_MEMORY_MB", "0")

    with pytest.raises(ValidationError):
        Settings()
