"""
Pytest configuration and fixtures for admin client tests.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clean_payara_env(monkeypatch, tmp_path):
    """
    Keep settings independent of the developer's environment.

    Removes PAYARA_* variables and runs each test from an empty directory so
    no stray .env file is picked up.
    """
    import os
    for key in list(os.environ):
        if key.upper().startswith("PAYARA_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def war_file(tmp_path: Path) -> Path:
    path = tmp_path / "build" / "app.war"
    path.parent.mkdir()
    path.write_bytes(b"PK-not-really-a-war 0123456789")
    return path


@pytest.fixture
def exploded_dir(tmp_path: Path) -> Path:
    path = tmp_path / "exploded" / "app"
    (path / "WEB-INF").mkdir(parents=True)
    (path / "index.html").write_text("<html></html>")
    return path


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by a test (it binds the captured streams)."""
    yield
    import structlog
    from structlog.contextvars import clear_contextvars
    structlog.reset_defaults()
    clear_contextvars()
