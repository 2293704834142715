# tests/test_config.py

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from mdapi.config import DEFAULT_MARKDOWN_DIR, Settings, port_from_env
from mdapi.main import create_app


def test_defaults(monkeypatch):
    for var in ("MARKDOWN_DIR", "HOST", "PORT", "CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings.from_env()

    assert settings.markdown_dir == DEFAULT_MARKDOWN_DIR
    assert settings.cors_origins == ["*"]
    assert port_from_env() == 4000


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MARKDOWN_DIR", str(tmp_path))
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    settings = Settings.from_env()

    assert settings.markdown_dir == Path(tmp_path)
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert port_from_env() == 8080


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")

    with pytest.raises(ValueError):
        port_from_env()


def test_invalid_port_does_not_affect_the_app(monkeypatch, markdown_dir, write_md):
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("MARKDOWN_DIR", str(markdown_dir))
    write_md("readme.md", "# Readme")

    assert Settings.from_env().markdown_dir == markdown_dir
    with TestClient(create_app()) as c:
        resp = c.get("/markdown/")

    assert resp.status_code == 200
    assert resp.json() == [{"id": 1, "title": "Readme", "fileName": "readme"}]
