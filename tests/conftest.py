# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from mdapi.config import Settings
from mdapi.main import create_app


@pytest.fixture
def markdown_dir(tmp_path):
    d = tmp_path / "markdown"
    d.mkdir()
    return d


@pytest.fixture
def write_md(markdown_dir):
    def _write(name: str, content: str):
        path = markdown_dir / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def client(markdown_dir):
    app = create_app(Settings(markdown_dir=markdown_dir))
    with TestClient(app) as c:
        yield c
