import json

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """
    Run the test from tmp_path so the relative data/dinosaurs.json resolves there.
    """
    monkeypatch.chdir(tmp_path)
    data = tmp_path / "data"
    data.mkdir()
    return data


@pytest.fixture
def write_dinos(data_dir):
    def _write(payload) -> None:
        text = payload if isinstance(payload, str) else json.dumps(payload)
        (data_dir / "dinosaurs.json").write_text(text, encoding="utf-8")

    return _write


@pytest.fixture
def client():
    return TestClient(app)
