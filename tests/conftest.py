"""Shared fixtures: every test gets its own ledger file under ``tmp_path``."""
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from finance_dashboard.api import create_app
from finance_dashboard.config import Settings


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "transacoes.json"


@pytest.fixture
def settings(data_file: Path) -> Settings:
    return Settings(data_file=str(data_file))


@pytest.fixture
def api(settings: Settings):
    """A TestClient with the app lifespan running (ledger loaded)."""
    with TestClient(create_app(settings)) as client:
        yield client
