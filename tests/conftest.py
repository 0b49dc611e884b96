import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


def write_rates(path: Path, content) -> Path:
    """Write a rate table; dicts are dumped as JSON, strings written verbatim."""
    text = content if isinstance(content, str) else json.dumps(content)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def rates_file(tmp_path: Path) -> Path:
    # Not created; tests write it when they need a table
    return tmp_path / "exchangeRates.json"


@pytest.fixture
def make_settings(rates_file: Path):
    def _make(overrides=None) -> Settings:
        settings = Settings(
            _env_file=None,
            rates_file=rates_file,
            rate_overrides=overrides or {},
        )
        settings.init_post_load()
        return settings

    return _make


@pytest.fixture
def make_client(make_settings):
    def _make(overrides=None) -> TestClient:
        return TestClient(create_app(make_settings(overrides)))

    return _make
