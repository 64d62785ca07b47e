"""Pytest configuration and fixtures."""

import pytest
import structlog

from bikecatalog import BicycleCatalog
from bikecatalog.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings and logging config from leaking between tests."""
    for name in ("BIKECATALOG_LOG_LEVEL", "BIKECATALOG_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def catalog():
    return BicycleCatalog()


@pytest.fixture
def road_config():
    return {"size": "M", "tapeColor": "red"}


@pytest.fixture
def mountain_config():
    return {"frontShock": "Manitou", "rearShock": "Fox"}


@pytest.fixture
def recumbent_config():
    return {"flag": "tall and orange"}
