from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from backend.core.config import Settings
from backend.core.logging import build_logger
from backend.application import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(random_seed=1234, log_level="INFO")


@pytest.fixture
def logger(settings: Settings) -> logging.Logger:
    return build_logger(settings)


@pytest.fixture
def app(settings: Settings, logger: logging.Logger):
    return create_app(settings, logger=logger)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
