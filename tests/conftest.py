"""
Shared fixtures.

Every test gets its own in-memory SQLite database. The API fixtures run
the real application lifespan, so the engine is built and disposed the
same way it is in production.
"""

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from promotion_tracking.core.config import Settings
from promotion_tracking.infrastructure.database import build_engine, create_schema
from promotion_tracking.infrastructure.promotion.repository import (
    PromotionRepositoryAdapter,
)
from promotion_tracking.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def engine(settings: Settings) -> Iterator[Engine]:
    engine = build_engine(settings)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine: Engine) -> PromotionRepositoryAdapter:
    return PromotionRepositoryAdapter(engine=engine)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
