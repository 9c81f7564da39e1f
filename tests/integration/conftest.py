"""
Integration fixtures: a real PostgreSQL database named by TEST_DATABASE_URL.

Tables are truncated and reseeded before every test. Without the variable
the whole directory is skipped.
"""

from __future__ import annotations

import asyncio
import os

import pytest
from fastapi.testclient import TestClient

import seed

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "").strip()


def pytest_collection_modifyitems(config, items):
    if TEST_DATABASE_URL:
        return
    skip = pytest.mark.skip(reason="TEST_DATABASE_URL is not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="module")
def db_client():
    mp = pytest.MonkeyPatch()
    mp.setenv("DATABASE_URL", TEST_DATABASE_URL)
    from main import app

    try:
        # Entering the context runs the lifespan, which opens the pool.
        with TestClient(app) as client:
            yield client
    finally:
        mp.undo()


@pytest.fixture
def api(db_client):
    asyncio.run(seed.seed(TEST_DATABASE_URL))
    return db_client
