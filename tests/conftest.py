"""
Shared fixtures for route-level tests.

These tests never touch PostgreSQL: the app is driven through
`fastapi.testclient.TestClient` without entering its lifespan (so no pool is
created) and repository functions are replaced with async fakes.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client() -> TestClient:
    # 500 responses are asserted on, not re-raised.
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def fake_async(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[tuple]]:
    """
    Replace `module.name` with an async function.

    `result` may be a plain value (returned as-is), an exception instance
    (raised), or a callable (called with the original arguments). Returns the
    list that records every call as `(args, kwargs)`.
    """

    def install(module: Any, name: str, result: Any = None) -> list[tuple]:
        calls: list[tuple] = []

        async def fake(*args: Any, **kwargs: Any) -> Any:
            calls.append((args, kwargs))
            if isinstance(result, BaseException):
                raise result
            if callable(result):
                return result(*args, **kwargs)
            return result

        monkeypatch.setattr(module, name, fake)
        return calls

    return install
