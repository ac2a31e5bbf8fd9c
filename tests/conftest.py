"""테스트 인프라: 가짜 DB 세션, httpx 클라이언트, JWT 픽스처.

Test infrastructure: Fake async DB session, httpx client and token fixtures.
The fake session records every positional SQL statement sent through
``app.database.fetch_rows`` and replays scripted result rows in order.
"""

from collections import deque
from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.database import get_db
from app.main import app
from app.utils.jwt import create_access_token


class FakeResult:
    """CursorResult 대역: Minimal stand-in for a buffered CursorResult."""

    returns_rows: bool = True

    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self._rows = rows

    def mappings(self) -> "FakeResult":
        return self

    def all(self) -> list[dict[str, Any]]:
        return self._rows


class FakeDatabase:
    """AsyncSession 대역: 실행된 SQL을 기록하고 준비된 행을 순서대로 반환.

    AsyncSession stand-in. ``returns()`` queues one row list per statement;
    statements beyond the queue get no rows.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._results: deque[list[dict[str, Any]]] = deque()
        self._error: Exception | None = None
        self.conn = MagicMock()
        self.conn.exec_driver_sql = AsyncMock(side_effect=self._execute)
        self.commit = AsyncMock()
        self.close = AsyncMock()

    def returns(self, *row_sets: list[dict[str, Any]]) -> None:
        self._results.extend(row_sets)

    def fails_with(self, exc: Exception) -> None:
        """이후 모든 실행이 예외를 던지도록: Make every later statement raise ``exc``."""
        self._error = exc

    async def connection(self) -> MagicMock:
        return self.conn

    async def _execute(self, sql: str, params: tuple[Any, ...]) -> FakeResult:
        self.calls.append((sql, params))
        if self._error is not None:
            raise self._error
        return FakeResult(self._results.popleft() if self._results else [])

    @property
    def last_sql(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> tuple[Any, ...]:
        return self.calls[-1][1]


@pytest.fixture
def db() -> FakeDatabase:
    return FakeDatabase()


@pytest_asyncio.fixture
async def client(db: FakeDatabase) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트: DB 세션을 가짜로 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[FakeDatabase, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def admin_token() -> str:
    return create_access_token("admin", is_admin=True)


@pytest.fixture
def user_token() -> str:
    return create_access_token("user1", is_admin=False)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
