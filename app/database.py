"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine and session factory for PostgreSQL via
asyncpg, and the helper that runs positional (``$1``, ``$2`` …) SQL templates.
"""

from collections.abc import AsyncGenerator
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.config import settings

# 비동기 데이터베이스 엔진: Async database engine (asyncpg driver)
# pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
)

# 비동기 세션 팩토리: Async session factory
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    The session is automatically closed after the request completes.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


async def fetch_rows(
    db: AsyncSession,
    sql: str,
    values: Sequence[Any] = (),
) -> list[dict[str, Any]]:
    """위치 파라미터 SQL 템플릿을 실행하고 행 목록을 반환합니다.

    Execute a template with ``$N`` placeholders and return its rows as dicts.
    The statement goes to asyncpg as-is (the dialect's native ``numeric_dollar``
    paramstyle), so ``$N`` binds ``values[N - 1]``. Driver errors propagate.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        sql: 위치 파라미터 SQL 템플릿 (SQL template with $N placeholders)
        values: 플레이스홀더 순서의 값 (Values in placeholder order)

    Returns:
        list[dict[str, Any]]: 결과 행 (Result rows, empty for no match)
    """
    conn: AsyncConnection = await db.connection()
    result = await conn.exec_driver_sql(sql, tuple(values))
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
