# geoasset/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- Settings.DATABASE_URL 로부터 SQLModel 의 비동기 엔진을 생성합니다.
- 비동기 세션 생성을 위한 세션 공장과 요청 단위 세션 의존성을 제공합니다.
- 애플리케이션 시작 시 데이터베이스 테이블을 생성하는 함수를 포함합니다.

엔진과 세션 공장은 create_app() 에서 한 번 만들어져 app.state 에 보관됩니다.
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from geoasset.core.config import Settings

# 모든 SQLModel 클래스가 SQLModel.metadata 에 등록되도록 모델을 임포트합니다.
from geoasset.domains import models  # noqa: F401

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """
    설정의 DATABASE_URL 로 비동기 엔진을 생성합니다.
    커넥션 풀 옵션은 SQLite 가 아닌 서버형 DB 에만 적용합니다.
    """
    url = settings.DATABASE_URL.get_secret_value()
    engine_kwargs = {"echo": settings.DEBUG_MODE, "future": True}

    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:"):
            # 인메모리 DB 는 연결마다 새 DB 가 되므로 하나의 연결을 공유합니다.
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update(
            pool_recycle=3600,  # 1시간마다 연결 재활용
            pool_size=10,       # 최소 10개의 연결 유지
            max_overflow=20,    # 최대 20개의 추가 연결 허용 (총 30개)
        )

    return create_async_engine(url, **engine_kwargs)


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    """비동기 세션을 생성하는 '세션 공장'을 정의합니다."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_db_and_tables(engine: AsyncEngine) -> None:
    """
    등록된 모든 SQLModel 테이블을 생성합니다. 기존 테이블은 삭제하지 않습니다.
    """
    logger.info("Creating database tables (if missing)...")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables are ready.")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


@asynccontextmanager
async def get_async_session_context(session_factory: sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """
    CLI 등 요청 밖의 비동기 컨텍스트에서 사용할 수 있는
    독립적인 비동기 DB 세션을 제공하는 컨텍스트 관리자입니다.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
