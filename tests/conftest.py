# tests/conftest.py

from typing import AsyncGenerator, Callable, Awaitable
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from geoasset.main import create_app
from geoasset.core.config import Settings
from geoasset.core.database import build_session_factory, get_session

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 모델을 임포트합니다.
from geoasset.domains.models import *    # noqa: F401, F403
from geoasset.domains.usr import models as usr_models
from geoasset.domains.usr.crud import SQLModelIdentityStore


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 새 인메모리 SQLite DB 를 사용합니다. StaticPool 로 하나의 연결을 공유해야
# 같은 DB 를 계속 볼 수 있습니다.
TEST_DATABASE_URL = "sqlite+aiosqlite://"
TEST_JWT_KEY = "test-signing-key-for-geoasset-api-0123456789"

# 테스트 사용자 비밀번호 (기본 비밀번호 정책을 만족)
TEST_PASSWORD = "Passw0rd!"


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        APP_ENV="testing",
        DATABASE_URL=TEST_DATABASE_URL,
        JWT_KEY=TEST_JWT_KEY,
        AUTO_CREATE_TABLES=False,
    )


@pytest.fixture(scope="function")
def test_app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    각 테스트 함수마다 빈 스키마를 가진 인메모리 DB 엔진을 제공합니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine  # 테스트 실행

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    테스트 코드와 API 요청이 함께 사용하는 비동기 데이터베이스 세션입니다.
    """
    session_factory = build_session_factory(test_engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
def user_factory(
    db_session: AsyncSession, test_settings: Settings
) -> Callable[..., Awaitable[usr_models.User]]:
    """
    Identity store 를 통해 테스트 사용자를 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_user(username: str, password: str = TEST_PASSWORD, email: str = None) -> usr_models.User:
        identity_store = SQLModelIdentityStore(test_settings)
        result = await identity_store.create_user(
            db_session, username=username, email=email or f"{username}@example.com", password=password
        )
        if not result.succeeded:
            pytest.fail(f"Failed to create test user {username}: {result.errors}")
        return await identity_store.find_by_username(db_session, username=username)
    return _create_user


@pytest_asyncio.fixture(scope="function")
async def test_user(user_factory: Callable) -> usr_models.User:
    """위치를 소유하는 기본 테스트 사용자입니다."""
    return await user_factory("alice")


@pytest_asyncio.fixture(scope="function")
async def other_user(user_factory: Callable) -> usr_models.User:
    """소유권 격리 확인용 두 번째 사용자입니다."""
    return await user_factory("bob")


# --- 인증 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
def authorized_client_factory(
    test_app: FastAPI,
    db_session: AsyncSession,
) -> Callable[[str, str], AsyncGenerator[AsyncClient, None]]:
    """
    특정 사용자로 로그인된 AsyncClient를 생성하는 팩토리 함수를 반환합니다.
    로그인 API를 실제로 호출하여 받은 토큰을 Authorization 헤더에 넣습니다.
    """
    @asynccontextmanager
    async def _create_client_context(username: str, password: str = TEST_PASSWORD) -> AsyncGenerator[AsyncClient, None]:
        def override_get_session():
            yield db_session

        test_app.dependency_overrides[get_session] = override_get_session
        try:
            transport = ASGITransport(app=test_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                res = await client.post(
                    "/api/account/login", json={"username": username, "password": password}
                )
                if res.status_code != 200:
                    pytest.fail(f"Login failed for {username}: {res.text}")

                token = res.json()["token"]
                client.headers["Authorization"] = f"Bearer {token}"
                yield client
        finally:
            test_app.dependency_overrides.pop(get_session, None)

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def authorized_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    test_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """test_user 로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_user.username) as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def other_client(
    authorized_client_factory: Callable[..., AsyncGenerator[AsyncClient, None]],
    other_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """other_user 로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(other_user.username) as client:
        yield client


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(test_app: FastAPI, db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    인증되지 않은 사용자를 위한 AsyncClient 인스턴스를 생성하고,
    테스트용 비동기 DB 세션을 주입합니다.
    """
    def override_get_session():
        yield db_session

    test_app.dependency_overrides[get_session] = override_get_session
    try:
        async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        test_app.dependency_overrides.clear()
