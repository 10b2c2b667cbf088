# tests/test_main.py

"""
FastAPI 애플리케이션의 메인 엔드포인트와 애플리케이션 팩토리에 대한 통합 테스트를 정의하는 모듈입니다.

- 애플리케이션의 루트 경로 (`/`) 응답을 테스트합니다.
- 데이터베이스 연결 헬스 체크 엔드포인트 (`/health-check`)를 테스트합니다.
- 수명 주기(lifespan)의 테이블 생성과 서명 키 경고를 테스트합니다.
"""

import logging

import pytest
from httpx import AsyncClient
from sqlalchemy import inspect

from geoasset.main import create_app, lifespan
from geoasset.core.config import Settings


@pytest.mark.asyncio
async def test_read_root(client: AsyncClient):
    """
    루트 엔드포인트 (`GET /`)가 환영 메시지를 반환하는지 테스트합니다.
    """
    response = await client.get("/")
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to GeoAsset API. Visit /docs for interactive API documentation."}


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """
    헬스 체크 엔드포인트 (`GET /health-check`)가 데이터베이스 연결 상태를 올바르게 반환하는지 테스트합니다.
    """
    response = await client.get("/health-check")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database_connection": "successful"}


def test_create_app_stores_settings_on_state(test_settings: Settings):
    app = create_app(test_settings)

    assert app.state.settings is test_settings
    assert app.state.engine is not None
    assert app.state.session_factory is not None
    paths = app.openapi()["paths"]
    assert "/api/account/register" in paths
    assert "/api/account/login" in paths
    assert "/api/locations" in paths
    assert set(paths["/api/locations/{location_id}"]) == {"get", "put", "delete"}


@pytest.mark.asyncio
async def test_lifespan_creates_tables_and_warns_without_signing_key(caplog):
    """
    JWT_KEY 가 없어도 시작은 되지만 경고 로그를 남기고, AUTO_CREATE_TABLES 로 테이블을 생성합니다.
    """
    settings = Settings(_env_file=None, DATABASE_URL="sqlite+aiosqlite://", JWT_KEY=None, AUTO_CREATE_TABLES=True)
    app = create_app(settings)

    with caplog.at_level(logging.WARNING):
        async with lifespan(app):
            async with app.state.engine.connect() as conn:
                table_names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert {"users", "locations"} <= set(table_names)
    assert any("JWT_KEY is not configured" in record.getMessage() for record in caplog.records)
