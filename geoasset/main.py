# geoasset/main.py

import logging
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status

from geoasset import API_PREFIX
from geoasset.core.config import Settings
from geoasset.core.database import build_engine, build_session_factory, create_db_and_tables, get_session
from geoasset.core.exceptions import register_exception_handlers
from geoasset.core.logging_config import setup_logging

from geoasset.domains.usr.routers import router as usr_router
from geoasset.domains.loc.routers import router as loc_router

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    시작 시 테이블을 준비하고, 종료 시 데이터베이스 연결 풀을 정리합니다.
    """
    settings: Settings = app.state.settings
    logger.info("Starting %s %s (%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)

    if not settings.has_signing_key:
        logger.warning(
            "JWT_KEY is not configured. Tokens are verified with the built-in fallback key "
            "and login will fail until JWT_KEY is set."
        )

    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables(app.state.engine)

    yield  # 애플리케이션 실행

    logger.info("Shutting down %s...", settings.APP_NAME)
    await app.state.engine.dispose()
    logger.info("Database connection pool disposed.")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    FastAPI 애플리케이션을 생성합니다.
    설정, 엔진, 세션 공장은 여기서 한 번 만들어져 app.state 에 보관됩니다.
    """
    if settings is None:
        settings = Settings()

    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    register_exception_handlers(app)

    # -- 도메인 라우터 포함 --
    app.include_router(usr_router, prefix=f"{API_PREFIX}/account")
    app.include_router(loc_router, prefix=f"{API_PREFIX}/locations")

    @app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
    async def read_root():
        return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}

    @app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
    async def health_check(session: AsyncSession = Depends(get_session)):
        """
        데이터베이스에 SELECT 1 을 실행하여 서비스의 정상 작동 여부를 확인합니다.
        """
        try:
            result = await session.exec(select(1))
            if result.first():
                return {"status": "ok", "database_connection": "successful"}
        except Exception as e:
            logger.error("Database health check failed: %s", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Database connection error during health check: {e}"
            )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database health check failed: No result from test query"
        )

    return app


app = create_app()


# if __name__ == "__main__":
#     import uvicorn
#     uvicorn.run("geoasset.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
