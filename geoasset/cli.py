# geoasset/cli.py

"""
GeoAsset 관리용 명령줄 도구입니다.

    geoasset init-db        # 테이블 생성
    geoasset create-user    # 계정 생성 (Identity store 의 비밀번호 정책 적용)

설정(DATABASE_URL 등)은 API 서버와 같은 환경 변수 / .env 파일에서 읽습니다.
"""

import asyncio
import typer

from geoasset.core.config import Settings
from geoasset.core.database import (
    build_engine,
    build_session_factory,
    create_db_and_tables,
    get_async_session_context,
)
from geoasset.core.logging_config import setup_logging
from geoasset.domains.usr.crud import SQLModelIdentityStore
from geoasset.domains.usr.schemas import IdentityResult

cli = typer.Typer(help="GeoAsset management commands.")


async def _init_db(settings: Settings) -> None:
    engine = build_engine(settings)
    try:
        await create_db_and_tables(engine)
    finally:
        await engine.dispose()


async def _create_user(settings: Settings, username: str, email: str, password: str) -> IdentityResult:
    engine = build_engine(settings)
    try:
        await create_db_and_tables(engine)
        session_factory = build_session_factory(engine)
        async with get_async_session_context(session_factory) as db:
            identity_store = SQLModelIdentityStore(settings)
            return await identity_store.create_user(db, username=username, email=email, password=password)
    finally:
        await engine.dispose()


@cli.command("init-db")
def init_db():
    """
    등록된 모든 테이블을 생성합니다. 기존 테이블과 데이터는 그대로 둡니다.
    """
    settings = Settings()
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(_init_db(settings))
    typer.echo("데이터베이스 테이블이 준비되었습니다.")


@cli.command("create-user")
def create_user(
    username: str = typer.Option(
        ..., '--username', '-u',
        prompt="사용자명(ID)을 입력하세요",
        help="로그인 시 사용할 사용자명(ID)입니다."
    ),
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="이메일을 입력하세요",
        help="계정의 이메일 주소입니다."
    ),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="계정 비밀번호입니다. 설정된 비밀번호 정책을 만족해야 합니다."
    ),
):
    """
    새로운 사용자 계정을 생성합니다.
    """
    settings = Settings()
    setup_logging(settings.LOG_LEVEL)

    result = asyncio.run(_create_user(settings, username, email, password))
    if not result.succeeded:
        for error in result.errors:
            typer.echo(f"오류 [{error.code}]: {error.description}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"계정이 성공적으로 생성되었습니다: {username}")


if __name__ == "__main__":
    cli()
