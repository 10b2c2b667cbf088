# geoasset/domains/usr/routers.py

"""
'usr' 도메인 (계정)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
가입은 토큰을 발급하지 않으며, 로그인 성공 시에만 Access Token 을 발급합니다.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlmodel.ext.asyncio.session import AsyncSession

from geoasset.core import dependencies as deps
from geoasset.core import security
from geoasset.core.config import Settings

from . import crud as usr_crud
from . import schemas as usr_schemas

logger = logging.getLogger(__name__)


# 라우터 인스턴스 생성 (prefix는 main.py에서 관리)
router = APIRouter(
    tags=["Account (계정)"],
)


@router.post(
    "/register",
    response_model=usr_schemas.MessageResponse,
    responses={400: {"model": List[usr_schemas.IdentityError]}},
    summary="회원 가입",
)
async def register(
    user_in: usr_schemas.UserRegister,
    db: AsyncSession = Depends(deps.get_db_session),
    identity_store: usr_crud.IdentityStore = Depends(deps.get_identity_store),
):
    result = await identity_store.create_user(
        db, username=user_in.username, email=user_in.email, password=user_in.password
    )
    if not result.succeeded:
        logger.info(
            "Registration failed for '%s': %s", user_in.username, [e.code for e in result.errors]
        )
        # Identity store 의 오류 목록을 그대로 JSON 배열로 반환합니다.
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(result.errors),
        )
    return {"message": "Registration successful"}


@router.post("/login", response_model=usr_schemas.AuthResponse, summary="로그인 (Access Token 획득)")
async def login(
    login_in: usr_schemas.UserLogin,
    db: AsyncSession = Depends(deps.get_db_session),
    identity_store: usr_crud.IdentityStore = Depends(deps.get_identity_store),
    settings: Settings = Depends(deps.get_settings),
):
    user = await identity_store.find_by_username(db, username=login_in.username)
    if user is None or not identity_store.verify_password(user, login_in.password):
        # 존재하지 않는 사용자와 잘못된 비밀번호는 같은 응답을 반환합니다.
        logger.info("Failed login attempt for '%s'", login_in.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = security.create_access_token(settings, user_id=user.id, username=user.username)
    return usr_schemas.AuthResponse(token=token, username=user.username)
