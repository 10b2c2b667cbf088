# geoasset/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- 비밀번호 해싱 및 검증 (passlib bcrypt).
- JWT(JSON Web Token) 생성 및 검증 (python-jose, HS256).
- Bearer 토큰에서 현재 사용자(sub 클레임)를 얻는 의존성.

토큰 검증은 상태를 갖지 않습니다. 사용자 ID 는 검증된 토큰의 sub 클레임에서만 얻으며
데이터베이스를 조회하지 않습니다.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from geoasset import API_PREFIX
from geoasset.core.config import Settings, get_settings
from geoasset.core.exceptions import MissingSigningKeyError
from geoasset.domains.usr import schemas as usr_schemas

logger = logging.getLogger(__name__)


# --- 비밀번호 해싱 설정 ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    일반 텍스트 비밀번호와 해싱된 비밀번호를 비교하여 일치하는지 확인합니다.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# --- Bearer 스키마 설정 ---
# 헤더가 없으면 401 "Not authenticated" 를 반환합니다.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_PREFIX}/account/login")


# --- JWT 토큰 생성 및 검증 ---
def create_access_token(
    settings: Settings,
    *,
    user_id: str,
    username: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Access Token 을 생성합니다.
    클레임: sub(사용자 ID), name(사용자명), jti(토큰 고유 ID), exp(만료 시각).
    설정에 JWT_KEY 가 없으면 MissingSigningKeyError 를 발생시킵니다.
    """
    if not settings.has_signing_key:
        raise MissingSigningKeyError()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode = {
        "sub": user_id,
        "name": username,
        "jti": str(uuid.uuid4()),
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.JWT_KEY.get_secret_value(), algorithm=settings.ALGORITHM)
    logger.debug("Access token issued for user %s, expires at %s", user_id, expire)
    return encoded_jwt


def decode_access_token(settings: Settings, token: str) -> usr_schemas.TokenData:
    """
    토큰의 서명과 만료를 검증하고 클레임을 반환합니다. exp 클레임이 없는 토큰은 거부합니다.
    발급자(iss)/대상(aud) 검증은 하지 않습니다.
    """
    payload = jwt.decode(
        token,
        settings.verification_key,
        algorithms=[settings.ALGORITHM],
        options={"verify_aud": False, "verify_iss": False, "require_exp": True},
    )
    user_id = payload.get("sub")
    if not user_id:
        raise JWTError("Token has no subject claim")
    return usr_schemas.TokenData(user_id=user_id, username=payload.get("name"), jti=payload.get("jti"))


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> usr_schemas.TokenData:
    """
    Bearer 토큰을 디코딩하고 검증하여 현재 사용자 클레임을 반환합니다.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        return decode_access_token(settings, token)
    except JWTError as e:
        logger.debug("Token verification failed: %s", e)
        raise credentials_exception


async def get_current_user_id(
    current_user: usr_schemas.TokenData = Depends(get_current_user),
) -> str:
    """현재 사용자의 ID(sub 클레임)만 반환합니다. 모든 위치 조회/변경의 범위가 됩니다."""
    return current_user.user_id
