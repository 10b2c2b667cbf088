# geoasset/domains/usr/schemas.py

"""
'usr' 도메인 (계정)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

import re
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator

PASSWORD_MIN_LENGTH = 6
# "@" 가 정확히 하나이고 앞뒤가 비어 있지 않은 형태만 확인 (도메인 규칙은 검사하지 않음)
EMAIL_SHAPE = re.compile(r"^[^@\s]+@[^@\s]+$")


# =============================================================================
# 1. 계정 요청/응답 스키마
# =============================================================================
class UserRegister(BaseModel):
    """회원 가입 요청 스키마"""
    username: str = Field(..., min_length=1, max_length=256)
    email: str = Field(..., max_length=256)
    password: str

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str) -> str:
        if not EMAIL_SHAPE.match(value):
            raise ValueError("The Email field is not a valid e-mail address.")
        return value

    @field_validator("password")
    @classmethod
    def password_min_length(cls, value: str) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        return value


class UserLogin(BaseModel):
    """로그인 요청 스키마"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """로그인 성공 응답 스키마"""
    token: str
    username: str


class MessageResponse(BaseModel):
    message: str


# =============================================================================
# 2. Identity store 결과 스키마
# =============================================================================
class IdentityError(BaseModel):
    """Identity store 가 보고하는 개별 오류 (코드 + 설명)"""
    code: str
    description: str


class IdentityResult(BaseModel):
    succeeded: bool
    errors: List[IdentityError] = []

    @classmethod
    def success(cls) -> "IdentityResult":
        return cls(succeeded=True)

    @classmethod
    def failed(cls, errors: List[IdentityError]) -> "IdentityResult":
        return cls(succeeded=False, errors=errors)


# =============================================================================
# 3. 인증 토큰 스키마
# =============================================================================
class TokenData(BaseModel):
    """검증된 JWT 에서 꺼낸 클레임"""
    user_id: str
    username: Optional[str] = None
    jti: Optional[str] = None
