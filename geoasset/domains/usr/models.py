# geoasset/domains/usr/models.py

"""
'usr' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

users 테이블은 Identity store 가 소유합니다. 비밀번호는 bcrypt 해시로만 저장되며,
사용자명 중복 검사는 대문자로 정규화한 normalized_username 으로 수행합니다(대소문자 무시).
"""

import uuid
from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


def normalize_key(value: Optional[str]) -> Optional[str]:
    """사용자명/이메일 비교용 정규화 값 (대문자)"""
    return value.upper() if value is not None else None


class UserBase(SQLModel):
    """
    users 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    username: str = Field(max_length=256, description="로그인 사용자명")
    email: Optional[str] = Field(default=None, max_length=256, description="사용자 이메일")


class User(UserBase, table=True):
    """
    users 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    ID 는 생성 시 발급되는 UUID 문자열이며 토큰의 sub 클레임으로 사용됩니다.
    """
    __tablename__ = "users"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        max_length=36,
        description="사용자 고유 ID (UUID)"
    )
    normalized_username: str = Field(max_length=256, sa_column_kwargs={"unique": True}, description="정규화된 사용자명")
    normalized_email: Optional[str] = Field(default=None, max_length=256, index=True, description="정규화된 이메일")
    password_hash: str = Field(max_length=255, description="해싱된 비밀번호")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
