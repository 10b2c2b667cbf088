# geoasset/domains/loc/models.py

"""
'loc' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from decimal import Decimal
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.types import TIMESTAMP


class Location(SQLModel, table=True):
    """
    locations 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    좌표는 NUMERIC(18,10) 으로 저장되며, 소유자(user_id)는 생성 후 바뀌지 않습니다.
    """
    __tablename__ = "locations"

    id: Optional[int] = Field(default=None, primary_key=True, description="위치 고유 ID")
    name: str = Field(max_length=100, description="위치 이름")
    latitude: Decimal = Field(sa_column=Column(Numeric(18, 10), nullable=False), description="위도")
    longitude: Decimal = Field(sa_column=Column(Numeric(18, 10), nullable=False), description="경도")
    description: Optional[str] = Field(default=None, description="설명")
    date_time: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), nullable=False),
        description="생성 일시 (UTC)"
    )
    user_id: str = Field(
        sa_column=Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
        description="소유 사용자 ID"
    )
