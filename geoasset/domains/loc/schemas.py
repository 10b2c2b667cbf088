# geoasset/domains/loc/schemas.py

"""
'loc' 도메인 (위치 정보)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional, Annotated
from decimal import Decimal
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

# 좌표는 Decimal 로 다루되 JSON 응답에서는 숫자로 직렬화합니다.
Latitude = Annotated[
    Decimal,
    Field(ge=-90, le=90, description="위도 (-90 ~ 90)"),
    PlainSerializer(float, return_type=float, when_used="json"),
]
Longitude = Annotated[
    Decimal,
    Field(ge=-180, le=180, description="경도 (-180 ~ 180)"),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class LocationBase(BaseModel):
    name: str = Field(..., max_length=100, description="위치 이름")
    latitude: Latitude
    longitude: Longitude
    description: Optional[str] = Field(None, description="설명")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Location name is required")
        return value


class LocationCreate(LocationBase):
    pass


class LocationUpdate(LocationBase):
    """PUT 요청 본문. 경로의 ID 와 일치해야 합니다."""
    id: int


class LocationRead(LocationBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date_time: datetime = Field(..., serialization_alias="dateTime")
