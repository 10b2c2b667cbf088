# geoasset/domains/loc/crud.py

"""
'loc' 도메인 (위치 정보)과 관련된 CRUD 로직을 담당하는 모듈입니다.

모든 메서드는 호출한 사용자의 ID(user_id)를 명시적으로 받아 조회/변경 범위를 제한합니다.
다른 사용자의 위치는 존재하지 않는 것과 동일하게 취급됩니다.
"""

from typing import List, Optional
import logging
from datetime import datetime, UTC

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

# 공통 CRUDBase 및 LOC 도메인의 모델, 스키마 임포트
from geoasset.core.crud_base import CRUDBase
from . import models as loc_models
from . import schemas as loc_schemas


logger = logging.getLogger(__name__)


class CRUDLocation(
    CRUDBase[
        loc_models.Location,
        loc_schemas.LocationCreate,
        loc_schemas.LocationUpdate
    ]
):
    def __init__(self):
        super().__init__(model=loc_models.Location)

    def _check_owner(self, db_obj: loc_models.Location, user_id: str) -> None:
        if db_obj.user_id != user_id:
            raise ValueError(f"Location {db_obj.id} is not owned by user {user_id}")

    async def get_all(self, db: AsyncSession, *, user_id: str) -> List[loc_models.Location]:
        """사용자의 모든 위치를 조회합니다."""
        return await self.get_multi(db, user_id=user_id)

    async def search_by_name(self, db: AsyncSession, *, name: str, user_id: str) -> List[loc_models.Location]:
        """이름에 name 이 포함된 사용자의 위치를 조회합니다. (%, _ 는 문자 그대로 비교)"""
        return await self.get_multi(db, self.model.name.contains(name, autoescape=True), user_id=user_id)

    async def get_by_id(self, db: AsyncSession, *, id: int, user_id: str) -> Optional[loc_models.Location]:
        statement = select(self.model).where(self.model.id == id, self.model.user_id == user_id)
        result = await db.execute(statement)
        return result.scalars().one_or_none()

    async def create(
        self, db: AsyncSession, *, obj_in: loc_schemas.LocationCreate, user_id: str
    ) -> loc_models.Location:
        """소유자와 생성 일시는 서버에서 설정합니다."""
        db_obj = await super().create(db, obj_in=obj_in, user_id=user_id, date_time=datetime.now(UTC))
        logger.info("Location %s created by user %s", db_obj.id, user_id)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: loc_models.Location, obj_in: loc_schemas.LocationUpdate, user_id: str
    ) -> loc_models.Location:
        """
        이름/위도/경도/설명을 통째로 교체합니다. ID 와 소유자는 바뀌지 않습니다.
        """
        self._check_owner(db_obj, user_id)
        db_obj = await super().update(db, db_obj=db_obj, obj_in=obj_in, exclude={"id"}, exclude_unset=False)
        logger.info("Location %s updated by user %s", db_obj.id, user_id)
        return db_obj

    async def remove(self, db: AsyncSession, *, db_obj: loc_models.Location, user_id: str) -> loc_models.Location:
        self._check_owner(db_obj, user_id)
        location_id = db_obj.id
        db_obj = await super().delete(db, db_obj=db_obj)
        logger.info("Location %s deleted by user %s", location_id, user_id)
        return db_obj


location = CRUDLocation()
