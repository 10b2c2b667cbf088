# geoasset/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었으며, 각 변경 작업은 단일 commit 으로 끝납니다.
"""

from typing import Generic, List, Optional, Type, TypeVar, Any, Set

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        response = await db.execute(statement)
        return response.scalars().first()

    async def get_multi(self, db: AsyncSession, *conditions: Any, **filters: Any) -> List[ModelType]:
        """
        조건을 만족하는 레코드를 모두 조회합니다.
        위치 인자는 SQL 조건식, 키워드 인자는 동등 비교 필터입니다. 정렬은 기본 키 순서입니다.
        """
        query = select(self.model)
        for field, value in filters.items():
            query = query.where(getattr(self.model, field) == value)
        if conditions:
            query = query.where(*conditions)
        if hasattr(self.model, "id"):
            query = query.order_by(self.model.id)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType, **extra: Any) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        extra 는 요청 본문에 없는 서버 측 값(소유자 등)입니다.
        """
        db_obj = self.model.model_validate({**obj_in.model_dump(), **extra})
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType,
        exclude: Optional[Set[str]] = None,
        exclude_unset: bool = True,
    ) -> ModelType:
        """
        기존 레코드를 업데이트합니다.
        exclude_unset=False 이면 요청에 없는 필드도 기본값으로 덮어씁니다(전체 교체).
        """
        update_data = obj_in.model_dump(exclude_unset=exclude_unset, exclude=exclude)
        for key, value in update_data.items():
            setattr(db_obj, key, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        await db.delete(db_obj)
        await db.commit()
        return db_obj
