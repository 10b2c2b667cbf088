# geoasset/domains/loc/routers.py

"""
'loc' 도메인 (위치 정보)의 API 엔드포인트를 정의하는 모듈입니다.

모든 엔드포인트는 Bearer 토큰이 필요하며, 작업 대상 사용자는 토큰의 sub 클레임에서만 얻습니다.
다른 사용자의 위치에 대한 요청은 403 이 아닌 404 로 응답합니다.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from geoasset import API_PREFIX
from geoasset.core import dependencies as deps

# 'loc' 도메인의 CRUD, 스키마
from geoasset.domains.loc import crud as loc_crud
from geoasset.domains.loc import schemas as loc_schemas

# 라우터 인스턴스 생성
router = APIRouter(
    tags=["Location Management (위치 관리)"],
    responses={404: {"description": "Not found"}},
)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")


@router.get("", response_model=List[loc_schemas.LocationRead], summary="내 위치 목록 조회")
async def read_locations(
    name: Optional[str] = None,
    db: AsyncSession = Depends(deps.get_db_session),
    user_id: str = Depends(deps.get_current_user_id),
):
    """
    현재 사용자의 위치 목록을 조회합니다.
    - `name`: 지정하면 이름에 해당 문자열이 포함된 위치만 반환합니다.
    """
    if name:
        return await loc_crud.location.search_by_name(db, name=name, user_id=user_id)
    return await loc_crud.location.get_all(db, user_id=user_id)


@router.post(
    "",
    response_model=loc_schemas.LocationRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 위치 생성",
)
async def create_location(
    location_create: loc_schemas.LocationCreate,
    response: Response,
    db: AsyncSession = Depends(deps.get_db_session),
    user_id: str = Depends(deps.get_current_user_id),
):
    db_location = await loc_crud.location.create(db, obj_in=location_create, user_id=user_id)
    response.headers["Location"] = f"{API_PREFIX}/locations/{db_location.id}"
    return db_location


@router.get("/{location_id}", response_model=loc_schemas.LocationRead, summary="특정 위치 조회")
async def read_location(
    location_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    user_id: str = Depends(deps.get_current_user_id),
):
    db_location = await loc_crud.location.get_by_id(db, id=location_id, user_id=user_id)
    if db_location is None:
        raise _not_found()
    return db_location


@router.put("/{location_id}", response_model=loc_schemas.LocationRead, summary="위치 정보 수정")
async def update_location(
    location_id: int,
    location_update: loc_schemas.LocationUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    user_id: str = Depends(deps.get_current_user_id),
):
    """
    위치의 이름/위도/경도/설명을 교체합니다. 본문의 `id` 는 경로의 ID 와 같아야 합니다.
    """
    if location_id != location_update.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID mismatch")

    db_location = await loc_crud.location.get_by_id(db, id=location_id, user_id=user_id)
    if db_location is None:
        raise _not_found()
    return await loc_crud.location.update(db, db_obj=db_location, obj_in=location_update, user_id=user_id)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT, summary="위치 삭제")
async def delete_location(
    location_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    user_id: str = Depends(deps.get_current_user_id),
):
    db_location = await loc_crud.location.get_by_id(db, id=location_id, user_id=user_id)
    if db_location is None:
        raise _not_found()
    await loc_crud.location.remove(db, db_obj=db_location, user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
