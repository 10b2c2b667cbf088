# geoasset/domains/loc/__init__.py

"""
FastAPI 애플리케이션의 'loc' 도메인 패키지입니다.

'loc' 도메인은 사용자별로 소유되는 지리 좌표(위치) 정보를 관리합니다.
모든 조회와 변경은 호출한 사용자의 ID 로 범위가 제한됩니다.

주요 서브모듈:
- `models.py`: locations 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 위치 생성/수정 요청 및 응답 스키마 (위도/경도 범위 검증 포함).
- `crud.py`: 사용자 범위 CRUD 로직 (CRUDLocation).
- `routers.py`: /api/locations 엔드포인트.
"""

__title__ = "GeoAsset Location Domain"
__description__ = "Manages per-user geographic locations."
__version__ = "0.1.0"
__all__ = []
