# geoasset/__init__.py

"""
GeoAsset FastAPI 애플리케이션의 메인 패키지입니다.

사용자별로 격리된 지리 좌표(위치) 정보를 관리하는 API 백엔드로,
공통 설정, 데이터베이스 연결, 보안 유틸리티를 담는 core 서브패키지와
계정(usr) 및 위치(loc) 도메인을 담는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "GeoAsset API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Per-user geographic location management API backend."
__all__ = []
