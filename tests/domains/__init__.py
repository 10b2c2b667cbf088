# tests/domains/__init__.py

"""
도메인별 테스트 스위트 패키지입니다.

- `test_usr.py`: 'usr' 도메인 (가입, 로그인, Identity store) 테스트.
- `test_loc.py`: 'loc' 도메인 (사용자별 위치 CRUD) 테스트.
"""

__title__ = "GeoAsset Domain Tests"
__description__ = "Tests for each business domain of the GeoAsset API."
__version__ = "0.1.0"
__all__ = []
