# tests/__init__.py

"""
GeoAsset API 의 테스트 스위트 패키지입니다.

- `conftest.py`: 인메모리 SQLite DB, 테스트 사용자, 인증 클라이언트 픽스처.
- `test_main.py`: 루트/헬스 체크 엔드포인트와 애플리케이션 팩토리, 수명 주기.
- `test_security.py`: 토큰 발급/검증과 비밀번호 해싱.
- `test_cli.py`: 관리용 명령줄 도구.
- `domains/`: 도메인(usr, loc)별 API 및 CRUD 통합 테스트.
"""

__title__ = "GeoAsset API Tests"
__description__ = "Test suite for the GeoAsset FastAPI application."
__version__ = "0.1.0"
__all__ = []
