# geoasset/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진, 세션 공장, 요청 단위 세션 의존성 (SQLModel / SQLAlchemy).
- `security.py`: 비밀번호 해싱, JWT 발급 및 검증, 현재 사용자 의존성.
- `dependencies.py`: 라우터에서 사용하는 공통 의존성 모음.
- `crud_base.py`: 공통 CRUD 기본 클래스.
- `exceptions.py`: 공통 예외와 전역 예외 핸들러.
- `logging_config.py`: 루트 로거 설정.
"""

__all__ = []
