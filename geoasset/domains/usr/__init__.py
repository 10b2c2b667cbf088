# geoasset/domains/usr/__init__.py

"""
FastAPI 애플리케이션의 'usr' 도메인 패키지입니다.

'usr' 도메인은 계정(가입/로그인)과 사용자 자격 증명(Identity store)을 관리합니다.

주요 서브모듈:
- `models.py`: users 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 가입/로그인 요청 및 응답, Identity 오류, 토큰 클레임 스키마.
- `crud.py`: IdentityStore 인터페이스와 SQLModel 기반 구현 (비밀번호 정책 포함).
- `routers.py`: /api/account 엔드포인트 (register, login).
"""

__title__ = "GeoAsset Account Domain"
__description__ = "Manages user accounts and issues access tokens."
__version__ = "0.1.0"
__all__ = []
