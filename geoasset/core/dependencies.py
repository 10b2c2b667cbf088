# geoasset/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 (get_db_session).
- 애플리케이션 설정 (get_settings).
- 현재 인증된 사용자 (get_current_user, get_current_user_id).
- Identity store (get_identity_store). 테스트에서는 dependency_overrides 로 교체할 수 있습니다.
"""

from fastapi import Depends

from geoasset.core.config import Settings, get_settings  # noqa: F401
from geoasset.core.database import get_session
from geoasset.core.security import get_current_user, get_current_user_id  # noqa: F401
from geoasset.domains.usr.crud import IdentityStore, SQLModelIdentityStore

# routers 에서는 get_db_session 을 사용합니다. get_session 과 같은 객체이므로
# 어느 쪽을 override 해도 적용됩니다.
get_db_session = get_session


def get_identity_store(settings: Settings = Depends(get_settings)) -> IdentityStore:
    """설정의 비밀번호 정책을 사용하는 Identity store 를 반환합니다."""
    return SQLModelIdentityStore(settings)
