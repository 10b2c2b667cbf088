# geoasset/domains/usr/crud.py

"""
'usr' 도메인의 CRUD 작업(Identity store)을 담당하는 모듈입니다.

IdentityStore 는 라우터가 의존하는 최소 기능 인터페이스이며,
SQLModelIdentityStore 가 users 테이블과 passlib(bcrypt) 으로 이를 구현합니다.
"""

import logging
import string
from typing import List, Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from geoasset.core.config import Settings
from geoasset.core.crud_base import CRUDBase
from geoasset.core.security import get_password_hash, verify_password
from . import models as usr_models
from . import schemas as usr_schemas

logger = logging.getLogger(__name__)

ALLOWED_USERNAME_CHARACTERS = set(string.ascii_letters + string.digits + "-._@+")


class IdentityStore(Protocol):
    """사용자 자격 증명을 소유하는 저장소의 기능 인터페이스"""

    async def create_user(
        self, db: AsyncSession, *, username: str, email: Optional[str], password: str
    ) -> usr_schemas.IdentityResult:
        ...

    async def find_by_username(self, db: AsyncSession, *, username: str) -> Optional[usr_models.User]:
        ...

    def verify_password(self, user: usr_models.User, password: str) -> bool:
        ...


# =============================================================================
# 1. 사용자/비밀번호 검증기 (Identity 오류 코드)
# =============================================================================
def duplicate_user_name(username: str) -> usr_schemas.IdentityError:
    return usr_schemas.IdentityError(
        code="DuplicateUserName", description=f"Username '{username}' is already taken."
    )


def validate_username(username: str) -> List[usr_schemas.IdentityError]:
    if not username or any(ch not in ALLOWED_USERNAME_CHARACTERS for ch in username):
        return [usr_schemas.IdentityError(
            code="InvalidUserName",
            description=f"Username '{username}' is invalid, can only contain letters or digits.",
        )]
    return []


def validate_password(settings: Settings, password: str) -> List[usr_schemas.IdentityError]:
    """
    설정된 비밀번호 정책으로 비밀번호를 검사하고, 위반한 규칙을 모두 반환합니다.
    """
    errors: List[usr_schemas.IdentityError] = []
    if len(password or "") < settings.PASSWORD_REQUIRED_LENGTH:
        errors.append(usr_schemas.IdentityError(
            code="PasswordTooShort",
            description=f"Passwords must be at least {settings.PASSWORD_REQUIRED_LENGTH} characters.",
        ))
    if settings.PASSWORD_REQUIRE_NON_ALPHANUMERIC and all(ch.isalnum() for ch in password):
        errors.append(usr_schemas.IdentityError(
            code="PasswordRequiresNonAlphanumeric",
            description="Passwords must have at least one non alphanumeric character.",
        ))
    if settings.PASSWORD_REQUIRE_DIGIT and not any(ch in string.digits for ch in password):
        errors.append(usr_schemas.IdentityError(
            code="PasswordRequiresDigit",
            description="Passwords must have at least one digit ('0'-'9').",
        ))
    if settings.PASSWORD_REQUIRE_LOWERCASE and not any(ch in string.ascii_lowercase for ch in password):
        errors.append(usr_schemas.IdentityError(
            code="PasswordRequiresLower",
            description="Passwords must have at least one lowercase ('a'-'z').",
        ))
    if settings.PASSWORD_REQUIRE_UPPERCASE and not any(ch in string.ascii_uppercase for ch in password):
        errors.append(usr_schemas.IdentityError(
            code="PasswordRequiresUpper",
            description="Passwords must have at least one uppercase ('A'-'Z').",
        ))
    return errors


# =============================================================================
# 2. users 테이블 CRUD (SQLModel 기반 Identity store)
# =============================================================================
class SQLModelIdentityStore(CRUDBase[usr_models.User, usr_schemas.UserRegister, usr_schemas.UserRegister]):
    def __init__(self, settings: Settings):
        super().__init__(model=usr_models.User)
        self.settings = settings

    async def find_by_username(self, db: AsyncSession, *, username: str) -> Optional[usr_models.User]:
        # 사용자명은 대소문자를 구분하지 않으므로 정규화된 값으로 조회합니다.
        return await self.get_by_attribute(
            db, attribute="normalized_username", value=usr_models.normalize_key(username)
        )

    async def create_user(
        self, db: AsyncSession, *, username: str, email: Optional[str], password: str
    ) -> usr_schemas.IdentityResult:
        """
        비밀번호 정책을 먼저 검사하고, 위반이 있으면 그 오류들만 반환합니다.
        비밀번호가 통과한 경우에만 사용자명 형식과 중복을 검사합니다.
        오류가 하나라도 있으면 저장하지 않습니다.
        """
        errors = validate_password(self.settings, password)
        if errors:
            return usr_schemas.IdentityResult.failed(errors)

        errors = validate_username(username)
        if not errors and await self.find_by_username(db, username=username):
            errors.append(duplicate_user_name(username))
        if errors:
            return usr_schemas.IdentityResult.failed(errors)

        db_user = usr_models.User(
            username=username,
            normalized_username=usr_models.normalize_key(username),
            email=email,
            normalized_email=usr_models.normalize_key(email),
            password_hash=get_password_hash(password),
        )
        db.add(db_user)
        try:
            await db.commit()
        except IntegrityError:
            # 동시 가입으로 unique 제약에 걸린 경우
            await db.rollback()
            return usr_schemas.IdentityResult.failed([duplicate_user_name(username)])

        logger.info("User '%s' created with id %s", username, db_user.id)
        return usr_schemas.IdentityResult.success()

    def verify_password(self, user: usr_models.User, password: str) -> bool:
        return verify_password(password, user.password_hash)
