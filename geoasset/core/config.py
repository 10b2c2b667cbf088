# geoasset/core/config.py

from typing import Optional
from fastapi import Request
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# JWT_KEY 가 설정되지 않았을 때 토큰 검증에 사용되는 대체 키입니다.
# 예측 가능한 비밀값이므로 운영 환경에서는 반드시 JWT_KEY 를 설정해야 합니다.
DEFAULT_JWT_KEY = "GeoAssetSystem_Secure_Key_2026_@_Secure_Long_String"


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.

    create_app() 에서 한 번 생성되어 app.state.settings 에 보관되며,
    각 컴포넌트는 의존성 주입(get_settings)으로 전달받습니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "GeoAsset API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Geographic asset (location) management API"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging and SQL echo")
    LOG_LEVEL: str = Field("INFO", description="Root logger level")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(
        SecretStr("sqlite+aiosqlite:///./geoasset.db"),
        description="Async database connection URL (postgresql+asyncpg://... or sqlite+aiosqlite://...)"
    )
    # 시작 시 누락된 테이블을 생성합니다. (버전 관리 마이그레이션 없음)
    AUTO_CREATE_TABLES: bool = Field(True, description="Create missing tables on application startup")

    # --- JWT (JSON Web Token) 설정 ---
    JWT_KEY: Optional[SecretStr] = Field(None, description="Symmetric key for JWT signing. Keep this highly secure!")
    ALGORITHM: str = Field("HS256", description="Algorithm used for JWT signing")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24, description="Access token expiration time in minutes (1 day)")

    # --- 비밀번호 정책 (Identity store) ---
    PASSWORD_REQUIRED_LENGTH: int = Field(6, ge=1)
    PASSWORD_REQUIRE_DIGIT: bool = True
    PASSWORD_REQUIRE_LOWERCASE: bool = True
    PASSWORD_REQUIRE_UPPERCASE: bool = True
    PASSWORD_REQUIRE_NON_ALPHANUMERIC: bool = True

    @property
    def has_signing_key(self) -> bool:
        return self.JWT_KEY is not None and bool(self.JWT_KEY.get_secret_value())

    @property
    def verification_key(self) -> str:
        """토큰 검증용 키. JWT_KEY 가 없으면 DEFAULT_JWT_KEY 로 대체합니다."""
        if self.has_signing_key:
            return self.JWT_KEY.get_secret_value()
        return DEFAULT_JWT_KEY


def get_settings(request: Request) -> Settings:
    """create_app() 에서 app.state 에 보관한 설정 객체를 반환하는 의존성입니다."""
    return request.app.state.settings
