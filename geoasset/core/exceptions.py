# geoasset/core/exceptions.py

"""
애플리케이션 공통 예외 및 전역 예외 핸들러를 정의하는 모듈입니다.

- MissingSigningKeyError: 서명 키 없이 토큰 발급을 시도한 배포 결함. 처리하지 않고 500 으로 노출됩니다.
- RequestValidationError 핸들러: FastAPI 기본 422 응답을 400 검증 오류 응답으로 변환합니다.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

VALIDATION_TITLE = "One or more validation errors occurred."


class GeoAssetError(Exception):
    """애플리케이션 예외의 최상위 클래스"""


class MissingSigningKeyError(GeoAssetError):
    def __init__(self, message: str = "JWT Key is missing from configuration."):
        super().__init__(message)


def _field_name(loc: tuple) -> str:
    # ("body", "latitude") -> "latitude", ("query", "name") -> "name"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) if parts else "$"


def validation_errors_to_dict(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    result: Dict[str, List[str]] = {}
    for error in errors:
        message = error.get("msg", "Invalid value")
        # pydantic v2 는 field_validator 메시지 앞에 "Value error, " 를 붙입니다.
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        result.setdefault(_field_name(tuple(error.get("loc", ()))), []).append(message)
    return result


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = validation_errors_to_dict(exc.errors())
        logger.info("Validation failed for %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "title": VALIDATION_TITLE,
                "status": status.HTTP_400_BAD_REQUEST,
                "errors": errors,
            },
        )
