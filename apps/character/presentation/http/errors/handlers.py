"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.character.application.auth.exceptions import AuthenticationFailure
from apps.character.application.common.exceptions import ApplicationError, PersistenceError
from apps.character.domain.exceptions import DomainError
from apps.character.presentation.http.errors.translators import (
    translate_application_error,
    translate_domain_error,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        status_code, code = translate_domain_error(exc)
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "code": code},
        )

    @app.exception_handler(AuthenticationFailure)
    async def authentication_failure_handler(request: Request, exc: AuthenticationFailure):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "code": exc.code},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        # 드라이버 메시지는 로그에만 남김
        logger.error(
            "Persistence failure",
            extra={"operation": exc.operation, "error": exc.message, "path": request.url.path},
        )
        return JSONResponse(
            status_code=503,
            content={
                "detail": f"Persistence operation failed: {exc.operation}",
                "code": "PERSISTENCE_ERROR",
            },
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        status_code, code = translate_application_error(exc)
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "code": code},
        )
