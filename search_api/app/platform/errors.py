from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi import status
from search_api.app.platform.logging import request_id_ctx
from search_api.app.platform import exceptions as domainex
import logging

logger = logging.getLogger(__name__)

def error_envelope(message, code="BAD_REQUEST", details=None, trace_id=None):
    return {
        "success": False,
        "error": {
            "code": code, "message": message, "details": details
        },
        "trace_id": trace_id
    }

async def http_exception_handler(request: Request, exc: HTTPException):
    # 4xx, 5xx 에러
    return JSONResponse(status_code=exc.status_code,
                        content=error_envelope(
                            exc.detail,
                            code=f"HTTP_{exc.status_code}",
                            trace_id=request_id_ctx.get()))

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 쿼리 파라미터 타입 오류 등은 잘못된 요청(400)으로 내려준다
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                        content=error_envelope(
                            "Missing or invalid parameters",
                            code="VALIDATION_ERROR",
                            details=[{"loc": e.get("loc"), "msg": e.get("msg")} for e in exc.errors()],
                            trace_id=request_id_ctx.get()))

async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception path=%s", request.url.path)
    # 500 Internal server error
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content=error_envelope(
                            "Internal server error",
                            code="INTERNAL_ERROR",
                            trace_id=request_id_ctx.get()))

def classify(exc: domainex.DomainError) -> tuple[int, str]:
    """
    도메인 예외 → (HTTP 상태, 에러 코드).
    """
    if isinstance(exc, domainex.UnsupportedLocale):
        return status.HTTP_400_BAD_REQUEST, "UNSUPPORTED_LOCALE"
    if isinstance(exc, domainex.InvalidInput):
        return status.HTTP_400_BAD_REQUEST, "INVALID_INPUT"
    if isinstance(exc, domainex.MissingLocaleVariant):
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "MISSING_LOCALE_VARIANT"
    if isinstance(exc, domainex.EngineUnavailable):
        return status.HTTP_503_SERVICE_UNAVAILABLE, "ENGINE_UNAVAILABLE"
    if isinstance(exc, domainex.EngineError):
        return status.HTTP_502_BAD_GATEWAY, "ENGINE_ERROR"
    if isinstance(exc, domainex.DecodeError):
        return status.HTTP_502_BAD_GATEWAY, "DECODE_ERROR"
    return status.HTTP_400_BAD_REQUEST, "SERVICE_ERROR"

async def domain_exception_handler(request: Request, exc: domainex.DomainError):
    """
    도메인/유즈케이스 예외를 HTTP로 매핑.
    5xx는 호출자에게 상세 사유를 숨기고 로그에만 남긴다.
    """
    http_status, code = classify(exc)

    if http_status >= 500:
        logger.error("Domain error: %s (%s) path=%s", exc, code, request.url.path)
        message = "Internal server error"
    else:
        logger.warning("Domain error: %s (%s) path=%s", exc, code, request.url.path)
        message = str(exc)

    return JSONResponse(
        status_code=http_status,
        content=error_envelope(
            message,
            code=code,
            trace_id=request_id_ctx.get())
    )
