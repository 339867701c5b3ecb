import time, uuid, logging
from starlette.middleware.base import BaseHTTPMiddleware
from search_api.app.platform.errors import unhandled_exception_handler
from search_api.app.platform.logging import request_id_ctx

access_logger = logging.getLogger("search_api.access")

class RequestContextMiddleware(BaseHTTPMiddleware):
    """X-Request-ID 전파 + 요청당 access 로그 1줄."""

    async def dispatch(self, request, call_next):
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        token = request_id_ctx.set(rid)
        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                # request_id가 살아 있을 때 500 응답/로그를 만든다(CORS 헤더도 바깥에서 붙는다)
                response = await unhandled_exception_handler(request, exc)
            ms = (time.perf_counter() - start) * 1000
            access_logger.info(
                "%s %s %s %.2fms", request.method, request.url.path, response.status_code, ms,
                extra={"method": request.method, "path": request.url.path,
                       "status_code": response.status_code, "duration_ms": round(ms, 2)},
            )
        finally:
            request_id_ctx.reset(token)
        response.headers["X-Request-ID"] = rid
        return response
