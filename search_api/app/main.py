from __future__ import annotations

from contextlib import asynccontextmanager
from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from search_api.app.api.routers import health, items
from search_api.app.adapters.searchers.opensearch_client import build_client
from search_api.app.platform.config import settings
from search_api.app.platform.logging import setup_logging
from search_api.app.platform.errors import (
    http_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
    domain_exception_handler
)
from search_api.app.platform import exceptions as domainex
from search_api.app.middlewares.request_context import RequestContextMiddleware



@asynccontextmanager
async def lifespan(app: FastAPI):
    # 로깅 등 공통 준비
    setup_logging(
        app_name=settings.APP_NAME,
        log_to_file=settings.LOG_TO_FILE,
        log_dir=settings.LOG_DIR,
        as_json=settings.LOG_AS_JSON,
        level=settings.LOG_LEVEL,
    )

    # OpenSearch 클라이언트를 한 번만 생성해서 공유
    app.state.opensearch = build_client(settings)
    try:
        yield
    finally:
        app.state.opensearch.close()

app = FastAPI(title="SizeMatch Search API", debug=settings.DEBUG, lifespan=lifespan)

v1 = APIRouter(prefix="/v1")
v1.include_router(items.router)

app.include_router(health.router)
app.include_router(v1)

# Global Exception Filter
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(domainex.DomainError, domain_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# 요청 컨텍스트/액세스 로그 미들웨어
app.add_middleware(RequestContextMiddleware)
# CORS는 가장 바깥에서 처리(preflight OPTIONS 포함)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET"],
    allow_headers=["Content-Type"],
)
