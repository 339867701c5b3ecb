# app/platform/logging.py
import os
import json
import logging
import logging.config
from contextvars import ContextVar
from datetime import datetime, timezone

# ===== Request ID =====
request_id_ctx: ContextVar[str] = ContextVar("request_id", default="-")

class RequestIDFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get()
        return True

# 검색 로그에 extra=로 붙이는 필드들
SEARCH_FIELDS = (
    "index", "locale", "total", "returned", "filters",
    "took_ms", "engine_ms", "status_code", "duration_ms", "method", "path",
)

# ===== JSON Formatter =====
class JsonFormatter(logging.Formatter):
    """
    한 줄 JSON 로그. 로그 수집기(Logstash/Fluent Bit)에서 그대로 파싱 가능.
    extra=로 넘긴 검색 관련 필드가 있으면 함께 기록한다.
    """
    def __init__(self, app_name: str = "-") -> None:
        super().__init__()
        self.app_name = app_name

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "app": self.app_name,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
        }

        for k in SEARCH_FIELDS:
            v = getattr(record, k, None)
            if v is not None:
                payload[k] = v

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

# ===== Text Formatter (로컬 확인용) =====
TEXT_APP = "%(asctime)s %(levelname)s [%(name)s] [%(request_id)s] %(message)s"
TEXT_ACCESS = "%(asctime)s %(levelname)s [access] [%(request_id)s] %(message)s"


def _handler(formatter: str, level: str, filename: str | None = None) -> dict:
    if filename is None:
        return {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": formatter,
            "filters": ["request_id"],
        }
    return {
        "class": "logging.handlers.TimedRotatingFileHandler",
        "level": level,
        "formatter": formatter,
        "filename": filename,
        "when": "midnight",
        "backupCount": 14,
        "encoding": "utf-8",
        "filters": ["request_id"],
    }


def setup_logging(
    *,
    app_name: str = "-",
    log_to_file: bool = False,
    log_dir: str = "/var/log/app",
    as_json: bool = True,
    level: str = "INFO",
) -> None:
    """
    - app 로그: root, uvicorn.error, opensearch
    - access 로그: uvicorn.access, search_api.access
    - uvicorn.* 는 propagate=False (중복 방지)
    """
    level = level.upper()
    app_fmt = "json" if as_json else "text_app"
    access_fmt = "json" if as_json else "text_access"

    handlers = {
        "console_app": _handler(app_fmt, level),
        "console_access": _handler(access_fmt, level),
    }
    if log_to_file:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file_app"] = _handler(app_fmt, level, f"{log_dir}/app.log")
        handlers["file_access"] = _handler(access_fmt, level, f"{log_dir}/access.log")

    app_handlers = ["console_app"] + (["file_app"] if log_to_file else [])
    access_handlers = ["console_access"] + (["file_access"] if log_to_file else [])

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_id": {"()": RequestIDFilter},
        },
        "formatters": {
            "json": {"()": JsonFormatter, "app_name": app_name},
            "text_app": {"format": TEXT_APP},
            "text_access": {"format": TEXT_ACCESS},
        },
        "handlers": handlers,
        "loggers": {
            "": {"handlers": app_handlers, "level": level, "propagate": False},
            "uvicorn.error": {"handlers": app_handlers, "level": level, "propagate": False},
            # 엔진 클라이언트의 요청 로그는 너무 많아서 WARNING 이상만
            "opensearch": {"handlers": app_handlers, "level": "WARNING", "propagate": False},
            "uvicorn.access": {"handlers": access_handlers, "level": level, "propagate": False},
            "search_api.access": {"handlers": access_handlers, "level": level, "propagate": False},
        },
    })
