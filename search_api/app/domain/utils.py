"""
유틸리티 함수.
"""

import json
import math
from typing import Any, Mapping

from search_api.app.domain.models import Dimension, DimensionBounds, Locale, SearchRequest
from search_api.app.platform.exceptions import InvalidInput, UnsupportedLocale


def resolve_locale(value: str | None) -> Locale:
    """
    로케일 문자열을 Locale로 변환하는 함수.
    Args:
        value: str | None (None/빈 값이면 en)
    Returns:
        Locale: 지원 로케일
    """
    if value is None or not value.strip():
        return Locale.en
    try:
        return Locale(value.strip().lower())
    except ValueError:
        raise UnsupportedLocale(value) from None


def parse_cursor(raw: str | None) -> tuple[float, int] | None:
    """
    페이지네이션 커서를 파싱하는 함수.
    '3.14,1600000000' 또는 '[3.14, 1600000000]' 형태만 허용한다.
    Args:
        raw: str | None (쿼리 파라미터 a)
    Returns:
        tuple[float, int] | None: (score, timestamp)
    """
    if raw is None or not raw.strip():
        return None

    text = raw.strip()
    if not text.startswith("["):
        text = f"[{text}]"
    try:
        values = json.loads(text)
    except ValueError:
        raise InvalidInput(f"malformed cursor: {raw!r}") from None

    if not isinstance(values, list) or len(values) != 2:
        raise InvalidInput("cursor must hold exactly two sort values (score, timestamp)")

    score, timestamp = values
    if isinstance(score, bool) or not isinstance(score, (int, float)) or not math.isfinite(score):
        raise InvalidInput(f"cursor score must be a finite number: {score!r}")
    if isinstance(timestamp, float) and timestamp.is_integer():
        timestamp = int(timestamp)
    if isinstance(timestamp, bool) or not isinstance(timestamp, int) or timestamp < 0:
        raise InvalidInput(f"cursor timestamp must be a non-negative integer: {timestamp!r}")

    return float(score), timestamp


def build_search_request(
    query: str | None,
    lang: str | None = None,
    after: str | None = None,
    bounds: Mapping[str, Any] | None = None) -> SearchRequest:
    """
    경계(HTTP 등)에서 받은 원시 값으로 SearchRequest를 만든다.
    Args:
        query: 검색어(필수, 공백만 있으면 안 됨)
        lang: 로케일(기본 en)
        after: 페이지네이션 커서
        bounds: {"min_height": 40, "max_height": 80, ...}
    Returns:
        SearchRequest: 검증된 요청
    """
    if query is None or not query.strip():
        raise InvalidInput("query parameter 'q' is required")

    locale = resolve_locale(lang)
    cursor = parse_cursor(after)

    bounds = bounds or {}
    dims: dict[Dimension, DimensionBounds] = {}
    for dim in Dimension:
        lo = bounds.get(f"min_{dim.value}")
        hi = bounds.get(f"max_{dim.value}")
        if lo is not None or hi is not None:
            dims[dim] = DimensionBounds(min=lo, max=hi)

    return SearchRequest(query=query.strip(), locale=locale, cursor=cursor, bounds=dims)
