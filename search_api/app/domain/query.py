"""
검색 쿼리 컴파일러.

SearchRequest + RangeFilter 목록 → OpenSearch 검색 바디(dict).
문자열 템플릿이 아니라 dict 트리로 만들고 직렬화는 클라이언트에 맡긴다.
"""

from __future__ import annotations

from typing import Any, Dict, List

from search_api.app.domain.filters import to_range_clauses
from search_api.app.domain.models import Locale, RangeFilter, SearchRequest
from search_api.app.platform.exceptions import UnsupportedLocale

PAGE_SIZE = 25

# 필드별 가중치: name > categories > description
FIELD_BOOSTS = (
    ("name", 10),
    ("categories", 3),
    ("description", 1),
)

SORT = [
    {"_score": "desc"},
    {"timestamp": "asc"},
]


def localized_fields(locale: Locale) -> List[str]:
    """
    로케일별 검색 필드 목록(예: name.fr^10).
    Args:
        locale (Locale): 지원 로케일
    Returns:
        List[str]: multi_match fields
    """
    if not isinstance(locale, Locale):
        try:
            locale = Locale(locale)
        except ValueError:
            raise UnsupportedLocale(str(locale)) from None

    fields = []
    for name, boost in FIELD_BOOSTS:
        field = f"{name}.{locale.value}"
        fields.append(field if boost == 1 else f"{field}^{boost}")
    return fields


def compile_query(
    req: SearchRequest,
    filters: List[RangeFilter]) -> Dict[str, Any]:
    """
    검색 쿼리 바디를 구성한다.

    Args:
        req (SearchRequest): 검색 요청
        filters (List[RangeFilter]): 치수 범위 필터(모두 AND, 점수 미반영)
    Returns:
        Dict[str, Any]: 검색 쿼리 바디
    """
    body: Dict[str, Any] = {
        "query": {
            "bool": {
                "must": [
                    {
                        "multi_match": {
                            "query": req.query,
                            "fields": localized_fields(req.locale),
                            "operator": "and",
                        }
                    }
                ],
                "filter": to_range_clauses(filters),
            }
        },
        "size": PAGE_SIZE,
        "sort": [dict(s) for s in SORT],
    }

    # 이전 페이지 마지막 hit의 (score, timestamp) 다음부터
    if req.cursor is not None:
        score, timestamp = req.cursor
        body["search_after"] = [score, timestamp]

    return body
