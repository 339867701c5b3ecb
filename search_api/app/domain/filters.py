"""
치수 범위 필터 빌더.

요청의 (치수, min/max) 값을 엔진 filter 절에 들어갈 RangeFilter 목록으로 바꾼다.
순서는 Dimension 선언 순서 → 하한, 상한 순으로 고정이라 같은 입력이면 항상 같은 결과가 나온다.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from search_api.app.domain.models import BoundKind, Dimension, DimensionBounds, RangeFilter
from search_api.app.platform.exceptions import InvalidInput


def _present(value: float | None, zero_is_unset: bool) -> bool:
    if value is None:
        return False
    if zero_is_unset and value == 0:
        return False
    return True


def build_dimension_filters(
    bounds: Mapping[Dimension, DimensionBounds],
    zero_is_unset: bool = False) -> List[RangeFilter]:
    """
    Args:
        bounds: 치수별 min/max (없는 치수는 필터 없음)
        zero_is_unset: True면 0을 '지정 안 함'으로 취급(구 클라이언트 호환)
    Returns:
        List[RangeFilter]: 하한(gte) → 상한(lte) 순의 필터 목록
    """
    filters: List[RangeFilter] = []
    for dim in Dimension:
        b = bounds.get(dim)
        if b is None:
            continue

        lower = b.min if _present(b.min, zero_is_unset) else None
        upper = b.max if _present(b.max, zero_is_unset) else None
        if lower is not None and upper is not None and lower > upper:
            raise InvalidInput(f"min_{dim.value} ({lower}) is greater than max_{dim.value} ({upper})")

        if lower is not None:
            filters.append(RangeFilter(dimension=dim, bound=BoundKind.lower, value=lower))
        if upper is not None:
            filters.append(RangeFilter(dimension=dim, bound=BoundKind.upper, value=upper))
    return filters


def to_range_clauses(filters: List[RangeFilter]) -> List[Dict[str, Any]]:
    """RangeFilter 목록 → bool.filter에 들어갈 range 절 목록."""
    return [{"range": {f.field: {f.bound.value: f.value}}} for f in filters]
