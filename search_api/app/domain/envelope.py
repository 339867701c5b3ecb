"""
엔진 응답 봉투 파서.

{"hits": {"total": {"value": N}, "hits": [{"_id", "_score", "_source"}, ...]}}
→ SearchEnvelope(total, hits). _source는 해석하지 않고 그대로 넘긴다.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from search_api.app.domain.models import SearchEnvelope, SearchHit
from search_api.app.platform.exceptions import DecodeError, EngineError

logger = logging.getLogger(__name__)


def _error_reason(error: Any) -> str:
    if isinstance(error, Mapping):
        root = error.get("root_cause") or []
        if root and isinstance(root[0], Mapping) and root[0].get("reason"):
            return str(root[0]["reason"])
        return str(error.get("reason") or error.get("type") or error)
    return str(error)


def _load(raw: bytes | str | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(raw, Mapping):
        return raw
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"response is not JSON: {e}") from e
    if not isinstance(data, Mapping):
        raise DecodeError(f"response root is {type(data).__name__}, expected object")
    return data


def _total(hits: Mapping[str, Any]) -> int:
    total = hits.get("total")
    # 7.x 이상: {"value": N, "relation": "eq"} / 6.x: N
    if isinstance(total, Mapping):
        total = total.get("value")
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise DecodeError(f"invalid hits.total: {hits.get('total')!r}")
    return total


def parse_envelope(raw: bytes | str | Mapping[str, Any]) -> SearchEnvelope:
    """
    Args:
        raw: 엔진 응답(바이트/문자열 JSON 또는 이미 디코딩된 dict)
    Returns:
        SearchEnvelope: 전체 건수 + hit 목록(엔진 순서 유지)
    Raises:
        EngineError: 응답이 엔진 측 실패를 나타내는 경우
        DecodeError: 봉투 구조가 예상과 다른 경우
    """
    data = _load(raw)

    if "error" in data:
        status = data.get("status")
        raise EngineError(_error_reason(data["error"]), status if isinstance(status, int) else None)

    shards = data.get("_shards")
    if isinstance(shards, Mapping) and shards.get("failed"):
        logger.warning("partial shard failure: %s", shards.get("failures"))

    hits = data.get("hits")
    if not isinstance(hits, Mapping):
        raise DecodeError("missing hits object")

    total = _total(hits)
    raw_hits = hits.get("hits", [])
    if not isinstance(raw_hits, list):
        raise DecodeError("hits.hits is not a list")

    parsed = []
    for i, h in enumerate(raw_hits):
        if not isinstance(h, Mapping):
            raise DecodeError(f"hit #{i} is not an object")
        doc_id = h.get("_id")
        source = h.get("_source")
        score = h.get("_score")
        if not isinstance(doc_id, str) or not doc_id:
            raise DecodeError(f"hit #{i} has no _id")
        if not isinstance(source, Mapping):
            raise DecodeError(f"hit {doc_id} has no _source")
        if score is not None and (isinstance(score, bool) or not isinstance(score, (int, float))):
            raise DecodeError(f"hit {doc_id} has invalid _score: {score!r}")
        parsed.append(SearchHit(id=doc_id, score=score, document=dict(source)))

    return SearchEnvelope(total=total, hits=parsed)
