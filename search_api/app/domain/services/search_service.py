# app/domain/services/search_service.py
"""
SearchService
==============

아이템 검색 오케스트레이터.

Flow:
    SearchRequest → 치수 필터 → 쿼리 컴파일 → SearchPort(엔진) → 봉투 파싱 → 로케일 프로젝션

- 도메인은 **Port(인터페이스)** 에만 의존합니다. (DIP)
- 구현체는 adapters 레이어에서 주입(의존성 주입; DI)합니다.
- 부분 결과는 없다: 중간 단계 하나라도 실패하면 요청 전체가 실패한다.

예시:
    svc = SearchService(searcher)
    result = svc.search(build_search_request("red box", lang="fr"))
"""

from __future__ import annotations

import logging
from time import perf_counter

from search_api.app.domain.envelope import parse_envelope
from search_api.app.domain.filters import build_dimension_filters
from search_api.app.domain.models import SearchRequest, SearchResult
from search_api.app.domain.ports import SearchPort
from search_api.app.domain.projection import project_hit
from search_api.app.domain.query import compile_query

logger = logging.getLogger(__name__)

class SearchService:

    def __init__(
        self,
        searcher: SearchPort,
        zero_bound_is_unset: bool = False) -> None:
        self._searcher = searcher
        self._zero_bound_is_unset = zero_bound_is_unset

    # ================= public API =================
    def search(self, req: SearchRequest) -> SearchResult:
        """
        검색을 수행하는 메서드.
        Args:
            req: SearchRequest : 검증된 검색 요청
        Returns:
            SearchResult: 전체 건수 + 현재 페이지 아이템(엔진 순위 순서)
        """
        t0 = perf_counter()
        filters = build_dimension_filters(req.bounds, zero_is_unset=self._zero_bound_is_unset)
        body = compile_query(req, filters)
        logger.info(
            "service.search: query=%r locale=%s filters=%d cursor=%s",
            req.query, req.locale.value, len(filters), req.cursor is not None,
            extra={"locale": req.locale.value, "filters": len(filters)},
        )

        t1 = perf_counter()
        raw = self._searcher.search(body)
        t2 = perf_counter()

        envelope = parse_envelope(raw)
        items = [project_hit(hit, req.locale) for hit in envelope.hits]
        t3 = perf_counter()

        logger.info(
            "service.search done: total=%d returned=%d build=%.2fms engine=%.2fms project=%.2fms",
            envelope.total, len(items), (t1 - t0) * 1000, (t2 - t1) * 1000, (t3 - t2) * 1000,
            extra={
                "index": self._searcher.index_name,
                "total": envelope.total,
                "returned": len(items),
                "engine_ms": round((t2 - t1) * 1000, 2),
                "took_ms": round((t3 - t0) * 1000, 2),
            },
        )
        return SearchResult(total=envelope.total, items=items)
