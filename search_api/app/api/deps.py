from __future__ import annotations

from fastapi import Depends, Request
from opensearchpy import OpenSearch

from search_api.app.domain.ports import SearchPort
from search_api.app.domain.services.search_service import SearchService
from search_api.app.adapters.searchers.opensearch_client import build_client
from search_api.app.adapters.searchers.opensearch_searcher import OpenSearchSearcher
from search_api.app.platform.config import settings


# ---- 클라이언트 ----
def get_opensearch(request: Request) -> OpenSearch:
    """
    앱 시작 시 main.py의 lifespan에서 만들어 넣어둔 OpenSearch 클라이언트를 꺼낸다.
    없으면(테스트 등) 즉석 생성해서 app.state에 넣어둔다.
    """
    if not hasattr(request.app.state, "opensearch"):
        request.app.state.opensearch = build_client(settings)
    return request.app.state.opensearch


def get_searcher(client: OpenSearch = Depends(get_opensearch)) -> SearchPort:
    return OpenSearchSearcher(client, settings.ITEMS_INDEX, timeout=settings.OPENSEARCH_TIMEOUT)


def get_search_service(searcher: SearchPort = Depends(get_searcher)) -> SearchService:
    """
    FastAPI DI에서 SearchPort를 받아 SearchService를 생성해 주입한다.
    """
    return SearchService(
        searcher,
        zero_bound_is_unset=settings.ZERO_BOUND_IS_UNSET,
    )
