from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from typing import Annotated
from search_api.app.api.deps import get_search_service, SearchService
from search_api.app.domain.models import SearchResult
from search_api.app.domain.utils import build_search_request
import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["items"])

class ItemsQuery(BaseModel):
    """
    아이템 검색 쿼리 파라미터.
    치수 범위는 min_<dimension>/max_<dimension> (양끝 포함).
    """
    q: str | None = Field(None, description="검색 쿼리(필수)")
    a: str | None = Field(None, description="페이지네이션 커서: 이전 페이지 마지막 아이템의 'score,timestamp'")
    lang: str = Field("en", description="응답 로케일(en|fr)")

    min_length: float | None = None
    max_length: float | None = None
    min_height: float | None = None
    max_height: float | None = None
    min_width: float | None = None
    max_width: float | None = None
    min_depth: float | None = None
    max_depth: float | None = None
    min_weight: float | None = None
    max_weight: float | None = None
    min_diameter: float | None = None
    max_diameter: float | None = None
    min_volume: float | None = None
    max_volume: float | None = None
    min_thickness: float | None = None
    max_thickness: float | None = None

@router.get(
    "",
    summary="아이템 검색",
    description=(
        "검색어로 아이템을 검색합니다. 결과는 `lang` 로케일로 펼쳐서 반환하며, "
        "한 페이지는 25건입니다. 다음 페이지는 마지막 아이템의 `score,timestamp`를 `a`로 넘깁니다."
    ),
    operation_id="searchItems",
    status_code=200,
    response_model=SearchResult,
    responses={
        200: {
            "description": "검색 성공",
            "content": {
                "application/json": {
                    "examples": {
                        "basic": {
                            "summary": "기본 검색 예시",
                            "value": {
                                "total": 2,
                                "items": [
                                    {
                                        "id": "b9f1c2",
                                        "score": 3.1,
                                        "source": "ikea",
                                        "timestamp": 1600000000,
                                        "name": "Red Box",
                                        "description": "Storage box",
                                        "urls": ["https://example.com/en/red-box"],
                                        "categories": ["storage"],
                                        "image_urls": ["https://example.com/img/red-box.jpg"],
                                        "dimensions": {"height": 30.0, "width": 40.0},
                                        "price": {"amount": 9.99, "currency": "EUR"}
                                    }
                                ]
                            }
                        }
                    }
                }
            },
        },
        400: {"description": "필수 파라미터 누락/지원하지 않는 로케일/잘못된 커서"},
        500: {"description": "서버 내부 오류"},
        502: {"description": "검색 엔진 오류/응답 형식 오류"},
        503: {"description": "검색 엔진 연결 불가"},
    },
)
def search_items(
    params: Annotated[ItemsQuery, Query()],
    svc: SearchService = Depends(get_search_service)):
    logger.debug("ItemsQuery: %s", params)
    req = build_search_request(
        params.q,
        lang=params.lang,
        after=params.a,
        bounds=params.model_dump(include={
            name for name in ItemsQuery.model_fields if name.startswith(("min_", "max_"))
        }),
    )
    return svc.search(req)
