from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from opensearchpy import OpenSearch
from search_api.app.api.deps import get_opensearch
from search_api.app.platform.config import settings

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
def health():
    return {"ok": True}

@router.get("/ready")
def ready(client: OpenSearch = Depends(get_opensearch)):
    # 엔진 응답 여부만 본다(ping은 실패 시 False를 돌려준다)
    up = bool(client.ping())
    return JSONResponse(
        status_code=200 if up else 503,
        content={"ok": up, "index": settings.ITEMS_INDEX},
    )
