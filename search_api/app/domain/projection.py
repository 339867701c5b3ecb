"""
로케일 프로젝터.

저장 문서(다국어) → 요청 로케일 하나로 펼친 ProjectedItem.
로케일 변형이 없으면 다른 로케일로 대체하지 않고 MissingLocaleVariant를 던진다.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Callable, Dict, Mapping

from pydantic import ValidationError

from search_api.app.domain.models import (
    Locale,
    Localized,
    ProjectedItem,
    SearchHit,
    StoredDocument,
)
from search_api.app.platform.exceptions import DecodeError, MissingLocaleVariant, UnsupportedLocale

# 로케일 → Localized 필드 접근자. Locale에 값을 추가하면 여기도 채워야 한다.
VARIANT_ACCESSORS: Dict[Locale, Callable[[Localized], Any]] = {
    Locale.en: attrgetter("en"),
    Locale.fr: attrgetter("fr"),
}

LOCALIZED_FIELDS = ("name", "description", "urls", "categories", "price")


def decode_document(doc_id: str, source: Mapping[str, Any]) -> StoredDocument:
    try:
        return StoredDocument.model_validate(source)
    except ValidationError as e:
        raise DecodeError(f"document {doc_id}: {e.error_count()} invalid field(s): "
                          + ", ".join(".".join(map(str, err["loc"])) for err in e.errors())) from e


def project(doc_id: str, score: float | None, doc: StoredDocument, locale: Locale) -> ProjectedItem:
    """
    Args:
        doc_id: 엔진 문서 id
        score: 관련도 점수
        doc: 저장 문서
        locale: 검증된 로케일
    Returns:
        ProjectedItem: 단일 로케일 아이템
    Raises:
        MissingLocaleVariant: 로케일 변형이 없는 필드가 있을 때
    """
    accessor = VARIANT_ACCESSORS.get(locale)
    if accessor is None:  # Locale 밖의 값으로 직접 호출된 경우
        raise UnsupportedLocale(str(locale))

    resolved: Dict[str, Any] = {}
    for field in LOCALIZED_FIELDS:
        value = accessor(getattr(doc, field))
        if value is None:
            raise MissingLocaleVariant(doc_id, field, locale.value)
        resolved[field] = value

    return ProjectedItem(
        id=doc_id,
        score=score,
        source=doc.source,
        timestamp=doc.timestamp,
        image_urls=list(doc.image_urls),
        dimensions=dict(doc.dimensions),
        **resolved,
    )


def project_hit(hit: SearchHit, locale: Locale) -> ProjectedItem:
    """hit 1건 디코딩 + 프로젝션."""
    doc = decode_document(hit.id, hit.document)
    return project(hit.id, hit.score, doc, locale)
