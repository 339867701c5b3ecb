"""
도메인 모델 정의.

- Locale / Dimension / BoundKind: 닫힌 열거형(지원 로케일, 물리 치수, 범위 종류)
- SearchRequest: 호출 1건의 검색 파라미터(불변)
- RangeFilter: 치수 범위 필터 1개
- StoredDocument: 엔진에 저장된 다국어 문서(_source)
- SearchHit / SearchEnvelope: 엔진 응답 봉투를 해석한 결과
- ProjectedItem / SearchResult: 호출자에게 내려주는 단일 로케일 응답

Pydantic v2 기반 모델이라 검증/직렬화가 용이합니다.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar
from pydantic import BaseModel, ConfigDict, Field


JSONDict = dict[str, Any]
T = TypeVar("T")


class Locale(str, Enum):
    """지원 로케일. 여기에 없는 값은 요청 단계에서 거부된다."""
    en = "en"
    fr = "fr"


class Dimension(str, Enum):
    """필터 가능한 물리 치수. 선언 순서가 필터 절 순서가 된다."""
    length = "length"
    height = "height"
    width = "width"
    depth = "depth"
    weight = "weight"
    diameter = "diameter"
    volume = "volume"
    thickness = "thickness"


class BoundKind(str, Enum):
    """범위 종류 → 엔진 range 연산자."""
    lower = "gte"
    upper = "lte"


class DimensionBounds(BaseModel):
    """치수 하나의 min/max. None이면 '지정 안 함'."""
    model_config = ConfigDict(frozen=True)

    min: float | None = None
    max: float | None = None


class RangeFilter(BaseModel):
    """치수 범위 필터 1개(하한 또는 상한, 양끝 포함)."""
    model_config = ConfigDict(frozen=True)

    dimension: Dimension
    bound: BoundKind
    value: float

    @property
    def field(self) -> str:
        return f"dimensions.{self.dimension.value}"


class SearchRequest(BaseModel):
    """
    검색 요청 1건. 요청마다 새로 만들고, 쿼리 컴파일 후 버린다.
    cursor는 이전 페이지 마지막 hit의 정렬 키 값 (score, timestamp).
    """
    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1, description="자유 텍스트 검색어")
    locale: Locale = Field(Locale.en, description="응답 로케일")
    cursor: tuple[float, int] | None = Field(None, description="search_after 정렬 키")
    bounds: dict[Dimension, DimensionBounds] = Field(default_factory=dict)


class Price(BaseModel):
    amount: float = Field(..., ge=0)
    currency: str


class Localized(BaseModel, Generic[T]):
    """로케일별 값. 저장 문서의 name/description/urls/categories/price."""
    en: T | None = None
    fr: T | None = None


class StoredDocument(BaseModel):
    """
    엔진에 저장된 아이템(_source).
    OpenSearch 매핑 예시:
      - source: keyword
      - timestamp: long (정렬 tiebreaker)
      - dimensions.<dimension>: float
      - name.<locale>, description.<locale>, categories.<locale>: text
    """
    source: str
    timestamp: int = Field(..., ge=0)
    image_urls: list[str] = Field(default_factory=list)
    dimensions: dict[Dimension, float] = Field(default_factory=dict)

    name: Localized[str]
    description: Localized[str]
    urls: Localized[list[str]]
    categories: Localized[list[str]]
    price: Localized[Price]


class SearchHit(BaseModel):
    """엔진 hit 1건. document는 아직 해석하지 않은 _source."""
    id: str
    score: float | None = None
    document: JSONDict


class SearchEnvelope(BaseModel):
    total: int = Field(..., ge=0)
    hits: list[SearchHit] = Field(default_factory=list)


class ProjectedItem(BaseModel):
    """단일 로케일로 펼친 응답 아이템."""
    id: str
    score: float | None = None
    source: str
    timestamp: int
    name: str
    description: str
    urls: list[str]
    categories: list[str]
    image_urls: list[str]
    dimensions: dict[Dimension, float]
    price: Price


class SearchResult(BaseModel):
    """total은 엔진이 보고한 전체 매칭 수(페이지 크기보다 클 수 있음)."""
    total: int = Field(..., ge=0)
    items: list[ProjectedItem] = Field(default_factory=list)
