from unittest.mock import MagicMock
import pytest

from search_api.app.domain.models import Dimension, DimensionBounds, Locale, SearchRequest
from search_api.app.domain.services.search_service import SearchService
from search_api.app.platform.exceptions import (
    DecodeError,
    EngineError,
    EngineUnavailable,
    MissingLocaleVariant,
)
from search_api.tests.samples import make_response, make_source


@pytest.fixture
def mock_searcher():
    s = MagicMock()
    s.index_name = "items"
    return s


@pytest.fixture
def service(mock_searcher):
    return SearchService(searcher=mock_searcher)


def test_search_returns_projected_items_in_engine_order(service, mock_searcher):
    """
    query="red box", locale=en, hit 2건(A 3.1, B 1.2) → total=2, [A, B] 순서.
    """

    # given
    mock_searcher.search.return_value = make_response([
        ("A", 3.1, make_source(name_en="Red Box")),
        ("B", 1.2, make_source(name_en="Crimson Case")),
    ])

    # when
    res = service.search(SearchRequest(query="red box"))

    # then
    assert res.total == 2
    assert [i.id for i in res.items] == ["A", "B"]
    assert [i.name for i in res.items] == ["Red Box", "Crimson Case"]
    assert [i.score for i in res.items] == [3.1, 1.2]
    mock_searcher.search.assert_called_once()


def test_search_sends_compiled_body(service, mock_searcher):
    """
    엔진에는 필터/정렬/페이지 크기/커서가 반영된 바디가 한 번 전달된다.
    """

    # given
    mock_searcher.search.return_value = make_response([])
    req = SearchRequest(
        query="chair",
        locale=Locale.fr,
        cursor=(1.5, 42),
        bounds={Dimension.height: DimensionBounds(min=40, max=80)},
    )

    # when
    service.search(req)

    # then
    (body,), _ = mock_searcher.search.call_args
    assert body["size"] == 25
    assert body["sort"] == [{"_score": "desc"}, {"timestamp": "asc"}]
    assert body["search_after"] == [1.5, 42]
    assert body["query"]["bool"]["filter"] == [
        {"range": {"dimensions.height": {"gte": 40.0}}},
        {"range": {"dimensions.height": {"lte": 80.0}}},
    ]
    assert body["query"]["bool"]["must"][0]["multi_match"]["fields"][0] == "name.fr^10"


def test_zero_hits_is_empty_result(service, mock_searcher):
    mock_searcher.search.return_value = make_response([])

    res = service.search(SearchRequest(query="unicorn"))

    assert res.total == 0
    assert res.items == []


def test_total_can_exceed_page(service, mock_searcher):
    mock_searcher.search.return_value = make_response([("A", 1.0, make_source())], total=300)

    res = service.search(SearchRequest(query="box"))

    assert res.total == 300
    assert len(res.items) == 1


def test_page_size_fixed_and_zero_sentinel_configurable(mock_searcher):
    mock_searcher.search.return_value = make_response([])
    svc = SearchService(searcher=mock_searcher, zero_bound_is_unset=True)

    svc.search(SearchRequest(query="box", bounds={Dimension.depth: DimensionBounds(min=0, max=20)}))

    (body,), _ = mock_searcher.search.call_args
    assert body["size"] == 25
    assert body["query"]["bool"]["filter"] == [{"range": {"dimensions.depth": {"lte": 20.0}}}]


def test_missing_locale_variant_aborts_whole_request(service, mock_searcher):
    """
    한 건이라도 로케일 변형이 없으면 부분 결과 없이 전체 실패.
    """
    broken = make_source()
    broken["name"] = {"en": "Only English"}
    mock_searcher.search.return_value = make_response([
        ("A", 2.0, make_source()),
        ("B", 1.0, broken),
    ])

    with pytest.raises(MissingLocaleVariant):
        service.search(SearchRequest(query="box", locale=Locale.fr))


def test_malformed_document_is_decode_error(service, mock_searcher):
    mock_searcher.search.return_value = make_response([("A", 1.0, {"source": "x"})])

    with pytest.raises(DecodeError):
        service.search(SearchRequest(query="box"))


def test_engine_error_body_is_engine_error(service, mock_searcher):
    mock_searcher.search.return_value = {"error": {"reason": "boom"}, "status": 500}

    with pytest.raises(EngineError):
        service.search(SearchRequest(query="box"))


def test_search_propagates_port_exception(service, mock_searcher):
    """
    검색 포트가 예외를 던지면 서비스도 그대로 전파해야 함(내부 재시도 없음)
    """

    # given
    mock_searcher.search.side_effect = EngineUnavailable("connection refused")

    # when / then
    with pytest.raises(EngineUnavailable) as ei:
        _ = service.search(SearchRequest(query="box"))

    assert "connection refused" in str(ei.value)
    assert mock_searcher.search.call_count == 1
