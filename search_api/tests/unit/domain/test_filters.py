import pytest

from search_api.app.domain.filters import build_dimension_filters, to_range_clauses
from search_api.app.domain.models import BoundKind, Dimension, DimensionBounds, RangeFilter
from search_api.app.platform.exceptions import InvalidInput


def test_no_bounds_no_filters():
    assert build_dimension_filters({}) == []
    assert build_dimension_filters({Dimension.height: DimensionBounds()}) == []


def test_min_and_max_height_lower_before_upper():
    """
    min_height=40, max_height=80 → height ≥ 40, height ≤ 80 순서로 2개.
    """
    filters = build_dimension_filters({Dimension.height: DimensionBounds(min=40, max=80)})

    assert filters == [
        RangeFilter(dimension=Dimension.height, bound=BoundKind.lower, value=40),
        RangeFilter(dimension=Dimension.height, bound=BoundKind.upper, value=80),
    ]
    assert to_range_clauses(filters) == [
        {"range": {"dimensions.height": {"gte": 40.0}}},
        {"range": {"dimensions.height": {"lte": 80.0}}},
    ]


def test_only_one_side():
    filters = build_dimension_filters({
        Dimension.weight: DimensionBounds(max=5),
        Dimension.length: DimensionBounds(min=100),
    })
    assert [(f.dimension, f.bound) for f in filters] == [
        (Dimension.length, BoundKind.lower),
        (Dimension.weight, BoundKind.upper),
    ]


def test_order_follows_dimension_enum_not_input_order():
    """
    입력 dict 순서와 무관하게 Dimension 선언 순서로 나오고, 반복 호출해도 같다.
    """
    bounds_a = {
        Dimension.thickness: DimensionBounds(min=1, max=2),
        Dimension.volume: DimensionBounds(min=3),
        Dimension.length: DimensionBounds(max=4),
    }
    bounds_b = dict(reversed(list(bounds_a.items())))

    first = build_dimension_filters(bounds_a)
    assert first == build_dimension_filters(bounds_b)
    assert first == build_dimension_filters(bounds_a)
    assert [f.dimension for f in first] == [
        Dimension.length, Dimension.volume, Dimension.thickness, Dimension.thickness,
    ]


def test_all_dimensions_both_sides():
    bounds = {d: DimensionBounds(min=1, max=2) for d in Dimension}
    filters = build_dimension_filters(bounds)
    assert len(filters) == 2 * len(Dimension)
    assert [f.bound for f in filters[:2]] == [BoundKind.lower, BoundKind.upper]


def test_zero_is_a_real_bound_by_default():
    """
    0은 기본적으로 '값 0으로 필터'로 취급한다.
    """
    filters = build_dimension_filters({Dimension.depth: DimensionBounds(min=0, max=0)})
    assert [(f.bound, f.value) for f in filters] == [(BoundKind.lower, 0.0), (BoundKind.upper, 0.0)]


def test_zero_is_unset_in_legacy_mode():
    """
    zero_is_unset=True면 0인 경계는 빠지고 나머지만 남는다.
    """
    filters = build_dimension_filters(
        {
            Dimension.depth: DimensionBounds(min=0, max=0),
            Dimension.width: DimensionBounds(min=0, max=60),
        },
        zero_is_unset=True,
    )
    assert filters == [RangeFilter(dimension=Dimension.width, bound=BoundKind.upper, value=60)]


def test_min_greater_than_max_is_invalid():
    with pytest.raises(InvalidInput) as ei:
        build_dimension_filters({Dimension.height: DimensionBounds(min=90, max=10)})
    assert "min_height" in str(ei.value)


def test_equal_min_and_max_is_allowed():
    filters = build_dimension_filters({Dimension.diameter: DimensionBounds(min=12.5, max=12.5)})
    assert len(filters) == 2
