import pytest

from tunelib.filters import (
    Filter,
    Nested,
    Not,
    TagEq,
    TagStartsWith,
    TagWithValueInt,
)
from tunelib.models import GeneralData


def gd(*tags):
    return GeneralData(tags=list(tags))


def test_empty_filter_passes_everything():
    assert Filter().passes(gd()) is True
    assert Filter(and_=False).passes(gd("x")) is True


def test_tag_eq():
    f = TagEq("Fav")
    assert f.passes(gd("a", "Fav")) is True
    assert f.passes(gd("Favourite")) is False
    assert f.passes(gd()) is False


def test_tag_starts_with():
    f = TagStartsWith("Year=")
    assert f.passes(gd("Year=2001")) is True
    assert f.passes(gd("year=2001")) is False


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("Year=2000", True),
        ("Year=2010", True),
        ("Year=1999", False),
        ("Year=2011", False),
        ("Year=+2005", True),
        ("Year= 2005", False),
        ("Year=abc", False),
        ("Year=", False),
        ("Other=2005", False),
    ],
)
def test_tag_with_value_int_bounds(tag, expected):
    f = TagWithValueInt("Year=", 2000, 2010)
    assert f.passes(gd(tag)) is expected


def test_tag_with_value_int_negative_and_overflow():
    f = TagWithValueInt("T=", -(2**31), 2**31 - 1)
    assert f.passes(gd("T=-5")) is True
    assert f.passes(gd(f"T={2**31}")) is False


def test_and_or_joiners():
    tags = gd("a")
    assert Filter(True, [TagEq("a"), TagEq("b")]).passes(tags) is False
    assert Filter(False, [TagEq("a"), TagEq("b")]).passes(tags) is True


def test_not_and_nested():
    tags = gd("a")
    assert Not(Filter(True, [TagEq("a")])).passes(tags) is False
    assert Not(Filter(True, [TagEq("b")])).passes(tags) is True
    assert Nested(Filter(False, [TagEq("b"), TagEq("a")])).passes(tags) is True
    # an empty negated filter fails everything
    assert Not().passes(tags) is False


def test_get_paths():
    leaf = TagEq("x")
    inner = Filter(True, [TagStartsWith("y"), leaf])
    nested = Nested(inner)
    root = Filter(True, [TagEq("z"), nested])
    assert root.get([]) is root
    assert root.get([1]) is nested
    assert root.get([1, 1]) is leaf
    assert root.get([5]) is None
    assert root.get([0, 0]) is None
    assert root.get([1, 7]) is None


def test_toggle_joiner_root_and_nested():
    inner = Filter(True, [TagEq("a"), TagEq("b")])
    root = Filter(True, [Not(inner), TagEq("c")])
    assert root.toggle_joiner([]) is True
    assert root.and_ is False
    assert root.toggle_joiner([0]) is True
    assert inner.and_ is False
    assert root.toggle_joiner([0]) is True
    assert inner.and_ is True


def test_toggle_joiner_on_leaf_or_missing():
    root = Filter(True, [TagEq("c")])
    assert root.toggle_joiner([0]) is False
    assert root.toggle_joiner([3]) is False
    assert root.and_ is True


def test_toggle_changes_result():
    root = Filter(True, [TagEq("a"), TagEq("b")])
    tags = gd("a")
    before = root.passes(tags)
    root.toggle_joiner([])
    assert root.passes(tags) is not before