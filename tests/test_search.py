import re

import pytest

from tunelib.filters import Filter, TagEq
from tunelib.models import GeneralData
from tunelib.search import compile_search, match_score, score_item


def test_empty_pattern_compiles_to_none():
    assert compile_search("", True) is None


def test_invalid_pattern_raises():
    with pytest.raises(re.error):
        compile_search("(", True)


def test_case_insensitive_flag():
    assert compile_search("abc", True).search("ABC") is not None
    assert compile_search("abc", False).search("ABC") is None


def test_no_search_is_neutral():
    assert match_score("anything", None, "", True) == 1.0


def test_invalid_search_hides_everything():
    assert match_score("anything", None, "(", True) == 0.0


def test_prefer_start_ranking_order():
    regex = compile_search("abc", True)
    texts = ["abc", "x abc", "abc def", "x abcd", "xabc"]
    scores = [match_score(t, regex, "abc", True) for t in texts]
    assert all(a > b for a, b in zip(scores, scores[1:]))
    assert scores[-1] > match_score("nothing", regex, "abc", True)


def test_no_match_hides():
    regex = compile_search("abc", True)
    assert match_score("zzz", regex, "abc", True) == match_score("zzz", None, "abc", True)


def test_best_of_several_matches_counts():
    regex = compile_search("abc", True)
    assert match_score("xabc abc", regex, "abc", True) == match_score(
        "x abc", regex, "abc", True
    )


def test_simple_search_ignores_position():
    regex = compile_search("abc", True)
    whole = match_score("abc", regex, "abc", False)
    inner = match_score("xabcx", regex, "abc", False)
    assert whole == inner
    assert whole > match_score("zzz", regex, "abc", False)
    assert match_score("xabcx", regex, "abc", True) == whole


def test_score_item_filter_blocks():
    regex = compile_search("abc", True)
    blocked = score_item(Filter(filters=[TagEq("Fav")]), GeneralData(), "abc", regex, "abc", True)
    assert blocked == match_score("zzz", regex, "abc", True)


def test_score_item_passing_filter_uses_search_score():
    regex = compile_search("abc", True)
    general = GeneralData(tags=["Fav"])
    for text in ["abc", "x abc", "xabc"]:
        assert score_item(
            Filter(filters=[TagEq("Fav")]), general, text, regex, "abc", True
        ) == match_score(text, regex, "abc", True)


def test_score_item_empty_filter_without_search_is_neutral():
    assert score_item(Filter(), GeneralData(), "x", None, "", True) == match_score(
        "y", None, "", False
    )