"""Regex search scoring for library entries."""

from __future__ import annotations

import re
from typing import Optional

from tunelib.filters import Filter
from tunelib.models import GeneralData

# Scores for prefer-start matching, highest first.
_WHOLE_TEXT = 6.0
_WHOLE_WORD = 5.0
_AT_START = 4.0
_AFTER_SPACE = 3.0
_ELSEWHERE = 2.0
_NEUTRAL = 1.0
_HIDDEN = 0.0


def compile_search(pattern: str, case_insensitive: bool) -> Optional[re.Pattern[str]]:
    """Compile a search pattern; an empty pattern gives None.

    Raises ``re.error`` if the pattern is not a valid regular expression.
    """
    if not pattern:
        return None
    flags = re.UNICODE | (re.IGNORECASE if case_insensitive else 0)
    return re.compile(pattern, flags)


def _score_match(text: str, start: int, end: int) -> float:
    if start == 0:
        return _WHOLE_TEXT if end == len(text) else _AT_START
    if text[start - 1].isspace():
        if end >= len(text) or text[end].isspace():
            return _WHOLE_WORD
        return _AFTER_SPACE
    return _ELSEWHERE


def match_score(
    text: str,
    regex: Optional[re.Pattern[str]],
    search_text: str,
    prefer_start_matches: bool,
) -> float:
    """Score ``text`` against a search.

    0.0 hides the entry, 1.0 is neutral (no search), higher values rank
    better. With ``prefer_start_matches`` the best of all matches counts:
    matches covering the whole text, whole words or word starts rank above
    matches elsewhere.
    """
    if regex is None:
        return _NEUTRAL if not search_text else _HIDDEN
    if not prefer_start_matches:
        return _ELSEWHERE if regex.search(text) is not None else _HIDDEN
    return max(
        (_score_match(text, m.start(), m.end()) for m in regex.finditer(text)),
        default=_HIDDEN,
    )


def score_item(
    item_filter: Filter,
    general: GeneralData,
    text: str,
    regex: Optional[re.Pattern[str]],
    search_text: str,
    prefer_start_matches: bool,
) -> float:
    """Score an item: 0.0 if its tags fail ``item_filter``, else its search score."""
    if not item_filter.passes(general):
        return _HIDDEN
    return match_score(text, regex, search_text, prefer_start_matches)