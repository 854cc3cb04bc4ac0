"""Tag filters for songs, albums and artists in the library browser."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from tunelib.models import GeneralData

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_i32(text: str) -> Optional[int]:
    """Parse a signed 32-bit decimal integer, or return None if it is not one."""
    if _INT_RE.fullmatch(text) is None:
        return None
    value = int(text)
    if _I32_MIN <= value <= _I32_MAX:
        return value
    return None


@dataclass
class Filter:
    """A list of filters joined with AND (``and_``) or OR. An empty list passes everything."""

    and_: bool = True
    filters: list[FilterType] = field(default_factory=list)

    def passes(self, general: GeneralData) -> bool:
        if not self.filters:
            return True
        results = (f.passes(general) for f in self.filters)
        return all(results) if self.and_ else any(results)

    def get(self, path: list[int]) -> Union[FilterType, Filter, None]:
        """Find the element at ``path``.

        An empty path is this filter itself. Each index selects an entry of the
        current filter's list; a nested or negated entry is descended into for
        the remaining indices. Returns None if the path leads nowhere.
        """
        if not path:
            return self
        i, rest = path[0], path[1:]
        if not 0 <= i < len(self.filters):
            return None
        entry = self.filters[i]
        if not rest:
            return entry
        inner = _inner_filter(entry)
        if inner is None:
            return None
        return inner.get(rest)

    def toggle_joiner(self, path: list[int]) -> bool:
        """Switch the filter at ``path`` between AND and OR; False if there is none."""
        target = self.get(path)
        if not isinstance(target, Filter):
            target = _inner_filter(target) if target is not None else None
        if target is None:
            return False
        target.and_ = not target.and_
        return True


@dataclass
class Nested:
    """A group of filters with its own joiner."""

    filter: Filter = field(default_factory=Filter)

    def passes(self, general: GeneralData) -> bool:
        return self.filter.passes(general)


@dataclass
class Not:
    """Passes where the inner filter does not."""

    filter: Filter = field(default_factory=Filter)

    def passes(self, general: GeneralData) -> bool:
        return not self.filter.passes(general)


@dataclass
class TagEq:
    """Passes if some tag equals ``value``."""

    value: str

    def passes(self, general: GeneralData) -> bool:
        return any(tag == self.value for tag in general.tags)


@dataclass
class TagStartsWith:
    """Passes if some tag starts with ``value``."""

    value: str

    def passes(self, general: GeneralData) -> bool:
        return any(tag.startswith(self.value) for tag in general.tags)


@dataclass
class TagWithValueInt:
    """Passes if some tag is ``prefix`` followed by an integer in ``[min, max]``.

    The prefix usually ends with ``=``.
    """

    prefix: str
    min: int
    max: int

    def passes(self, general: GeneralData) -> bool:
        for tag in general.tags:
            if tag.startswith(self.prefix):
                value = _parse_i32(tag[len(self.prefix):])
                if value is not None and self.min <= value <= self.max:
                    return True
        return False


FilterType = Union[Nested, Not, TagEq, TagStartsWith, TagWithValueInt]


def _inner_filter(entry: FilterType) -> Optional[Filter]:
    if isinstance(entry, (Nested, Not)):
        return entry.filter
    return None