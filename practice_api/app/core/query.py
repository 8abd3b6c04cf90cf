"""
Predicate filter chain and query-string parsing helpers.

A :class:`FilterChain` is an ordered list of optional predicates.  Each
stage receives the output of the previous one, so the result is the
logical AND of every stage that was added.  Stages are only added for
criteria that were actually supplied, which keeps the chain readable at
the call site::

    chain = FilterChain("city")
    if country_id is not None:
        chain.where("countryId", lambda c: c.country_id == country_id)
    records = chain.apply(dataset)

Query values arrive as raw strings.  ``parse_int`` and ``parse_bool``
convert them strictly: an empty value means "not supplied", anything
that does not parse raises :class:`ValidationError` instead of silently
matching nothing.
"""

import logging
import re
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from .errors import ValidationError


logger = logging.getLogger(__name__)

T = TypeVar("T")

# ASCII digits with an optional minus sign; rejects "+5", "1_000" and non-ASCII digits.
INTEGER_PATTERN = re.compile(r"-?[0-9]+")


class FilterChain(Generic[T]):
    """Ordered sequence of optional predicates applied to a collection."""

    def __init__(self, resource: str = "record") -> None:
        self.resource = resource
        self._stages: List[Tuple[str, Callable[[T], bool]]] = []

    def where(self, name: str, predicate: Callable[[T], bool]) -> "FilterChain[T]":
        self._stages.append((name, predicate))
        return self

    @property
    def stages(self) -> List[str]:
        return [name for name, _ in self._stages]

    def apply(self, records: Iterable[T]) -> List[T]:
        result = list(records)
        for name, predicate in self._stages:
            result = [record for record in result if predicate(record)]
            logger.debug("%s filter '%s' left %d records", self.resource, name, len(result))
        return result


def contains(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.casefold() in haystack.casefold()


def is_blank(raw: Optional[str]) -> bool:
    return raw is None or raw.strip() == ""


def parse_int(name: str, raw: Optional[str], minimum: Optional[int] = None, maximum: Optional[int] = None) -> Optional[int]:
    """Parse an integer query value.

    Returns ``None`` when the value is absent or empty.  Raises
    ``ValidationError`` when it is not an integer or falls outside
    ``minimum``/``maximum`` (inclusive).
    """
    if is_blank(raw):
        return None
    if not INTEGER_PATTERN.fullmatch(raw.strip()):
        raise ValidationError(f"Invalid value for '{name}': expected an integer, got '{raw}'")
    value = int(raw.strip())
    if minimum is not None and value < minimum:
        raise ValidationError(f"Invalid value for '{name}': must be at least {minimum}")
    if maximum is not None and value > maximum:
        raise ValidationError(f"Invalid value for '{name}': must be at most {maximum}")
    return value


def parse_bool(name: str, raw: Optional[str]) -> Optional[bool]:
    """Parse ``true``/``false`` (any case).  Empty means not supplied."""
    if is_blank(raw):
        return None
    lowered = raw.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValidationError(f"Invalid value for '{name}': expected 'true' or 'false', got '{raw}'")


def parse_text(raw: Optional[str]) -> Optional[str]:
    """Normalise a free-text filter; empty means not supplied."""
    if is_blank(raw):
        return None
    return raw


def paginate(records: List[T], limit: Optional[int] = None, offset: Optional[int] = None) -> List[T]:
    """Slice a filtered collection.  Without ``limit`` everything after ``offset`` is kept."""
    start = offset or 0
    if limit is None:
        return records[start:]
    return records[start:start + limit]
