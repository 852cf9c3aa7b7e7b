"""Composable match predicates over index documents.

Predicates are small immutable objects evaluated against a `Document`.
They combine with `&` and `|`:

    (FieldEquals("email", term, ignore_case=True) | FieldEquals(...)) & scope

Prefix, suffix and containment checks treat `*` inside their operand as a
wildcard for any run of characters, matching how the index resolves wildcard
queries. Equality is always literal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from .schemas import Document

WILDCARD = "*"


@lru_cache(maxsize=256)
def _wildcard_regex(pattern: str, ignore_case: bool, anchor_end: bool = False) -> "re.Pattern[str]":
    body = ".*".join(re.escape(part) for part in pattern.split(WILDCARD))
    if anchor_end:
        body += r"\Z"
    flags = re.DOTALL | (re.IGNORECASE if ignore_case else 0)
    return re.compile(body, flags)


class Predicate:
    def matches(self, document: Document) -> bool:  # pragma: no cover - abstract
        raise NotImplementedError

    def __and__(self, other: "Predicate") -> "Predicate":
        return AllOf((self, other))

    def __or__(self, other: "Predicate") -> "Predicate":
        return AnyOf((self, other))


@dataclass(frozen=True)
class MatchAll(Predicate):
    def matches(self, document: Document) -> bool:
        return True


@dataclass(frozen=True)
class FieldEquals(Predicate):
    field: str
    value: str
    ignore_case: bool = False

    def matches(self, document: Document) -> bool:
        actual = document.text(self.field)
        if self.ignore_case:
            return actual.lower() == self.value.lower()
        return actual == self.value


@dataclass(frozen=True)
class FieldStartsWith(Predicate):
    field: str
    value: str
    ignore_case: bool = False

    def matches(self, document: Document) -> bool:
        regex = _wildcard_regex(self.value, self.ignore_case)
        return regex.match(document.text(self.field)) is not None


@dataclass(frozen=True)
class FieldEndsWith(Predicate):
    field: str
    value: str
    ignore_case: bool = False

    def matches(self, document: Document) -> bool:
        regex = _wildcard_regex(self.value, self.ignore_case, anchor_end=True)
        return regex.search(document.text(self.field)) is not None


@dataclass(frozen=True)
class FieldContains(Predicate):
    field: str
    value: str
    ignore_case: bool = False

    def matches(self, document: Document) -> bool:
        regex = _wildcard_regex(self.value, self.ignore_case)
        return regex.search(document.text(self.field)) is not None


@dataclass(frozen=True)
class AllOf(Predicate):
    predicates: Tuple[Predicate, ...]

    def matches(self, document: Document) -> bool:
        return all(p.matches(document) for p in self.predicates)


@dataclass(frozen=True)
class AnyOf(Predicate):
    predicates: Tuple[Predicate, ...]

    def matches(self, document: Document) -> bool:
        return any(p.matches(document) for p in self.predicates)
