from __future__ import annotations

from typing import Iterable, List

from til.categories import ALL_CATEGORIES
from til.facts import Fact


def normalize_category(raw: object) -> str:
    value = str(raw or "").strip().lower()
    return value or ALL_CATEGORIES


def filter_facts(facts: Iterable[Fact], category: str = ALL_CATEGORIES) -> List[Fact]:
    if category == ALL_CATEGORIES:
        return list(facts)
    return [f for f in facts if f.category == category]
