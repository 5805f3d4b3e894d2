"""Application state owned by the root view.

State is immutable; every transition takes the prior state and returns a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Tuple

from til.categories import ALL_CATEGORIES, find_category
from til.facts import Fact


@dataclass(frozen=True)
class AppState:
    facts: Tuple[Fact, ...] = field(default_factory=tuple)
    show_form: bool = False
    current_category: str = ALL_CATEGORIES


def with_facts(state: AppState, facts: Iterable[Fact]) -> AppState:
    """Replace the whole collection (used once the initial fetch completes)."""
    return replace(state, facts=tuple(facts))


def prepend_fact(state: AppState, fact: Fact) -> AppState:
    return replace(state, facts=(fact,) + state.facts)


def toggle_form(state: AppState) -> AppState:
    return replace(state, show_form=not state.show_form)


def select_category(state: AppState, name: str) -> AppState:
    if name != ALL_CATEGORIES:
        find_category(name)
    return replace(state, current_category=name)
