from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class Category:
    name: str
    color: str


CATEGORIES: Tuple[Category, ...] = (
    Category("technology", "#3b82f6"),
    Category("science", "#16a34a"),
    Category("finance", "#ef4444"),
    Category("society", "#eab308"),
    Category("entertainment", "#db2777"),
    Category("health", "#14b8a6"),
    Category("history", "#f97316"),
    Category("news", "#8b5cf6"),
)


class UnknownCategoryError(KeyError):
    """Raised when a category name is not in the registry."""


def category_names() -> List[str]:
    return [c.name for c in CATEGORIES]


def find_category(name: str) -> Category:
    for category in CATEGORIES:
        if category.name == name:
            return category
    raise UnknownCategoryError(name)


def category_color(name: str) -> str:
    return find_category(name).color


def is_known_category(name: str) -> bool:
    return any(c.name == name for c in CATEGORIES)
