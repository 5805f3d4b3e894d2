"""Shared fixtures for the Today I Learned tests."""

from __future__ import annotations

import pytest

from til.config import Settings
from til.facts import Fact


@pytest.fixture
def settings() -> Settings:
    return Settings(supabase_url="https://demo.supabase.co", supabase_key="anon-key")


@pytest.fixture
def remote_rows() -> list[dict]:
    """Rows as served by the hosted facts table."""
    return [
        {
            "id": 1,
            "text": "React is being developed by Meta (formerly facebook)",
            "source": "https://opensource.fb.com/",
            "category": "technology",
            "votesInteresting": 24,
            "votesMindblowing": 9,
            "votesFalse": 4,
            "createdIn": 2021,
        },
        {
            "id": 2,
            "text": "Millennial dads spend 3 times as much time with their kids than their fathers spent with them.",
            "source": "https://www.mother.ly/parenting/millennial-dads-spend-more-time-with-their-kids",
            "category": "society",
            "votesInteresting": 11,
            "votesMindblowing": 2,
            "votesFalse": 0,
            "createdIn": 2019,
        },
        {
            "id": 3,
            "text": "Lisbon is the capital of Portugal",
            "source": "https://en.wikipedia.org/wiki/Lisbon",
            "category": "society",
            "votesInteresting": 8,
            "votesMindblowing": 3,
            "votesFalse": 1,
            "createdIn": 2015,
        },
    ]


@pytest.fixture
def facts(remote_rows: list[dict]) -> list[Fact]:
    return [Fact.from_row(row) for row in remote_rows]
