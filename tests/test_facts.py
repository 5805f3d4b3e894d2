"""Tests for the Fact record shape."""

from __future__ import annotations

from til.facts import Fact


class TestFact:
    def test_from_remote_row(self, remote_rows: list[dict]):
        fact = Fact.from_row(remote_rows[2])
        assert fact.text == "Lisbon is the capital of Portugal"
        assert fact.votes_mindblowing == 3
        assert fact.created_in == 2015

    def test_from_snake_case_dict(self, facts: list[Fact]):
        assert Fact.from_row(facts[1].to_dict()) == facts[1]

    def test_to_dict_uses_field_names(self, facts: list[Fact]):
        data = facts[0].to_dict()
        assert data["votes_interesting"] == 24
        assert "votesInteresting" not in data
