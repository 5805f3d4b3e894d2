"""Tests for the submission form transitions."""

from __future__ import annotations

import random

import pytest

from til.facts import Fact
from til.form import FactDraft, chars_remaining, submit_fact, validate_draft
from til.state import AppState


@pytest.fixture
def open_state(facts: list[Fact]) -> AppState:
    return AppState(facts=tuple(facts), show_form=True)


@pytest.fixture
def valid_draft() -> FactDraft:
    return FactDraft(text="Honey never spoils", source="https://example.com/honey", category="science")


class TestValidateDraft:
    def test_valid_draft_has_no_errors(self, valid_draft: FactDraft):
        assert validate_draft(valid_draft) == []

    def test_empty_draft_reports_every_field(self):
        errors = validate_draft(FactDraft())
        assert len(errors) == 3

    def test_text_at_limit_is_valid(self, valid_draft: FactDraft):
        draft = FactDraft(text="x" * 200, source=valid_draft.source, category=valid_draft.category)
        assert validate_draft(draft) == []

    def test_text_over_limit_is_invalid(self, valid_draft: FactDraft):
        draft = FactDraft(text="x" * 201, source=valid_draft.source, category=valid_draft.category)
        errors = validate_draft(draft)
        assert len(errors) == 1
        assert "200" in errors[0]


class TestSubmitFact:
    def test_valid_submission_prepends_one_fact(self, open_state: AppState, valid_draft: FactDraft):
        result = submit_fact(open_state, valid_draft, year=2024, rng=random.Random(7))

        assert result.accepted
        assert len(result.state.facts) == len(open_state.facts) + 1
        new_fact = result.state.facts[0]
        assert new_fact == result.fact
        assert new_fact.text == "Honey never spoils"
        assert new_fact.source == "https://example.com/honey"
        assert new_fact.category == "science"
        assert new_fact.created_in == 2024
        assert (new_fact.votes_interesting, new_fact.votes_mindblowing, new_fact.votes_false) == (0, 0, 0)
        assert result.state.facts[1:] == open_state.facts

    def test_valid_submission_clears_draft_and_hides_form(self, open_state: AppState, valid_draft: FactDraft):
        result = submit_fact(open_state, valid_draft)

        assert result.draft == FactDraft()
        assert result.state.show_form is False
        assert result.errors == []

    def test_local_id_is_in_range(self, open_state: AppState, valid_draft: FactDraft):
        result = submit_fact(open_state, valid_draft, rng=random.Random(1))
        assert 0 <= result.fact.id <= 10_000_000

    def test_defaults_to_current_year(self, open_state: AppState, valid_draft: FactDraft):
        from datetime import date

        result = submit_fact(open_state, valid_draft)
        assert result.fact.created_in == date.today().year

    @pytest.mark.parametrize(
        "draft",
        [
            FactDraft(text="Honey never spoils", source="https://example.com", category=""),
            FactDraft(text="Honey never spoils", source="not a url", category="science"),
            FactDraft(text="", source="https://example.com", category="science"),
            FactDraft(text="x" * 201, source="https://example.com", category="science"),
        ],
    )
    def test_invalid_submission_leaves_list_unchanged(self, open_state: AppState, draft: FactDraft):
        result = submit_fact(open_state, draft)

        assert not result.accepted
        assert result.state is open_state
        assert result.state.show_form is True
        assert result.draft == draft
        assert result.errors

    def test_does_not_mutate_prior_state(self, open_state: AppState, valid_draft: FactDraft):
        before = open_state.facts
        submit_fact(open_state, valid_draft)
        assert open_state.facts is before


class TestCharsRemaining:
    def test_counts_down_from_limit(self):
        assert chars_remaining("") == 200
        assert chars_remaining("abc") == 197
        assert chars_remaining("x" * 210) == -10
