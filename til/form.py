from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional

from til.facts import MAX_TEXT_LENGTH, Fact
from til.state import AppState, prepend_fact
from til.urls import is_valid_url


logger = logging.getLogger(__name__)

MAX_LOCAL_ID = 10_000_000


@dataclass(frozen=True)
class FactDraft:
    text: str = ""
    source: str = ""
    category: str = ""


@dataclass(frozen=True)
class SubmitResult:
    state: AppState
    draft: FactDraft
    fact: Optional[Fact] = None
    errors: List[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.fact is not None


def chars_remaining(text: str) -> int:
    return MAX_TEXT_LENGTH - len(text or "")


def validate_draft(draft: FactDraft) -> List[str]:
    errors: List[str] = []
    if not draft.text:
        errors.append("Write the fact you want to share.")
    elif len(draft.text) > MAX_TEXT_LENGTH:
        errors.append(f"Facts are limited to {MAX_TEXT_LENGTH} characters ({len(draft.text)} given).")
    if not is_valid_url(draft.source):
        errors.append("The source must be a valid URL, e.g. https://example.com.")
    if not draft.category:
        errors.append("Choose a category.")
    return errors


def submit_fact(
    state: AppState,
    draft: FactDraft,
    *,
    year: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> SubmitResult:
    """Validate ``draft`` and, when valid, prepend a new local fact.

    On success the returned draft is empty and the form is hidden. On failure
    the state and draft come back unchanged together with the problems found.
    The new fact is never written back to the remote table.
    """
    errors = validate_draft(draft)
    if errors:
        logger.debug("Rejected fact draft: %s", errors)
        return SubmitResult(state=state, draft=draft, errors=errors)

    rng = rng or random
    fact = Fact(
        id=rng.randint(0, MAX_LOCAL_ID),
        text=draft.text,
        source=draft.source,
        category=draft.category,
        votes_interesting=0,
        votes_mindblowing=0,
        votes_false=0,
        created_in=year if year is not None else date.today().year,
    )
    new_state = replace(prepend_fact(state, fact), show_form=False)
    logger.info("Added local fact %s in category %s", fact.id, fact.category)
    return SubmitResult(state=new_state, draft=FactDraft(), fact=fact)
