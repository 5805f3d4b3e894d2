from __future__ import annotations

from typing import Any, Dict, Iterable, List

import altair as alt
import pandas as pd

from til.categories import ALL_CATEGORIES, CATEGORIES
from til.data import facts_to_frame
from til.facts import VOTE_FIELDS, Fact
from til.filters import filter_facts

alt.data_transformers.disable_max_rows()


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    return chart.to_dict()


def facts_message(count: int) -> str:
    return f"There are {count} facts in the database. Add your own!"


def category_breakdown(df: pd.DataFrame) -> pd.DataFrame:
    """Per-category fact and vote totals, in registry order (zeros included)."""
    registry = pd.DataFrame(
        {"category": [c.name for c in CATEGORIES], "color": [c.color for c in CATEGORIES]}
    )
    if df.empty:
        totals = pd.DataFrame(columns=["category", "facts"] + VOTE_FIELDS)
    else:
        totals = (
            df.groupby("category")
            .agg(
                facts=("id", "count"),
                votes_interesting=("votes_interesting", "sum"),
                votes_mindblowing=("votes_mindblowing", "sum"),
                votes_false=("votes_false", "sum"),
            )
            .reset_index()
        )
    out = registry.merge(totals, on="category", how="left")
    for col in ["facts"] + VOTE_FIELDS:
        out[col] = pd.to_numeric(out[col], errors="coerce").fillna(0).astype(int)
    return out


def breakdown_chart(breakdown: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(breakdown)
        .mark_bar()
        .encode(
            x=alt.X("category:N", title="Category", sort=[c.name for c in CATEGORIES]),
            y=alt.Y("facts:Q", title="Facts", axis=alt.Axis(format="d")),
            color=alt.Color(
                "category:N",
                scale=alt.Scale(domain=[c.name for c in CATEGORIES], range=[c.color for c in CATEGORIES]),
                legend=None,
            ),
            tooltip=["category", "facts", "votes_interesting", "votes_mindblowing", "votes_false"],
        )
        .properties(height=220)
    )


def compute_summary(facts: Iterable[Fact], *, category: str = ALL_CATEGORIES) -> Dict[str, Any]:
    visible: List[Fact] = filter_facts(facts, category)
    df = facts_to_frame(visible)
    breakdown = category_breakdown(df)
    return {
        "category": category,
        "total": len(visible),
        "message": facts_message(len(visible)),
        "by_category": breakdown.to_dict(orient="records"),
        "chart": to_vega_spec(breakdown_chart(breakdown)),
    }
