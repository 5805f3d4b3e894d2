from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


MAX_TEXT_LENGTH = 200

# Remote row key -> Fact field.
ROW_COLUMNS = {
    "id": "id",
    "text": "text",
    "source": "source",
    "category": "category",
    "votesInteresting": "votes_interesting",
    "votesMindblowing": "votes_mindblowing",
    "votesFalse": "votes_false",
    "createdIn": "created_in",
}
VOTE_FIELDS = ["votes_interesting", "votes_mindblowing", "votes_false"]


@dataclass(frozen=True)
class Fact:
    id: int
    text: str
    source: str
    category: str
    votes_interesting: int = 0
    votes_mindblowing: int = 0
    votes_false: int = 0
    created_in: int = 0

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Fact":
        """Build a Fact from a remote row (camelCase keys) or a snake_case dict."""
        values = {}
        for key, field_name in ROW_COLUMNS.items():
            if key in row:
                values[field_name] = row[key]
            elif field_name in row:
                values[field_name] = row[field_name]
        for field_name in VOTE_FIELDS:
            values[field_name] = int(values.get(field_name) or 0)
        return cls(
            id=int(values["id"]),
            text=str(values.get("text") or ""),
            source=str(values.get("source") or ""),
            category=str(values.get("category") or ""),
            votes_interesting=values["votes_interesting"],
            votes_mindblowing=values["votes_mindblowing"],
            votes_false=values["votes_false"],
            created_in=int(values.get("created_in") or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
