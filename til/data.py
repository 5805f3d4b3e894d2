from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import httpx
import pandas as pd

from til.config import Settings, load_settings
from til.facts import ROW_COLUMNS, VOTE_FIELDS, Fact


logger = logging.getLogger(__name__)

FACT_FIELDS = list(ROW_COLUMNS.values())


class FactsFetchError(RuntimeError):
    """Raised when the facts table cannot be read."""


def drop_duplicate_columns(df: pd.DataFrame) -> pd.DataFrame:
    return df.loc[:, ~df.columns.duplicated()]


def normalize_fact_rows(rows: Iterable[Dict[str, Any]]) -> pd.DataFrame:
    """Remote rows -> frame with Fact field names and clean dtypes."""
    df = pd.DataFrame(list(rows))
    if df.empty:
        return pd.DataFrame(columns=FACT_FIELDS)
    df = drop_duplicate_columns(df.rename(columns=ROW_COLUMNS))
    for col in FACT_FIELDS:
        if col not in df.columns:
            df[col] = pd.NA

    df["id"] = pd.to_numeric(df["id"], errors="coerce")
    missing_id = df["id"].isna()
    if missing_id.any():
        logger.warning("Dropping %d fact rows without a usable id", int(missing_id.sum()))
        df = df[~missing_id].copy()
    df["id"] = df["id"].astype("int64")

    for col in VOTE_FIELDS + ["created_in"]:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0).astype("int64")
    for col in ["text", "source", "category"]:
        df[col] = df[col].fillna("").astype(str)
    return df[FACT_FIELDS].reset_index(drop=True)


def rows_to_facts(rows: Iterable[Dict[str, Any]]) -> List[Fact]:
    df = normalize_fact_rows(rows)
    return [Fact.from_row(rec) for rec in df.to_dict(orient="records")]


def facts_to_frame(facts: Iterable[Fact]) -> pd.DataFrame:
    records = [f.to_dict() for f in facts]
    if not records:
        return pd.DataFrame(columns=FACT_FIELDS)
    return pd.DataFrame.from_records(records, columns=FACT_FIELDS)


class FactsClient:
    """Read the facts table of a hosted PostgREST (Supabase) project.

    Args:
        settings: Resolved settings; loaded from the environment when omitted.
        http_client: Optional ``httpx.Client`` to reuse (tests inject one with a
            mock transport). When omitted a client is opened per fetch.
    """

    def __init__(self, settings: Optional[Settings] = None, *, http_client: Optional[httpx.Client] = None) -> None:
        self._settings = settings or load_settings()
        if not self._settings.supabase_url or not self._settings.supabase_key:
            raise ValueError(
                "Backend credentials required. Set SUPABASE_URL and SUPABASE_KEY."
            )
        self._http_client = http_client

    @property
    def table_url(self) -> str:
        return f"{self._settings.supabase_url}/rest/v1/{self._settings.facts_table}"

    def _headers(self) -> Dict[str, str]:
        key = self._settings.supabase_key or ""
        return {"apikey": key, "Authorization": f"Bearer {key}", "Accept": "application/json"}

    def _get(self, client: httpx.Client) -> httpx.Response:
        response = client.get(self.table_url, params={"select": "*"}, headers=self._headers())
        response.raise_for_status()
        return response

    def fetch_facts(self) -> List[Fact]:
        """Select every row of the facts table, in the order served."""
        try:
            if self._http_client is not None:
                response = self._get(self._http_client)
            else:
                with httpx.Client(timeout=self._settings.http_timeout) as client:
                    response = self._get(client)
            payload = response.json()
        except httpx.HTTPError as exc:
            raise FactsFetchError(f"Could not read table {self._settings.facts_table!r}: {exc}") from exc
        except ValueError as exc:
            raise FactsFetchError(f"Table {self._settings.facts_table!r} returned invalid JSON") from exc
        if not isinstance(payload, list):
            raise FactsFetchError(
                f"Table {self._settings.facts_table!r} returned {type(payload).__name__}, expected a list of rows"
            )
        facts = rows_to_facts(payload)
        logger.info("Fetched %d facts from %s", len(facts), self._settings.facts_table)
        return facts


def try_load_facts(
    client: Optional[FactsClient] = None, settings: Optional[Settings] = None
) -> Tuple[List[Fact], Optional[str]]:
    """One-shot initial fetch returning (facts, error message or None)."""
    try:
        client = client or FactsClient(settings)
        return client.fetch_facts(), None
    except (FactsFetchError, ValueError) as exc:
        logger.error("Loading facts failed: %s", exc)
        return [], str(exc)


def load_facts(client: Optional[FactsClient] = None, settings: Optional[Settings] = None) -> List[Fact]:
    """One-shot initial fetch. Failures are logged and yield an empty list."""
    facts, _ = try_load_facts(client, settings)
    return facts
