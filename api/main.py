from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import List, Tuple

import numpy as np
import pandas as pd
from fastapi import FastAPI, Query
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from api.schemas import CategoriesResponse, CategoryModel, FactModel, FactsResponse
from til.categories import ALL_CATEGORIES, CATEGORIES, UnknownCategoryError, is_known_category
from til.config import configure_logging, load_settings
from til.data import facts_to_frame, load_facts
from til.facts import Fact
from til.filters import filter_facts, normalize_category
from til.summary import compute_summary


settings = load_settings()
configure_logging(settings)

app = FastAPI(title="Today I Learned API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8501", "http://127.0.0.1:8501"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_facts() -> Tuple[Fact, ...]:
    """Facts are fetched once per process, like the browser app fetches on mount."""
    return tuple(load_facts(settings=settings))


def _json(data: object) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except Exception:
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
            },
        )
    )


def _error(exc: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc), "type": type(exc).__name__})


def _selected(category: str) -> str:
    name = normalize_category(category)
    if name != ALL_CATEGORIES and not is_known_category(name):
        raise UnknownCategoryError(name)
    return name


@app.get("/meta/categories", response_model=CategoriesResponse)
def meta_categories():
    return CategoriesResponse(categories=[CategoryModel(name=c.name, color=c.color) for c in CATEGORIES])


@app.get("/facts")
def facts(category: str = Query(default=ALL_CATEGORIES)):
    try:
        name = _selected(category)
        visible: List[Fact] = filter_facts(get_facts(), name)
        payload = FactsResponse(facts=[FactModel(**f.to_dict()) for f in visible], count=len(visible))
        return _json(payload.model_dump())
    except UnknownCategoryError as exc:
        return _error(exc, status_code=404)
    except Exception as exc:
        logger.exception("facts failed")
        return _error(exc)


@app.get("/summary")
def summary(category: str = Query(default=ALL_CATEGORIES)):
    try:
        name = _selected(category)
        return _json(compute_summary(get_facts(), category=name))
    except UnknownCategoryError as exc:
        return _error(exc, status_code=404)
    except Exception as exc:
        logger.exception("summary failed")
        return _error(exc)


@app.get("/export/facts")
def export_facts(category: str = Query(default=ALL_CATEGORIES)):
    try:
        name = _selected(category)
        export_df = facts_to_frame(filter_facts(get_facts(), name))
        filename = "facts.csv" if name == ALL_CATEGORIES else f"facts-{name}.csv"
        csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    except UnknownCategoryError as exc:
        return _error(exc, status_code=404)
    except Exception as exc:
        logger.exception("export_facts failed")
        return _error(exc)
    return Response(content=csv_bytes, media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={filename}"})
