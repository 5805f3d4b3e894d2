from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class CategoryModel(BaseModel):
    name: str
    color: str


class CategoriesResponse(BaseModel):
    categories: List[CategoryModel]


class FactModel(BaseModel):
    id: int
    text: str
    source: str
    category: str
    votes_interesting: int = Field(default=0, ge=0)
    votes_mindblowing: int = Field(default=0, ge=0)
    votes_false: int = Field(default=0, ge=0)
    created_in: int


class FactsResponse(BaseModel):
    facts: List[FactModel]
    count: int
