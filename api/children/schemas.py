"""
Pydantic schemas for child endpoints.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, StrictInt

from core.schemas import detail_envelope, list_envelope, updated_envelope


class Child(BaseModel):
    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Emily Johnson"])
    date_of_birth: date = Field(..., examples=["2020-05-12"])
    classroom_id: int | None = Field(default=None, examples=[1])
    daycare_id: int | None = Field(default=None, examples=[1])


class ChildUpdate(BaseModel):
    name: str | None = Field(default=None, examples=["Emily Johnson"])
    date_of_birth: date | None = Field(default=None, examples=["2020-05-12"])
    classroom_id: StrictInt | None = Field(default=None, examples=[2])
    daycare_id: StrictInt | None = Field(default=None, examples=[1])


ChildList = list_envelope("ChildList", "children_count", Child)
ChildDetail = detail_envelope("ChildDetail", Child)
ChildUpdated = updated_envelope("ChildUpdated", Child)
