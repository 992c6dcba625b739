"""
Pydantic schemas for parent endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.schemas import detail_envelope, list_envelope, updated_envelope


class Parent(BaseModel):
    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Alice Johnson"])
    phone: str | None = Field(default=None, examples=["555-123-4567"])
    email: str | None = Field(default=None, examples=["alice.johnson@email.com"])


class ParentUpdate(BaseModel):
    name: str | None = Field(default=None, examples=["Alice Walker"])
    phone: str | None = Field(default=None, examples=["555-777-0000"])
    email: str | None = Field(default=None, examples=["alice.walker@email.com"])


ParentList = list_envelope("ParentList", "parents_count", Parent)
ParentDetail = detail_envelope("ParentDetail", Parent)
ParentUpdated = updated_envelope("ParentUpdated", Parent)
