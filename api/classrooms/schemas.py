"""
Pydantic schemas for classroom endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt

from core.schemas import detail_envelope, list_envelope, updated_envelope


class Classroom(BaseModel):
    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Blue Butterflies"])
    daycare_id: int | None = Field(default=None, examples=[1])


class ClassroomUpdate(BaseModel):
    name: str | None = Field(default=None, examples=["Purple Pandas"])
    daycare_id: StrictInt | None = Field(default=None, examples=[2])


ClassroomList = list_envelope("ClassroomList", "classrooms_count", Classroom)
ClassroomDetail = detail_envelope("ClassroomDetail", Classroom)
ClassroomUpdated = updated_envelope("ClassroomUpdated", Classroom)
