"""
Pydantic schemas for enrollment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt

from core.schemas import detail_envelope, list_envelope, updated_envelope


class Enrollment(BaseModel):
    id: int = Field(..., examples=[1])
    child_id: int | None = Field(default=None, examples=[1])
    parent_id: int | None = Field(default=None, examples=[1])


class EnrollmentUpdate(BaseModel):
    child_id: StrictInt | None = Field(default=None, examples=[5])
    parent_id: StrictInt | None = Field(default=None, examples=[3])


EnrollmentList = list_envelope("EnrollmentList", "enrollments_count", Enrollment)
EnrollmentDetail = detail_envelope("EnrollmentDetail", Enrollment)
EnrollmentUpdated = updated_envelope("EnrollmentUpdated", Enrollment)
