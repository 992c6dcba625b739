"""
Pydantic schemas for daycare endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.schemas import detail_envelope, list_envelope, updated_envelope


class Daycare(BaseModel):
    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Happy Kids Daycare"])
    address: str | None = Field(default=None, examples=["123 Rainbow Street"])
    phone: str | None = Field(default=None, examples=["555-111-2222"])
    email: str | None = Field(default=None, examples=["contact@happykids.com"])


class DaycareUpdate(BaseModel):
    name: str | None = Field(default=None, examples=["Bright Future Daycare"])
    address: str | None = Field(default=None, examples=["456 Rainbow Rd, Springfield"])
    phone: str | None = Field(default=None, examples=["555-999-8888"])
    email: str | None = Field(default=None, examples=["contact@brightfuture.com"])


DaycareList = list_envelope("DaycareList", "daycares_count", Daycare)
DaycareDetail = detail_envelope("DaycareDetail", Daycare)
DaycareUpdated = updated_envelope("DaycareUpdated", Daycare)
