"""
Pydantic schemas for booking-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from meetx.models.booking import BookingStatus
from meetx.schemas.activity import ActivitySummary


class BookingCreate(BaseModel):
    activity_id: int = Field(..., gt=0)


class BookingUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    id: int
    user_id: int
    activity_id: int
    status: BookingStatus
    created_at: datetime
    updated_at: datetime
    activity: Optional[ActivitySummary] = None

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    message: str
