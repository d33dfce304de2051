"""
Pydantic schemas for activity-related request/response validation.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field, field_validator

TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"


def pad_hour(value: Optional[str]) -> Optional[str]:
    """Zero-pad the hour ("7:30" -> "07:30") so stored times sort correctly as text."""
    if value is None:
        return value
    hour, minute = value.split(":")
    return f"{int(hour):02d}:{minute}"


class ActivityCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10)
    location: str = Field(..., min_length=3, max_length=255)
    date: dt.date
    time: str = Field(..., pattern=TIME_PATTERN)
    capacity: int = Field(default=10, gt=0)

    @field_validator("time")
    @classmethod
    def zero_pad_hour(cls, value: Optional[str]) -> Optional[str]:
        return pad_hour(value)


class ActivityUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, min_length=10)
    location: Optional[str] = Field(None, min_length=3, max_length=255)
    date: Optional[dt.date] = None
    time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    capacity: Optional[int] = Field(None, gt=0)

    @field_validator("time")
    @classmethod
    def zero_pad_hour(cls, value: Optional[str]) -> Optional[str]:
        return pad_hour(value)


class ActivitySummary(BaseModel):
    """Display fields shown in listings and embedded in bookings."""

    id: int
    title: str
    description: str
    location: str
    date: dt.date
    time: str

    model_config = {"from_attributes": True}


class ActivityResponse(ActivitySummary):
    capacity: int
    created_by: Optional[int]
    created_at: dt.datetime
    updated_at: dt.datetime
