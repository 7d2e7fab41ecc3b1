from pydantic import BaseModel, Field
from typing import Optional, List, Dict

# ----------------- Event Schemas ---------------------


class Event(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    date: Optional[List[int]] = None  # [month, day, year]
    start_time: Optional[int] = Field(None, alias="startTime", ge=0, le=1439)  # minutes since midnight
    end_time: Optional[int] = Field(None, alias="endTime", ge=0, le=1439)
    address: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    time_sensitive: Optional[bool] = Field(None, alias="timeSensitive")

    class Config:
        populate_by_name = True


# Weekday name -> events sorted by start_time
WeeklySchedule = Dict[str, List[Event]]

# ----------------- Conflict Schemas ---------------------


class ConflictRequest(BaseModel):
    first: Optional[Event] = None
    second: Optional[Event] = None


class ConflictResult(BaseModel):
    conflict: bool
    reason: Optional[str] = None

# ----------------- Travel Cache Schemas ---------------------


class CacheClearResponse(BaseModel):
    message: str
    entries_cleared: int
