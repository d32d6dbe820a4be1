from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class FormatHoursRequest(BaseModel):
    opening_hours: Optional[Dict[str, str]] = Field(None, description='e.g. {"Monday": "10:00 AM - 8:00 PM"}')
    include_extended_hours: bool = True


class DayHoursOut(BaseModel):
    day: str
    hours: str


class FormatHoursResponse(BaseModel):
    hours: str
    extended_hours: Optional[str] = None
    days: List[DayHoursOut] = []


class HourTemplateOut(BaseModel):
    name: str
    days: List[str]
    open: str
    close: str


class ApplyTemplateRequest(BaseModel):
    opening_hours: Optional[Dict[str, str]] = None


class ApplyTemplateResponse(BaseModel):
    template: str
    opening_hours: Dict[str, str]
    hours: str
