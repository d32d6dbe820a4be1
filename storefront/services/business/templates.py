"""
Preset hour patterns used by the admin hours editor.
"""
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from storefront.core.errors import InvalidInput
from storefront.services.business.hours import DAYS, DayHours, normalize_day, normalize_hours


@dataclass(frozen=True)
class HourTemplate:
    name: str
    days: Tuple[str, ...]
    open: str
    close: str

    @property
    def hours(self) -> str:
        return f"{self.open} - {self.close}"


HOUR_TEMPLATES: Tuple[HourTemplate, ...] = (
    HourTemplate("Standard Business", tuple(DAYS[:5]), "9:00 AM", "5:00 PM"),
    HourTemplate("Extended Evening", tuple(DAYS[:5]), "10:00 AM", "8:00 PM"),
    HourTemplate("Weekend Hours", ("Saturday", "Sunday"), "11:00 AM", "6:00 PM"),
    HourTemplate("Evening Weekend", ("Friday", "Saturday"), "10:00 AM", "12:00 AM"),
    HourTemplate("Late Night Weekend", ("Friday", "Saturday"), "10:00 AM", "2:00 AM"),
    HourTemplate("Same Every Day", tuple(DAYS), "10:00 AM", "10:00 PM"),
)


def get_template(name: str) -> HourTemplate:
    for template in HOUR_TEMPLATES:
        if template.name.lower() == (name or "").strip().lower():
            return template
    raise InvalidInput(f"Unknown hours template {name!r}")


def apply_template(hours: Optional[DayHours], template: HourTemplate) -> Dict[str, str]:
    """copy of hours with the template's days overwritten."""
    updated = normalize_hours(hours)
    for day in template.days:
        updated[day] = template.hours
    return updated


def build_opening_hours(schedule: Mapping[str, Tuple[Optional[str], Optional[str]]]) -> Dict[str, str]:
    """{day: (open, close)} from the editor -> {day: "open - close"}; days missing either time are closed."""
    opening_hours = {}
    closed = set()
    for key, (open_time, close_time) in schedule.items():
        day = normalize_day(key)
        if day is None:
            raise InvalidInput(f"Invalid day name {key!r}. Use: {', '.join(DAYS)}")
        if day in opening_hours or day in closed:
            raise InvalidInput(f"Duplicate entry for {day}")
        if open_time and close_time:
            opening_hours[day] = f"{open_time} - {close_time}"
        else:
            closed.add(day)
    return {day: opening_hours[day] for day in DAYS if day in opening_hours}
