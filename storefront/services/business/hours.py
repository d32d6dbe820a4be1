"""
Store hours formatting service.
Turns a weekly {"Monday": "10:00 AM - 8:00 PM", ...} map into a one-line summary.
"""
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from storefront.core.errors import InvalidInput

DAYS = ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']
WEEKDAYS = frozenset(DAYS[:5])
WEEKEND = frozenset(['Saturday', 'Sunday'])
# late closing days checked for the extended hours note
LATE_NIGHT_DAYS = ('Friday', 'Saturday')

HOURS_NOT_AVAILABLE = "Hours not available"

_TIME_RE = re.compile(r'^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$')

DayHours = Mapping[str, str]


@dataclass(frozen=True)
class TimeOfDay:
    """12-hour clock time as written on the storefront, e.g. 9:00 AM."""
    hour: int  # 1-12
    minute: int
    meridiem: str  # 'AM' or 'PM'

    @property
    def is_after_midnight(self) -> bool:
        """early-morning closing time that belongs to the previous business day."""
        return self.meridiem == 'AM' and self.hour in (12, 1, 2, 3, 4, 5)

    def closing_value(self) -> float:
        """hours since the start of the business day; 2:00 AM closes later than 11:00 PM."""
        hour24 = self.hour % 12 + (12 if self.meridiem == 'PM' else 0)
        overflow = 24 if self.is_after_midnight else 0
        return hour24 + overflow + self.minute / 60

    def __str__(self) -> str:
        return f"{self.hour}:{self.minute:02d} {self.meridiem}"


def parse_time_of_day(token: str) -> TimeOfDay:
    """parse "<h>:<mm> <AM|PM>"."""
    match = _TIME_RE.match(token or "")
    if not match:
        raise InvalidInput(f"Invalid time {token!r}. Use H:MM AM/PM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if not 1 <= hour <= 12:
        raise InvalidInput(f"Invalid hour in {token!r}")
    if minute > 59:
        raise InvalidInput(f"Invalid minutes in {token!r}")
    return TimeOfDay(hour=hour, minute=minute, meridiem=match.group(3).upper())


def split_hours(hours: str) -> Optional[Tuple[str, str]]:
    """"10:00 AM - 8:00 PM" -> ("10:00 AM", "8:00 PM"), None if it isn't a range."""
    parts = hours.split(' - ')
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def closing_value(hours: str) -> Optional[float]:
    """comparable closing time for an hours string, None when it can't be parsed."""
    parts = split_hours(hours)
    if parts is None:
        return None
    try:
        return parse_time_of_day(parts[1]).closing_value()
    except InvalidInput:
        return None


def normalize_day(day: str) -> Optional[str]:
    """'monday' / 'MONDAY ' -> 'Monday'; None for anything that isn't a weekday name."""
    if not isinstance(day, str):
        return None
    name = day.strip().capitalize()
    return name if name in DAYS else None


def normalize_hours(hours: Optional[DayHours]) -> Dict[str, str]:
    """canonical {"Monday": ...} map of open days; unknown keys dropped.

    Raises InvalidInput when two keys name the same day ("Monday" and "monday").
    """
    if not hours:
        return {}
    known = {}
    seen = {}
    for key, value in hours.items():
        day = normalize_day(key)
        if day is None:
            continue
        if day in seen:
            raise InvalidInput(f"Duplicate hours for {day}: {seen[day]!r} and {key!r}")
        seen[day] = key
        if value:
            known[day] = value
    return known


def day_range_label(days: List[str]) -> str:
    """label for a set of days sharing the same hours."""
    group = set(days)
    if len(group) == 7:
        return "Every day"
    if group == WEEKDAYS:
        return "Weekdays"
    if group == WEEKEND:
        return "Weekend"

    ordered = sorted(group, key=DAYS.index)
    first, last = DAYS.index(ordered[0]), DAYS.index(ordered[-1])
    if len(ordered) == last - first + 1:
        return f"{ordered[0][:3]} - {ordered[-1][:3]}"
    return ", ".join(d[:3] for d in ordered)


class StoreHoursFormatter:
    """builds the hours summary shown in the header, footer and location pages."""

    separator = " | "
    extended_hours_note = " (Extended hours on weekends)"

    def group_days(self, hours: Optional[DayHours]) -> List[Tuple[str, List[str]]]:
        """(hours, days) groups in order of each group's first day."""
        known = normalize_hours(hours)
        groups: Dict[str, List[str]] = {}
        for day in DAYS:
            value = known.get(day)
            if value:
                groups.setdefault(value, []).append(day)
        return list(groups.items())

    def has_extended_weekend_hours(self, hours: Optional[DayHours]) -> bool:
        """Friday/Saturday close later than any other day."""
        known = normalize_hours(hours)
        late = [closing_value(known[d]) for d in LATE_NIGHT_DAYS if d in known]
        other = [closing_value(known[d]) for d in DAYS if d not in LATE_NIGHT_DAYS and d in known]
        late = [v for v in late if v is not None]
        other = [v for v in other if v is not None]
        if not late or not other:
            return False
        return max(late) > max(other)

    def format(self, hours: Optional[DayHours], include_extended_hours_note: bool = True) -> str:
        groups = self.group_days(hours)
        if not groups:
            return HOURS_NOT_AVAILABLE

        result = self.separator.join(f"{day_range_label(days)}: {value}" for value, days in groups)
        if include_extended_hours_note and self.has_extended_weekend_hours(hours):
            result += self.extended_hours_note
        return result

    def format_extended_hours_note(self, hours: Optional[DayHours]) -> Optional[str]:
        known = normalize_hours(hours)
        parts = [f"{day} {known[day]}" for day in LATE_NIGHT_DAYS if day in known]
        if not parts:
            return None
        return " & ".join(parts)


# global instance
store_hours_formatter = StoreHoursFormatter()


def format_store_hours(hours: Optional[DayHours], include_extended_hours_note: bool = True) -> str:
    """convenience function for the summary line."""
    return store_hours_formatter.format(hours, include_extended_hours_note)


def format_extended_hours_note(hours: Optional[DayHours]) -> Optional[str]:
    """'Friday 10:00 AM - 2:00 AM & Saturday 10:00 AM - 2:00 AM', None if neither day is open."""
    return store_hours_formatter.format_extended_hours_note(hours)


def get_hours_for_day(hours: Optional[DayHours], day: str) -> str:
    return normalize_hours(hours).get(normalize_day(day) or "", "")


def get_ordered_opening_hours(hours: Optional[DayHours]) -> List[Tuple[str, str]]:
    known = normalize_hours(hours)
    return [(day, known[day]) for day in DAYS if day in known]
