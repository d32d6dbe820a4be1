"""
Business logic services package.

This package contains services for store operating hours:
- Weekly hours summaries for display
- Extended weekend hours detection
- Preset hour templates for the admin editor
"""

from .hours import (
    DAYS,
    TimeOfDay,
    StoreHoursFormatter,
    store_hours_formatter,
    parse_time_of_day,
    format_store_hours,
    format_extended_hours_note,
    get_hours_for_day,
    get_ordered_opening_hours,
    normalize_hours
)
from .templates import HourTemplate, HOUR_TEMPLATES, get_template, apply_template, build_opening_hours

__all__ = [
    'DAYS',
    'TimeOfDay',
    'StoreHoursFormatter',
    'store_hours_formatter',
    'parse_time_of_day',
    'format_store_hours',
    'format_extended_hours_note',
    'get_hours_for_day',
    'get_ordered_opening_hours',
    'normalize_hours',
    'HourTemplate',
    'HOUR_TEMPLATES',
    'get_template',
    'apply_template',
    'build_opening_hours'
]
