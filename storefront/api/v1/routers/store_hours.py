from typing import List

from fastapi import APIRouter, HTTPException

from storefront.core.errors import StorefrontError
from storefront.schemas.store_hours import (
    ApplyTemplateRequest, ApplyTemplateResponse, DayHoursOut,
    FormatHoursRequest, FormatHoursResponse, HourTemplateOut
)
from storefront.services.business import (
    HOUR_TEMPLATES, apply_template, format_extended_hours_note,
    format_store_hours, get_ordered_opening_hours, get_template
)

router = APIRouter(prefix="/store-hours", tags=["store-hours"])


@router.post("/format", response_model=FormatHoursResponse)
def format_hours(payload: FormatHoursRequest):
    """summary line plus ordered per-day hours for a location."""
    try:
        return FormatHoursResponse(
            hours=format_store_hours(payload.opening_hours, payload.include_extended_hours),
            extended_hours=format_extended_hours_note(payload.opening_hours),
            days=[DayHoursOut(day=day, hours=hours) for day, hours in get_ordered_opening_hours(payload.opening_hours)],
        )
    except StorefrontError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/templates", response_model=List[HourTemplateOut])
def list_templates():
    return [
        HourTemplateOut(name=t.name, days=list(t.days), open=t.open, close=t.close)
        for t in HOUR_TEMPLATES
    ]


@router.post("/templates/{name}/apply", response_model=ApplyTemplateResponse)
def apply_hours_template(name: str, payload: ApplyTemplateRequest):
    """apply a preset to the given hours and preview the summary."""
    try:
        template = get_template(name)
    except StorefrontError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        opening_hours = apply_template(payload.opening_hours, template)
    except StorefrontError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ApplyTemplateResponse(
        template=template.name,
        opening_hours=opening_hours,
        hours=format_store_hours(opening_hours),
    )
