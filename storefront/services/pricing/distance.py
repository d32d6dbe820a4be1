"""
Delivery zone checks based on great-circle distance from the store.
"""
import math
from dataclasses import dataclass
from typing import Tuple

from storefront.core.errors import InvalidInput

EARTH_RADIUS_MILES = 3959

Coordinates = Tuple[float, float]  # (lat, lng)


@dataclass(frozen=True)
class DeliveryZoneCheck:
    distance_miles: float
    within_zone: bool
    radius_miles: float


def _validate(point: Coordinates, label: str) -> Coordinates:
    try:
        lat, lng = float(point[0]), float(point[1])
    except (TypeError, ValueError, IndexError):
        raise InvalidInput(f"{label} must be a (lat, lng) pair")
    if math.isnan(lat) or math.isnan(lng):
        raise InvalidInput(f"{label} coordinates are missing")
    if not -90 <= lat <= 90:
        raise InvalidInput(f"{label} latitude must be between -90 and 90")
    if not -180 <= lng <= 180:
        raise InvalidInput(f"{label} longitude must be between -180 and 180")
    return lat, lng


def distance_miles(origin: Coordinates, destination: Coordinates) -> float:
    """haversine distance in miles, rounded to 2 decimals."""
    lat1, lng1 = _validate(origin, "origin")
    lat2, lng2 = _validate(destination, "destination")

    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (math.sin(d_lat / 2) ** 2
         + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_MILES * c, 2)


def check_delivery_zone(customer: Coordinates, store: Coordinates, radius_miles: float) -> DeliveryZoneCheck:
    if radius_miles < 0:
        raise InvalidInput("radius_miles must not be negative")
    distance = distance_miles(customer, store)
    return DeliveryZoneCheck(
        distance_miles=distance,
        within_zone=distance <= radius_miles,
        radius_miles=radius_miles,
    )
