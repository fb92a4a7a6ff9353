"""Pure geofence and environmental threshold checks."""

import math
from dataclasses import dataclass

from app.reference_data.tables import GEOFENCE_ZONES, GeofenceZone

EARTH_RADIUS_KM = 6371


@dataclass(frozen=True)
class ZoneTransition:
    zone_name: str
    event: str  # "Entered" | "Exited"


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def is_inside(lat: float, lng: float, zone: GeofenceZone) -> bool:
    return haversine_km(lat, lng, zone.lat, zone.lng) <= zone.radius_km


def detect_transitions(
    current: tuple[float, float],
    prior: tuple[float, float] | None,
    zones: tuple[GeofenceZone, ...] = GEOFENCE_ZONES,
) -> list[ZoneTransition]:
    """Zone boundary crossings between the prior and current positions.

    A first reading (no prior position) never produces a transition.
    """
    if prior is None:
        return []

    transitions = []
    for zone in zones:
        now_inside = is_inside(current[0], current[1], zone)
        was_inside = is_inside(prior[0], prior[1], zone)
        if now_inside != was_inside:
            transitions.append(ZoneTransition(zone.name, "Entered" if now_inside else "Exited"))
    return transitions


def temperature_breached(temperature_c: float, max_c: float = 30.0, min_c: float = 2.0) -> bool:
    return temperature_c > max_c or temperature_c < min_c


def format_temperature(value: float) -> str:
    """Render 35.0 as "35" and 35.5 as "35.5"."""
    return f"{value:g}"
