from __future__ import annotations

import math

EARTH_RADIUS_M = 6371e3
# Straight-line distance undershoots the road network
ROAD_FACTOR = 1.2

BASE_FEE = 18.0
PER_KM_FEE = 9.0


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float, road_factor: float = ROAD_FACTOR) -> float:
    """Estimated road distance in metres between two coordinates.

    Haversine great-circle distance scaled by road_factor.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c * road_factor


def calculate_delivery_fee(distance_m: float, base_fee: float = BASE_FEE, per_km: float = PER_KM_FEE) -> float:
    """Delivery fee in rupees: base charge plus a per-km charge.

    Distance is floored to one decimal place of a kilometre before pricing.
    """
    if distance_m < 0:
        raise ValueError(f"Distance must be non-negative, got {distance_m}")
    distance_km = math.floor(distance_m / 1000 * 10) / 10
    return base_fee + distance_km * per_km
