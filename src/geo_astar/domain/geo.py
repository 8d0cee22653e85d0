import math

import numpy as np

EARTH_RADIUS_KM = 6371.0


def haversine_km(a, b, radius_km: float = EARTH_RADIUS_KM) -> float:
    """Great-circle distance in km between two objects exposing ``lat``/``lng`` in degrees."""
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)

    h = math.sin(d_lat / 2) ** 2 + math.sin(d_lng / 2) ** 2 * math.cos(lat1) * math.cos(lat2)
    h = min(h, 1.0)  # antipodal rounding
    return radius_km * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def haversine_km_many(lats, lngs, lat: float, lng: float, radius_km: float = EARTH_RADIUS_KM):
    """Vectorised haversine from every (lats[i], lngs[i]) to a single point.

    Returns a float ndarray with the same length as the inputs.
    """
    la = np.radians(np.asarray(lats, dtype=float))
    lo = np.radians(np.asarray(lngs, dtype=float))
    lat0, lng0 = math.radians(lat), math.radians(lng)

    h = np.sin((lat0 - la) / 2) ** 2 + np.sin((lng0 - lo) / 2) ** 2 * np.cos(la) * math.cos(lat0)
    h = np.clip(h, 0.0, 1.0)
    return radius_km * 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))
