import math

EARTH_RADIUS_KM = 6371


def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Calculate the great-circle distance between two points on Earth.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)
    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    # Float error can push a slightly past 1 near antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(lat1, lon1, lat2, lon2):
    """Great-circle distance in kilometres, rounded to 2 decimal places."""
    return round(haversine_distance(lat1, lon1, lat2, lon2), 2)


def stop_distance(stop_a, stop_b):
    return distance_km(stop_a.lat, stop_a.lon, stop_b.lat, stop_b.lon)
