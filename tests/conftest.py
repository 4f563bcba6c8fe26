import pytest

from transit_journeys.schedule_index import ScheduleIndex

# stop_id: (lat, lon, location_type). All but FAR sit within a few km of each other.
STOPS = {
    "A": (40.400, -3.700, 0),
    "B": (40.420, -3.680, 0),
    "C": (40.410, -3.690, 1),
    "D": (40.430, -3.660, 0),
    "E": (40.405, -3.695, 0),
    "FAR": (43.000, -8.000, 0),
}


def stop_row(stop_id, lat, lon, location_type=0):
    # String values, the way a CSV loader hands them over
    return {
        "stop_id": stop_id,
        "stop_code": f"{stop_id}-code",
        "stop_name": f"Stop {stop_id}",
        "stop_lat": str(lat),
        "stop_lon": str(lon),
        "zone_id": "A",
        "location_type": str(location_type),
        "wheelchair_boarding": "1",
    }


def build_index(trips, extra_stops=()):
    """
    Build a ScheduleIndex from compact trip descriptions.

    Each trip is (trip_id, route_id, [(stop_id, arrival, departure), ...]);
    stop_sequence is numbered from 1 in list order.
    """
    stops = [stop_row(stop_id, *values) for stop_id, values in STOPS.items()]
    stops.extend(extra_stops)
    route_ids = list(dict.fromkeys(route_id for _, route_id, _ in trips))
    routes = [{"route_id": r, "route_short_name": r, "route_long_name": f"Line {r}", "route_type": "3"}
              for r in route_ids]
    trip_rows = [{"trip_id": t, "route_id": r, "direction_id": "0", "trip_headsign": "Centro"}
                 for t, r, _ in trips]
    stop_times = []
    for trip_id, _, calls in trips:
        for seq, (stop_id, arrival, departure) in enumerate(calls, start=1):
            stop_times.append({
                "trip_id": trip_id,
                "stop_id": stop_id,
                "arrival_time": arrival,
                "departure_time": departure,
                "stop_sequence": str(seq),
            })
    return ScheduleIndex(stops, routes, trip_rows, stop_times)


@pytest.fixture
def make_index():
    return build_index


@pytest.fixture
def route_670_index():
    # Route 670 calls at A then B on a single trip
    return build_index([
        ("T670", "670", [("A", "08:10:00", "08:10:00"), ("B", "08:25:00", "08:25:00")]),
    ])


@pytest.fixture
def transfer_index():
    # Route 1 reaches interchange C at 09:00, route 2 leaves C at 09:15 for B
    return build_index([
        ("T1", "1", [("A", "08:40", "08:40"), ("C", "09:00", "09:00")]),
        ("T2", "2", [("C", "09:15", "09:15"), ("B", "09:30", "09:30")]),
    ])


@pytest.fixture
def mixed_index():
    # Three direct routes A->B and two transfer options via C
    return build_index([
        ("T1", "R1", [("A", "08:00", "08:00"), ("B", "08:30", "08:30")]),
        ("T2", "R2", [("A", "08:05", "08:05"), ("B", "08:25", "08:25")]),
        ("T3", "R3", [("A", "08:10", "08:10"), ("B", "08:50", "08:50")]),
        ("T4", "R4", [("A", "08:00", "08:00"), ("C", "08:10", "08:10")]),
        ("T5", "R5", [("C", "08:25", "08:25"), ("B", "08:35", "08:35")]),
        ("T6", "R6", [("C", "08:30", "08:30"), ("B", "08:40", "08:40")]),
    ])
