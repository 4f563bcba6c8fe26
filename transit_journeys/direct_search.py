import logging

from .geo import stop_distance
from .journey import RouteLeg, JourneyResult
from .time_utils import parse_gtfs_time, minutes_between


def reference_minutes(reference_time):
    """Accept a reference time as "HH:MM[:SS]" or as minutes since midnight."""
    if isinstance(reference_time, int):
        return reference_time
    return parse_gtfs_time(reference_time)


def best_per_key(items, key, rank):
    """
    Reduce items to one per key: the one with the lowest rank.

    Keys come back in first-seen order and ties keep the earliest item.
    """
    best = {}
    for item in items:
        k = key(item)
        if k not in best or rank(item) < rank(best[k]):
            best[k] = item
    return list(best.values())


def _build_leg(index, origin_st, dest_st):
    trip = index.get_trip(origin_st.trip_id)
    route = index.get_route(trip.route_id)
    ridden = [
        index.get_stop(st.stop_id)
        for st in index.stop_times_for_trip(trip.trip_id)
        if origin_st.stop_sequence < st.stop_sequence < dest_st.stop_sequence
    ]
    return RouteLeg(
        route=route,
        trip=trip,
        from_stop=index.get_stop(origin_st.stop_id),
        to_stop=index.get_stop(dest_st.stop_id),
        departure_time=origin_st.departure_time,
        arrival_time=dest_st.arrival_time,
        departure_minutes=origin_st.departure_minutes,
        arrival_minutes=dest_st.arrival_minutes,
        duration=minutes_between(origin_st.departure_minutes, dest_st.arrival_minutes),
        stops=[stop for stop in ridden if stop is not None],
    )


def find_direct_legs(index, origin_stop_id, destination_stop_id, reference_time):
    """
    Find the earliest leg per route that rides from origin to destination
    departing at or after the reference time.

    Args:
        index: ScheduleIndex to search
        origin_stop_id: Boarding stop
        destination_stop_id: Alighting stop
        reference_time: "HH:MM" string or minutes since midnight

    Returns:
        list: RouteLeg objects, at most one per route, by departure time
    """
    if origin_stop_id == destination_stop_id:
        return []
    if not index.has_stop(origin_stop_id) or not index.has_stop(destination_stop_id):
        return []
    earliest = reference_minutes(reference_time)

    dest_rows_by_trip = {}
    for st in index.stop_times_for_stop(destination_stop_id):
        dest_rows_by_trip.setdefault(st.trip_id, []).append(st)

    candidates = []
    for origin_st in index.stop_times_for_stop(origin_stop_id):
        dest_rows = dest_rows_by_trip.get(origin_st.trip_id)
        if not dest_rows:
            continue
        if origin_st.departure_minutes < earliest:
            continue
        # Wrong direction when the destination only appears before the origin
        later = [st for st in dest_rows if st.stop_sequence > origin_st.stop_sequence]
        if not later:
            continue
        dest_st = min(later, key=lambda st: st.stop_sequence)
        candidates.append(_build_leg(index, origin_st, dest_st))

    legs = best_per_key(candidates, key=lambda leg: leg.route.route_id,
                        rank=lambda leg: leg.departure_minutes)
    legs.sort(key=lambda leg: leg.departure_minutes)
    logging.debug(
        f"Direct search {origin_stop_id} -> {destination_stop_id}: "
        f"{len(candidates)} trips, {len(legs)} routes"
    )
    return legs


def find_direct_routes(index, origin_stop_id, destination_stop_id, reference_time):
    """
    Wrap each direct leg in a zero-transfer JourneyResult.
    """
    legs = find_direct_legs(index, origin_stop_id, destination_stop_id, reference_time)
    if not legs:
        return []
    origin = index.get_stop(origin_stop_id)
    destination = index.get_stop(destination_stop_id)
    distance = stop_distance(origin, destination)
    return [
        JourneyResult(
            journey_id=f"direct-{leg.route.route_id}-{leg.trip.trip_id}",
            from_stop=origin,
            to_stop=destination,
            routes=[leg],
            total_duration=leg.duration,
            total_distance=distance,
            transfers=0,
            walking_time=0,
        )
        for leg in legs
    ]
