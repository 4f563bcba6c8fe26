import logging
from collections import defaultdict
from types import MappingProxyType

from .errors import MalformedTimeError
from .models import Route, Trip, StopTime
from .stop import Stop


def _coerce(rows, model):
    """Accept either model instances or GTFS-shaped dicts."""
    return [row if isinstance(row, model) else model.from_dict(row) for row in rows or []]


def _coerce_stop_times(rows):
    """
    Like _coerce, but a row whose stop_sequence is not an integer is logged
    and left out instead of failing the whole build.
    """
    stop_times = []
    for row in rows or []:
        if isinstance(row, StopTime):
            stop_times.append(row)
            continue
        try:
            stop_times.append(StopTime.from_dict(row))
        except (TypeError, ValueError) as e:
            logging.warning(f"Skipping stop time row {row}: bad stop_sequence ({e})")
    return stop_times


class ScheduleIndex:
    """
    Read-only lookup structures over an already-parsed GTFS schedule.

    Building the index is the only step that mutates anything. Afterwards
    every map is exposed through a read-only view, so one index can serve
    any number of concurrent queries. To pick up a new schedule, build a new
    index and swap it in.
    """

    def __init__(self, stops, routes, trips, stop_times):
        stops = _coerce(stops, Stop)
        routes = _coerce(routes, Route)
        trips = _coerce(trips, Trip)
        stop_times = list(stop_times or [])
        row_count = len(stop_times)
        stop_times = _coerce_stop_times(stop_times)

        self._stops = MappingProxyType({stop.stop_id: stop for stop in stops})
        self._routes = MappingProxyType({route.route_id: route for route in routes})
        self._trips = MappingProxyType({trip.trip_id: trip for trip in trips})

        by_stop = defaultdict(list)
        by_trip = defaultdict(list)
        routes_by_stop = defaultdict(list)
        skipped = row_count - len(stop_times)

        for stop_time in stop_times:
            trip = self._trips.get(stop_time.trip_id)
            if trip is None or trip.route_id not in self._routes:
                logging.warning(f"Skipping stop time for unknown trip or route: {stop_time}")
                skipped += 1
                continue
            try:
                stop_time.parse_times()
            except MalformedTimeError as e:
                logging.warning(f"Skipping stop time {stop_time}: {e}")
                skipped += 1
                continue

            by_stop[stop_time.stop_id].append(stop_time)
            by_trip[stop_time.trip_id].append(stop_time)
            if trip.route_id not in routes_by_stop[stop_time.stop_id]:
                routes_by_stop[stop_time.stop_id].append(trip.route_id)

        self._stop_times_by_stop = MappingProxyType(
            {stop_id: tuple(rows) for stop_id, rows in by_stop.items()})
        self._stop_times_by_trip = MappingProxyType(
            {trip_id: tuple(sorted(rows, key=lambda st: st.stop_sequence))
             for trip_id, rows in by_trip.items()})
        self._routes_by_stop = MappingProxyType(
            {stop_id: tuple(route_ids) for stop_id, route_ids in routes_by_stop.items()})

        logging.info(
            f"Schedule index built: {len(self._stops)} stops, {len(self._routes)} routes, "
            f"{len(self._trips)} trips, {row_count - skipped} stop times ({skipped} skipped)"
        )

    @classmethod
    def from_dict(cls, data):
        """
        Build an index from a mapping holding the four GTFS tables:
        {"stops": [...], "routes": [...], "trips": [...], "stop_times": [...]}
        """
        return cls(
            stops=data.get('stops', []),
            routes=data.get('routes', []),
            trips=data.get('trips', []),
            stop_times=data.get('stop_times', []),
        )

    @property
    def stops(self):
        """All stops, in the order they were supplied."""
        return tuple(self._stops.values())

    def has_stop(self, stop_id):
        return stop_id in self._stops

    def get_stop(self, stop_id):
        return self._stops.get(stop_id)

    def get_route(self, route_id):
        return self._routes.get(route_id)

    def get_trip(self, trip_id):
        return self._trips.get(trip_id)

    def route_for_trip(self, trip_id):
        trip = self._trips.get(trip_id)
        if trip is None:
            return None
        return self._routes.get(trip.route_id)

    def stop_times_for_stop(self, stop_id):
        return self._stop_times_by_stop.get(stop_id, ())

    def stop_times_for_trip(self, trip_id):
        """Stop times of a trip, ordered by stop_sequence."""
        return self._stop_times_by_trip.get(trip_id, ())

    def routes_for_stop(self, stop_id):
        """Route ids serving a stop, in first-seen order."""
        return self._routes_by_stop.get(stop_id, ())

    def search_stops(self, term, exclude=None, limit=15):
        """
        Find stops whose name, code or id contains the search term.

        Names starting with the term come first, then shorter names.
        Terms shorter than two characters match nothing.

        Args:
            term: Free-text search term (case-insensitive)
            exclude: Optional stop id to leave out, e.g. an already chosen origin
            limit: Maximum number of stops to return

        Returns:
            list: Matching Stop objects
        """
        if not term or len(term.strip()) < 2:
            return []
        needle = term.strip().lower()
        matches = [
            stop for stop in self._stops.values()
            if stop.stop_id != exclude and (
                needle in stop.name.lower()
                or needle in stop.code.lower()
                or needle in stop.stop_id.lower()
            )
        ]
        matches.sort(key=lambda s: (0 if s.name.lower().startswith(needle) else 1, len(s.name)))
        return matches[:limit]

    def __repr__(self):
        return f"ScheduleIndex(stops={len(self._stops)}, trips={len(self._trips)})"
