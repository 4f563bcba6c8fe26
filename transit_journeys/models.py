from typing import Dict, Any

from .stop import as_int
from .time_utils import parse_gtfs_time

DIRECTION_LABELS = {0: "Outbound", 1: "Inbound"}


class Route:
    def __init__(self, route_id, short_name="", long_name="", color="", route_type=0):
        self.route_id = str(route_id)
        self.short_name = short_name or ""
        self.long_name = long_name or ""
        self.color = color or ""
        self.route_type = as_int(route_type)

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "Route":
        return cls(
            route_id=row['route_id'],
            short_name=row.get('route_short_name', ''),
            long_name=row.get('route_long_name', ''),
            color=row.get('route_color', ''),
            route_type=row.get('route_type', 0),
        )

    @property
    def display_name(self):
        return self.short_name or self.long_name or self.route_id

    def to_dict(self):
        return {
            "route_id": self.route_id,
            "route_short_name": self.short_name,
            "route_long_name": self.long_name,
            "route_color": self.color,
            "route_type": self.route_type,
        }

    def __repr__(self):
        return f"Route({self.route_id}, {self.display_name})"


class Trip:
    def __init__(self, trip_id, route_id, direction_id=0, headsign="", service_id=""):
        self.trip_id = str(trip_id)
        self.route_id = str(route_id)
        self.direction_id = as_int(direction_id)
        self.headsign = headsign or ""
        self.service_id = service_id or ""

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "Trip":
        return cls(
            trip_id=row['trip_id'],
            route_id=row['route_id'],
            direction_id=row.get('direction_id', 0),
            headsign=row.get('trip_headsign', ''),
            service_id=row.get('service_id', ''),
        )

    @property
    def direction_label(self):
        return DIRECTION_LABELS.get(self.direction_id, "Unknown")

    def to_dict(self):
        return {
            "trip_id": self.trip_id,
            "route_id": self.route_id,
            "direction_id": self.direction_id,
            "direction_label": self.direction_label,
            "trip_headsign": self.headsign,
            "service_id": self.service_id,
        }

    def __repr__(self):
        return f"Trip({self.trip_id}, route={self.route_id}, direction={self.direction_id})"


class StopTime:
    """
    One row of the stop_times table: when a trip calls at a stop.

    Times are kept as the original strings. The schedule index calls
    parse_times() once while it is being built, which fills in
    arrival_minutes and departure_minutes.
    """

    def __init__(self, trip_id, stop_id, arrival_time, departure_time, stop_sequence):
        self.trip_id = str(trip_id)
        self.stop_id = str(stop_id)
        self.arrival_time = (arrival_time or "").strip()
        self.departure_time = (departure_time or "").strip()
        self.stop_sequence = int(stop_sequence)
        self.arrival_minutes = None
        self.departure_minutes = None

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "StopTime":
        return cls(
            trip_id=row['trip_id'],
            stop_id=row['stop_id'],
            arrival_time=row.get('arrival_time', ''),
            departure_time=row.get('departure_time', ''),
            stop_sequence=row['stop_sequence'],
        )

    def parse_times(self):
        """
        Parse both times into minutes since service-day midnight.

        A blank time borrows the other one. Raises MalformedTimeError when
        both are blank or either cannot be read.
        """
        arrival = self.arrival_time or self.departure_time
        departure = self.departure_time or self.arrival_time
        self.arrival_minutes = parse_gtfs_time(arrival)
        self.departure_minutes = parse_gtfs_time(departure)
        if not self.arrival_time:
            self.arrival_time = departure
        if not self.departure_time:
            self.departure_time = arrival
        return self

    def __repr__(self):
        return (f"StopTime({self.trip_id}, {self.stop_id}, seq={self.stop_sequence}, "
                f"{self.arrival_time}-{self.departure_time})")
