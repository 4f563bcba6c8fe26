from typing import Dict, Any, List

from .time_utils import format_time_12h, format_duration


class RouteLeg:
    """A single uninterrupted ride on one route between two stops."""

    def __init__(self, route, trip, from_stop, to_stop, departure_time, arrival_time,
                 departure_minutes, arrival_minutes, duration, stops):
        self.route = route
        self.trip = trip
        self.from_stop = from_stop
        self.to_stop = to_stop
        self.departure_time = departure_time
        self.arrival_time = arrival_time
        self.departure_minutes = departure_minutes
        self.arrival_minutes = arrival_minutes
        self.duration = duration
        # Stops ridden through, excluding both ends
        self.stops = tuple(stops)

    @property
    def direction(self):
        return self.trip.direction_id

    @property
    def direction_label(self):
        return self.trip.direction_label

    def to_dict(self) -> Dict[str, Any]:
        return {
            "route": self.route.to_dict(),
            "trip": self.trip.to_dict(),
            "from_stop": self.from_stop.to_dict(),
            "to_stop": self.to_stop.to_dict(),
            "departure_time": self.departure_time,
            "arrival_time": self.arrival_time,
            "duration": self.duration,
            "stops": [stop.to_dict() for stop in self.stops],
            "direction": self.direction,
            "direction_label": self.direction_label,
        }

    def __repr__(self):
        return (f"RouteLeg({self.route.display_name}: {self.from_stop.stop_id} {self.departure_time}"
                f" -> {self.to_stop.stop_id} {self.arrival_time})")


class JourneyResult:
    """
    One itinerary from origin to destination: a single leg for a direct
    journey, or two legs joined at a transfer stop.
    """

    def __init__(self, journey_id, from_stop, to_stop, routes: List[RouteLeg], total_duration,
                 total_distance, transfers, walking_time=0, transfer_stops=()):
        self.journey_id = journey_id
        self.from_stop = from_stop
        self.to_stop = to_stop
        self.routes = tuple(routes)
        self.total_duration = total_duration
        self.total_distance = total_distance
        self.transfers = transfers
        self.walking_time = walking_time
        self.transfer_stops = tuple(transfer_stops)

    @property
    def departure_time(self):
        return self.routes[0].departure_time

    @property
    def arrival_time(self):
        return self.routes[-1].arrival_time

    def summary(self):
        """One-line human readable description, with 12-hour times."""
        names = " > ".join(leg.route.display_name for leg in self.routes)
        return (f"{names}: {format_time_12h(self.departure_time)} - {format_time_12h(self.arrival_time)}"
                f" ({format_duration(self.total_duration)}, {self.total_distance:.2f} km,"
                f" {self.transfers} transfer{'s' if self.transfers != 1 else ''})")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the journey to plain data for JSON responses."""
        return {
            "id": self.journey_id,
            "from_stop": self.from_stop.to_dict(),
            "to_stop": self.to_stop.to_dict(),
            "routes": [leg.to_dict() for leg in self.routes],
            "total_duration": self.total_duration,
            "total_distance": self.total_distance,
            "transfers": self.transfers,
            "walking_time": self.walking_time,
            "transfer_stops": [stop.to_dict() for stop in self.transfer_stops],
        }

    def __repr__(self):
        return f"JourneyResult({self.journey_id}, {self.total_duration} min, transfers={self.transfers})"
