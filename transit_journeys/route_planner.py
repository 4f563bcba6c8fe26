import logging

from .config import Config
from .direct_search import find_direct_routes
from .errors import InvalidInputError, MalformedTimeError
from .ranker import rank_journeys
from .schedule_index import ScheduleIndex
from .time_utils import parse_gtfs_time, current_time
from .transfer_search import TransferSearch


class JourneyPlanner:
    def __init__(self, index: ScheduleIndex, config=Config):
        """
        Initialize the JourneyPlanner with a prebuilt ScheduleIndex.
        """
        self.index = index
        self.config = config

    def swap_index(self, index: ScheduleIndex):
        """
        Replace the schedule index, e.g. after a feed update.

        Queries already running keep the index they started with.
        """
        logging.info(f"Swapping schedule index: {self.index} -> {index}")
        self.index = index

    def validate_stops(self, index, origin_stop_id, destination_stop_id):
        """
        Checks that both stops of a journey request exist.

        Args:
            index: The ScheduleIndex the query will run against
            origin_stop_id: Stop the journey starts from
            destination_stop_id: Stop the journey ends at

        Raises:
            InvalidInputError: If either stop is unknown
        """
        if not index.has_stop(origin_stop_id):
            raise InvalidInputError(f"Unknown origin stop: {origin_stop_id}")
        if not index.has_stop(destination_stop_id):
            raise InvalidInputError(f"Unknown destination stop: {destination_stop_id}")

    def parse_requested_time(self, requested_time):
        """Minutes since midnight for a requested "HH:MM[:SS]" time."""
        try:
            return parse_gtfs_time(requested_time)
        except MalformedTimeError as e:
            raise InvalidInputError(f"Invalid requested time: {requested_time!r}") from e

    def plan_journey(self, origin_stop_id, destination_stop_id, requested_time=None):
        """
        Plans journeys from origin to destination departing at or after the
        requested time, with at most one transfer.

        Direct routes are searched first, then one-transfer routes through
        candidate stops. Both are merged and ranked by total duration.

        Args:
            origin_stop_id: Stop the journey starts from
            destination_stop_id: Stop the journey ends at
            requested_time: Earliest departure as "HH:MM"; defaults to now in Config.TIMEZONE

        Returns:
            list: Up to MAX_RESULTS JourneyResult objects, shortest first. An empty
            list means no service was found, which is not an error.

        Raises:
            InvalidInputError: If either stop is unknown or the time cannot be read
        """
        # Pin the index for the whole query so a concurrent swap cannot mix schedules
        index = self.index

        self.validate_stops(index, origin_stop_id, destination_stop_id)

        if origin_stop_id == destination_stop_id:
            logging.warning(f"Origin and destination are the same stop ({origin_stop_id}), nothing to plan")
            return []

        if requested_time is None:
            requested_time = current_time(self.config.TIMEZONE)
            logging.info(f"No requested time given, using current time {requested_time}")

        reference = self.parse_requested_time(requested_time)

        origin = index.get_stop(origin_stop_id)
        destination = index.get_stop(destination_stop_id)
        logging.info(f"Planning journey from '{origin.name}' ({origin_stop_id}) to "
                     f"'{destination.name}' ({destination_stop_id}) after {requested_time}")

        direct = find_direct_routes(index, origin_stop_id, destination_stop_id, reference)
        logging.debug(f"Direct routes found: {len(direct)}")

        transfers = TransferSearch(index, self.config).find(origin_stop_id, destination_stop_id, reference)
        logging.debug(f"Transfer routes found: {len(transfers)}")

        journeys = rank_journeys(direct, transfers, limit=self.config.MAX_RESULTS)
        logging.info("Planned %d journeys (%d direct, %d with a transfer)",
                     len(journeys), len(direct), len(transfers))
        return journeys


def plan_journey(index, origin_stop_id, destination_stop_id, requested_time=None, config=Config):
    """Plan a journey without keeping a JourneyPlanner around."""
    return JourneyPlanner(index, config).plan_journey(origin_stop_id, destination_stop_id, requested_time)
