import logging
from concurrent.futures import ThreadPoolExecutor

from .config import Config
from .direct_search import find_direct_routes, reference_minutes
from .geo import stop_distance
from .journey import JourneyResult


def find_transfer_candidates(index, origin, destination, config=Config):
    """
    Pick the stops worth trying as a transfer point between origin and destination.

    A stop qualifies if it is an interchange, or if it lies within
    TRANSFER_RADIUS_KM of both ends. Stops are taken in schedule order and
    the list stops growing at MAX_TRANSFER_CANDIDATES.
    """
    candidates = []
    for stop in index.stops:
        if len(candidates) >= config.MAX_TRANSFER_CANDIDATES:
            break
        if stop.stop_id in (origin.stop_id, destination.stop_id):
            continue
        if stop.is_interchange:
            candidates.append(stop)
        elif (stop_distance(origin, stop) < config.TRANSFER_RADIUS_KM
              and stop_distance(stop, destination) < config.TRANSFER_RADIUS_KM):
            candidates.append(stop)
    logging.debug(f"Transfer candidates: {[stop.stop_id for stop in candidates]}")
    return candidates


def _compose(first, second, hub, config):
    leg1 = first.routes[0]
    leg2 = second.routes[0]
    allowance = config.TRANSFER_ALLOWANCE_MINUTES
    return JourneyResult(
        journey_id=f"transfer-{leg1.route.route_id}-{leg2.route.route_id}-{hub.stop_id}",
        from_stop=first.from_stop,
        to_stop=second.to_stop,
        routes=[leg1, leg2],
        total_duration=leg1.duration + leg2.duration + allowance,
        total_distance=round(first.total_distance + second.total_distance, 2),
        transfers=1,
        walking_time=allowance,
        transfer_stops=[hub],
    )


class TransferSearch:
    """
    Builds one-transfer journeys by running the direct search twice per
    candidate stop: origin to candidate, then candidate to destination.

    The direct search is passed in so it can be swapped or wrapped.
    """

    def __init__(self, index, config=Config, direct_search=find_direct_routes):
        self.index = index
        self.config = config
        self.direct_search = direct_search

    def _legs_via(self, hub, origin_id, destination_id, reference):
        """
        Pair each leg into the hub with the legs out of it that it can catch.

        The onward search starts MIN_TRANSFER_MINUTES after each arrival, so
        the earliest trip kept per route is the first one worth connecting to.
        """
        first_legs = self.direct_search(self.index, origin_id, hub.stop_id, reference)
        connections = []
        for first in first_legs:
            earliest = first.routes[0].arrival_minutes + self.config.MIN_TRANSFER_MINUTES
            connections.append((first, self.direct_search(self.index, hub.stop_id, destination_id, earliest)))
        return hub, connections

    def _search_candidates(self, candidates, origin_id, destination_id, reference):
        workers = self.config.TRANSFER_WORKERS
        if workers > 1 and len(candidates) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                return list(pool.map(
                    lambda hub: self._legs_via(hub, origin_id, destination_id, reference),
                    candidates,
                ))
        return [self._legs_via(hub, origin_id, destination_id, reference) for hub in candidates]

    def is_feasible_connection(self, first, second):
        """True when the wait between the two legs is within the transfer window."""
        # Both times sit on the same service-day scale, so no wrap past midnight
        gap = second.routes[0].departure_minutes - first.routes[0].arrival_minutes
        return self.config.MIN_TRANSFER_MINUTES <= gap <= self.config.MAX_TRANSFER_MINUTES

    def find(self, origin_stop_id, destination_stop_id, reference_time):
        """
        Find up to MAX_TRANSFER_RESULTS one-transfer journeys.

        Returns:
            list: JourneyResult objects with exactly two legs, in discovery order
        """
        if origin_stop_id == destination_stop_id:
            return []
        origin = self.index.get_stop(origin_stop_id)
        destination = self.index.get_stop(destination_stop_id)
        if origin is None or destination is None:
            return []
        reference = reference_minutes(reference_time)

        candidates = find_transfer_candidates(self.index, origin, destination, self.config)
        results = []
        for hub, connections in self._search_candidates(
                candidates, origin_stop_id, destination_stop_id, reference):
            for first, second_legs in connections:
                for second in second_legs:
                    if first.routes[0].route.route_id == second.routes[0].route.route_id:
                        continue
                    if not self.is_feasible_connection(first, second):
                        continue
                    results.append(_compose(first, second, hub, self.config))
                    if len(results) >= self.config.MAX_TRANSFER_RESULTS:
                        logging.debug(f"Transfer search hit the cap of {len(results)} results")
                        return results

        logging.debug(f"Transfer search {origin_stop_id} -> {destination_stop_id}: {len(results)} results")
        return results


def find_transfer_routes(index, origin_stop_id, destination_stop_id, reference_time, config=Config):
    return TransferSearch(index, config).find(origin_stop_id, destination_stop_id, reference_time)
