"""
Transit Journeys

This module provides journey planning over a static GTFS schedule: direct
rides and itineraries with a single transfer, ranked by total duration.

Data loading is left to the caller. Build a ScheduleIndex from the parsed
stops, routes, trips and stop_times tables, then ask a JourneyPlanner.

Example:
    from transit_journeys import ScheduleIndex, JourneyPlanner

    index = ScheduleIndex(stops, routes, trips, stop_times)
    planner = JourneyPlanner(index)
    journeys = planner.plan_journey("par_4_1", "par_4_17", "08:00")
    for journey in journeys:
        print(journey.summary())
"""

from .route_planner import JourneyPlanner, plan_journey
from .schedule_index import ScheduleIndex
from .journey import JourneyResult, RouteLeg
from .models import Route, Trip, StopTime
from .stop import Stop
from .errors import JourneyPlannerError, InvalidInputError, MalformedTimeError
