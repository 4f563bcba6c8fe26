#!/usr/bin/env python3
import argparse
import logging
import json
import sys

from transit_journeys.route_planner import JourneyPlanner
from transit_journeys.schedule_index import ScheduleIndex
from transit_journeys.config import Config
from transit_journeys.errors import InvalidInputError
from transit_journeys.geo import distance_km
from transit_journeys.time_utils import format_time_12h, format_duration


def setup_logging(debug=False):
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def load_index(data_file):
    """
    Load a schedule JSON file holding the parsed GTFS tables
    ("stops", "routes", "trips", "stop_times") and index it.
    Returns None if the file cannot be read.
    """
    try:
        with open(data_file, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"❌ Schedule file not found: {data_file}")
        return None
    except json.JSONDecodeError:
        print(f"❌ Invalid JSON in schedule file: {data_file}")
        return None
    return ScheduleIndex.from_dict(data)


def plan(origin, destination, requested_time=None, data_file=None, as_json=False):
    """Plan journeys between two stops and print them."""
    index = load_index(data_file or Config.SCHEDULE_PATH)
    if index is None:
        return 1

    planner = JourneyPlanner(index)
    try:
        journeys = planner.plan_journey(origin, destination, requested_time)
    except InvalidInputError as e:
        print(f"❌ {e}")
        return 1

    if as_json:
        print(json.dumps([journey.to_dict() for journey in journeys], indent=2))
        return 0

    if not journeys:
        print(f"❌ No direct or one-transfer journeys found from {origin} to {destination}")
        return 0

    print(f"✅ Found {len(journeys)} journeys:")
    for i, journey in enumerate(journeys):
        print(f"\n🚌 Option {i+1}: {format_duration(journey.total_duration)}, "
              f"{journey.total_distance:.2f} km, {journey.transfers} transfer(s)")
        for leg in journey.routes:
            print(f"  {leg.route.display_name} ({leg.direction_label}): "
                  f"{leg.from_stop.name} {format_time_12h(leg.departure_time)} → "
                  f"{leg.to_stop.name} {format_time_12h(leg.arrival_time)} "
                  f"[{len(leg.stops)} stops between]")
        if journey.transfers:
            print(f"  🚶 Allow {journey.walking_time} minutes to change at "
                  f"{journey.transfer_stops[0].name}")
    return 0


def search_stops(term, data_file=None):
    """Search stops by name, code or id."""
    index = load_index(data_file or Config.SCHEDULE_PATH)
    if index is None:
        return 1

    stops = index.search_stops(term)
    if not stops:
        print(f"❌ No stops matching '{term}'")
        return 0
    for stop in stops:
        routes = [index.get_route(route_id).display_name for route_id in index.routes_for_stop(stop.stop_id)]
        marker = " 🏢" if stop.is_interchange else ""
        print(f"  📍 {stop.name} (ID: {stop.stop_id}, code: {stop.code}){marker} routes: {', '.join(routes) or '-'}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Transit Journeys CLI - plan journeys over a GTFS schedule",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plan journeys between two stops
  ./main_cli.py plan par_4_1 par_4_17 --time "08:00" --data schedule.json

  # Find stops by name
  ./main_cli.py stops "Atocha" --data schedule.json

  # Distance between two coordinates
  ./main_cli.py distance 40.4168 -3.7038 40.4065 -3.6895
        """
    )

    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Sub-command help')

    # Plan command
    plan_parser = subparsers.add_parser('plan', help='Plan journeys between two stops')
    plan_parser.add_argument('origin', type=str, help='Origin stop id')
    plan_parser.add_argument('destination', type=str, help='Destination stop id')
    plan_parser.add_argument('--time', type=str, help='Earliest departure (e.g., "08:00"); defaults to now')
    plan_parser.add_argument('--data', type=str, help='Schedule JSON file')
    plan_parser.add_argument('--json', action='store_true', help='Print results as JSON')

    # Stops command
    stops_parser = subparsers.add_parser('stops', help='Search stops')
    stops_parser.add_argument('term', type=str, help='Name, code or id to search for')
    stops_parser.add_argument('--data', type=str, help='Schedule JSON file')

    # Distance command
    distance_parser = subparsers.add_parser('distance', help='Great-circle distance between two points')
    for name in ('lat1', 'lon1', 'lat2', 'lon2'):
        distance_parser.add_argument(name, type=float)

    args = parser.parse_args(argv)
    setup_logging(args.debug or Config.DEBUG)

    if args.command == 'plan':
        return plan(args.origin, args.destination, args.time, args.data, args.json)
    elif args.command == 'stops':
        return search_stops(args.term, args.data)
    elif args.command == 'distance':
        print(f"{distance_km(args.lat1, args.lon1, args.lat2, args.lon2):.2f} km")
        return 0
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
