from transit_journeys.direct_search import find_direct_legs, find_direct_routes, best_per_key
from transit_journeys.geo import stop_distance


def test_direct_route_found(route_670_index):
    results = find_direct_routes(route_670_index, "A", "B", "08:00")
    assert len(results) == 1
    journey = results[0]
    assert journey.transfers == 0
    assert journey.total_duration == 15
    assert journey.walking_time == 0
    assert journey.journey_id == "direct-670-T670"
    leg = journey.routes[0]
    assert leg.route.route_id == "670"
    assert leg.departure_time == "08:10:00"
    assert leg.arrival_time == "08:25:00"
    assert journey.total_distance == stop_distance(route_670_index.get_stop("A"), route_670_index.get_stop("B"))


def test_no_departure_after_requested_time(route_670_index):
    assert find_direct_routes(route_670_index, "A", "B", "08:30") == []


def test_departure_at_requested_time_counts(route_670_index):
    assert len(find_direct_routes(route_670_index, "A", "B", "08:10")) == 1


def test_wrong_direction_rejected(route_670_index):
    assert find_direct_routes(route_670_index, "B", "A", "00:00") == []


def test_same_or_unknown_stop_returns_empty(route_670_index):
    assert find_direct_routes(route_670_index, "A", "A", "08:00") == []
    assert find_direct_routes(route_670_index, "A", "nowhere", "08:00") == []


def test_keeps_earliest_trip_per_route(make_index):
    index = make_index([
        ("T1a", "R1", [("A", "08:20", "08:20"), ("B", "08:40", "08:40")]),
        ("T1b", "R1", [("A", "08:10", "08:10"), ("B", "08:35", "08:35")]),
        ("T2", "R2", [("A", "08:05", "08:05"), ("B", "08:50", "08:50")]),
        ("T1c", "R1", [("A", "07:00", "07:00"), ("B", "07:20", "07:20")]),
    ])
    legs = find_direct_legs(index, "A", "B", "08:00")
    assert [(leg.route.route_id, leg.trip.trip_id) for leg in legs] == [("R2", "T2"), ("R1", "T1b")]
    assert [leg.duration for leg in legs] == [45, 25]


def test_intermediate_stops_exclude_both_ends(make_index):
    index = make_index([
        ("T1", "R1", [("A", "08:00", "08:00"), ("E", "08:05", "08:06"),
                      ("C", "08:10", "08:11"), ("B", "08:20", "08:20"), ("D", "08:30", "08:30")]),
    ])
    leg = find_direct_legs(index, "A", "B", "08:00")[0]
    assert [stop.stop_id for stop in leg.stops] == ["E", "C"]
    assert leg.from_stop.stop_id == "A"
    assert leg.to_stop.stop_id == "B"

    leg = find_direct_legs(index, "E", "C", "08:00")[0]
    assert leg.stops == ()
    assert leg.departure_time == "08:06"
    assert leg.duration == 4


def test_origin_sequence_before_destination(make_index):
    index = make_index([
        ("T1", "R1", [("A", "08:00", "08:00"), ("C", "08:10", "08:10"), ("B", "08:20", "08:20")]),
        ("T2", "R2", [("B", "08:00", "08:00"), ("C", "08:10", "08:10"), ("A", "08:20", "08:20")]),
    ])
    for journey in find_direct_routes(index, "A", "B", "07:00"):
        leg = journey.routes[0]
        rows = {st.stop_id: st.stop_sequence for st in index.stop_times_for_trip(leg.trip.trip_id)}
        assert rows["A"] < rows["B"]
    assert [j.routes[0].route.route_id for j in find_direct_routes(index, "A", "B", "07:00")] == ["R1"]


def test_loop_trip_uses_next_call_at_destination(make_index):
    index = make_index([
        ("T1", "R1", [("B", "07:50", "07:50"), ("A", "08:00", "08:00"),
                      ("C", "08:10", "08:10"), ("B", "08:20", "08:20")]),
    ])
    leg = find_direct_legs(index, "A", "B", "07:00")[0]
    assert leg.arrival_time == "08:20"
    assert leg.duration == 20


def test_post_midnight_service(make_index):
    index = make_index([
        ("TN", "N1", [("A", "24:50:00", "24:50:00"), ("B", "25:05:00", "25:05:00")]),
    ])
    results = find_direct_routes(index, "A", "B", "24:30")
    assert len(results) == 1
    assert results[0].total_duration == 15
    assert len(find_direct_routes(index, "A", "B", "23:00")) == 1
    assert find_direct_routes(index, "A", "B", "25:00") == []


def test_reference_time_as_minutes(route_670_index):
    assert len(find_direct_routes(route_670_index, "A", "B", 480)) == 1


def test_best_per_key_keeps_first_on_ties():
    items = [("x", 3, "first"), ("y", 1, "y"), ("x", 2, "second"), ("x", 2, "third")]
    best = best_per_key(items, key=lambda i: i[0], rank=lambda i: i[1])
    assert best == [("x", 2, "second"), ("y", 1, "y")]
    assert best_per_key([], key=lambda i: i, rank=lambda i: i) == []


def test_best_per_key_interleaved_keys_keep_first_seen_order():
    items = [("b", 5), ("a", 4), ("b", 1), ("c", 2), ("a", 3), ("c", 9)]
    best = best_per_key(items, key=lambda i: i[0], rank=lambda i: i[1])
    assert best == [("b", 1), ("a", 3), ("c", 2)]
