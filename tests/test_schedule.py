import random

from atcsim.aircraft import Aircraft
from atcsim.schedule import FlightSchedule

_numbers = iter(range(10_000))


def flight(priority, arrival, takeoff):
    plane = Aircraft(
        next(_numbers),
        "PIA",
        "Commercial",
        "At Gate" if takeoff else "Holding",
        "East",
        takeoff,
        arrival,
        rng=random.Random(0),
    )
    plane.priority = priority
    return plane


def test_empty_schedule():
    schedule = FlightSchedule()
    assert schedule.is_empty()
    assert schedule.next_flight() is None
    assert schedule.next_arrival() is None
    assert schedule.next_departure() is None


def test_flights_go_to_their_queue():
    schedule = FlightSchedule()
    dep = flight(1, 0, True)
    arr = flight(1, 0, False)
    schedule.add_flight(dep)
    schedule.add_flight(arr)
    assert not schedule.is_empty()
    assert schedule.next_departure() is dep
    assert schedule.next_arrival() is arr
    assert schedule.is_empty()


def test_priority_order_then_arrival_time():
    schedule = FlightSchedule()
    low = flight(1, 0, True)
    high_late = flight(4, 9, True)
    high_early = flight(4, 3, True)
    mid = flight(2, 1, True)
    for f in (low, high_late, high_early, mid):
        schedule.add_flight(f)
    order = [schedule.next_departure() for _ in range(4)]
    assert order == [high_early, high_late, mid, low]


def test_next_flight_prefers_arrival_on_tie():
    schedule = FlightSchedule()
    dep = flight(2, 0, True)
    arr = flight(2, 5, False)
    schedule.add_flight(dep)
    schedule.add_flight(arr)
    assert schedule.next_flight() is arr
    assert schedule.next_flight() is dep


def test_next_flight_prefers_higher_departure():
    schedule = FlightSchedule()
    dep = flight(4, 0, True)
    arr = flight(1, 0, False)
    schedule.add_flight(arr)
    schedule.add_flight(dep)
    assert schedule.next_flight() is dep
    assert len(schedule) == 1


def test_drains_all_flights():
    schedule = FlightSchedule()
    flights = [flight(p, p, p % 2 == 0) for p in range(1, 5)]
    for f in flights:
        schedule.add_flight(f)
    drained = []
    while not schedule.is_empty():
        drained.append(schedule.next_flight())
    assert sorted(f.number for f in drained) == sorted(f.number for f in flights)