import random

import pytest

from atcsim.airline import Airline


def make_airline(name="PIA", deployed=0, number=6, flights=8):
    return Airline(name, "Commercial", number, deployed, flights, rng=random.Random(1))


def test_generate_numbers_sequentially():
    airline = make_airline()
    first = airline.generate_aircraft("At Gate", "East", True, 2)
    second = airline.generate_aircraft("Holding", "North", False, 5)
    assert first.id == "PIA0"
    assert second.id == "PIA1"
    assert airline.aircraft_deployed == 2


def test_generated_aircraft_carries_arguments():
    airline = make_airline()
    plane = airline.generate_aircraft("Holding", "North", False, 5)
    assert plane.airline == "PIA"
    assert plane.type == "Commercial"
    assert plane.phase == "Holding"
    assert plane.direction == "North"
    assert plane.takeoff is False
    assert plane.arrival_time == 5


def test_return_aircraft_frees_slot():
    airline = make_airline()
    plane = airline.generate_aircraft("At Gate", "East", True, 2)
    airline.return_aircraft(plane)
    assert airline.aircraft_deployed == 0


def test_return_wrong_airline_raises():
    pia = make_airline()
    other = make_airline(name="FedEx")
    plane = other.generate_aircraft("At Gate", "West", True, 0)
    with pytest.raises(ValueError):
        pia.return_aircraft(plane)
    assert pia.aircraft_deployed == 0


def test_return_none_raises():
    with pytest.raises(ValueError):
        make_airline().return_aircraft(None)


def test_add_fine_ignores_non_positive():
    airline = make_airline()
    airline.add_fine(1000)
    airline.add_fine(0)
    airline.add_fine(-50)
    airline.add_fine(1000)
    assert airline.fines_collected == 2000


@pytest.mark.parametrize(
    "deployed, number, flights, expected",
    [
        (0, 6, 8, False),
        (9, 20, 8, True),
        (6, 6, 8, True),
        (3, 6, 3, False),
    ],
)
def test_aircraft_available(deployed, number, flights, expected):
    airline = make_airline(deployed=deployed, number=number, flights=flights)
    assert airline.aircraft_available() is expected