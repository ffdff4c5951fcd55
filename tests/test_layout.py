import pytest

from atcsim.layout import aircraft_position, get_current, get_start_end


def test_runway_c_path_ignores_direction():
    assert get_start_end("East", "Takeoff Roll", 2) == (235, 100)
    assert get_start_end("North", "Takeoff Roll", 2) == get_start_end("West", "Takeoff Roll", 2)


def test_runway_a_north_matches_runway_c():
    for phase in ("At Gate", "Takeoff Roll", "Climb", "Taxi", "Approach", "Land"):
        assert get_start_end("North", phase, 0) == get_start_end("North", phase, 2)


def test_runway_a_south_values():
    assert get_start_end("South", "Climb", 0) == (350, 450)
    assert get_start_end("South", "Approach", 0) == (450, 350)


def test_runway_b_values():
    assert get_start_end("West", "Climb", 1) == (478, 800)
    assert get_start_end("East", "Approach", 1) == (800, 475)


@pytest.mark.parametrize(
    "direction, phase, runway",
    [
        ("North", "Departure", 2),
        ("North", "Holding", 0),
        ("East", "Climb", 0),
        ("North", "Climb", 1),
    ],
)
def test_unknown_paths_raise(direction, phase, runway):
    with pytest.raises(ValueError):
        get_start_end(direction, phase, runway)


@pytest.mark.parametrize("start, end", [(0, 100), (315, 235), (478, 800), (800, 475), (7, 7)])
def test_get_current_endpoints(start, end):
    assert get_current(start, end, 0.0) == start
    assert get_current(start, end, 1.0) == end


@pytest.mark.parametrize("start, end", [(0, 100), (800, 475)])
def test_get_current_stays_between_endpoints(start, end):
    low, high = sorted((start, end))
    for step in range(11):
        assert low <= get_current(start, end, step / 10) <= high


def test_get_current_is_monotonic_towards_end():
    values = [get_current(450, 350, step / 20) for step in range(21)]
    assert values == sorted(values, reverse=True)


def test_position_runway_a_airborne_and_ground():
    assert aircraft_position(0, "North", "Takeoff Roll", 0.0) == (202, 235)
    assert aircraft_position(0, "North", "Taxi", 1.0) == (182, 235)


def test_position_runway_b_moves_along_x():
    assert aircraft_position(1, "West", "Climb", 1.0) == (800, 340)
    x, y = aircraft_position(1, "East", "At Gate", 0.5)
    assert (x, y) == (225, 360)


def test_position_runway_c_ground_offset():
    airborne = aircraft_position(2, "West", "Land", 0.0)
    ground = aircraft_position(2, "West", "Taxi", 0.0)
    assert airborne[0] == 152
    assert ground[0] == 132


def test_position_unknown_runway_raises():
    with pytest.raises(ValueError):
        aircraft_position(3, "North", "Taxi", 0.0)