"""Screen geometry of the airfield: where an aircraft is drawn on its runway."""

from __future__ import annotations

GROUND_PHASES = frozenset({"At Gate", "Taxi"})

_RUNWAY_C_PATH = {
    "At Gate": (315, 315),
    "Takeoff Roll": (235, 100),
    "Climb": (100, 0),
    "Taxi": (315, 235),
    "Approach": (0, 100),
    "Land": (100, 235),
}

# Start and end coordinates along the runway's axis, keyed by runway index,
# direction and phase.  Runway 2 uses the same path whatever the direction.
_PATHS: dict[tuple[int, str], dict[str, tuple[int, int]]] = {
    (0, "North"): dict(_RUNWAY_C_PATH),
    (0, "South"): {
        "At Gate": (315, 315),
        "Takeoff Roll": (235, 350),
        "Climb": (350, 450),
        "Taxi": (315, 235),
        "Approach": (450, 350),
        "Land": (350, 235),
    },
    (1, "West"): {
        "At Gate": (225, 225),
        "Takeoff Roll": (325, 478),
        "Climb": (478, 800),
        "Taxi": (225, 325),
        "Approach": (0, 193),
        "Land": (193, 325),
    },
    (1, "East"): {
        "At Gate": (225, 225),
        "Takeoff Roll": (325, 192),
        "Climb": (192, 0),
        "Taxi": (225, 325),
        "Approach": (800, 475),
        "Land": (475, 325),
    },
}

# Fixed cross-axis coordinate per runway: (in the air / on the runway, on the ground).
_FIXED_AXIS = {
    0: (202, 182),
    1: (340, 360),
    2: (152, 132),
}


def get_start_end(direction: str, phase: str, runway: int) -> tuple[int, int]:
    """Return the start and end coordinate of ``phase`` along ``runway``'s axis.

    Raises ValueError for a runway, direction or phase that has no path.
    """
    if runway == 2:
        path = _RUNWAY_C_PATH
    else:
        path = _PATHS.get((runway, direction))
        if path is None:
            raise ValueError(f"no path on runway {runway} heading {direction!r}")
    try:
        return path[phase]
    except KeyError:
        raise ValueError(f"no path for phase {phase!r} on runway {runway}") from None


def get_current(start: int, end: int, progress: float) -> int:
    """Interpolate from ``start`` towards ``end`` by the fraction ``progress``."""
    if end > start:
        return start + int(progress * (end - start))
    return start - int(progress * (start - end))


def aircraft_position(runway: int, direction: str, phase: str, progress: float) -> tuple[int, int]:
    """Screen ``(x, y)`` of an aircraft ``progress`` (0 to 1) of the way through ``phase``."""
    if runway not in _FIXED_AXIS:
        raise ValueError(f"unknown runway index: {runway}")
    start, end = get_start_end(direction, phase, runway)
    along = get_current(start, end, progress)
    airborne, ground = _FIXED_AXIS[runway]
    fixed = ground if phase in GROUND_PHASES else airborne
    if runway == 1:
        return along, fixed
    return fixed, along