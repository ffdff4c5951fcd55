"""Aircraft state: flight phase, speed and timing."""

from __future__ import annotations

import random
from typing import Protocol

from .fleet import airline_code

TAKEOFF_PHASES = ("At Gate", "Taxi", "Takeoff Roll", "Climb", "Departure")
LANDING_PHASES = ("Holding", "Approach", "Land", "Taxi", "At Gate")

# Nominal speed band (km/h) per phase, and how far outside the band a
# randomly chosen speed may stray.
LANDING_SPEEDS = {
    "Holding": (400, 600),
    "Approach": (240, 290),
    "Land": (30, 240),
    "Taxi": (15, 30),
    "At Gate": (0, 5),
}
TAKEOFF_SPEEDS = {
    "At Gate": (0, 5),
    "Taxi": (15, 30),
    "Takeoff Roll": (0, 290),
    "Climb": (250, 463),
    "Departure": (800, 900),
}
LANDING_SPREAD = 25
TAKEOFF_SPREAD = 5

DEFAULT_PHASE_DURATION = 2.0


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Aircraft:
    """A single flight moving through its takeoff or landing phases."""

    def __init__(
        self,
        number: int,
        airline: str,
        aircraft_type: str,
        status: str,
        direction: str,
        takeoff: bool,
        arrival_time: float,
        rng: RandomSource | None = None,
    ) -> None:
        self.number = number
        self.airline = airline
        self.type = aircraft_type
        self.status = status
        self.phase = status
        self.direction = direction
        self.takeoff = takeoff
        self.arrival_time = arrival_time
        self.schedule_time = 0.0
        self.wait_time = 0.0
        self.priority = -1
        self.avn = False
        self.phase_time = 0.0
        self.phase_duration = DEFAULT_PHASE_DURATION
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self.speed = 0
        self.set_speed()

    @property
    def id(self) -> str:
        """Alphanumeric identifier: airline code followed by the aircraft number."""
        return f"{airline_code(self.airline)}{self.number}"

    def set_speed(self) -> None:
        """Pick a speed below, within or above the current phase's nominal band."""
        if self.takeoff:
            low, high = TAKEOFF_SPEEDS.get(self.phase, (0, 0))
            spread = TAKEOFF_SPREAD
        else:
            low, high = LANDING_SPEEDS.get(self.phase, (0, 0))
            spread = LANDING_SPREAD

        option = self._rng.randrange(3)
        if option == 0:
            speed = self._rng.randrange(spread) + (low - spread)
        elif option == 1:
            speed = self._rng.randrange(high - low + 1) + low
        else:
            speed = self._rng.randrange(spread) + (high + 1)
        self.speed = abs(speed)

    def advance_phase(self) -> None:
        """Move to the next phase of the flight and pick a new speed.

        The final phase is kept once reached.
        """
        phases = TAKEOFF_PHASES if self.takeoff else LANDING_PHASES
        if self.phase in phases[:-1]:
            self.phase = phases[phases.index(self.phase) + 1]
        self.status = self.phase
        self.set_speed()

    def phase_progress(self) -> float:
        """Percentage of the current phase that has elapsed."""
        return self.phase_time / self.phase_duration * 100

    def __repr__(self) -> str:
        return f"Aircraft({self.id!r}, phase={self.phase!r}, speed={self.speed})"