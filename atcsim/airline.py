"""Airlines: factories that hand out and take back aircraft."""

from __future__ import annotations

from .aircraft import Aircraft, RandomSource


class Airline:
    """Produces aircraft for one airline and collects its fines."""

    def __init__(
        self,
        name: str,
        airline_type: str,
        aircraft_number: int,
        aircraft_deployed: int,
        flights_in_operation: int,
        rng: RandomSource | None = None,
    ) -> None:
        self.name = name
        self.type = airline_type
        self.aircraft_number = aircraft_number
        self.aircraft_deployed = aircraft_deployed
        self.flights_in_operation = flights_in_operation
        self.fines_collected = 0
        self._rng = rng

    def generate_aircraft(
        self, status: str, direction: str, takeoff: bool, schedule_time: float
    ) -> Aircraft:
        """Create a new aircraft numbered after those already deployed."""
        number = self.aircraft_deployed
        self.aircraft_deployed += 1
        return Aircraft(
            number, self.name, self.type, status, direction, takeoff, schedule_time, rng=self._rng
        )

    def aircraft_available(self) -> bool:
        """Whether more aircraft may be created."""
        return (
            self.flights_in_operation < self.aircraft_deployed
            or self.aircraft_number < self.aircraft_deployed + 1
        )

    def return_aircraft(self, aircraft: Aircraft | None) -> None:
        """Take an aircraft back so another may be deployed.

        Raises ValueError if there is no aircraft or it belongs to another airline.
        """
        if aircraft is None or aircraft.airline != self.name:
            raise ValueError(f"aircraft does not belong to {self.name}")
        self.aircraft_deployed -= 1

    def add_fine(self, fine: int) -> None:
        """Record a fine; amounts that are not positive are ignored."""
        if fine > 0:
            self.fines_collected += fine