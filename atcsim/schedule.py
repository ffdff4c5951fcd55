"""Priority queues of arriving and departing flights."""

from __future__ import annotations

import heapq
import itertools

from .aircraft import Aircraft


class _FlightQueue:
    """Highest priority first; among equals, earliest arrival time first."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, float, int, Aircraft]] = []
        self._counter = itertools.count()

    def push(self, flight: Aircraft) -> None:
        heapq.heappush(
            self._heap, (-flight.priority, flight.arrival_time, next(self._counter), flight)
        )

    def peek(self) -> Aircraft:
        return self._heap[0][3]

    def pop(self) -> Aircraft | None:
        return heapq.heappop(self._heap)[3] if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)


class FlightSchedule:
    """Arrival and departure queues ordered by priority (4 highest)."""

    def __init__(self) -> None:
        self._arrivals = _FlightQueue()
        self._departures = _FlightQueue()

    def add_flight(self, flight: Aircraft) -> None:
        """Queue a flight as a departure if it takes off, else as an arrival."""
        (self._departures if flight.takeoff else self._arrivals).push(flight)

    def next_departure(self) -> Aircraft | None:
        """Remove and return the next departure, or None if there is none."""
        return self._departures.pop()

    def next_arrival(self) -> Aircraft | None:
        """Remove and return the next arrival, or None if there is none."""
        return self._arrivals.pop()

    def is_empty(self) -> bool:
        return not self._arrivals and not self._departures

    def next_flight(self) -> Aircraft | None:
        """Remove and return the more urgent head; arrivals win ties."""
        if not self._arrivals:
            return self.next_departure()
        if not self._departures:
            return self.next_arrival()
        if self._arrivals.peek().priority >= self._departures.peek().priority:
            return self.next_arrival()
        return self.next_departure()

    def __len__(self) -> int:
        return len(self._arrivals) + len(self._departures)