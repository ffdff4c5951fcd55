"""Air traffic control: scheduling flights onto runways and reporting their speeds."""

from __future__ import annotations

import argparse
import queue
import random
import sys
import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .aircraft import DEFAULT_PHASE_DURATION, Aircraft, RandomSource
from .airline import Airline
from .avn import AVNChecker
from .fleet import AIRLINES
from .runway import Runway
from .schedule import FlightSchedule

FINE = 1000
RUNWAY_IDS = "ABC"
HEAVY_TYPES = frozenset({"Military", "Cargo"})
NORTH_SOUTH = frozenset({"North", "South"})


class Orchestrator:
    """Owns the runways, airlines and flight schedule, and runs flights through them.

    ``notify`` receives each speed report (``airline/id/type/speed/status``),
    ``clock`` and ``sleep`` measure and pass time, and ``start_delay`` is how
    long an aircraft waits before asking for a runway.
    """

    def __init__(
        self,
        notify: Callable[[str], object] | None = None,
        out: TextIO | None = None,
        rng: RandomSource | None = None,
        *,
        start_delay: float = 1.0,
        phase_duration: float = DEFAULT_PHASE_DURATION,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], object] = time.sleep,
        poll_interval: float = 0.01,
    ) -> None:
        self.runways = [Runway(ident) for ident in RUNWAY_IDS]
        self.airlines = [
            Airline(name, info.type, info.aircraft, 0, 8, rng=rng)
            for name, info in AIRLINES.items()
        ]
        self.pending: list[Aircraft] = []
        self.schedule = FlightSchedule()
        self.notify = notify
        self.out = out
        self.start_delay = start_delay
        self.phase_duration = phase_duration
        self._clock = clock
        self._sleep = sleep
        self._poll_interval = poll_interval

        cargo = next((airline for airline in self.airlines if airline.type == "Cargo"), None)
        if cargo is not None:
            cargo.generate_aircraft("At Gate", "West", True, 0)

    def _say(self, text: str) -> None:
        print(text, file=self.out, flush=True)

    def _airline(self, name: str) -> Airline | None:
        return next((airline for airline in self.airlines if airline.name == name), None)

    def add_flights(self) -> list[Aircraft]:
        """Queue the sample flights and return them."""
        samples = [
            (0, "At Gate", "East", True, 2, "Added departure"),
            (1, "Holding", "North", False, 2, "Added arrival"),
            (2, "Holding", "South", False, 5, "Added cargo arrival"),
            (3, "At Gate", "West", True, 5, "Added military departure"),
            (5, "Holding", "East", True, 5, "Added emergency arrival"),
        ]
        added = []
        for index, status, direction, takeoff, when, label in samples:
            flight = self.airlines[index].generate_aircraft(status, direction, takeoff, when)
            flight.priority = 1
            flight.phase_duration = self.phase_duration
            self.pending.append(flight)
            added.append(flight)
            self._say(
                f"{label}: {flight.id} (Priority: {flight.priority}, "
                f"Schedule Time: {flight.arrival_time})"
            )
        return added

    def check_fines(self, aircraft: Aircraft) -> str:
        """Send the aircraft's speed report to the violation checker and return it."""
        message = (
            f"{aircraft.airline}/{aircraft.id}/{aircraft.type}/"
            f"{aircraft.speed}/{aircraft.status}\n"
        )
        if self.notify is not None:
            self.notify(message)
        return message

    def fine_airline(self, airline: str) -> None:
        """Fine the named airline; unknown names are ignored."""
        found = self._airline(airline)
        if found is not None:
            found.add_fine(FINE)

    def _route(self, aircraft: Aircraft) -> tuple[Runway, str] | None:
        """Runway and final phase for an aircraft ready to start, else None."""
        ready = (aircraft.takeoff and aircraft.status == "At Gate") or (
            not aircraft.takeoff and aircraft.status == "Holding"
        )
        if not ready:
            return None
        if aircraft.type in HEAVY_TYPES:
            return self.runways[2], "Departure" if aircraft.takeoff else "At Gate"
        if aircraft.direction in NORTH_SOUTH or not aircraft.takeoff:
            return self.runways[0], "At Gate"
        return self.runways[1], "Departure"

    def _report(self, aircraft: Aircraft) -> None:
        self._say(f"{aircraft.id} Entering {aircraft.phase} Phase.")
        self._say(f"{aircraft.id} Speed: {aircraft.speed} km/h.")

    def _hold_phase(self, aircraft: Aircraft) -> None:
        start = self._clock()
        while True:
            elapsed = self._clock() - start
            if elapsed >= aircraft.phase_duration:
                break
            aircraft.phase_time = elapsed
            self._sleep(min(self._poll_interval, aircraft.phase_duration - elapsed))

    def use_runway(self, aircraft: Aircraft) -> Runway | None:
        """Run the aircraft through its phases on a runway.

        Returns the runway used, or None if the aircraft was not ready to
        start a takeoff or landing.
        """
        self._sleep(self.start_delay)
        route = self._route(aircraft)
        if route is None:
            return None
        runway, gate = route
        self._say(f">\t{aircraft.id} Waiting to use Runway {runway.id}")
        with runway.lock:
            if not runway.in_use:
                self._say(f">\t{aircraft.id} Started using Runway {runway.id}")
                runway.occupy(aircraft)
                while aircraft.phase != gate:
                    self._report(aircraft)
                    self.check_fines(aircraft)
                    previous = aircraft.phase
                    aircraft.advance_phase()
                    self._hold_phase(aircraft)
                    if aircraft.phase == previous:
                        break
                self.check_fines(aircraft)
                self._report(aircraft)
            runway.release()
            self.remove_aircraft(aircraft)
        return runway

    def remove_aircraft(self, aircraft: Aircraft) -> bool:
        """Return the aircraft to its airline; False if no airline claims it."""
        airline = self._airline(aircraft.airline)
        if airline is None:
            return False
        airline.return_aircraft(aircraft)
        return True

    def schedule_runways(self) -> list[threading.Thread]:
        """Release pending flights as their times come and start each on a runway.

        Returns the threads started, one per flight released.
        """
        threads: list[threading.Thread] = []
        start = self._clock()
        while self.pending:
            elapsed = self._clock() - start
            due = [flight for flight in self.pending if elapsed >= flight.arrival_time]
            for flight in due:
                self.pending.remove(flight)
                self.schedule.add_flight(flight)
                self._say(f"\t<<< Scheduled: {flight.id} at time {elapsed:f} seconds >>>")
                flight.schedule_time = elapsed
                flight.wait_time = elapsed - flight.arrival_time
                next_flight = self.schedule.next_flight()
                if next_flight is None:
                    continue
                thread = threading.Thread(
                    target=self.use_runway, args=(next_flight,), daemon=True
                )
                thread.start()
                threads.append(thread)
            if self.pending and not due:
                self._sleep(self._poll_interval)
        return threads

    def proceed_simulation(self) -> list[threading.Thread]:
        """Queue the sample flights and schedule them; return the runway threads."""
        self.add_flights()
        return self.schedule_runways()


def main(argv: list[str] | None = None) -> int:
    """Run the sample simulation, writing violation notices to a directory."""
    parser = argparse.ArgumentParser(prog="atcsim", description="Air traffic control simulation")
    parser.add_argument("--directory", default=".", help="where notice files are written")
    parser.add_argument(
        "--speed", type=float, default=1.0, help="how many times faster than real time to run"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for aircraft speeds")
    args = parser.parse_args(argv)
    if args.speed <= 0:
        parser.error("--speed must be positive")

    Path(args.directory).mkdir(parents=True, exist_ok=True)
    speed = args.speed

    def scaled_clock() -> float:
        return time.monotonic() * speed

    def scaled_sleep(seconds: float) -> None:
        time.sleep(seconds / speed)

    reports: queue.Queue[str | None] = queue.Queue()
    checker = AVNChecker(args.directory)
    checker_thread = threading.Thread(target=checker.run, args=(iter(reports.get, None),))
    checker_thread.start()

    orchestrator = Orchestrator(
        notify=reports.put,
        out=sys.stdout,
        rng=random.Random(args.seed),
        clock=scaled_clock,
        sleep=scaled_sleep,
    )
    try:
        for thread in orchestrator.proceed_simulation():
            thread.join()
    finally:
        reports.put(None)
        checker_thread.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())