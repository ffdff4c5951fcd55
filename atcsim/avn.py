"""Airspace violation notices (AVNs): detection, recording and reading back."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import NamedTuple

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DUE_DATE_FORMAT = "%Y-%m-%d"
DUE_DAYS = 3
SURCHARGE = 1.15
UNPAID = "Unpaid"

BASE_FINES = {
    "Commercial": 500000,
    "Cargo": 700000,
}

# Per phase: the check that a speed is acceptable, and the allowed speed as
# written into a notice.
_SPEED_LIMITS: dict[str, tuple[Callable[[int], bool], str]] = {
    "At Gate": (lambda speed: speed <= 10, "10"),
    "Taxi": (lambda speed: speed <= 30, "30"),
    "Takeoff Roll": (lambda speed: speed <= 290, "290"),
    "Climb": (lambda speed: speed <= 463, "463"),
    "Departure": (lambda speed: 800 <= speed <= 900, "800-900"),
    "Holding": (lambda speed: speed < 600, "600"),
    "Approach": (lambda speed: 240 <= speed <= 290, "240-290"),
    "Landing": (lambda speed: 30 <= speed <= 240, "30-240"),
}

_ENTRY_LINES = 10


class AVNMessage(NamedTuple):
    """A speed report for one aircraft."""

    airline: str
    flight_id: str
    type: str
    speed: int
    phase: str


@dataclass
class AVNEntry:
    """One recorded violation notice, as stored in an airline's notice file."""

    avn_id: str
    airline: str
    flight_id: str
    type: str
    speed: str
    allowed_speed: str
    date: str
    due_date: str
    fine: str
    status: str

    def lines(self) -> list[str]:
        """The entry's fields in file order."""
        return [
            self.avn_id,
            self.airline,
            self.flight_id,
            self.type,
            self.speed,
            self.allowed_speed,
            self.date,
            self.due_date,
            self.fine,
            self.status,
        ]

    def render(self) -> str:
        """The entry as a block of lines followed by a blank line."""
        return "\n".join(self.lines()) + "\n\n"


def parse_message(message: str) -> AVNMessage:
    """Parse an ``airline/id/type/speed/phase`` report.

    Raises ValueError if fields are missing or the speed is not an integer.
    """
    fields = message.rstrip("\n").split("/")
    if len(fields) < 5:
        raise ValueError(f"malformed AVN message: {message!r}")
    airline, flight_id, aircraft_type, speed, phase = fields[:5]
    try:
        speed_value = int(speed)
    except ValueError:
        raise ValueError(f"invalid speed in AVN message: {speed!r}") from None
    return AVNMessage(airline, flight_id, aircraft_type, speed_value, phase)


def find_violation(phase: str, speed: int) -> str | None:
    """Return the allowed speed if ``speed`` breaks the limit for ``phase``, else None."""
    limit = _SPEED_LIMITS.get(phase)
    if limit is None:
        return None
    within, allowed = limit
    return None if within(speed) else allowed


def fine_amount(aircraft_type: str) -> float:
    """Fine for a violation by an aircraft of the given type, surcharge included."""
    return BASE_FINES.get(aircraft_type, 0) * SURCHARGE


def read_entries(path: str | Path) -> list[AVNEntry]:
    """Read every notice stored in a notice file.

    Raises FileNotFoundError if the file is missing and ValueError if a record
    does not hold exactly the expected fields.
    """
    text = Path(path).read_text(encoding="utf-8")
    entries: list[AVNEntry] = []
    for block in text.split("\n\n"):
        lines = [line for line in block.split("\n") if line]
        if not lines:
            continue
        if len(lines) != _ENTRY_LINES:
            raise ValueError(f"malformed AVN record in {path}: {lines!r}")
        entries.append(AVNEntry(*lines))
    return entries


class AVNChecker:
    """Checks speed reports and appends notices to per-airline files."""

    def __init__(
        self,
        directory: str | Path = ".",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.directory = Path(directory)
        self._clock = clock if clock is not None else datetime.now
        self.next_id = 0

    def notice_path(self, airline: str) -> Path:
        """File holding the notices of ``airline``."""
        return self.directory / f"{airline}.txt"

    def add_notice(self, fields: AVNMessage, allowed: str) -> AVNEntry:
        """Record a violation notice for the reported aircraft and return it."""
        issued = self._clock()
        entry = AVNEntry(
            avn_id=str(self.next_id),
            airline=fields.airline,
            flight_id=fields.flight_id,
            type=fields.type,
            speed=str(fields.speed),
            allowed_speed=allowed,
            date=issued.strftime(DATE_FORMAT),
            due_date=(issued + timedelta(days=DUE_DAYS)).strftime(DUE_DATE_FORMAT),
            fine=f"{fine_amount(fields.type):g}",
            status=UNPAID,
        )
        self.next_id += 1
        with self.notice_path(fields.airline).open("a", encoding="utf-8") as handle:
            handle.write(entry.render())
        return entry

    def check(self, message: str) -> AVNEntry | None:
        """Check one report; record and return a notice if it is a violation."""
        fields = parse_message(message)
        allowed = find_violation(fields.phase, fields.speed)
        if allowed is None:
            return None
        return self.add_notice(fields, allowed)

    def run(self, messages: Iterable[str]) -> list[AVNEntry]:
        """Check every report in turn and return the notices issued."""
        return [entry for entry in map(self.check, messages) if entry is not None]