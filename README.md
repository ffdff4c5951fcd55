# atcsim

A small air traffic control simulation. Airlines generate aircraft, a
priority-ordered flight schedule queues arrivals and departures, and each
aircraft takes one of three runways (A, B, C) and steps through its flight
phases: holding, approach, land, taxi and at gate for arrivals; at gate,
taxi, takeoff roll, climb and departure for departures. At every phase the
aircraft picks a speed that may fall below, within or above the nominal band
for that phase, and the speed is reported. An airspace violation checker
appends a notice (AVN) to a per-airline file whenever a reported speed breaks
the limit for its phase.

## Installation

```
pip install .
```

## Running the simulation

```
atcsim [--directory DIR] [--speed FACTOR] [--seed N]
```

- `--directory` — where notice files are written (default: the current
  directory; created if missing).
- `--speed` — how many times faster than real time to run (default `1.0`,
  must be positive).
- `--seed` — seed for the random aircraft speeds.

The command queues the sample flights, releases each one when its scheduled
time comes, runs each released flight on a runway in its own thread, and
prints every runway assignment, phase change and speed as it happens.
Violation notices go to `<airline>.txt` in the chosen directory.

## Modules

- `atcsim.fleet` — the registry of airlines (`AIRLINES`, `AirlineInfo`) and
  `airline_code(name)`, which gives an airline's call-sign prefix.
- `atcsim.aircraft` — `Aircraft`, with `id`, `set_speed()`,
  `advance_phase()` and `phase_progress()`.
- `atcsim.airline` — `Airline`, a factory with `generate_aircraft()`,
  `aircraft_available()`, `return_aircraft()` and `add_fine()`.
- `atcsim.schedule` — `FlightSchedule`: arrival and departure queues ordered
  by priority (highest first, then earliest arrival time), with
  `add_flight()`, `next_arrival()`, `next_departure()`, `next_flight()`
  (arrivals win ties) and `is_empty()`.
- `atcsim.runway` — `Runway`, with `occupy()` and `release()` and the locks
  that guard it.
- `atcsim.avn` — violation checking: `parse_message()`, `find_violation()`,
  `fine_amount()`, `read_entries()`, `AVNEntry` and `AVNChecker`
  (`check()`, `run()`, `add_notice()`).
- `atcsim.layout` — screen geometry of the airfield: `get_start_end()`,
  `get_current()` and `aircraft_position()`.
- `atcsim.orchestrator` — `Orchestrator`, which owns the runways, airlines
  and schedule (`add_flights()`, `schedule_runways()`, `use_runway()`,
  `check_fines()`, `fine_airline()`, `remove_aircraft()`,
  `proceed_simulation()`), and `main()`, the command above.

## Using the pieces

```python
from atcsim.airline import Airline
from atcsim.schedule import FlightSchedule
from atcsim.avn import find_violation, fine_amount

pia = Airline("PIA", "Commercial", 6, 0, 8)
flight = pia.generate_aircraft("At Gate", "East", True, 2)
flight.priority = 1

schedule = FlightSchedule()
schedule.add_flight(flight)
next_up = schedule.next_flight()

print(find_violation("Taxi", 45))   # "30": the allowed limit, or None if within it
print(fine_amount("Cargo"))         # base fine including the 15% surcharge
```

Each notice records its number, airline, flight id, aircraft type, speed,
allowed speed, issue time, a due date three days later, the fine and the
status `Unpaid`. Read the notices issued to an airline with
`atcsim.avn.read_entries("PIA.txt")`.

## What it does not do

There is no graphical display. `atcsim.layout` computes where an aircraft
would be drawn on its runway, but nothing draws the airfield, and there is no
window for an airline to log in and browse its notices; use `read_entries()`
for that. Notices are never marked as paid.

## Tests

```
pip install .[test]
pytest
```