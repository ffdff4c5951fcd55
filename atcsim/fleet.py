"""Static registry of the airlines that operate at the airport."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AirlineInfo:
    """Registry entry for an airline: call-sign prefix, kind of traffic and fleet sizes."""

    code: str
    type: str
    aircraft: int
    flights: int


AIRLINES: dict[str, AirlineInfo] = {
    "PIA": AirlineInfo("PIA", "Commercial", 6, 4),
    "Airblue": AirlineInfo("ABL", "Commercial", 4, 4),
    "FedEx": AirlineInfo("FEX", "Cargo", 3, 2),
    "Pakistan Airforce": AirlineInfo("PAF", "Military", 2, 1),
    "BlueDart": AirlineInfo("BDA", "Cargo", 2, 2),
    "AghaKhan Air Ambulance": AirlineInfo("AAA", "Medical", 2, 1),
}


def airline_code(name: str) -> str:
    """Return the call-sign prefix of the named airline.

    Raises KeyError for an airline that is not registered.
    """
    try:
        return AIRLINES[name].code
    except KeyError:
        raise KeyError(f"unknown airline: {name!r}") from None