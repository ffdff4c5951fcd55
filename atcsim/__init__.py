"""Air traffic control simulation: airlines, aircraft, runways, scheduling and violation notices."""

__version__ = "0.1.0"