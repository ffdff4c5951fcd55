"""Runways shared between aircraft threads."""

from __future__ import annotations

import threading

from .aircraft import Aircraft


class Runway:
    """A runway: who is using it, guarded by a usage lock and a view lock.

    ``lock`` serialises aircraft using the runway; ``view_lock`` protects the
    occupant reference while it is read for display.
    """

    def __init__(self, ident: str) -> None:
        self.id = ident
        self.in_use = False
        self.aircraft: Aircraft | None = None
        self.lock = threading.Lock()
        self.view_lock = threading.Lock()

    def occupy(self, aircraft: Aircraft) -> Aircraft | None:
        """Mark the runway as used by ``aircraft``; return any occupant it displaced."""
        with self.view_lock:
            previous = self.aircraft if self.in_use else None
            self.in_use = True
            self.aircraft = aircraft
        return previous

    def release(self) -> Aircraft | None:
        """Free the runway and return the aircraft that was using it."""
        with self.view_lock:
            previous = self.aircraft
            self.in_use = False
            self.aircraft = None
        return previous