# ABOUTME: Platform location service abstraction for the "locate me" flow.
# ABOUTME: Wraps a one-shot position reading, or its failure, reported by the viewer's browser.

from typing import Protocol

from src.models import Coordinate


class LocationUnavailable(Exception):
    """The location service refused or could not produce a position."""


class LocationService(Protocol):
    async def current_position(self) -> Coordinate: ...


class BrowserPosition:
    """A position reading the browser already took and forwarded to the server."""

    def __init__(self, latitude: float, longitude: float):
        self.coordinate = Coordinate(latitude=latitude, longitude=longitude)

    async def current_position(self) -> Coordinate:
        return self.coordinate


class BrowserPositionError:
    """The browser reported that the position reading failed (e.g. permission denied)."""

    def __init__(self, reason: str = "denied"):
        self.reason = reason

    async def current_position(self) -> Coordinate:
        raise LocationUnavailable(self.reason)
