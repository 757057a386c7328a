from __future__ import annotations

from .models import Location


class UnknownLocationError(ValueError):
    """Raised when a route query names a location absent from the current graph."""

    def __init__(self, location: Location):
        self.location = location
        super().__init__(f"Unknown location '{location}': not present in the initialized graph")
