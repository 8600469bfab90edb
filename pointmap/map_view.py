"""The map: markers for stored points and a highlight for the current one."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime

from pointmap.state import GlobalState, Store
from pointmap.types import MapPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Marker:
    """A pin for a stored point; its popup shows the description."""

    id: uuid.UUID
    lat: float
    lng: float
    description: str
    updated_at: datetime

    @property
    def key(self) -> tuple[uuid.UUID, datetime]:
        """Identity of the marker; changes whenever the point is modified."""
        return (self.id, self.updated_at)


class MapView:
    """Map state derived from a Store, plus click handling."""

    CENTER = (49.74250, 6.10000)
    ZOOM = 8.0
    HEIGHT_PX = 700
    HIGHLIGHT_COLOR = "blue"
    HIGHLIGHT_RADIUS = 200.0

    def __init__(self, store: Store) -> None:
        self.store = store

    def click(self, lat: float, lng: float) -> None:
        """Make the clicked location the current point."""
        logger.debug("click at (%r, %r)", lat, lng)

        def mutate(state: GlobalState) -> None:
            state.current_point = MapPoint(lat, lng, "")

        self.store.update(mutate)

    def markers(self) -> list[Marker]:
        """Markers for all stored points, in order."""
        return [
            Marker(p.id, p.lat, p.lng, p.description, p.updated_at)
            for p in self.store.get().points_list
        ]

    def highlight(self) -> tuple[float, float] | None:
        """Centre of the circle drawn around the current point, if any."""
        current = self.store.get().current_point
        if current is None:
            return None
        return (current.lat, current.lng)