"""Operations that change the point list and the current point."""

from __future__ import annotations

import logging
import uuid

from pointmap.state import GlobalState, Store
from pointmap.types import MapPoint

logger = logging.getLogger(__name__)


class PointActions:
    """High-level edits applied to a Store."""

    def __init__(self, store: Store) -> None:
        self.store = store

    def add_point(self, lat: float, lng: float, description: str) -> None:
        """Append a new point and clear the current point."""
        new_point = MapPoint(lat, lng, description)
        self.store.update(lambda state: state.points_list.append(new_point))
        self.clear_current_point()

    def update_point(
        self, point_id: uuid.UUID, lat: float, lng: float, description: str
    ) -> None:
        """Change the point with ``point_id`` if present, then clear the current point."""
        logger.debug("update_point %r", description)

        def mutate(state: GlobalState) -> None:
            point = next((p for p in state.points_list if p.id == point_id), None)
            if point is not None:
                point.lat = lat
                point.lng = lng
                point.description = description
                point.update_timestamp()

        self.store.update(mutate)
        self.clear_current_point()

    def delete_point(self, point_id: uuid.UUID) -> None:
        """Remove every point with ``point_id``."""

        def mutate(state: GlobalState) -> None:
            state.points_list = [p for p in state.points_list if p.id != point_id]

        self.store.update(mutate)

    def set_current_point(self, point: MapPoint) -> None:
        """Make ``point`` the current point."""

        def mutate(state: GlobalState) -> None:
            state.current_point = point

        self.store.update(mutate)

    def update_current_point_lat(self, lat: float) -> None:
        """Set the current point's latitude, creating a point at (lat, 0) if none."""

        def mutate(state: GlobalState) -> None:
            if state.current_point is not None:
                state.current_point.lat = lat
                state.current_point.update_timestamp()
            else:
                state.current_point = MapPoint(lat, 0.0, "")

        self.store.update(mutate)

    def update_current_point_lng(self, lng: float) -> None:
        """Set the current point's longitude, creating a point at (0, lng) if none."""

        def mutate(state: GlobalState) -> None:
            if state.current_point is not None:
                state.current_point.lng = lng
                state.current_point.update_timestamp()
            else:
                state.current_point = MapPoint(0.0, lng, "")

        self.store.update(mutate)

    def update_current_point_description(self, description: str) -> None:
        """Set the current point's description; does nothing without a current point."""

        def mutate(state: GlobalState) -> None:
            if state.current_point is not None:
                state.current_point.description = description
                state.current_point.update_timestamp()

        self.store.update(mutate)

    def clear_current_point(self) -> None:
        """Forget the current point."""

        def mutate(state: GlobalState) -> None:
            state.current_point = None

        self.store.update(mutate)

    def current_point(self) -> MapPoint | None:
        """A copy of the current point, if any."""
        return self.store.get().current_point

    def points_list(self) -> list[MapPoint]:
        """A copy of all points."""
        return self.store.get().points_list