"""The list of stored points with edit and delete controls."""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass
from datetime import datetime

from pointmap.actions import PointActions
from pointmap.form import EditSession
from pointmap.types import MapPoint


@dataclass(frozen=True)
class PointListEntry:
    """One row of the point list."""

    id: uuid.UUID
    lat: float
    lng: float
    description: str
    updated_at: datetime

    @property
    def key(self) -> tuple[uuid.UUID, datetime]:
        """Identity of the row; changes whenever the point is modified."""
        return (self.id, self.updated_at)


class PointList:
    """Shows every stored point and starts edits or deletions."""

    def __init__(self, actions: PointActions, session: EditSession) -> None:
        self.actions = actions
        self.session = session

    def entries(self) -> list[PointListEntry]:
        """Rows for all stored points, in order."""
        return [
            PointListEntry(p.id, p.lat, p.lng, p.description, p.updated_at)
            for p in self.actions.points_list()
        ]

    def edit(self, point: MapPoint) -> None:
        """Load ``point`` into the form for editing."""
        self.actions.set_current_point(copy.deepcopy(point))
        self.session.start(point.id)

    def delete(self, point_id: uuid.UUID) -> None:
        """Remove the point with ``point_id``."""
        self.actions.delete_point(point_id)