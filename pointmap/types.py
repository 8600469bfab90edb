"""Core data types for points placed on the map."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MapPoint:
    """A named geographic point with a unique id and a last-modified time."""

    lat: float
    lng: float
    description: str = ""
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    updated_at: datetime = field(default_factory=_now)

    def update_timestamp(self) -> None:
        """Mark the point as modified now."""
        self.updated_at = _now()