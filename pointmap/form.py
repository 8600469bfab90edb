"""The form used to add a new point or edit an existing one."""

from __future__ import annotations

import math
import uuid
from typing import Callable

from pointmap.actions import PointActions


def _parse_float(text: str) -> float | None:
    """Parse a strict decimal float; ``None`` if ``text`` is not one."""
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


class EditSession:
    """Whether a stored point is being edited, and which one."""

    def __init__(self) -> None:
        self.is_editing = False
        self.editing_id: uuid.UUID | None = None
        self._listeners: list[Callable[[], None]] = []

    def _watch(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    def start(self, point_id: uuid.UUID) -> None:
        """Begin editing the point with ``point_id``."""
        self.is_editing = True
        self.editing_id = point_id
        self._changed()

    def stop(self) -> None:
        """Leave editing mode."""
        self.is_editing = False
        self.editing_id = None
        self._changed()


class PointForm:
    """Latitude, longitude and description inputs with save and cancel."""

    def __init__(self, actions: PointActions, session: EditSession) -> None:
        self.actions = actions
        self.session = session
        self.description = ""
        actions.store.subscribe(lambda _state: self.sync())
        session._watch(self.sync)

    def sync(self) -> None:
        """While editing, copy the current point's description into the form."""
        current = self.actions.current_point()
        if current is not None and self.session.is_editing:
            self.description = current.description

    def save(self) -> None:
        """Add the current point, or store the edits to the point being edited."""
        current = self.actions.current_point()
        if current is None:
            return
        description = self.description
        if self.session.is_editing:
            point_id = self.session.editing_id
            if point_id is not None:
                self.actions.update_point(point_id, current.lat, current.lng, description)
                self.session.stop()
        else:
            self.actions.add_point(current.lat, current.lng, description)
        self.description = ""

    def cancel(self) -> None:
        """Abandon editing and clear the form."""
        self.session.stop()
        self.description = ""
        self.actions.clear_current_point()

    def input_description(self, value: str) -> None:
        """Handle text typed into the description field."""
        self.description = value
        self.actions.update_current_point_description(value)

    def input_lat(self, text: str) -> None:
        """Handle text typed into the latitude field; unparsable text is ignored."""
        value = _parse_float(text)
        if value is not None:
            self.actions.update_current_point_lat(value)

    def input_lng(self, text: str) -> None:
        """Handle text typed into the longitude field; unparsable text is ignored."""
        value = _parse_float(text)
        if value is not None:
            self.actions.update_current_point_lng(value)

    def lat_value(self) -> float:
        """Value shown in the latitude field."""
        current = self.actions.current_point()
        return current.lat if current is not None else 0.0

    def lng_value(self) -> float:
        """Value shown in the longitude field."""
        current = self.actions.current_point()
        return current.lng if current is not None else 0.0

    def description_value(self) -> str:
        """Value shown in the description field."""
        if self.description:
            return self.description
        current = self.actions.current_point()
        return current.description if current is not None else ""

    def button_label(self) -> str:
        """Label of the save button."""
        return "Save Changes" if self.session.is_editing else "Add Point"

    def shows_cancel(self) -> bool:
        """Whether the cancel button is visible."""
        return self.session.is_editing


def format_number(value: float) -> str:
    """Format a coordinate the way the views display it."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)