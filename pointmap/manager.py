"""Panel combining the point form and the point list."""

from __future__ import annotations

from pointmap.actions import PointActions
from pointmap.form import EditSession, PointForm
from pointmap.point_list import PointList
from pointmap.state import Store


class PointManager:
    """Wires a form and a list to one store through a shared edit session."""

    def __init__(self, store: Store) -> None:
        self.session = EditSession()
        self.actions = PointActions(store)
        self.form = PointForm(self.actions, self.session)
        self.point_list = PointList(self.actions, self.session)

    def title(self) -> str:
        """Heading of the panel."""
        return "Edit Point" if self.session.is_editing else "Add Point to Map"