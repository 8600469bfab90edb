"""Application-wide state and a small observable store around it."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Callable

from pointmap.types import MapPoint


@dataclass
class GlobalState:
    """All points on the map plus the point currently being edited."""

    points_list: list[MapPoint] = field(default_factory=list)
    current_point: MapPoint | None = None


Mutator = Callable[[GlobalState], None]
Listener = Callable[[GlobalState], None]


class Store:
    """Holds a GlobalState, hands out snapshots and notifies listeners on change."""

    def __init__(self, state: GlobalState | None = None) -> None:
        self._state = state if state is not None else GlobalState()
        self._listeners: list[Listener] = []

    def get(self) -> GlobalState:
        """Return an independent snapshot of the current state."""
        return copy.deepcopy(self._state)

    def update(self, mutate: Mutator) -> None:
        """Apply ``mutate`` to the state in place, then notify listeners."""
        mutate(self._state)
        snapshot = self.get()
        for listener in list(self._listeners):
            listener(snapshot)

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        """Register ``callback`` for state changes; return a function that removes it."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe


def default_points() -> list[MapPoint]:
    """The points the application starts with."""
    return [
        MapPoint(50.05679, 6.02565, "BASE 1"),
        MapPoint(49.61098, 6.13353, "BASE 2"),
    ]