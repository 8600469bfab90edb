"""The application: point manager beside the map, rendered as text."""

from __future__ import annotations

import argparse

from pointmap.form import format_number
from pointmap.manager import PointManager
from pointmap.map_view import MapView
from pointmap.state import GlobalState, Store, default_points


class App:
    """Owns the store and the two panels that share it."""

    def __init__(self, store: Store | None = None) -> None:
        if store is None:
            store = Store(GlobalState(points_list=default_points(), current_point=None))
        self.store = store
        self.manager = PointManager(store)
        self.map_view = MapView(store)

    def render(self) -> str:
        """A plain-text view of both panels."""
        form = self.manager.form
        lines = [
            self.manager.title(),
            f"Latitude: {format_number(form.lat_value())}",
            f"Longitude: {format_number(form.lng_value())}",
            f"Description: {form.description_value()}",
            f"[{form.button_label()}]" + (" [Cancel]" if form.shows_cancel() else ""),
            "Added Points",
        ]
        for entry in self.manager.point_list.entries():
            lines.append(
                f"- Lat: {format_number(entry.lat)} Lng: {format_number(entry.lng)}"
            )
            lines.append(f"  {entry.description}")
        lat, lng = MapView.CENTER
        lines.append(
            f"Map (center {format_number(lat)}, {format_number(lng)}, "
            f"zoom {format_number(MapView.ZOOM)})"
        )
        for marker in self.map_view.markers():
            lines.append(
                f"  marker {format_number(marker.lat)}, {format_number(marker.lng)}: "
                f"{marker.description}"
            )
        highlight = self.map_view.highlight()
        if highlight is not None:
            lines.append(
                f"  {MapView.HIGHLIGHT_COLOR} circle {format_number(highlight[0])}, "
                f"{format_number(highlight[1])} r={format_number(MapView.HIGHLIGHT_RADIUS)}"
            )
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Start the application with its initial points and print its view."""
    parser = argparse.ArgumentParser(
        prog="pointmap", description="Show the map points and the point editor."
    )
    parser.parse_args(argv)
    print(App().render())
    return 0