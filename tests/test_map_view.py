from pointmap.map_view import MapView
from pointmap.state import GlobalState, Store, default_points


def make_view(points=None):
    return MapView(Store(GlobalState(points_list=points or [])))


def test_view_defaults_come_from_source():
    view = make_view()
    assert view.CENTER == (49.74250, 6.10000)
    assert view.ZOOM == 8.0
    assert view.HIGHLIGHT_RADIUS == 200.0
    assert view.highlight() is None


def test_no_highlight_initially():
    assert make_view().highlight() is None


def test_click_sets_current_point():
    view = make_view()
    view.click(48.5, 7.25)
    assert view.highlight() == (48.5, 7.25)
    current = view.store.get().current_point
    assert current.description == ""


def test_click_replaces_previous_point():
    view = make_view()
    view.click(1.0, 2.0)
    view.click(3.0, 4.0)
    assert view.highlight() == (3.0, 4.0)
    assert view.markers() == []


def test_markers_follow_points():
    view = make_view(default_points())
    markers = view.markers()
    assert [m.description for m in markers] == ["BASE 1", "BASE 2"]
    assert (markers[0].lat, markers[0].lng) == (50.05679, 6.02565)
    assert len({m.key for m in markers}) == 2