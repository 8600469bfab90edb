from pointmap.state import GlobalState, Store, default_points
from pointmap.types import MapPoint


def test_default_points_match_bases():
    points = default_points()
    assert [p.description for p in points] == ["BASE 1", "BASE 2"]
    assert (points[0].lat, points[0].lng) == (50.05679, 6.02565)
    assert (points[1].lat, points[1].lng) == (49.61098, 6.13353)
    assert points[0].id != points[1].id


def test_default_state_is_empty():
    state = Store().get()
    assert state.points_list == []
    assert state.current_point is None


def test_update_changes_state():
    store = Store()
    point = MapPoint(1.0, 2.0, "x")
    store.update(lambda s: s.points_list.append(point))
    assert [p.id for p in store.get().points_list] == [point.id]


def test_get_returns_independent_snapshot():
    store = Store(GlobalState(points_list=default_points()))
    snapshot = store.get()
    snapshot.points_list.clear()
    assert len(store.get().points_list) == 2


def test_subscribe_and_unsubscribe():
    store = Store()
    seen = []
    unsubscribe = store.subscribe(lambda s: seen.append(s.current_point))
    point = MapPoint(5.0, 6.0, "here")

    def set_current(state):
        state.current_point = point

    store.update(set_current)
    assert len(seen) == 1
    assert seen[0].id == point.id

    unsubscribe()
    store.update(lambda s: None)
    assert len(seen) == 1