from pointmap.manager import PointManager
from pointmap.state import GlobalState, Store, default_points


def make_manager():
    return PointManager(Store(GlobalState(points_list=default_points())))


def test_title_in_add_mode():
    assert make_manager().title() == "Add Point to Map"


def test_edit_from_list_switches_form():
    manager = make_manager()
    point = manager.actions.points_list()[0]
    manager.point_list.edit(point)
    assert manager.title() == "Edit Point"
    assert manager.form.button_label() == "Save Changes"
    assert manager.form.description_value() == "BASE 1"


def test_save_edit_returns_to_add_mode():
    manager = make_manager()
    point = manager.actions.points_list()[1]
    manager.point_list.edit(point)
    manager.form.input_description("Renamed")
    manager.form.save()
    assert manager.title() == "Add Point to Map"
    assert [e.description for e in manager.point_list.entries()] == ["BASE 1", "Renamed"]


def test_cancel_returns_to_add_mode():
    manager = make_manager()
    manager.point_list.edit(manager.actions.points_list()[0])
    manager.form.cancel()
    assert manager.title() == "Add Point to Map"
    assert manager.actions.current_point() is None