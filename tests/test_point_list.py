import uuid

import pytest

from pointmap.actions import PointActions
from pointmap.form import EditSession
from pointmap.point_list import PointList
from pointmap.state import GlobalState, Store, default_points


@pytest.fixture
def parts():
    store = Store(GlobalState(points_list=default_points()))
    actions = PointActions(store)
    session = EditSession()
    return actions, session, PointList(actions, session)


def test_entries_follow_points(parts):
    actions, _, plist = parts
    entries = plist.entries()
    assert [e.description for e in entries] == ["BASE 1", "BASE 2"]
    assert [e.id for e in entries] == [p.id for p in actions.points_list()]


def test_entry_key_combines_id_and_timestamp(parts):
    _, _, plist = parts
    entry = plist.entries()[0]
    assert entry.key == (entry.id, entry.updated_at)


def test_edit_sets_current_point_and_session(parts):
    actions, session, plist = parts
    point = actions.points_list()[1]
    plist.edit(point)
    assert session.is_editing is True
    assert session.editing_id == point.id
    assert actions.current_point().description == "BASE 2"


def test_edit_does_not_alias_stored_point(parts):
    actions, _, plist = parts
    point = actions.points_list()[0]
    plist.edit(point)
    actions.update_current_point_lat(12.5)
    assert actions.points_list()[0].lat == point.lat


def test_delete_removes_point(parts):
    actions, _, plist = parts
    first = plist.entries()[0]
    plist.delete(first.id)
    assert [e.description for e in plist.entries()] == ["BASE 2"]


def test_delete_unknown_id_keeps_list(parts):
    _, _, plist = parts
    plist.delete(uuid.uuid4())
    assert len(plist.entries()) == 2