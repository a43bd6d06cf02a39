from dataclasses import replace
import pytest
from models import EventStatus
from store import EntityStore
from fixtures import load_fixtures, SAMPLE_EVENTS


@pytest.fixture
def store():
    return load_fixtures(EntityStore())


def test_fixtures_loaded_in_order(store):
    assert [e.id for e in store.list_events()] == [1, 2, 3]
    assert [u.email for u in store.list_users()] == [
        "admin@itplatform.com",
        "contact@techacademypro.com",
        "info@cloudmasters.com",
        "student@example.com",
    ]
    assert store.current_user is None


def test_get_event_by_id(store):
    assert store.get_event(2).title == "AWS Cloud Architecture"
    assert store.get_event(99) is None


def test_replace_event_keeps_position(store):
    updated = replace(store.get_event(2), status=EventStatus.REJECTED)
    assert store.replace_event(updated) is True
    assert [e.id for e in store.list_events()] == [1, 2, 3]
    assert store.get_event(2).status == EventStatus.REJECTED


def test_replace_missing_event_is_noop(store):
    before = store.list_events()
    ghost = replace(SAMPLE_EVENTS[0], id=404)
    assert store.replace_event(ghost) is False
    assert store.list_events() == before


def test_list_events_returns_copy(store):
    events = store.list_events()
    events.clear()
    assert len(store.list_events()) == 3


def test_session_set_and_clear(store):
    store.set_current_user(store.get_user(1))
    assert store.current_user.name == "Admin User"
    store.clear_current_user()
    assert store.current_user is None
