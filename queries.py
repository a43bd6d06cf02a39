"""
Read-side derivations over a snapshot of events.

Every function here is pure: the same events, reference time and filter
always give the same result. Results keep the input order.
"""
from datetime import datetime
from typing import Iterable
from models import Event, EventStatus, User, Role

EVENT_TYPES = ("webinar", "seminar", "course")

EVENT_CATEGORIES = (
    "Frontend Development",
    "Backend Development",
    "Full Stack Development",
    "Mobile Development",
    "Cloud Computing",
    "Cybersecurity",
    "Data Science",
    "Machine Learning",
    "DevOps",
    "Database Management",
    "UI/UX Design",
    "Project Management",
    "Agile/Scrum",
    "Other",
)


def is_expired(event: Event, now: datetime) -> bool:
    """An event is expired once its start time is no longer strictly in the future."""
    return not event.occurs_at > now


def active_events(events: Iterable[Event], now: datetime) -> list[Event]:
    """Approved events that have not started yet."""
    return [e for e in events if not is_expired(e, now) and e.status == EventStatus.APPROVED]


def expired_events(events: Iterable[Event], now: datetime) -> list[Event]:
    """Events whose time has passed, whatever their status.

    A pending event in the past shows up here and in ``pending_events``.
    """
    return [e for e in events if is_expired(e, now)]


def pending_events(events: Iterable[Event]) -> list[Event]:
    return [e for e in events if e.status == EventStatus.PENDING]


def filter_events(events: Iterable[Event], search_term: str = "", type_filter: str = "all") -> list[Event]:
    """Case-insensitive search over title, description and provider name, AND an exact type match."""
    term = search_term.lower()
    matches = []
    for e in events:
        matches_search = term in e.title.lower() or term in e.description.lower() or term in e.provider.lower()
        matches_type = type_filter == "all" or e.type == type_filter
        if matches_search and matches_type:
            matches.append(e)
    return matches


def events_for_provider(events: Iterable[Event], email: str) -> list[Event]:
    return [e for e in events if e.provider_email == email]


def providers(users: Iterable[User]) -> list[User]:
    return [u for u in users if u.role == Role.PROVIDER]


def is_full(event: Event) -> bool:
    return event.current_participants >= event.max_participants


def can_enroll(event: Event, now: datetime) -> bool:
    return event.status == EventStatus.APPROVED and not is_expired(event, now) and not is_full(event)


def status_label(event: Event, now: datetime) -> str:
    """Badge text for an event card: EXPIRED wins over the lifecycle status."""
    if is_expired(event, now):
        return "EXPIRED"
    return event.status.value.upper()
