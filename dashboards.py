from datetime import datetime
from typing import assert_never
from models import Event, User, Role
from store import EntityStore
from utils import average, percentage
import queries

RECENT_LIMIT = 5


def home_path(role: Role) -> str:
    """Landing page for each role after login."""
    if role is Role.ADMIN:
        return "/admin"
    elif role is Role.PROVIDER:
        return "/provider"
    elif role is Role.STUDENT:
        return "/student"
    else:
        assert_never(role)


def event_summary(event: Event, now: datetime) -> dict:
    return {
        "id": event.id,
        "title": event.title,
        "type": event.type,
        "provider": event.provider,
        "occurs_at": event.occurs_at.isoformat(),
        "status": event.status.value,
        "label": queries.status_label(event, now),
        "participants": f"{event.current_participants}/{event.max_participants}",
    }


def home_summary(events: list[Event], now: datetime) -> dict:
    """Public landing page figures, computed over active events only."""
    active = queries.active_events(events, now)
    return {
        "total_events": len(active),
        "total_providers": len({e.provider for e in active}),
        "total_participants": sum(e.current_participants for e in active),
    }


def admin_overview(events: list[Event], users: list[User], now: datetime) -> dict:
    active = queries.active_events(events, now)
    pending = queries.pending_events(events)
    expired = queries.expired_events(events, now)
    return {
        "total_events": len(events),
        "active_events": len(active),
        "pending_events": len(pending),
        "expired_events": len(expired),
        "total_providers": len(queries.providers(users)),
        "total_participants": sum(e.current_participants for e in active),
        "activity_rate": percentage(len(active), len(events)),
        "recent_events": [event_summary(e, now) for e in events[:RECENT_LIMIT]],
    }


def provider_overview(events: list[Event], provider: User, now: datetime) -> dict:
    mine = queries.events_for_provider(events, provider.email)
    active = queries.active_events(mine, now)
    fill_rates = [e.current_participants / e.max_participants for e in active]
    return {
        "name": provider.name,
        "total_events": len(mine),
        "active_events": len(active),
        "pending_events": len(queries.pending_events(mine)),
        "expired_events": len(queries.expired_events(mine, now)),
        "total_participants": sum(e.current_participants for e in active),
        "total_revenue": sum(e.current_participants * e.price for e in active),
        "approval_rate": percentage(len(active), len(mine)),
        "participation_rate": percentage(sum(fill_rates), len(fill_rates)),
        "recent_events": [event_summary(e, now) for e in mine[:RECENT_LIMIT]],
    }


def category_breakdown(active: list[Event]) -> list[dict]:
    """Count and average price per category, in first-seen order."""
    groups: dict[str, list[Event]] = {}
    for e in active:
        groups.setdefault(e.category, []).append(e)
    return [
        {"category": category, "event_count": len(group), "avg_price": average([e.price for e in group])}
        for category, group in groups.items()
    ]


def provider_breakdown(active: list[Event]) -> list[dict]:
    """Per provider name; contact details come from that provider's first event."""
    groups: dict[str, list[Event]] = {}
    for e in active:
        groups.setdefault(e.provider, []).append(e)
    return [
        {
            "name": name,
            "email": group[0].provider_email,
            "phone": group[0].provider_phone,
            "event_count": len(group),
            "avg_price": average([e.price for e in group]),
        }
        for name, group in groups.items()
    ]


def student_overview(events: list[Event], now: datetime, search_term: str = "", type_filter: str = "all") -> dict:
    active = queries.active_events(events, now)
    found = queries.filter_events(active, search_term, type_filter)
    return {
        "events": [event_summary(e, now) for e in found],
        "categories": list(dict.fromkeys(e.category for e in active)),
        "total_providers": len({e.provider for e in active}),
        "avg_price": average([e.price for e in active]),
        "by_category": category_breakdown(active),
        "by_provider": provider_breakdown(active),
    }


def dashboard_for(principal: User, store: EntityStore, now: datetime) -> dict:
    """Pick the dashboard that matches the principal's role."""
    events = store.list_events()
    role = principal.role
    if role is Role.ADMIN:
        return admin_overview(events, store.list_users(), now)
    elif role is Role.PROVIDER:
        return provider_overview(events, principal, now)
    elif role is Role.STUDENT:
        return student_overview(events, now)
    else:
        assert_never(role)
