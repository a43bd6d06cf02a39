import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable
from models import Event, EventDraft, EventStatus, User
from store import EntityStore
import queries

logger = logging.getLogger(__name__)


class EventIdGenerator:
    def __init__(self, clock: Callable[[], datetime], start_after: int = 0):
        """Issue event IDs from the clock in milliseconds, never repeating or going backwards."""
        self.clock = clock
        self.last_id = start_after

    def next_id(self) -> int:
        millis = int(self.clock().timestamp() * 1000)
        self.last_id = max(millis, self.last_id + 1)
        return self.last_id


class EventManager:
    def __init__(self, store: EntityStore, clock: Callable[[], datetime] = datetime.now):
        """Initialize EventManager with a store and a clock."""
        self.store = store
        self.clock = clock
        existing_ids = [e.id for e in store.list_events()]
        self.ids = EventIdGenerator(clock, start_after=max(existing_ids, default=0))

    def create_event(self, draft: EventDraft, creator: User) -> Event:
        """
        Store a new pending event owned by the creator.
        The draft must already be validated; nothing is checked here.
        """
        event = Event(
            id=self.ids.next_id(),
            title=draft.title,
            type=draft.type,
            description=draft.description,
            category=draft.category,
            provider=creator.name,
            provider_email=creator.email,
            provider_phone=creator.phone or "",
            occurs_at=draft.occurs_at,
            duration=draft.duration,
            price=draft.price,
            max_participants=draft.max_participants,
            current_participants=0,
            status=EventStatus.PENDING,
            requirements=draft.requirements,
            image=draft.image,
            created_at=self.clock(),
        )
        self.store.add_event(event)
        logger.info(f"Event {event.id} created by {creator.email}")
        return event

    def set_event_status(self, event_id: int, status: EventStatus):
        """Overwrite an event's status. Any status may follow any other; unknown IDs are ignored."""
        status = EventStatus(status)
        if status not in (EventStatus.APPROVED, EventStatus.REJECTED):
            raise ValueError(f"Cannot move an event to status {status!r}")
        event = self.store.get_event(event_id)
        if event is None:
            logger.info(f"Status change to {status.value} ignored: event {event_id} not found")
            return
        self.store.replace_event(replace(event, status=status))
        logger.info(f"Event {event_id} {event.status.value} -> {status.value}")

    def approve_event(self, event_id: int):
        self.set_event_status(event_id, EventStatus.APPROVED)

    def reject_event(self, event_id: int):
        self.set_event_status(event_id, EventStatus.REJECTED)

    def get_event(self, event_id: int) -> Event | None:
        """Retrieve an event by ID."""
        return self.store.get_event(event_id)

    def list_events(self) -> list[Event]:
        """Retrieve all events."""
        return self.store.list_events()

    def active_events(self, now: datetime | None = None) -> list[Event]:
        return queries.active_events(self.store.list_events(), now if now is not None else self.clock())

    def expired_events(self, now: datetime | None = None) -> list[Event]:
        return queries.expired_events(self.store.list_events(), now if now is not None else self.clock())

    def pending_events(self) -> list[Event]:
        return queries.pending_events(self.store.list_events())
