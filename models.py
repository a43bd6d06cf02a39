from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    ADMIN = "admin"
    PROVIDER = "provider"
    STUDENT = "student"


class EventStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class EventDraft:
    """Validated form input for a new event, before the engine assigns identity."""
    title: str
    type: str  # 'webinar', 'seminar' or 'course'
    description: str
    category: str
    occurs_at: datetime
    duration: str
    price: float
    max_participants: int
    requirements: str = ""
    image: str = ""


@dataclass(frozen=True)
class Event:
    id: int
    title: str
    type: str
    description: str
    category: str
    provider: str
    provider_email: str
    occurs_at: datetime
    duration: str  # free-text label, never compared
    price: float
    max_participants: int
    current_participants: int = 0
    status: EventStatus = EventStatus.PENDING
    provider_phone: str = ""
    requirements: str = ""
    image: str = ""
    created_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    password: str
    role: Role
    organization: str = ""
    phone: Optional[str] = None  # providers only
    description: Optional[str] = None  # providers only
