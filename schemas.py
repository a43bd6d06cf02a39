from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from models import EventDraft, EventStatus
from utils import combine_date_time
from queries import EVENT_CATEGORIES

REQUIRED_MESSAGES = {
    "title": "Title is required",
    "description": "Description is required",
    "category": "Category is required",
    "date": "Date is required",
    "time": "Time is required",
    "duration": "Duration is required",
    "image": "Image URL is required",
}


class EventForm(BaseModel):
    title: str
    type: Literal["webinar", "seminar", "course"]
    description: str
    category: str
    date: str
    time: str
    duration: str
    price: float = Field(gt=0)
    max_participants: int = Field(gt=0)
    requirements: str = ""
    image: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Kubernetes in Production",
                "type": "webinar",
                "description": "Running and scaling clusters safely.",
                "category": "DevOps",
                "date": "2030-05-01",
                "time": "10:00",
                "duration": "3 hours",
                "price": 59,
                "max_participants": 40,
                "requirements": "Docker basics",
                "image": "https://example.com/k8s.png",
            }
        }
    )

    @field_validator("title", "description", "category", "date", "time", "duration", "image")
    @classmethod
    def not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(REQUIRED_MESSAGES[info.field_name])
        return value.strip()

    @field_validator("category")
    @classmethod
    def known_category(cls, value: str) -> str:
        if value not in EVENT_CATEGORIES:
            raise ValueError("Unknown category")
        return value

    @model_validator(mode="after")
    def parseable_schedule(self):
        try:
            occurs_at = combine_date_time(self.date, self.time)
        except ValueError:
            raise ValueError("Invalid date format")
        # Stored times are naive local time; offsets cannot be compared against them.
        if occurs_at.tzinfo is not None:
            raise ValueError("Invalid date format")
        return self

    @property
    def occurs_at(self) -> datetime:
        return combine_date_time(self.date, self.time)

    def to_draft(self) -> EventDraft:
        return EventDraft(
            title=self.title,
            type=self.type,
            description=self.description,
            category=self.category,
            occurs_at=self.occurs_at,
            duration=self.duration,
            price=self.price,
            max_participants=self.max_participants,
            requirements=self.requirements,
            image=self.image,
        )


class LoginRequest(BaseModel):
    email: str
    password: str


class EventOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    type: str
    description: str
    category: str
    provider: str
    provider_email: str
    provider_phone: str
    occurs_at: datetime
    duration: str
    price: float
    max_participants: int
    current_participants: int
    status: EventStatus
    requirements: str
    image: str
    created_at: datetime


class EventDetailOut(EventOut):
    label: str
    is_expired: bool
    is_full: bool
    can_enroll: bool


class ProviderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    organization: str
    phone: str | None = None
    description: str | None = None
