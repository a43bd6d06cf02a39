from datetime import datetime
from models import Event, EventStatus, User, Role
from store import EntityStore

SAMPLE_EVENTS = [
    Event(
        id=1,
        title="React Advanced Patterns",
        type="webinar",
        description="Learn advanced React patterns and best practices for building scalable applications.",
        category="Frontend Development",
        provider="TechAcademy Pro",
        provider_email="contact@techacademypro.com",
        provider_phone="+1-555-0123",
        occurs_at=datetime(2024, 2, 15, 14, 0),
        duration="2 hours",
        price=49,
        max_participants=50,
        current_participants=23,
        status=EventStatus.APPROVED,
        requirements="Basic React knowledge",
        image="https://images.unsplash.com/photo-1633356122544-f134324a6cee?w=400",
        created_at=datetime(2024, 1, 15, 10, 0),
    ),
    Event(
        id=2,
        title="AWS Cloud Architecture",
        type="course",
        description="Comprehensive course on AWS cloud architecture and deployment strategies.",
        category="Cloud Computing",
        provider="Cloud Masters Institute",
        provider_email="info@cloudmasters.com",
        provider_phone="+1-555-0456",
        occurs_at=datetime(2024, 2, 20, 9, 0),
        duration="6 weeks",
        price=299,
        max_participants=30,
        current_participants=18,
        status=EventStatus.APPROVED,
        requirements="Basic IT knowledge",
        image="https://images.unsplash.com/photo-1451187580459-43490279c0fa?w=400",
        created_at=datetime(2024, 1, 10, 14, 30),
    ),
    Event(
        id=3,
        title="Cybersecurity Fundamentals",
        type="seminar",
        description="Essential cybersecurity concepts and practical defense strategies.",
        category="Cybersecurity",
        provider="SecureNet Academy",
        provider_email="hello@securenet.com",
        provider_phone="+1-555-0789",
        occurs_at=datetime(2024, 1, 25, 16, 0),
        duration="4 hours",
        price=79,
        max_participants=40,
        current_participants=35,
        status=EventStatus.APPROVED,
        requirements="None",
        image="https://images.unsplash.com/photo-1550751827-4bd374c3f58b?w=400",
        created_at=datetime(2024, 1, 5, 11, 15),
    ),
]

SAMPLE_USERS = [
    User(
        id=1,
        name="Admin User",
        email="admin@itplatform.com",
        password="admin123",
        role=Role.ADMIN,
        organization="IT Training Platform",
    ),
    User(
        id=2,
        name="TechAcademy Pro",
        email="contact@techacademypro.com",
        password="provider123",
        role=Role.PROVIDER,
        organization="TechAcademy Pro",
        phone="+1-555-0123",
        description="Leading provider of React and frontend development training.",
    ),
    User(
        id=3,
        name="Cloud Masters Institute",
        email="info@cloudmasters.com",
        password="provider123",
        role=Role.PROVIDER,
        organization="Cloud Masters Institute",
        phone="+1-555-0456",
        description="Specialized in cloud computing and AWS training programs.",
    ),
    User(
        id=4,
        name="Student User",
        email="student@example.com",
        password="student123",
        role=Role.STUDENT,
        organization="Student",
    ),
]


def load_fixtures(store: EntityStore) -> EntityStore:
    """Seed a store with the sample events and users."""
    for event in SAMPLE_EVENTS:
        store.add_event(event)
    for user in SAMPLE_USERS:
        store.add_user(user)
    return store
