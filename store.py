from models import Event, User


class EntityStore:
    def __init__(self):
        """
        Initialize an empty in-memory store.
        Events and users keep insertion order; lookups are linear scans.
        """
        self.events: list[Event] = []
        self.users: list[User] = []
        self.current_user: User | None = None

    def list_events(self) -> list[Event]:
        """Retrieve all events in insertion order."""
        return list(self.events)

    def get_event(self, event_id: int) -> Event | None:
        """Retrieve an event by ID."""
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    def add_event(self, event: Event):
        """Append an event to the store."""
        self.events.append(event)

    def replace_event(self, event: Event) -> bool:
        """
        Replace the stored event that has the same ID.
        A missing ID is a no-op: nothing is raised and the collection is untouched.
        """
        for index, existing in enumerate(self.events):
            if existing.id == event.id:
                self.events[index] = event
                return True
        return False

    def list_users(self) -> list[User]:
        """Retrieve all users in insertion order."""
        return list(self.users)

    def get_user(self, user_id: int) -> User | None:
        """Retrieve a user by ID."""
        for user in self.users:
            if user.id == user_id:
                return user
        return None

    def add_user(self, user: User):
        """Append a user to the store."""
        self.users.append(user)

    def set_current_user(self, user: User):
        self.current_user = user

    def clear_current_user(self):
        self.current_user = None
