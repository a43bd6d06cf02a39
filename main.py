from fastapi import FastAPI, HTTPException, Depends, Request, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi import status
from datetime import datetime
from typing import Callable
from models import EventStatus, Role, User
from store import EntityStore
from fixtures import load_fixtures
from manager import EventManager
from auth import authenticate, clear_session, get_current_user, get_store, require_role
from schemas import EventForm, LoginRequest, EventOut, EventDetailOut, ProviderOut
from dashboards import dashboard_for, home_path, home_summary
import queries
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
import os

load_dotenv()  # Load variables from .env file
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SEED_FIXTURES = os.getenv("SEED_FIXTURES", "true").lower() in ("1", "true", "yes")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

# Logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


# -------------------------------
# Dependencies
# -------------------------------
def get_manager(request: Request) -> EventManager:
    return request.app.state.manager


def get_now(request: Request) -> datetime:
    return request.app.state.clock()


def find_event_or_404(manager: EventManager, event_id: int):
    event = manager.get_event(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


# -------------------------------
# App factory
# -------------------------------
def create_app(store: EntityStore | None = None, clock: Callable[[], datetime] = datetime.now) -> FastAPI:
    """Build the API around a store; a fresh seeded store is created when none is given."""
    if store is None:
        store = EntityStore()
        if SEED_FIXTURES:
            load_fixtures(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Store ready with {len(store.events)} events and {len(store.users)} users")
        yield
        logger.info("Clearing session")
        clear_session(store)

    app = FastAPI(lifespan=lifespan)
    app.state.store = store
    app.state.clock = clock
    app.state.manager = EventManager(store, clock)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


def register_routes(app: FastAPI):
    # -------------------------------
    # Session Routes
    # -------------------------------
    @app.post("/login", response_model=dict, summary="Log in with email and password")
    def login(credentials: LoginRequest, store: EntityStore = Depends(get_store)):
        """Authenticate and open the session for the matching user."""
        if not credentials.email or not credentials.password:
            raise HTTPException(status_code=400, detail="Please fill in all fields")
        if not authenticate(store, credentials.email, credentials.password):
            raise HTTPException(status_code=401, detail="Invalid email or password")
        user = store.current_user
        return {"message": "Login successful", "data": {"email": user.email, "role": user.role.value, "home": home_path(user.role)}}

    @app.post("/logout", response_model=dict, summary="Log out")
    def logout(store: EntityStore = Depends(get_store)):
        clear_session(store)
        return {"message": "Logged out", "data": {}}

    # -------------------------------
    # Event Routes
    # -------------------------------
    @app.get("/", response_model=dict, summary="Landing page figures")
    def root(manager: EventManager = Depends(get_manager), now: datetime = Depends(get_now)):
        """Welcome message with figures over active events."""
        return {"message": "Welcome to the IT Training Platform", "data": home_summary(manager.list_events(), now)}

    @app.get("/events", response_model=dict, summary="List all events")
    def list_events(manager: EventManager = Depends(get_manager)):
        events = manager.list_events()
        return {"message": "Events retrieved", "data": [EventOut.model_validate(e).model_dump(mode="json") for e in events]}

    @app.get("/events/active", response_model=dict, summary="Browse approved upcoming events")
    def list_active_events(
        search: str = "",
        type: str = Query("all"),
        manager: EventManager = Depends(get_manager),
        now: datetime = Depends(get_now),
    ):
        """Search active events by title, description or provider, optionally narrowed to one type."""
        events = queries.filter_events(manager.active_events(now), search, type)
        return {"message": "Active events retrieved", "data": [EventOut.model_validate(e).model_dump(mode="json") for e in events]}

    @app.get("/events/expired", response_model=dict, summary="List expired events")
    def list_expired_events(manager: EventManager = Depends(get_manager), now: datetime = Depends(get_now)):
        events = manager.expired_events(now)
        return {"message": "Expired events retrieved", "data": [EventOut.model_validate(e).model_dump(mode="json") for e in events]}

    @app.get("/events/pending", response_model=dict, summary="List events awaiting approval")
    def list_pending_events(manager: EventManager = Depends(get_manager)):
        events = manager.pending_events()
        return {"message": "Pending events retrieved", "data": [EventOut.model_validate(e).model_dump(mode="json") for e in events]}

    @app.get("/events/{event_id}", response_model=dict, summary="Event detail")
    def get_event(event_id: int, manager: EventManager = Depends(get_manager), now: datetime = Depends(get_now)):
        event = find_event_or_404(manager, event_id)
        detail = EventDetailOut(
            **EventOut.model_validate(event).model_dump(),
            label=queries.status_label(event, now),
            is_expired=queries.is_expired(event, now),
            is_full=queries.is_full(event),
            can_enroll=queries.can_enroll(event, now),
        )
        return {"message": "Event retrieved", "data": detail.model_dump(mode="json")}

    @app.post("/events", response_model=dict, status_code=status.HTTP_201_CREATED, summary="Submit a new event")
    def create_event(
        form: EventForm,
        current_user: User = Depends(require_role(Role.PROVIDER)),
        manager: EventManager = Depends(get_manager),
        now: datetime = Depends(get_now),
    ):
        """Create a pending event for admin review (providers only)."""
        if form.occurs_at <= now:
            raise HTTPException(status_code=400, detail="Event date must be in the future")
        event = manager.create_event(form.to_draft(), current_user)
        return {"message": "Event created successfully! It will be reviewed by admin.", "data": EventOut.model_validate(event).model_dump(mode="json")}

    @app.post("/events/{event_id}/approve", response_model=dict, summary="Approve an event")
    def approve_event(
        event_id: int,
        current_user: User = Depends(require_role(Role.ADMIN)),
        manager: EventManager = Depends(get_manager),
    ):
        find_event_or_404(manager, event_id)
        manager.set_event_status(event_id, EventStatus.APPROVED)
        return {"message": "Event approved successfully!", "data": {"id": event_id, "status": EventStatus.APPROVED.value}}

    @app.post("/events/{event_id}/reject", response_model=dict, summary="Reject an event")
    def reject_event(
        event_id: int,
        current_user: User = Depends(require_role(Role.ADMIN)),
        manager: EventManager = Depends(get_manager),
    ):
        find_event_or_404(manager, event_id)
        manager.set_event_status(event_id, EventStatus.REJECTED)
        return {"message": "Event rejected successfully!", "data": {"id": event_id, "status": EventStatus.REJECTED.value}}

    # -------------------------------
    # Role-scoped Routes
    # -------------------------------
    @app.get("/me/events", response_model=dict, summary="Events owned by the logged-in provider")
    def my_events(current_user: User = Depends(require_role(Role.PROVIDER)), manager: EventManager = Depends(get_manager)):
        events = queries.events_for_provider(manager.list_events(), current_user.email)
        return {"message": "Events retrieved", "data": [EventOut.model_validate(e).model_dump(mode="json") for e in events]}

    @app.get("/providers", response_model=dict, summary="List training providers")
    def list_providers(current_user: User = Depends(require_role(Role.ADMIN)), store: EntityStore = Depends(get_store)):
        providers = queries.providers(store.list_users())
        return {"message": "Providers retrieved", "data": [ProviderOut.model_validate(p).model_dump() for p in providers]}

    @app.get("/dashboard", response_model=dict, summary="Dashboard for the logged-in role")
    def dashboard(
        current_user: User = Depends(get_current_user),
        store: EntityStore = Depends(get_store),
        now: datetime = Depends(get_now),
    ):
        return {"message": f"{current_user.role.value.capitalize()} dashboard", "data": dashboard_for(current_user, store, now)}


app = create_app()
