import logging
from fastapi import Depends, HTTPException, Request
from models import Role, User
from store import EntityStore

logger = logging.getLogger(__name__)


def authenticate(store: EntityStore, email: str, password: str) -> bool:
    """
    Log a user in by exact email and password match.
    Demo-grade: credentials are compared in plaintext. On failure the session is left as it was.
    """
    for user in store.list_users():
        if user.email == email and user.password == password:
            store.set_current_user(user)
            logger.info(f"User {email} logged in as {user.role.value}")
            return True
    logger.warning(f"Failed login attempt for {email}")
    return False


def clear_session(store: EntityStore):
    """Log out whoever is logged in."""
    store.clear_current_user()
    logger.info("Session cleared")


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


async def get_current_user(store: EntityStore = Depends(get_store)) -> User:
    """Retrieve the logged-in user or reject the request."""
    if store.current_user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return store.current_user


def require_role(*roles: Role):
    """Build a dependency that only lets the given roles through."""
    async def checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise HTTPException(status_code=403, detail="Access denied")
        return current_user
    return checker
