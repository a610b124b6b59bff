"""
Auth Service - Registration, login/logout and the session gate
Implements: Single Responsibility Principle (SRP)
"""
from ..state import AppState
from ..domain.identity import Identity
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """Service xử lý account + session business logic"""

    def __init__(self, state: AppState):
        self.state = state

    async def register(self, username: str, credential: str) -> None:
        """
        Register a new account

        Business rules:
        - Username must be unique
        - Registration does not log the caller in
        """
        with self.state.lock:
            self.state.users.register(username, credential)
        logger.info(f"[AUTH] Registered user {username!r}")

    async def login(self, identity: Identity, username: str, credential: str) -> None:
        """
        Bind the caller's session to username

        A failed login raises before touching SessionTable, so any
        previous session of the caller stays as it was.
        """
        with self.state.lock:
            account = self.state.users.verify(username, credential)
            previous = self.state.sessions.start_session(identity, account.username)

        if previous is not None and previous != account.username:
            logger.info(f"[AUTH] {identity} switched session {previous!r} -> {account.username!r}")
        else:
            logger.info(f"[AUTH] {identity} logged in as {account.username!r}")

    async def logout(self, identity: Identity) -> None:
        with self.state.lock:
            username = self.state.sessions.resolve(identity)
            self.state.sessions.end_session(identity)
        logger.info(f"[AUTH] {identity} logged out ({username!r})")

    def require_session(self, identity: Identity) -> str:
        """
        Gate consulted by every task operation

        Returns:
            Username bound to identity

        Raises:
            NotAuthenticatedError: If identity has no session
        """
        with self.state.lock:
            return self.state.sessions.resolve(identity)

    async def get_caller(self, identity: Identity) -> Identity:
        """Echo the calling identity. Never fails."""
        return identity
