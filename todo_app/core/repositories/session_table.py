"""
Session Table

Mapping caller Identity -> authenticated username.
At most one username per identity; a later login overwrites.
"""

from typing import Optional

from .base import BaseRepository
from ..domain.identity import Identity
from ..exceptions import NotAuthenticatedError


class SessionTable(BaseRepository[Identity, str]):
    """Live sessions, lost on process restart"""

    def start_session(self, identity: Identity, username: str) -> Optional[str]:
        """
        Bind identity to username, replacing any previous binding

        Returns:
            The username previously bound to this identity, if any
        """
        previous = self._items.get(identity)
        self._items[identity] = username
        return previous

    def end_session(self, identity: Identity):
        """
        Raises:
            NotAuthenticatedError: If identity has no session
        """
        if self._items.pop(identity, None) is None:
            raise NotAuthenticatedError("Not logged in")

    def resolve(self, identity: Identity) -> str:
        """
        Lấy username của session

        Raises:
            NotAuthenticatedError: If identity has no session
        """
        username = self._items.get(identity)
        if username is None:
            raise NotAuthenticatedError("User not authenticated")
        return username
