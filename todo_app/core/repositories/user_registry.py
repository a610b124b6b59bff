"""
User Registry

Mapping username -> Account. Enforces username uniqueness.
"""

import logging
from typing import Optional, Callable

from .base import BaseRepository
from ..credentials import CredentialPolicy, PlaintextCredentialPolicy
from ..domain.account import Account
from ..exceptions import DuplicateUsernameError, InvalidCredentialsError

logger = logging.getLogger(__name__)


class UserRegistry(BaseRepository[str, Account]):
    """
    Registry cho user accounts

    Handles:
    - Registration (unique usernames)
    - Credential verification via CredentialPolicy
    """

    def __init__(
        self,
        clock: Callable[[], int],
        credential_policy: Optional[CredentialPolicy] = None
    ):
        super().__init__()
        self._clock = clock
        self._policy = credential_policy or PlaintextCredentialPolicy()

    def register(self, username: str, credential: str) -> Account:
        """
        Tạo account mới

        Args:
            username: Unique username
            credential: Submitted credential

        Returns:
            The created Account

        Raises:
            DuplicateUsernameError: If the username already exists
        """
        if username in self._items:
            raise DuplicateUsernameError("Username already exists")

        account = Account(
            username=username,
            credential=self._policy.prepare(credential),
            created_at=self._clock()
        )
        self._items[username] = account
        logger.debug(f"Registered account {username!r}")
        return account

    def verify(self, username: str, credential: str) -> Account:
        """
        Check a username/credential pair

        Unknown username and wrong credential produce the same error.

        Raises:
            InvalidCredentialsError: If the pair does not match
        """
        account = self._items.get(username)
        if account is None or not self._policy.matches(account.credential, credential):
            raise InvalidCredentialsError("Invalid username or password")
        return account

    def get(self, username: str) -> Optional[Account]:
        """Lấy account theo username"""
        return self._items.get(username)
