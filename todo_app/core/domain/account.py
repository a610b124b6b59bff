"""
Account Domain Model

An Account is created once by registration and never updated or deleted.
The credential is stored in whatever form the CredentialPolicy produced.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """
    Aggregate Root cho user account

    Fields:
    - username: unique key, immutable
    - credential: stored secret, compared only through CredentialPolicy
    - created_at: nanosecond timestamp set at registration
    """
    username: str
    credential: str
    created_at: int

    def __post_init__(self):
        if self.created_at < 0:
            raise ValueError("created_at cannot be negative")

    def __str__(self) -> str:
        # Never render the credential
        return f"Account(username={self.username!r}, created_at={self.created_at})"

    def __repr__(self) -> str:
        return self.__str__()
