"""
Identity Domain Model

The calling identity is issued outside this process (by the transport layer)
and is opaque to the core: it is only compared, hashed and ordered.
"""

from dataclasses import dataclass


# Well-known textual form of the anonymous principal.
ANONYMOUS_IDENTITY_TEXT = "2vxsx-fae"


@dataclass(frozen=True, order=True)
class Identity:
    """
    Value Object cho caller identity
    Immutable, usable as a dict key
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Identity cannot be empty")

    @staticmethod
    def anonymous() -> 'Identity':
        return Identity(ANONYMOUS_IDENTITY_TEXT)

    def is_anonymous(self) -> bool:
        return self.value == ANONYMOUS_IDENTITY_TEXT

    def __str__(self) -> str:
        return self.value
