"""
Credential Policy

Single seam for how credentials are stored and compared.
UserRegistry only ever calls `prepare` and `matches`, so a hashing
scheme can replace PlaintextCredentialPolicy without touching it.
"""

import hmac
from abc import ABC, abstractmethod


class CredentialPolicy(ABC):
    """Abstract credential storage/comparison"""

    @abstractmethod
    def prepare(self, credential: str) -> str:
        """Turn a submitted credential into its stored form"""
        pass

    @abstractmethod
    def matches(self, stored: str, submitted: str) -> bool:
        """Compare a submitted credential against the stored form"""
        pass


class PlaintextCredentialPolicy(CredentialPolicy):
    """
    Stores the credential as given and compares byte-for-byte.

    Not a security measure; credentials are opaque strings here.
    """

    def prepare(self, credential: str) -> str:
        return credential

    def matches(self, stored: str, submitted: str) -> bool:
        # surrogatepass: any str, including lone surrogates from JSON, encodes
        return hmac.compare_digest(
            stored.encode("utf-8", "surrogatepass"),
            submitted.encode("utf-8", "surrogatepass")
        )
