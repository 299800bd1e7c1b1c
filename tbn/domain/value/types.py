"""Domain value objects."""

from enum import Enum

from tbn.domain.value.common import ValueObject


class AuthProvider(str, Enum):
    """Supported federated identity providers."""

    GOOGLE = "google"


class IdentityAssertion(ValueObject):
    """Identity asserted by an external provider after verification.

    Produced by an identity verifier adapter (e.g. Google ID token check)
    and consumed by identity reconciliation.
    """

    provider: AuthProvider
    provider_subject_id: str  # Stable subject ID (Google `sub`)
    email: str
    display_name: str | None = None
    avatar_url: str | None = None
    email_verified: bool = False
