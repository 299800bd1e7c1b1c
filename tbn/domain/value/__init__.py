"""Domain value objects."""

from tbn.domain.value.identifiers import AccountId, CommentId, WithdrawalRecordId
from tbn.domain.value.types import AuthProvider, IdentityAssertion

__all__ = [
    # Identifiers
    "AccountId",
    "CommentId",
    "WithdrawalRecordId",
    # Types
    "AuthProvider",
    "IdentityAssertion",
]
