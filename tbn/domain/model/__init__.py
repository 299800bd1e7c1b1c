"""Domain model entities."""

from tbn.domain.model.account import Account
from tbn.domain.model.broadcast import (
    BroadcastDetails,
    BroadcastInfo,
    BroadcastLookupResult,
    LookupFailure,
)
from tbn.domain.model.comment import Comment
from tbn.domain.model.withdrawal import WithdrawalRecord

__all__ = [
    "Account",
    "BroadcastDetails",
    "BroadcastInfo",
    "BroadcastLookupResult",
    "Comment",
    "LookupFailure",
    "WithdrawalRecord",
]
