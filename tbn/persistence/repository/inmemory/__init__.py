"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .comment import InMemoryCommentRepository
from .withdrawal import InMemoryWithdrawalRecordRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCommentRepository",
    "InMemoryWithdrawalRecordRepository",
]
