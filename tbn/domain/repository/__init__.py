"""Repository interfaces for the TBN domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tbn.domain.repository.account import AccountRepository
from tbn.domain.repository.comment import CommentRepository
from tbn.domain.repository.withdrawal import WithdrawalRecordRepository

__all__ = [
    "AccountRepository",
    "CommentRepository",
    "WithdrawalRecordRepository",
]
