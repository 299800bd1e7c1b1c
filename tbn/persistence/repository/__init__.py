"""PostgreSQL repository implementations."""

from tbn.persistence.repository.account import PostgresAccountRepository
from tbn.persistence.repository.comment import PostgresCommentRepository
from tbn.persistence.repository.withdrawal import PostgresWithdrawalRecordRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresCommentRepository",
    "PostgresWithdrawalRecordRepository",
]
