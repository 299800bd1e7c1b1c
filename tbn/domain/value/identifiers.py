"""Strongly typed identifiers for domain entities."""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
WithdrawalRecordId = NewType("WithdrawalRecordId", UUID)
CommentId = NewType("CommentId", UUID)
