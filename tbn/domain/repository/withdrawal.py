"""Withdrawal record repository interface."""

from abc import ABC, abstractmethod
from typing import List

from tbn.domain.model.withdrawal import WithdrawalRecord


class WithdrawalRecordRepository(ABC):
    """Append-only log of withdrawn accounts."""

    @abstractmethod
    async def append(self, record: WithdrawalRecord) -> WithdrawalRecord:
        """Append a withdrawal record.

        Args:
            record: The record to store

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> List[WithdrawalRecord]:
        """Find all records for an email, oldest first."""
        pass
