"""In-memory withdrawal record repository for testing."""

from typing import List

from tbn.domain.model.withdrawal import WithdrawalRecord
from tbn.domain.repository.withdrawal import WithdrawalRecordRepository


class InMemoryWithdrawalRecordRepository(WithdrawalRecordRepository):
    """In-memory implementation of WithdrawalRecordRepository for testing."""

    def __init__(self) -> None:
        self._records: list[WithdrawalRecord] = []

    async def append(self, record: WithdrawalRecord) -> WithdrawalRecord:
        self._records.append(record)
        return record

    async def find_by_email(self, email: str) -> List[WithdrawalRecord]:
        matches = [r for r in self._records if r.email == email]
        return sorted(matches, key=lambda r: r.withdrawn_at)
