"""PostgreSQL implementation of WithdrawalRecord repository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tbn.domain.model import WithdrawalRecord
from tbn.domain.repository import WithdrawalRecordRepository
from tbn.persistence.mappers import row_to_withdrawal_record, withdrawal_record_to_dict
from tbn.persistence.tables import withdrawal_records_table


class PostgresWithdrawalRecordRepository(WithdrawalRecordRepository):
    """PostgreSQL implementation of WithdrawalRecordRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def append(self, record: WithdrawalRecord) -> WithdrawalRecord:
        stmt = withdrawal_records_table.insert().values(
            **withdrawal_record_to_dict(record)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    async def find_by_email(self, email: str) -> List[WithdrawalRecord]:
        stmt = (
            select(withdrawal_records_table)
            .where(withdrawal_records_table.c.email == email)
            .order_by(withdrawal_records_table.c.withdrawn_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_withdrawal_record(dict(row)) for row in result.mappings()]
