"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from tbn.domain.model import Account, Comment, WithdrawalRecord
from tbn.domain.value import AccountId, AuthProvider, CommentId, WithdrawalRecordId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _provider(value: str | None) -> AuthProvider | None:
    return AuthProvider(value) if value else None


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(_uuid(row["id"])),
        email=row["email"],
        username=row.get("username"),
        display_name=row.get("display_name"),
        nickname=row.get("nickname"),
        avatar_url=row.get("avatar_url"),
        password_hash=row.get("password_hash"),
        provider=_provider(row.get("provider")),
        provider_subject_id=row.get("provider_subject_id"),
        deleted=row["deleted"],
        deleted_at=row.get("deleted_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict.

    Args:
        account: Account domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = account.model_dump()
    data["provider"] = account.provider.value if account.provider else None
    return data


def row_to_withdrawal_record(row: Dict[str, Any]) -> WithdrawalRecord:
    """Convert database row to WithdrawalRecord domain model."""
    return WithdrawalRecord(
        id=WithdrawalRecordId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        email=row["email"],
        display_name=row.get("display_name"),
        nickname=row.get("nickname"),
        avatar_url=row.get("avatar_url"),
        provider=_provider(row.get("provider")),
        provider_subject_id=row.get("provider_subject_id"),
        withdrawn_at=row["withdrawn_at"],
    )


def withdrawal_record_to_dict(record: WithdrawalRecord) -> Dict[str, Any]:
    """Convert WithdrawalRecord domain model to database dict."""
    data = record.model_dump()
    data["provider"] = record.provider.value if record.provider else None
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        region_code=row["region_code"],
        author_id=AccountId(_uuid(row["author_id"])),
        author_nickname=row["author_nickname"],
        text=row["text"],
        visible=row["visible"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
