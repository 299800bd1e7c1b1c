"""initial_schema

Create the schema for the TBN backend:
- Accounts (local and Google logins, soft-deleted on withdrawal)
- Withdrawal records (append-only snapshots of withdrawn accounts)
- Comments (per-region listener comments, hidden on withdrawal)

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13; older servers need it
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(50), nullable=True),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("nickname", sa.String(50), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column("provider", sa.String(50), nullable=True),  # 'google'
        sa.Column("provider_subject_id", sa.String(255), nullable=True),
        sa.Column("deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "provider", "provider_subject_id", name="uq_accounts_provider_identity"
        ),
        sa.CheckConstraint(
            "password_hash IS NOT NULL "
            "OR (provider IS NOT NULL AND provider_subject_id IS NOT NULL)",
            name="ck_accounts_authenticable",
        ),
    )
    # Email and username are only unique among active accounts
    op.create_index(
        "uq_accounts_email_active",
        "accounts",
        ["email"],
        unique=True,
        postgresql_where=sa.text("deleted = false"),
    )
    op.create_index(
        "uq_accounts_username_active",
        "accounts",
        ["username"],
        unique=True,
        postgresql_where=sa.text("deleted = false AND username IS NOT NULL"),
    )
    op.create_index("idx_accounts_email", "accounts", ["email"])

    # ========================================================================
    # WITHDRAWAL_RECORDS table
    # ========================================================================
    op.create_table(
        "withdrawal_records",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("nickname", sa.String(50), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("provider", sa.String(50), nullable=True),
        sa.Column("provider_subject_id", sa.String(255), nullable=True),
        sa.Column("withdrawn_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_withdrawal_records_email", "withdrawal_records", ["email"]
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("region_code", sa.String(10), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_nickname", sa.String(50), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("visible", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(text) BETWEEN 1 AND 1000", name="ck_comments_text_length"
        ),
    )
    op.create_index(
        "idx_comments_region_created",
        "comments",
        ["region_code", sa.text("created_at DESC")],
    )
    op.create_index("idx_comments_author", "comments", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("comments")
    op.drop_table("withdrawal_records")
    op.drop_table("accounts")
