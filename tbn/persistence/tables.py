"""SQLAlchemy table definitions for the TBN backend.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE (soft-deleted, never removed)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("email", String(255), nullable=False),
    Column("username", String(50), nullable=True),  # Local login name
    Column("display_name", String(255), nullable=True),
    Column("nickname", String(50), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("password_hash", Text, nullable=True),  # Local accounts only
    Column("provider", String(50), nullable=True),  # 'google'
    Column("provider_subject_id", String(255), nullable=True),
    Column("deleted", Boolean, nullable=False, server_default=text("false")),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint(
        "provider", "provider_subject_id", name="uq_accounts_provider_identity"
    ),
)

# Email and username are only unique among active accounts
Index(
    "uq_accounts_email_active",
    accounts_table.c.email,
    unique=True,
    postgresql_where=text("deleted = false"),
)
Index(
    "uq_accounts_username_active",
    accounts_table.c.username,
    unique=True,
    postgresql_where=text("deleted = false AND username IS NOT NULL"),
)
Index("idx_accounts_email", accounts_table.c.email)

# ============================================================================
# WITHDRAWAL RECORDS TABLE (append-only)
# ============================================================================
withdrawal_records_table = Table(
    "withdrawal_records",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("account_id", UUID, nullable=False),  # No FK: outlives the account row
    Column("email", String(255), nullable=False),
    Column("display_name", String(255), nullable=True),
    Column("nickname", String(50), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("provider", String(50), nullable=True),
    Column("provider_subject_id", String(255), nullable=True),
    Column("withdrawn_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_withdrawal_records_email", withdrawal_records_table.c.email)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("region_code", String(10), nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("author_nickname", String(50), nullable=False),
    Column("text", Text, nullable=False),
    Column("visible", Boolean, nullable=False, server_default=text("true")),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index(
    "idx_comments_region_created",
    comments_table.c.region_code,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_author", comments_table.c.author_id)
