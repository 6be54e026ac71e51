"""SQLAlchemy table definitions for MenuMaster.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Index, MetaData, String, Table
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=True, unique=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("has_paid", Boolean, nullable=False, server_default="false"),
    Column("payment_date", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_has_paid", users_table.c.has_paid)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("code", String(255), nullable=False, unique=True),
    Column("restaurant_name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column(
        "invited_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_invitations_created_at", invitations_table.c.created_at.desc())
