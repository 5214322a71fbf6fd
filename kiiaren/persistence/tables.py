"""SQLAlchemy table definitions for the workspace trust subsystem.

Core tables queried through SQLAlchemy expressions; rows are mapped to
domain models by hand in ``mappers``. They match the schema defined in
Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# WORKSPACES TABLE
# ============================================================================
workspaces_table = Table(
    "workspaces",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(80), nullable=False),
    Column("owner_id", UUID, nullable=False),  # Users live in the identity service
    Column("join_code", String(32), nullable=False, unique=True),
    Column("domain_verified", Boolean, nullable=False, server_default="false"),
    Column("join_code_enabled", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_workspaces_owner_id", workspaces_table.c.owner_id)

# ============================================================================
# MEMBERS TABLE
# ============================================================================
members_table = Table(
    "members",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "workspace_id",
        UUID,
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "role",
        Enum("admin", "member", name="member_role", create_type=False),
        nullable=False,
        server_default="member",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("workspace_id", "user_id", name="uq_members_workspace_user"),
)

Index("idx_members_user_id", members_table.c.user_id)

# ============================================================================
# DOMAIN CLAIMS TABLE
# ============================================================================
domain_claims_table = Table(
    "domain_claims",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "workspace_id",
        UUID,
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("domain", String(253), nullable=False),  # Normalized host name
    Column("verification_token", String(255), nullable=False),
    Column(
        "status",
        Enum("pending", "verified", "failed", name="domain_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column("verified_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("created_by", UUID, nullable=False),
    CheckConstraint(
        "status <> 'verified' OR verified_at IS NOT NULL",
        name="ck_domain_claims_verified_at",
    ),
)

# One claim per domain across all workspaces, whatever its status
Index("idx_domain_claims_domain", domain_claims_table.c.domain, unique=True)

# Auto-join lookup: a workspace's verified claims
Index(
    "idx_domain_claims_workspace_status",
    domain_claims_table.c.workspace_id,
    domain_claims_table.c.status,
)

# ============================================================================
# INVITE LINKS TABLE
# ============================================================================
invite_links_table = Table(
    "invite_links",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "workspace_id",
        UUID,
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("code", String(255), nullable=False, unique=True),  # URL-safe token
    Column("created_by", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("max_uses", Integer, nullable=True),
    Column("used_count", Integer, nullable=False, server_default="0"),
    Column(
        "scope_type",
        Enum("workspace", "channel", name="invite_link_scope", create_type=False),
        nullable=False,
        server_default="workspace",
    ),
    Column("channel_id", UUID, nullable=True),
    Column("revoked_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("max_uses IS NULL OR max_uses >= 1", name="ck_invite_links_max_uses"),
    CheckConstraint(
        "max_uses IS NULL OR used_count <= max_uses",
        name="ck_invite_links_used_count",
    ),
)

Index("idx_invite_links_workspace_id", invite_links_table.c.workspace_id)
