"""initial_trust_schema

Create the workspace trust schema:
- Workspaces (with domain_verified / join_code_enabled trust flags)
- Members (one membership per workspace and user)
- Domain claims (DNS TXT verification, one claim per domain)
- Invite links (expiry, usage cap, revocation)

Revision ID: 3c1f0d9a7b42
Revises:
Create Date: 2026-10-18 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0d9a7b42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_enum(name: str, *values: str) -> None:
    labels = ", ".join(f"'{v}'" for v in values)
    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE {name} AS ENUM ({labels});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    _create_enum("member_role", "admin", "member")
    _create_enum("domain_status", "pending", "verified", "failed")
    _create_enum("invite_link_scope", "workspace", "channel")

    # ========================================================================
    # WORKSPACES
    # ========================================================================
    op.create_table(
        "workspaces",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(80), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("join_code", sa.String(32), nullable=False, unique=True),
        sa.Column(
            "domain_verified",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column(
            "join_code_enabled",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("true"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_workspaces_owner_id", "workspaces", ["owner_id"])

    # ========================================================================
    # MEMBERS
    # ========================================================================
    op.create_table(
        "members",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("workspace_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "role",
            postgresql.ENUM("admin", "member", name="member_role", create_type=False),
            nullable=False,
            server_default="member",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["workspace_id"], ["workspaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("workspace_id", "user_id", name="uq_members_workspace_user"),
    )
    op.create_index("idx_members_user_id", "members", ["user_id"])

    # ========================================================================
    # DOMAIN CLAIMS
    # ========================================================================
    op.create_table(
        "domain_claims",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("workspace_id", sa.UUID(), nullable=False),
        sa.Column("domain", sa.String(253), nullable=False),
        sa.Column("verification_token", sa.String(255), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "verified",
                "failed",
                name="domain_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("verified_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["workspace_id"], ["workspaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status <> 'verified' OR verified_at IS NOT NULL",
            name="ck_domain_claims_verified_at",
        ),
    )

    # One claim per domain across all workspaces, whatever its status
    op.create_index(
        "idx_domain_claims_domain", "domain_claims", ["domain"], unique=True
    )
    # Auto-join lookup
    op.create_index(
        "idx_domain_claims_workspace_status",
        "domain_claims",
        ["workspace_id", "status"],
    )

    # ========================================================================
    # INVITE LINKS
    # ========================================================================
    op.create_table(
        "invite_links",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("workspace_id", sa.UUID(), nullable=False),
        sa.Column("code", sa.String(255), nullable=False, unique=True),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("max_uses", sa.Integer(), nullable=True),
        sa.Column("used_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "scope_type",
            postgresql.ENUM(
                "workspace", "channel", name="invite_link_scope", create_type=False
            ),
            nullable=False,
            server_default="workspace",
        ),
        sa.Column("channel_id", sa.UUID(), nullable=True),
        sa.Column("revoked_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["workspace_id"], ["workspaces.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "max_uses IS NULL OR max_uses >= 1", name="ck_invite_links_max_uses"
        ),
        sa.CheckConstraint(
            "max_uses IS NULL OR used_count <= max_uses",
            name="ck_invite_links_used_count",
        ),
    )
    op.create_index("idx_invite_links_workspace_id", "invite_links", ["workspace_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("invite_links")
    op.drop_table("domain_claims")
    op.drop_table("members")
    op.drop_table("workspaces")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS invite_link_scope")
    op.execute("DROP TYPE IF EXISTS domain_status")
    op.execute("DROP TYPE IF EXISTS member_role")
