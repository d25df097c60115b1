"""Initial tables

Revision ID: 0001
Revises:
Create Date: 2025-06-02 10:00:00.000000

"""

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

PRIORITY = sa.Enum("low", "medium", "high", "urgent")


def upgrade():
    op.create_table(
        "universities",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("name", sa.Text()),
        sa.Column("country", sa.Text()),
        sa.Column("type", sa.Enum("Public", "Private")),
        sa.Column("image", sa.Text()),
        sa.Column("short_description", sa.Text()),
        sa.Column("details", sa.Text()),
        sa.Column("status", sa.Enum("draft", "published"), nullable=False, server_default=sa.text("'draft'")),
        sa.Column("created_at", sa.Text(), nullable=False),
        sa.Column("updated_at", sa.Text(), nullable=False),
    )
    op.create_table(
        "consultations",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=False),
        sa.Column("preferred_destination", sa.Text()),
        sa.Column("program_level", sa.Text()),
        sa.Column("message", sa.Text()),
        sa.Column("agree_to_terms", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("subscribe_newsletter", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column(
            "status",
            sa.Enum("pending", "contacted", "scheduled", "completed", "cancelled"),
            nullable=False,
            server_default=sa.text("'pending'"),
        ),
        sa.Column("priority", PRIORITY, nullable=False, server_default=sa.text("'medium'")),
        sa.Column("assigned_to", sa.Text()),
        sa.Column("notes", sa.Text()),
        sa.Column("scheduled_date", sa.Text()),
        sa.Column("created_at", sa.Text(), nullable=False),
        sa.Column("updated_at", sa.Text(), nullable=False),
    )
    op.create_table(
        "contact_messages",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text()),
        sa.Column("subject", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("new", "read", "replied", "closed"),
            nullable=False,
            server_default=sa.text("'new'"),
        ),
        sa.Column("priority", PRIORITY, nullable=False, server_default=sa.text("'medium'")),
        sa.Column("notes", sa.Text()),
        sa.Column("replied_at", sa.Text()),
        sa.Column("created_at", sa.Text(), nullable=False),
        sa.Column("updated_at", sa.Text(), nullable=False),
    )
    op.create_table(
        "settings",
        sa.Column("key", sa.Text(), primary_key=True),
        sa.Column("value", sa.Text(), nullable=False, server_default=sa.text("'{}'")),
        sa.Column("updated_at", sa.Text(), nullable=False),
    )


def downgrade():
    op.drop_table("settings")
    op.drop_table("contact_messages")
    op.drop_table("consultations")
    op.drop_table("universities")
