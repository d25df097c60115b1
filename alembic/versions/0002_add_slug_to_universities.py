"""Add slug column to universities

Revision ID: 0002
Revises: 0001
Create Date: 2025-08-14 09:30:00.000000

Existing rows keep slug NULL until POST /api/admin/migrate-slugs is run.
Not unique: different names may collapse to the same slug.

"""

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade():
    with op.batch_alter_table("universities", schema=None) as batch_op:
        batch_op.add_column(sa.Column("slug", sa.Text(), nullable=True))
        batch_op.create_index("ix_universities_slug", ["slug"])


def downgrade():
    with op.batch_alter_table("universities", schema=None) as batch_op:
        batch_op.drop_index("ix_universities_slug")
        batch_op.drop_column("slug")
