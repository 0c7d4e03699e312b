"""link successful cancels to the use they reverse

Revision ID: 8b41d2c6e7a3
Revises: 3f9c1a7e5b20
Create Date: 2026-10-19 15:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "8b41d2c6e7a3"
down_revision = "3f9c1a7e5b20"
branch_labels = None
depends_on = None


def upgrade() -> None:
    with op.batch_alter_table("account_transaction") as batch_op:
        batch_op.add_column(sa.Column("cancelled_transaction_id", sa.String(length=32), nullable=True))
        batch_op.create_index(
            "ix_account_transaction_cancelled_transaction_id", ["cancelled_transaction_id"], unique=True
        )


def downgrade() -> None:
    with op.batch_alter_table("account_transaction") as batch_op:
        batch_op.drop_index("ix_account_transaction_cancelled_transaction_id")
        batch_op.drop_column("cancelled_transaction_id")
