"""create account user, account and transaction tables

Revision ID: 3f9c1a7e5b20
Revises: 
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c1a7e5b20"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "account_user",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )

    op.create_table(
        "account",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("account_user_id", sa.Integer(), sa.ForeignKey("account_user.id"), nullable=False),
        sa.Column("account_number", sa.String(length=10), nullable=False),
        sa.Column("account_status", sa.String(length=20), nullable=False, server_default="IN_USE"),
        sa.Column("balance", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("registered_at", sa.DateTime(timezone=True)),
        sa.Column("unregistered_at", sa.DateTime(timezone=True)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_account_account_user_id", "account", ["account_user_id"])
    op.create_index("ix_account_account_number", "account", ["account_number"], unique=True)

    op.create_table(
        "account_transaction",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("account.id"), nullable=False),
        sa.Column("transaction_type", sa.String(length=10), nullable=False),
        sa.Column("transaction_result_type", sa.String(length=1), nullable=False),
        sa.Column("amount", sa.BigInteger(), nullable=False),
        sa.Column("balance_snapshot", sa.BigInteger(), nullable=False),
        sa.Column("transaction_id", sa.String(length=32), nullable=False),
        sa.Column("transacted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_account_transaction_account_id", "account_transaction", ["account_id"])
    op.create_index(
        "ix_account_transaction_transaction_id", "account_transaction", ["transaction_id"], unique=True
    )


def downgrade() -> None:
    op.drop_index("ix_account_transaction_transaction_id", table_name="account_transaction")
    op.drop_index("ix_account_transaction_account_id", table_name="account_transaction")
    op.drop_table("account_transaction")

    op.drop_index("ix_account_account_number", table_name="account")
    op.drop_index("ix_account_account_user_id", table_name="account")
    op.drop_table("account")

    op.drop_table("account_user")
