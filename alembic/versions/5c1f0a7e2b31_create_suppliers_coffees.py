"""create SUPPLIERS and COFFEES

Revision ID: 5c1f0a7e2b31
Revises:
Create Date: 2026-10-18 10:12:40.118204
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1f0a7e2b31"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "SUPPLIERS",
        sa.Column("SUP_ID", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("SUP_NAME", sa.String(length=200), nullable=False),
        sa.Column("STREET", sa.String(length=200), nullable=False),
        sa.Column("CITY", sa.String(length=100), nullable=False),
        sa.Column("STATE", sa.String(length=20), nullable=False),
        sa.Column("ZIP", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("SUP_ID"),
    )
    op.create_table(
        "COFFEES",
        sa.Column("COF_NAME", sa.String(length=200), nullable=False),
        sa.Column("SUP_ID", sa.Integer(), nullable=False),
        sa.Column("PRICE", sa.Float(), nullable=False),
        sa.Column("SALES", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("TOTAL", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.CheckConstraint('"PRICE" >= 0', name="CK_Coffee_Price_NonNeg"),
        sa.ForeignKeyConstraint(["SUP_ID"], ["SUPPLIERS.SUP_ID"], name="SUP_FK"),
        sa.PrimaryKeyConstraint("COF_NAME"),
    )


def downgrade() -> None:
    op.drop_table("COFFEES")
    op.drop_table("SUPPLIERS")
