"""create_todos_and_passengers_tables

Revision ID: 4b1e9c27a0d3
Revises: 
Create Date: 2026-10-12 14:05:31.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e9c27a0d3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "todos",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.Text()),
        sa.Column("completed", sa.Integer(), server_default="0"),
    )

    # Canonical passenger shape: no distance column; email is required.
    op.create_table(
        "passengers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text()),
        sa.Column("passport_number", sa.Text()),
        sa.Column("nationality", sa.Text()),
        sa.Column("date_of_birth", sa.Text()),
        sa.Column("seat_number", sa.Text()),
        sa.Column("flight_number", sa.Text(), nullable=False),
        sa.Column("departure_city", sa.Text(), nullable=False),
        sa.Column("arrival_city", sa.Text(), nullable=False),
        sa.Column("departure_date", sa.Text(), nullable=False),
        sa.Column("ticket_class", sa.Text()),
        sa.Column("price", sa.Text()),
        sa.Column("status", sa.Text(), server_default="confirmed"),
        sa.Column("created_at", sa.Text(), server_default=sa.text("CURRENT_TIMESTAMP")),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("passengers")
    op.drop_table("todos")
