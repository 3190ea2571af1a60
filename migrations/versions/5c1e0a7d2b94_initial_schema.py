"""initial schema

Revision ID: 5c1e0a7d2b94
Revises:
Create Date: 2026-10-18 09:12:40.118204

"""
from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c1e0a7d2b94"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create staff, guest, room, reservation and room grant tables."""
    op.create_table(
        "staff",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("firstname", sa.Text(), nullable=False),
        sa.Column("lastname", sa.Text(), nullable=False),
        sa.Column("national_id", sa.String(length=32), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "guest",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("firstname", sa.Text(), nullable=False),
        sa.Column("lastname", sa.Text(), nullable=False),
        sa.Column("national_id", sa.String(length=32), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "room",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "reservation",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("guest_id", sa.String(length=36), nullable=False),
        sa.Column("check_in", sa.Date(), nullable=False),
        sa.Column("check_out", sa.Date(), nullable=False),
        sa.Column("check_in_enter_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("check_out_exit_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("special_requests", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["guest_id"], ["guest.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_reservation_guest_id", "reservation", ["guest_id"])
    op.create_index("ix_reservation_check_in", "reservation", ["check_in"])
    op.create_index("ix_reservation_check_out", "reservation", ["check_out"])
    op.create_table(
        "reservation_room",
        sa.Column("reservation_id", sa.String(length=36), nullable=False),
        sa.Column("room_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["reservation_id"], ["reservation.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["room_id"], ["room.id"]),
        sa.PrimaryKeyConstraint("reservation_id", "room_id"),
    )
    op.create_table(
        "guest_reservation_room",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("reservation_id", sa.String(length=36), nullable=False),
        sa.Column("room_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["reservation_id"], ["reservation.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["room_id"], ["room.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_guest_reservation_room_email", "guest_reservation_room", ["email"])
    op.create_index(
        "ix_guest_reservation_room_reservation_id", "guest_reservation_room", ["reservation_id"]
    )


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_index("ix_guest_reservation_room_reservation_id", table_name="guest_reservation_room")
    op.drop_index("ix_guest_reservation_room_email", table_name="guest_reservation_room")
    op.drop_table("guest_reservation_room")
    op.drop_table("reservation_room")
    op.drop_index("ix_reservation_check_out", table_name="reservation")
    op.drop_index("ix_reservation_check_in", table_name="reservation")
    op.drop_index("ix_reservation_guest_id", table_name="reservation")
    op.drop_table("reservation")
    op.drop_table("room")
    op.drop_table("guest")
    op.drop_table("staff")
