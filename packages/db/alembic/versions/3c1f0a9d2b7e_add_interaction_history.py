# This project was developed with assistance from AI tools.
"""add interaction history

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-12 09:14:27.503118

"""

import sqlalchemy as sa
from alembic import op

revision = "3c1f0a9d2b7e"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "interaction_history",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("model", sa.String(50), nullable=False),
        sa.Column("prompt", sa.Text(), nullable=False),
        sa.Column("result", sa.Text(), nullable=False),
        sa.Column("metadata", sa.JSON(), nullable=True),
        sa.Column(
            "timestamp",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_interaction_history_user_id", "interaction_history", ["user_id"])
    op.create_index("ix_interaction_history_timestamp", "interaction_history", ["timestamp"])


def downgrade() -> None:
    op.drop_index("ix_interaction_history_timestamp", table_name="interaction_history")
    op.drop_index("ix_interaction_history_user_id", table_name="interaction_history")
    op.drop_table("interaction_history")
