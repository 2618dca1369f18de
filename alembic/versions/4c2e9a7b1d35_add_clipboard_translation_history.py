"""add clipboard translation history table

Revision ID: 4c2e9a7b1d35
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4c2e9a7b1d35"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if "clipboard_translation_history" not in inspector.get_table_names():
        op.create_table(
            "clipboard_translation_history",
            sa.Column("id", sa.String(length=36), primary_key=True),
            sa.Column("user_id", sa.String(length=255), nullable=False),
            sa.Column("source_language", sa.String(length=35), nullable=True),
            sa.Column("target_language", sa.String(length=35), nullable=True),
            sa.Column("original_text", sa.Text(), nullable=False),
            sa.Column("translated_text", sa.Text(), nullable=False),
            sa.Column("context_hint", sa.String(length=255), nullable=True),
            sa.Column("is_favorite", sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )

    existing_indexes = {idx["name"] for idx in inspector.get_indexes("clipboard_translation_history")}

    if "ix_clipboard_translation_history_user_id" not in existing_indexes:
        op.create_index(
            "ix_clipboard_translation_history_user_id",
            "clipboard_translation_history",
            ["user_id"],
        )
    if "ix_clipboard_translation_history_user_favorite" not in existing_indexes:
        op.create_index(
            "ix_clipboard_translation_history_user_favorite",
            "clipboard_translation_history",
            ["user_id", "is_favorite"],
        )


def downgrade() -> None:
    op.drop_index("ix_clipboard_translation_history_user_favorite", table_name="clipboard_translation_history")
    op.drop_index("ix_clipboard_translation_history_user_id", table_name="clipboard_translation_history")
    op.drop_table("clipboard_translation_history")
