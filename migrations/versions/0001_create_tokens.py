"""Create tokens table

Revision ID: 0001
Revises:
Create Date: 2025-12-01 20:23:54.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "tokens",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("token", sa.String(), nullable=False),
        sa.Column("userId", sa.String(), nullable=False),
        sa.Column("scopes", postgresql.ARRAY(sa.String()).with_variant(sa.JSON(), "sqlite"), nullable=False),
        sa.Column("createdAt", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("expiresAt", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token"),
    )
    op.create_index(op.f("ix_tokens_userId"), "tokens", ["userId"], unique=False)
    op.create_index(op.f("ix_tokens_expiresAt"), "tokens", ["expiresAt"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_tokens_expiresAt"), table_name="tokens")
    op.drop_index(op.f("ix_tokens_userId"), table_name="tokens")
    op.drop_table("tokens")
