"""create content_metadata and user_analytics tables

Revision ID: 0001_create_content_tables
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import context, op
import sqlalchemy as sa

from internal.model.constant import (
    BUCKET_LENGTH,
    DEFAULT_CONTENT_TABLE,
    DEFAULT_USER_TABLE,
    ID_LENGTH,
    KEY_LENGTH,
    STATUS_LENGTH,
    USER_ID_LENGTH,
    created_at_index_name,
    source_index_name,
    user_index_name,
)


# revision identifiers, used by Alembic.
revision: str = "0001_create_content_tables"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _table_names():
    attributes = context.config.attributes
    return (
        attributes.get("content_table", DEFAULT_CONTENT_TABLE),
        attributes.get("user_table", DEFAULT_USER_TABLE),
        attributes.get("schema"),
    )


def upgrade() -> None:
    """Create both stores and the lookup indexes of the content table."""
    content_table, user_table, schema = _table_names()

    op.create_table(
        content_table,
        sa.Column("content_id", sa.String(ID_LENGTH), primary_key=True),
        sa.Column("user_id", sa.String(USER_ID_LENGTH), nullable=False),
        sa.Column("original_bucket", sa.String(BUCKET_LENGTH), nullable=False),
        sa.Column("original_key", sa.String(KEY_LENGTH), nullable=False),
        sa.Column("processed_key", sa.String(KEY_LENGTH), nullable=False),
        sa.Column("original_size", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("processed_size", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(STATUS_LENGTH), nullable=False, server_default="processed"),
        sa.Column("source_etag", sa.String(255), nullable=True),
        sa.Column("content_type", sa.String(127), nullable=True),
        sa.Column("width", sa.Integer(), nullable=True),
        sa.Column("height", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        schema=schema,
    )
    op.create_index(user_index_name(content_table), content_table, ["user_id"], schema=schema)
    op.create_index(created_at_index_name(content_table), content_table, ["created_at"], schema=schema)
    op.create_index(
        source_index_name(content_table), content_table, ["original_bucket", "original_key"], schema=schema
    )

    op.create_table(
        user_table,
        sa.Column("user_id", sa.String(USER_ID_LENGTH), primary_key=True),
        sa.Column("upload_count", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("last_upload", sa.DateTime(timezone=True), nullable=True),
        schema=schema,
    )


def downgrade() -> None:
    """Drop both stores."""
    content_table, user_table, schema = _table_names()

    op.drop_table(user_table, schema=schema)
    op.drop_index(source_index_name(content_table), table_name=content_table, schema=schema)
    op.drop_index(created_at_index_name(content_table), table_name=content_table, schema=schema)
    op.drop_index(user_index_name(content_table), table_name=content_table, schema=schema)
    op.drop_table(content_table, schema=schema)
