"""Table registry for the metadata store.

Table names are configurable, so tables are built at runtime by the factory
functions in content_metadata.py / user_analytics.py and grouped here.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import MetaData, Table

from .constant import DEFAULT_CONTENT_TABLE, DEFAULT_USER_TABLE
from .content_metadata import new_content_metadata_table
from .user_analytics import new_user_analytics_table


@dataclass
class Tables:
    metadata: MetaData
    content_metadata: Table
    user_analytics: Table


def new_tables(
    content_table: str = DEFAULT_CONTENT_TABLE,
    user_table: str = DEFAULT_USER_TABLE,
    schema: Optional[str] = None,
) -> Tables:
    """Build both tables on a fresh MetaData."""
    metadata = MetaData(schema=schema)
    return Tables(
        metadata=metadata,
        content_metadata=new_content_metadata_table(content_table, metadata),
        user_analytics=new_user_analytics_table(user_table, metadata),
    )


__all__ = ["Tables", "new_tables"]
