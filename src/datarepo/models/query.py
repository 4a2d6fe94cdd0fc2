"""Query options passed through to data clients.

Repositories never interpret these; they are forwarded to the client as-is.
How a filter, sort or page is applied is up to the client and its backend.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import SortOrder

# Field name -> constraint, e.g. {"category": "news", "views": {"$gt": 10}}
Filter = dict[str, Any]

# Aggregation stage or result document
Document = dict[str, Any]


class SortOption(BaseModel):
    """A single field to sort by, applied in list order."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    field: str
    order: SortOrder = SortOrder.ASC


class PaginationOptions(BaseModel):
    """Cursor and page size for list queries.

    A missing cursor requests the first page; a missing limit leaves the
    page size to the client.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    cursor: str | None = None
    limit: int | None = Field(default=None, gt=0)
