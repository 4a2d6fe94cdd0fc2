"""Response envelopes returned by data clients."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ResponseMetadata(BaseModel):
    """Optional metadata attached to a successful response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    request_id: str | None = None
    timestamp: datetime | None = None


class SuccessApiResponse(BaseModel, Generic[T]):
    """Envelope around a successful payload.

    The payload is an item, a page of items, a count or a list of
    aggregation documents depending on the operation.
    """

    # Items may be plain classes (neither pydantic models nor dataclasses);
    # those are only isinstance-checked when the envelope is parametrized.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    data: T
    metadata: ResponseMetadata | None = None


class PaginatedResponse(BaseModel, Generic[T]):
    """A page of items plus a continuation cursor."""

    # Same as SuccessApiResponse: plain item classes are isinstance-checked
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    items: list[T] = Field(default_factory=list)
    cursor: str | None = None  # Opaque token for the next page, None on the last one
    has_more: bool = False
