"""Enums for query options."""

from enum import Enum


class SortOrder(str, Enum):
    """Direction of a sort field."""

    ASC = "asc"
    DESC = "desc"
