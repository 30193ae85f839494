"""Enums for field schemes."""

from enum import Enum


class ValueClass(str, Enum):
    """Which value of a scope a scheme row reads from."""

    FIELDS = "fields"  # The scope's primary fields value
    DOCUMENT = "document"  # The chosen alternative document
