"""Submitted values: the typed data items of a passport form."""

from passport.values.enums import ValueType
from passport.values.models import ScanFile, Value
from passport.values.store import ValueStore
from passport.values.stores import InMemoryValueStore

__all__ = [
    "InMemoryValueStore",
    "ScanFile",
    "Value",
    "ValueStore",
    "ValueType",
]
