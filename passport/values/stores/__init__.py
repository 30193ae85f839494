"""Value store implementations."""

from passport.values.stores.inmemory import InMemoryValueStore

__all__ = ["InMemoryValueStore"]
