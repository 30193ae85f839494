"""Test factories for passport domain models."""

from tests.factories.values import ValueFactory

__all__ = ["ValueFactory"]
