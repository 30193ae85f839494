"""ValueStore abstract interface."""

from abc import ABC, abstractmethod

from passport.values.enums import ValueType
from passport.values.models import Value


class ValueStore(ABC):
    """Abstract interface for the values of one passport form.

    A form holds at most one Value per ValueType.
    """

    @abstractmethod
    def get(self, value_type: ValueType) -> Value | None:
        """Get the value of the given type, if any."""
        pass

    @abstractmethod
    def save(self, value: Value) -> None:
        """Save a value, replacing any value of the same type."""
        pass

    @abstractmethod
    def delete(self, value_type: ValueType) -> bool:
        """Delete the value of the given type."""
        pass

    @abstractmethod
    def types(self) -> list[ValueType]:
        """List the types that currently have a value."""
        pass

    def __contains__(self, value_type: object) -> bool:
        return isinstance(value_type, ValueType) and self.get(value_type) is not None
