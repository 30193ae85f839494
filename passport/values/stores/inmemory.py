"""In-memory implementation of ValueStore."""

from collections.abc import Iterable

from passport.values.enums import ValueType
from passport.values.models import Value
from passport.values.store import ValueStore


class InMemoryValueStore(ValueStore):
    """In-memory implementation of ValueStore for testing and development."""

    def __init__(self, values: Iterable[Value] = ()) -> None:
        self._values: dict[ValueType, Value] = {}
        for value in values:
            self.save(value)

    def get(self, value_type: ValueType) -> Value | None:
        return self._values.get(value_type)

    def save(self, value: Value) -> None:
        self._values[value.type] = value

    def delete(self, value_type: ValueType) -> bool:
        return self._values.pop(value_type, None) is not None

    def types(self) -> list[ValueType]:
        return [value_type for value_type in ValueType if value_type in self._values]
