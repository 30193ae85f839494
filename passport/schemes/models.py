"""Scheme models describing how a scope's fields are checked and shown."""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from passport.lang.keys import LangKey
from passport.schemes.enums import ValueClass
from passport.scopes.enums import ScopeType
from passport.values.enums import ValueType

Formatter = Callable[[str], str]
Validator = Callable[[str], bool]


class SchemeRow(BaseModel):
    """One field of a document scheme.

    A row without ``validator`` accepts any present value; a row without
    ``formatter`` shows the value as entered.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Field key to look up")
    value_class: ValueClass = Field(..., description="Value the row reads from")
    title: LangKey | None = Field(default=None, description="Display label")
    formatter: Formatter | None = Field(default=None, description="Display formatter")
    validator: Validator | None = Field(default=None, description="Acceptance check")

    def accepts(self, value: str) -> bool:
        return self.validator is None or self.validator(value)

    def render(self, value: str) -> str:
        return value if self.formatter is None else self.formatter(value)


class DocumentScheme(BaseModel):
    """Ordered field rows of an identity or address scope."""

    model_config = ConfigDict(frozen=True)

    scope_type: ScopeType = Field(..., description="Scope the scheme describes")
    rows: tuple[SchemeRow, ...] = Field(default=(), description="Rows in display order")

    @property
    def has_document_rows(self) -> bool:
        return any(row.value_class == ValueClass.DOCUMENT for row in self.rows)


class ContactScheme(BaseModel):
    """Single-value scheme of a phone or email scope."""

    model_config = ConfigDict(frozen=True)

    scope_type: ScopeType = Field(..., description="Scope the scheme describes")
    value_type: ValueType = Field(..., description="Value holding the contact")
    formatter: Formatter | None = Field(default=None, description="Display formatter")
    validator: Validator | None = Field(default=None, description="Acceptance check")

    def render(self, value: str) -> str:
        return value if self.formatter is None else self.formatter(value)
