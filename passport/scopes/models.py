"""Scope domain models."""

from pydantic import BaseModel, ConfigDict, Field

from passport.scopes.enums import ScopeType
from passport.values.enums import ValueType
from passport.values.models import Value


class Scope(BaseModel):
    """A verification requirement built from the values of a form.

    ``fields`` and ``documents`` reference Values owned by the form store;
    a Scope must not be kept past the lifetime of that store.
    """

    model_config = ConfigDict(frozen=False)

    type: ScopeType = Field(..., description="Scope kind")
    fields: Value = Field(..., description="Value holding the primary fields")
    documents: list[Value] = Field(
        default_factory=list, description="Accepted alternative documents"
    )
    selfie_required: bool = Field(
        default=False, description="Document must come with a selfie"
    )

    def has_document(self, value_type: ValueType) -> bool:
        """Whether a document of the given type is already attached."""
        return any(document.type == value_type for document in self.documents)


class ScopeRow(BaseModel):
    """Display data for one scope in the form checklist."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Row title")
    description: str = Field(..., description="Row description")
    ready_summary: str = Field(
        default="", description="Completeness summary, empty when not ready"
    )

    @property
    def ready(self) -> bool:
        return bool(self.ready_summary)
