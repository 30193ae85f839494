"""Value domain models.

Values are owned by the form store. Scopes built from them keep
references to the same instances, so edits to a Value show up in the
next summary computed for its scope.
"""

from pydantic import BaseModel, ConfigDict, Field

from passport.values.enums import ValueType


class ScanFile(BaseModel):
    """Reference to an uploaded scan or selfie.

    Only presence matters here; the content lives in file storage.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Storage identifier")
    size_bytes: int | None = Field(default=None, ge=0, description="File size")


class Value(BaseModel):
    """Single submitted datum of a passport form."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    type: ValueType = Field(..., description="Kind of datum")
    fields: dict[str, str] = Field(
        default_factory=dict, description="Field values by key"
    )
    scans: list[ScanFile] = Field(
        default_factory=list, description="Attached document scans"
    )
    selfie: ScanFile | None = Field(
        default=None, description="Selfie holding the document"
    )

    @property
    def has_scans(self) -> bool:
        """Whether at least one scan is attached."""
        return bool(self.scans)
