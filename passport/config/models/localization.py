"""Localization configuration models."""

from pydantic import BaseModel, Field


class LocalizationConfig(BaseModel):
    """Display string configuration.

    Overrides are keyed by the symbolic string key, for example
    ``lng_passport_identity_passport``.
    """

    locale: str = Field(default="en", description="Locale of the base display string table")
    overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Replacement strings by symbolic key",
    )
