"""Policy settings schema using Pydantic.

This module defines the immutable contract for the password policy constants.
The defaults reproduce the fixed policy; a configuration file may only
override the documented fields.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_SPECIAL_CHARACTERS = "!@#$%^&*()-+"


class PolicySettings(BaseModel):
    """Password policy settings - immutable policy contract.

    Once validated, settings are read-only and shared by every rule.
    """

    min_length: int = Field(
        default=6, ge=1, le=1024, description="Minimum number of characters"
    )
    weak_min_length: int = Field(
        default=6, ge=0, le=1024, description="Shortest length flagged as weak"
    )
    weak_max_length: int = Field(
        default=9, ge=0, le=1024, description="Longest length flagged as weak"
    )
    special_characters: str = Field(
        default=DEFAULT_SPECIAL_CHARACTERS,
        min_length=1,
        description="Literal set of accepted special characters",
    )
    max_repeat: int = Field(
        default=2,
        ge=1,
        le=64,
        description="Maximum number of identical characters allowed in a row",
    )

    @field_validator("special_characters")
    @classmethod
    def validate_special_characters(cls, v: str) -> str:
        """Reject whitespace-only special character sets."""
        if not v.strip():
            raise ValueError("special_characters cannot be blank")
        return v

    @model_validator(mode="after")
    def validate_weak_band(self) -> "PolicySettings":
        """Ensure the weak band is not inverted."""
        if self.weak_max_length < self.weak_min_length:
            raise ValueError(
                f"weak_max_length ({self.weak_max_length}) must be >= "
                f"weak_min_length ({self.weak_min_length})"
            )
        return self

    @property
    def special_character_set(self) -> frozenset[str]:
        """Special characters as a set of literal characters."""
        return frozenset(self.special_characters)

    model_config = ConfigDict(
        frozen=True,  # Make settings immutable after validation
        extra="forbid",  # Reject extra fields
    )


DEFAULT_SETTINGS = PolicySettings()
