"""
Configuration models for ChainSync.

This module defines Pydantic models for configuration validation.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEOUT_MS = 30000
DEFAULT_MAX_RETRIES = 3


class ChainSyncConfig(BaseModel):
    """Pydantic model for processor configuration.

    ``timeout`` and ``max_retries`` are stored as given but nothing reads
    them; the processor has no timeout or retry handling.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    verbose: bool = Field(default=False)
    timeout: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        validation_alias=AliasChoices("timeout", "timeoutMs", "timeout_ms"),
    )
    max_retries: int = Field(
        default=DEFAULT_MAX_RETRIES,
        validation_alias=AliasChoices("max_retries", "maxRetries"),
    )

    @field_validator("timeout", "max_retries")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate that the value is not negative."""
        if v < 0:
            raise ValueError("Value cannot be negative")
        return v

    def merged(self, **overrides) -> "ChainSyncConfig":
        """Return a copy with the given non-None fields replaced."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ChainSyncConfig(**values)
