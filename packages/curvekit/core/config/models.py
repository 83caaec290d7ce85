"""Configuration models for curvekit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from curvekit.core.curves.defaults import (
    DEFAULT_LEFT_LIMIT,
    DEFAULT_PERCENT_INSET,
    DEFAULT_RIGHT_LIMIT,
)
from curvekit.core.curves.models import VerticalHandle


class CurveDefaults(BaseModel):
    """Defaults applied when curves are built from configuration."""

    model_config = ConfigDict(extra="forbid")

    percent_inset: float = Field(
        default=DEFAULT_PERCENT_INSET,
        gt=0.0,
        lt=0.5,
        description="Fraction of the limit span between each limit and its intercept",
    )

    left_limit: float = Field(
        default=DEFAULT_LEFT_LIMIT, allow_inf_nan=False, description="Start-side asymptote"
    )

    right_limit: float = Field(
        default=DEFAULT_RIGHT_LIMIT, allow_inf_nan=False, description="End-side asymptote"
    )

    @model_validator(mode="after")
    def _validate_limits(self) -> CurveDefaults:
        if self.left_limit == self.right_limit:
            raise ValueError("left_limit and right_limit must differ")
        return self

    def default_handles(self) -> tuple[VerticalHandle, VerticalHandle]:
        """Handles pinning both limits to the configured values."""
        return (
            VerticalHandle.left_limit(self.left_limit),
            VerticalHandle.right_limit(self.right_limit),
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="forbid")

    curves: CurveDefaults = Field(default_factory=CurveDefaults)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
