"""Configuration Pydantic models for dash-license-check."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError


class EffectiveConfig(BaseModel):
    """Effective configuration of a run.

    Field aliases are the parameter names used on the CLI and in config
    files (e.g. ``inputFile``). Instances are immutable once resolved.
    """

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    batch: int = Field(
        default=50,
        ge=1,
        description="Batch size passed as-is to dash-licenses",
    )
    config_file: str = Field(
        default="dashLicensesConfig.json",
        alias="configFile",
        description="Config file used to fine-tune the other parameters",
    )
    dry_run: bool = Field(
        default=False,
        alias="dryRun",
        description="Stop before launching dash-licenses",
    )
    exclusions: str = Field(
        default="dependency-check-exclusions.json",
        description="JSON file listing restricted dependencies already reviewed",
    )
    input_file: str = Field(
        default="yarn.lock",
        alias="inputFile",
        description="Dependency manifest passed as-is to dash-licenses",
    )
    project: str = Field(
        default="",
        description='Eclipse Foundation project name, e.g. "ecd.theia"',
    )
    review: bool = Field(
        default=False,
        description="Ask dash-licenses to open IP review tickets",
    )
    summary: str = Field(
        default="dependency-check-summary.txt",
        description="File in which dash-licenses saves its findings",
    )
    timeout: int = Field(
        default=240,
        ge=1,
        description="Timeout in minutes passed as-is to dash-licenses",
    )

    @classmethod
    def parameter_names(cls) -> list[str]:
        """Return the recognized parameter names, in declaration order."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    def to_parameters(self) -> dict[str, Any]:
        """Return the configuration keyed by parameter name."""
        return self.model_dump(by_alias=True)

    @classmethod
    def check_parameter(cls, name: str, value: Any) -> Optional[str]:
        """Validate a single parameter value in isolation.

        Args:
            name: Parameter name (alias), e.g. "batch".
            value: Raw value from the CLI or a config file.

        Returns:
            None if the value is acceptable, otherwise a short reason.
        """
        try:
            cls.model_validate({name: value})
        except ValidationError as e:
            return "; ".join(err["msg"] for err in e.errors())
        return None
