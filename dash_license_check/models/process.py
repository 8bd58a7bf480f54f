"""Models describing external process executions."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ProcessStatus(BaseModel):
    """Outcome of a synchronous external process execution."""

    model_config = {"extra": "forbid", "frozen": True}

    bin: str = Field(description="Executable that was launched")
    args: list[str] = Field(default_factory=list, description="Arguments passed")
    returncode: Optional[int] = Field(
        default=None,
        description="Exit code, or None when the process was killed by a signal",
    )
    signal: Optional[str] = Field(
        default=None,
        description="Name of the signal that terminated the process",
    )

    @property
    def command(self) -> list[str]:
        """Full command line, executable first."""
        return [self.bin, *self.args]

    @property
    def succeeded(self) -> bool:
        """Check if the process exited normally with code 0."""
        return self.signal is None and self.returncode == 0
