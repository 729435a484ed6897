"""Pydantic models describing filedigest configuration."""

from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filedigest.digest.algorithms import Algorithm
from filedigest.digest.digesters import DEFAULT_CHUNK_SIZE


class DigestConfig(BaseModel):
    """Which algorithms to compute and how files are read."""

    model_config = ConfigDict(extra="allow")

    algorithms: List[str] = Field(default_factory=lambda: ["MD5", "SHA-1"])
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1)

    @field_validator("algorithms")
    @classmethod
    def _validate_algorithms(cls, value: List[str]) -> List[str]:
        """Reject empty lists and names no digester exists for."""

        if not value:
            raise ValueError("at least one algorithm is required.")
        for name in value:
            Algorithm.parse(name)
        return value


class VerifyPolicyConfig(BaseModel):
    """How expected digests are compared."""

    model_config = ConfigDict(extra="allow")

    case_sensitive: bool = False


class OutputConfig(BaseModel):
    """Checksum sidecar and summary file output."""

    model_config = ConfigDict(extra="allow")

    individual_files: bool = True
    output_dir: Optional[Path] = None
    summary_format: Optional[Literal["csv", "json"]] = None
    summary_file: Path = Path("checksums.csv")


class RuntimeConfig(BaseModel):
    """Execution-time behaviour of the command line."""

    model_config = ConfigDict(extra="allow")

    fail_on_error: bool = True
    log_file: Optional[Path] = None


class FileDigestConfig(BaseModel):
    """Root configuration object for filedigest."""

    model_config = ConfigDict(extra="allow")

    digest: DigestConfig = Field(default_factory=DigestConfig)
    verify: VerifyPolicyConfig = Field(default_factory=VerifyPolicyConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


__all__ = [
    "DigestConfig",
    "FileDigestConfig",
    "OutputConfig",
    "RuntimeConfig",
    "VerifyPolicyConfig",
]
