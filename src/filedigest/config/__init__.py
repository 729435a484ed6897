"""Configuration models and loaders for filedigest."""

from filedigest.errors import ConfigError

from .loader import ALGORITHMS_ENV_VAR, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import (
    DigestConfig,
    FileDigestConfig,
    OutputConfig,
    RuntimeConfig,
    VerifyPolicyConfig,
)

__all__ = [
    "ALGORITHMS_ENV_VAR",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DigestConfig",
    "FileDigestConfig",
    "OutputConfig",
    "RuntimeConfig",
    "VerifyPolicyConfig",
    "dump_example_config",
    "load_config",
]
