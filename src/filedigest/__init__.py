"""Compute and verify file digests through a registry of named algorithms."""

from filedigest.digest import (
    Algorithm,
    Crc32Digester,
    Digester,
    DigesterRegistry,
    MessageDigestDigester,
    default_registry,
    get_digester,
    supported_algorithms,
)
from filedigest.errors import (
    ConfigError,
    DigestMismatch,
    DigesterFailure,
    FileDigestError,
    UnsupportedAlgorithm,
)

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "ConfigError",
    "Crc32Digester",
    "DigestMismatch",
    "Digester",
    "DigesterFailure",
    "DigesterRegistry",
    "FileDigestError",
    "MessageDigestDigester",
    "UnsupportedAlgorithm",
    "default_registry",
    "get_digester",
    "supported_algorithms",
]
