"""Digest algorithms, digesters and the registry resolving them by name."""

from .algorithms import Algorithm, supported_algorithms
from .digesters import (
    DEFAULT_CHUNK_SIZE,
    Crc32Digester,
    Digester,
    MessageDigestDigester,
    build_digester,
)
from .registry import DigesterRegistry, default_registry, get_digester

__all__ = [
    "Algorithm",
    "Crc32Digester",
    "DEFAULT_CHUNK_SIZE",
    "Digester",
    "DigesterRegistry",
    "MessageDigestDigester",
    "build_digester",
    "default_registry",
    "get_digester",
    "supported_algorithms",
]
