"""The closed set of digest algorithms filedigest knows how to compute."""

from __future__ import annotations

from enum import Enum

from filedigest.errors import UnsupportedAlgorithm


class Algorithm(str, Enum):
    """Supported algorithms, valued by their display name."""

    CRC32 = "CRC32"
    MD2 = "MD2"
    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def filename_extension(self) -> str:
        """Suffix of the sidecar file holding a digest, e.g. ``.sha256``."""
        return "." + self.value.replace("-", "").lower()

    @property
    def engine_name(self) -> str:
        """Name understood by :func:`hashlib.new` (``sha-256`` -> ``sha256``)."""
        return self.value.replace("-", "").lower()

    @property
    def is_checksum(self) -> bool:
        return self is Algorithm.CRC32

    @classmethod
    def parse(cls, name: str) -> "Algorithm":
        """Resolve ``name`` case-insensitively, raising :class:`UnsupportedAlgorithm`."""

        if not isinstance(name, str):
            raise UnsupportedAlgorithm(repr(name), "algorithm names must be strings")
        try:
            return _BY_UPPER_NAME[name.upper()]
        except KeyError:
            raise UnsupportedAlgorithm(name) from None


_BY_UPPER_NAME = {member.value.upper(): member for member in Algorithm}


def supported_algorithms() -> tuple[str, ...]:
    """Return display names of every supported algorithm in declaration order."""
    return tuple(member.value for member in Algorithm)


__all__ = ["Algorithm", "supported_algorithms"]
