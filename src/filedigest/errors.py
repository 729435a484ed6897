"""Exception hierarchy for filedigest."""

from __future__ import annotations

import os


class FileDigestError(Exception):
    """Package base exception."""


class UnsupportedAlgorithm(FileDigestError, ValueError):
    """Requested digest algorithm is unknown or unavailable in this runtime."""

    def __init__(self, algorithm: str, reason: str | None = None) -> None:
        message = f"Unsupported digest algorithm {algorithm!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.algorithm = algorithm


class DigesterFailure(FileDigestError):
    """Digest computation or verification failed for a file."""

    def __init__(self, message: str, *, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.path = path


class DigestMismatch(DigesterFailure):
    """Computed digest differs from the expected value."""

    def __init__(
        self,
        algorithm: str,
        *,
        path: str | os.PathLike[str],
        expected: str,
        actual: str,
    ) -> None:
        super().__init__(
            f"{algorithm} digest mismatch for {os.fspath(path)}: expected {expected}, got {actual}",
            path=path,
        )
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual


class ConfigError(FileDigestError, RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


__all__ = [
    "ConfigError",
    "DigestMismatch",
    "DigesterFailure",
    "FileDigestError",
    "UnsupportedAlgorithm",
]
