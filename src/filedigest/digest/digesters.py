"""Digester implementations: one checksum-style and one message-digest-style."""

from __future__ import annotations

import abc
import functools
import hashlib
import logging
import os
import zlib
from typing import Callable, Protocol

from Crypto.Hash import MD2

from filedigest.digest.algorithms import Algorithm
from filedigest.errors import DigesterFailure, DigestMismatch, UnsupportedAlgorithm

DEFAULT_CHUNK_SIZE = 8192

LOGGER = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


class DigestState(Protocol):
    """Per-call accumulation state fed with file chunks."""

    def update(self, data: bytes) -> None: ...

    def hexdigest(self) -> str: ...


class Digester(abc.ABC):
    """Computes and verifies the digest of whole files for one algorithm.

    Instances hold configuration only. Every :meth:`calc` call builds its own
    accumulation state, so one instance may be shared between threads.
    """

    def __init__(
        self,
        algorithm: Algorithm,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        case_sensitive_verify: bool = False,
    ) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self._algorithm = algorithm
        self._chunk_size = chunk_size
        self._case_sensitive_verify = case_sensitive_verify

    @property
    def algorithm(self) -> str:
        """Display name of the algorithm, e.g. ``SHA-256``."""
        return self._algorithm.display_name

    @property
    def filename_extension(self) -> str:
        """Suffix for checksum files of this algorithm, e.g. ``.sha256``."""
        return self._algorithm.filename_extension

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @abc.abstractmethod
    def _new_state(self) -> DigestState:
        """Return a fresh accumulation state for a single computation."""

    def calc(self, path: PathLike) -> str:
        """Return the lowercase hex digest of the file at ``path``.

        Raises :class:`DigesterFailure` when the file cannot be opened or read.
        """

        state = self._new_state()
        try:
            with open(path, "rb") as handle:
                for chunk in iter(lambda: handle.read(self._chunk_size), b""):
                    state.update(chunk)
        except (OSError, ValueError) as exc:
            raise DigesterFailure(
                f"Unable to compute {self.algorithm} digest of {os.fspath(path)}: {exc}",
                path=path,
            ) from exc
        return state.hexdigest()

    def verify(self, path: PathLike, expected: str) -> None:
        """Raise :class:`DigestMismatch` unless the file digest equals ``expected``."""

        actual = self.calc(path)
        wanted = str(expected).strip()
        if self._case_sensitive_verify:
            matches = actual == wanted
        else:
            matches = actual == wanted.lower()
        if not matches:
            raise DigestMismatch(self.algorithm, path=path, expected=wanted, actual=actual)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.algorithm!r}, chunk_size={self._chunk_size})"


class _Crc32State:
    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value = 0

    def update(self, data: bytes) -> None:
        self._value = zlib.crc32(data, self._value)

    def hexdigest(self) -> str:
        return f"{self._value & 0xFFFFFFFF:08x}"


class Crc32Digester(Digester):
    """CRC32 checksum rendered as 8 lowercase hex digits."""

    def __init__(self, *, chunk_size: int = DEFAULT_CHUNK_SIZE, case_sensitive_verify: bool = False) -> None:
        super().__init__(Algorithm.CRC32, chunk_size=chunk_size, case_sensitive_verify=case_sensitive_verify)

    def _new_state(self) -> DigestState:
        return _Crc32State()


def _engine_factory(algorithm: Algorithm) -> Callable[[], DigestState]:
    if algorithm is Algorithm.MD2:
        # OpenSSL 3 dropped MD2, so hashlib cannot be relied on for it.
        return MD2.new
    return functools.partial(hashlib.new, algorithm.engine_name, usedforsecurity=False)


class MessageDigestDigester(Digester):
    """Cryptographic hash digester (MD2, MD5 and the SHA family)."""

    def __init__(
        self,
        algorithm: Algorithm,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        case_sensitive_verify: bool = False,
    ) -> None:
        if algorithm.is_checksum:
            raise UnsupportedAlgorithm(algorithm.display_name, "not a message digest algorithm")
        super().__init__(algorithm, chunk_size=chunk_size, case_sensitive_verify=case_sensitive_verify)
        self._factory = _engine_factory(algorithm)
        try:
            self._factory()
        except ValueError as exc:
            raise UnsupportedAlgorithm(algorithm.display_name, str(exc)) from exc
        LOGGER.debug("Initialised %s engine", algorithm.display_name)

    def _new_state(self) -> DigestState:
        try:
            return self._factory()
        except ValueError as exc:
            raise DigesterFailure(f"{self.algorithm} engine is unavailable: {exc}") from exc


def build_digester(
    algorithm: Algorithm,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    case_sensitive_verify: bool = False,
) -> Digester:
    """Construct the digester variant matching ``algorithm``."""

    if algorithm.is_checksum:
        return Crc32Digester(chunk_size=chunk_size, case_sensitive_verify=case_sensitive_verify)
    return MessageDigestDigester(algorithm, chunk_size=chunk_size, case_sensitive_verify=case_sensitive_verify)


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "Crc32Digester",
    "DigestState",
    "Digester",
    "MessageDigestDigester",
    "build_digester",
]
