"""Name-to-digester resolution with a per-registry instance cache."""

from __future__ import annotations

import logging
import threading

from filedigest.digest.algorithms import Algorithm, supported_algorithms
from filedigest.digest.digesters import DEFAULT_CHUNK_SIZE, Digester, build_digester

LOGGER = logging.getLogger(__name__)


class DigesterRegistry:
    """Resolve algorithm names to shared :class:`Digester` instances.

    The cache is keyed by the name exactly as supplied, so ``"md5"`` and
    ``"MD5"`` each get their own (equivalent) instance. Entries are never
    evicted.
    """

    def __init__(self, *, chunk_size: int = DEFAULT_CHUNK_SIZE, case_sensitive_verify: bool = False) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self._chunk_size = chunk_size
        self._case_sensitive_verify = case_sensitive_verify
        self._digesters: dict[str, Digester] = {}

    def get_digester(self, algorithm: str) -> Digester:
        """Return the digester for ``algorithm``, building it on first request.

        Raises :class:`~filedigest.errors.UnsupportedAlgorithm` for unknown
        names or engines the runtime cannot provide.
        """

        if isinstance(algorithm, str):
            digester = self._digesters.get(algorithm)
            if digester is not None:
                return digester

        resolved = Algorithm.parse(algorithm)
        candidate = build_digester(
            resolved,
            chunk_size=self._chunk_size,
            case_sensitive_verify=self._case_sensitive_verify,
        )
        LOGGER.debug("Caching %s digester under %r", resolved.display_name, algorithm)
        # Concurrent first requests converge on whichever instance landed first.
        return self._digesters.setdefault(algorithm, candidate)

    def supported_algorithms(self) -> tuple[str, ...]:
        return supported_algorithms()

    def __len__(self) -> int:
        return len(self._digesters)


_default_registry: DigesterRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> DigesterRegistry:
    """Return the lazily-created process-wide registry."""

    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = DigesterRegistry()
    return _default_registry


def get_digester(algorithm: str) -> Digester:
    """Shortcut for ``default_registry().get_digester(algorithm)``."""
    return default_registry().get_digester(algorithm)


__all__ = ["DigesterRegistry", "default_registry", "get_digester"]
