from __future__ import annotations

import hashlib
import zlib
from pathlib import Path

from Crypto.Hash import MD2

from filedigest.digest.digesters import Digester

RESOURCES = Path(__file__).resolve().parent / "resources"
SAMPLES_DIR = RESOURCES / "samples"
CHECKSUMS_DIR = RESOURCES / "checksums"

ALL_ALGORITHMS = ("CRC32", "MD2", "MD5", "SHA-1", "SHA-256", "SHA-384", "SHA-512")
MISSING_PATH = Path("some/path/that/does/not/exist")


def sample_files() -> list[Path]:
    """Return the sample files that have precomputed checksums."""

    return sorted(path for path in SAMPLES_DIR.iterdir() if path.is_file())


def reference_checksum(sample: Path, digester: Digester) -> str:
    """Read the precomputed digest of ``sample`` for ``digester``."""

    return (CHECKSUMS_DIR / (sample.name + digester.filename_extension)).read_text(encoding="utf-8")


def reference_digest(algorithm: str, data: bytes) -> str:
    """Digest ``data`` in one shot with an independent implementation."""

    name = algorithm.upper()
    if name == "CRC32":
        return f"{zlib.crc32(data) & 0xFFFFFFFF:08x}"
    if name == "MD2":
        return MD2.new(data).hexdigest()
    return hashlib.new(name.replace("-", "").lower(), data).hexdigest()


def write_repeating_file(path: Path, *, size: int, pattern: bytes = b"0123456789abcdef\x00\xff") -> bytes:
    """Write ``size`` bytes of ``pattern`` repeated to ``path`` and return them."""

    repeats = size // len(pattern) + 1
    data = (pattern * repeats)[:size]
    path.write_bytes(data)
    return data
