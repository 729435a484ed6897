"""Per-file checksum sidecars: ``X`` has its digest stored in ``X<extension>``."""

from __future__ import annotations

import os
from pathlib import Path

from filedigest.digest.digesters import Digester
from filedigest.errors import DigesterFailure


def checksum_path_for(path: str | os.PathLike[str], digester: Digester, *, output_dir: Path | None = None) -> Path:
    """Return the sidecar path holding the ``digester`` digest of ``path``."""

    source = Path(path)
    name = source.name + digester.filename_extension
    if output_dir is not None:
        return Path(output_dir) / name
    return source.with_name(name)


def write_checksum_file(
    path: str | os.PathLike[str],
    digester: Digester,
    *,
    output_dir: Path | None = None,
    digest: str | None = None,
) -> Path:
    """Store the digest of ``path``, without trailing newline, in its sidecar.

    ``digest`` skips recomputation when the caller already has it.
    """

    if digest is None:
        digest = digester.calc(path)
    dest = checksum_path_for(path, digester, output_dir=output_dir)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(digest, encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise DigesterFailure(f"Unable to write checksum file {dest}: {exc}", path=dest) from exc
    return dest


def read_checksum_file(checksum_path: str | os.PathLike[str]) -> str:
    """Return the digest stored in ``checksum_path``.

    Only the first whitespace-separated token is used, so ``<hex>  <name>``
    lines written by other tools are accepted too.
    """

    try:
        text = Path(checksum_path).read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise DigesterFailure(
            f"Unable to read checksum file {os.fspath(checksum_path)}: {exc}", path=checksum_path
        ) from exc

    tokens = text.split()
    if not tokens:
        raise DigesterFailure(f"Checksum file {os.fspath(checksum_path)} is empty", path=checksum_path)
    return tokens[0]


def verify_checksum_file(
    path: str | os.PathLike[str], digester: Digester, *, checksum_dir: Path | None = None
) -> None:
    """Verify ``path`` against the digest recorded in its sidecar."""

    expected = read_checksum_file(checksum_path_for(path, digester, output_dir=checksum_dir))
    digester.verify(path, expected)


__all__ = [
    "checksum_path_for",
    "read_checksum_file",
    "verify_checksum_file",
    "write_checksum_file",
]
