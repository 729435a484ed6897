"""Summary files listing the digests of many files at once."""

from __future__ import annotations

import csv
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Literal, Sequence

from filedigest.digest.digesters import Digester
from filedigest.errors import DigesterFailure

SummaryFormat = Literal["csv", "json"]


@dataclass(frozen=True)
class ChecksumRecord:
    """Digest of one file under one algorithm."""

    path: str
    algorithm: str
    digest: str


def compute_records(
    paths: Iterable[str | os.PathLike[str]],
    digesters: Sequence[Digester],
    *,
    on_error: Callable[[DigesterFailure], None] | None = None,
) -> list[ChecksumRecord]:
    """Compute every file against every digester, preserving input order.

    Without ``on_error`` the first :class:`DigesterFailure` propagates. With it,
    the failure is handed over and that file/digester pair is left out.
    """

    records: list[ChecksumRecord] = []
    for path in paths:
        for digester in digesters:
            try:
                digest = digester.calc(path)
            except DigesterFailure as exc:
                if on_error is None:
                    raise
                on_error(exc)
                continue
            records.append(ChecksumRecord(os.fspath(path), digester.algorithm, digest))
    return records


def _group_by_file(records: Iterable[ChecksumRecord]) -> tuple[list[str], dict[str, dict[str, str]]]:
    algorithms: list[str] = []
    files: dict[str, dict[str, str]] = {}
    for record in records:
        if record.algorithm not in algorithms:
            algorithms.append(record.algorithm)
        files.setdefault(record.path, {})[record.algorithm] = record.digest
    return algorithms, files


def write_summary(records: Iterable[ChecksumRecord], dest: Path, *, fmt: SummaryFormat = "csv") -> Path:
    """Write ``records`` to ``dest`` as one row/entry per file and return ``dest``."""

    if fmt not in ("csv", "json"):
        raise ValueError(f"Unsupported summary format {fmt!r}; expected 'csv' or 'json'.")

    algorithms, files = _group_by_file(records)
    dest.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "json":
        payload = {
            "files": [{"file": name, "checksums": checksums} for name, checksums in files.items()],
        }
        dest.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return dest

    with dest.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["File", *algorithms])
        for name, checksums in files.items():
            writer.writerow([name, *(checksums.get(algorithm, "") for algorithm in algorithms)])
    return dest


__all__ = ["ChecksumRecord", "SummaryFormat", "compute_records", "write_summary"]
