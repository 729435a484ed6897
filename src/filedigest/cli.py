"""Command-line entry points for filedigest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml

from filedigest.config import ConfigError, FileDigestConfig, dump_example_config, load_config
from filedigest.digest.algorithms import Algorithm
from filedigest.digest.digesters import Digester
from filedigest.digest.registry import DigesterRegistry
from filedigest.errors import DigesterFailure, DigestMismatch, UnsupportedAlgorithm
from filedigest.io.checksum_files import verify_checksum_file, write_checksum_file
from filedigest.io.summary import compute_records, write_summary
from filedigest.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Compute and verify file checksums")

EXIT_FAILURE = 1
EXIT_USAGE = 2


def _parse_settings(settings: Optional[List[str]]) -> dict[str, Any]:
    """Turn repeated ``--set key=value`` options into dotted config overrides."""

    overrides: dict[str, Any] = {}
    for item in settings or []:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            typer.echo(f"Invalid --set {item!r}; expected key=value.", err=True)
            raise typer.Exit(code=EXIT_USAGE)
        try:
            overrides[key.strip()] = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            typer.echo(f"Invalid value in --set {item!r}: {exc}", err=True)
            raise typer.Exit(code=EXIT_USAGE) from exc
    return overrides


def _load(config_path: Optional[Path], settings: Optional[List[str]] = None) -> FileDigestConfig:
    overrides = _parse_settings(settings)
    try:
        return load_config(config_path, overrides=overrides or None)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_USAGE) from exc


def _resolve_digesters(cfg: FileDigestConfig, algorithms: Optional[List[str]]) -> list[Digester]:
    registry = DigesterRegistry(
        chunk_size=cfg.digest.chunk_size,
        case_sensitive_verify=cfg.verify.case_sensitive,
    )
    names = algorithms or cfg.digest.algorithms
    try:
        return [registry.get_digester(name) for name in names]
    except UnsupportedAlgorithm as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_USAGE) from exc


def _handle_failure(exc: DigesterFailure, cfg: FileDigestConfig, logger: logging.Logger) -> None:
    if cfg.runtime.fail_on_error:
        logger.error("%s", exc)
        raise typer.Exit(code=EXIT_FAILURE)
    logger.warning("%s", exc)


@app.command()
def algorithms() -> None:
    """List supported algorithms and their checksum file extensions."""

    for algorithm in Algorithm:
        typer.echo(f"{algorithm.display_name}\t{algorithm.filename_extension}")


@app.command()
def calc(
    files: List[Path] = typer.Argument(..., help="Files to digest"),
    algorithm: Optional[List[str]] = typer.Option(
        None, "--algorithm", "-a", help="Algorithm to use; repeat for several (default from config)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (YAML/TOML/JSON)"),
    settings: Optional[List[str]] = typer.Option(
        None, "--set", help="Override a config value, e.g. --set runtime.fail_on_error=false; repeatable"
    ),
    write: Optional[bool] = typer.Option(None, "--write/--no-write", help="Write <file><extension> checksum files"),
    output_dir: Optional[Path] = typer.Option(None, help="Directory for checksum files (default: beside each file)"),
    summary: Optional[Path] = typer.Option(None, help="Write a summary of all digests to this path"),
    summary_format: Optional[str] = typer.Option(None, help="Summary format: csv or json"),
) -> None:
    """Compute checksums for FILES."""

    cfg = _load(config, settings)
    logger = configure_logging(log_path=cfg.runtime.log_file)
    digesters = _resolve_digesters(cfg, algorithm)

    individual_files = cfg.output.individual_files if write is None else write
    checksum_dir = output_dir or cfg.output.output_dir
    fmt = summary_format or cfg.output.summary_format
    summary_path = summary or (cfg.output.summary_file if fmt else None)
    if summary_path is not None and fmt is None:
        fmt = "json" if summary_path.suffix.lower() == ".json" else "csv"
    if fmt not in (None, "csv", "json"):
        typer.echo(f"Unsupported summary format {fmt!r}; expected csv or json.", err=True)
        raise typer.Exit(code=EXIT_USAGE)

    records = compute_records(files, digesters, on_error=lambda exc: _handle_failure(exc, cfg, logger))
    by_algorithm = {digester.algorithm: digester for digester in digesters}
    for record in records:
        if individual_files:
            try:
                sidecar = write_checksum_file(
                    record.path, by_algorithm[record.algorithm], output_dir=checksum_dir, digest=record.digest
                )
            except DigesterFailure as exc:
                _handle_failure(exc, cfg, logger)
            else:
                logger.info("Wrote %s", sidecar)
        typer.echo(f"{record.algorithm} ({record.path}) = {record.digest}")

    if summary_path is not None:
        write_summary(records, summary_path, fmt=fmt)
        logger.info("Wrote %s summary %s", fmt, summary_path)


@app.command()
def check(
    files: List[Path] = typer.Argument(..., help="Files to verify against their checksum files"),
    algorithm: Optional[List[str]] = typer.Option(
        None, "--algorithm", "-a", help="Algorithm to verify; repeat for several (default from config)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file (YAML/TOML/JSON)"),
    settings: Optional[List[str]] = typer.Option(
        None, "--set", help="Override a config value, e.g. --set runtime.fail_on_error=false; repeatable"
    ),
    checksum_dir: Optional[Path] = typer.Option(None, help="Directory holding the checksum files"),
) -> None:
    """Verify FILES against previously written checksum files."""

    cfg = _load(config, settings)
    logger = configure_logging(log_path=cfg.runtime.log_file)
    digesters = _resolve_digesters(cfg, algorithm)
    directory = checksum_dir or cfg.output.output_dir

    failures = 0
    for path in files:
        for digester in digesters:
            try:
                verify_checksum_file(path, digester, checksum_dir=directory)
            except DigestMismatch as exc:
                failures += 1
                typer.echo(f"{digester.algorithm} ({path}) MISMATCH")
                _handle_failure(exc, cfg, logger)
                continue
            except DigesterFailure as exc:
                failures += 1
                typer.echo(f"{digester.algorithm} ({path}) FAILED")
                _handle_failure(exc, cfg, logger)
                continue
            typer.echo(f"{digester.algorithm} ({path}) OK")

    if failures:
        logger.warning("%s verification(s) failed", failures)


@app.command("init-config")
def init_config(dest: Path = typer.Argument(Path("filedigest.yaml"), help="Where to write the example config")) -> None:
    """Write the default configuration as a starting point."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=EXIT_USAGE) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
