"""
Command line interface for sample retrieval.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from sample_retrieval.clients import SampleServiceValidationError, SampleXmlClient
from sample_retrieval.config import Settings, load_settings
from sample_retrieval.logging_utils import configure_logging, get_logger
from sample_retrieval.models import Sample

app = typer.Typer(
    name="sample-retrieval",
    help="Retrieve sample records from the submission service",
)
logger = get_logger(__name__)


def _settings(
    config_path: Optional[Path],
    test: Optional[bool],
    username: Optional[str] = None,
) -> Settings:
    overrides = {"test_mode": test, "webin_username": username}
    try:
        return load_settings(yaml_path=config_path, overrides=overrides)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Invalid settings: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _format_sample(sample: Sample) -> str:
    lines = [
        f"name: {sample.name if sample.name is not None else ''}",
        f"tax_id: {sample.tax_id if sample.tax_id is not None else ''}",
        f"organism: {sample.organism or ''}",
        f"attributes: {len(sample.attributes)}",
    ]
    for attribute in sample.attributes:
        value = attribute.value or ""
        if attribute.units:
            value = f"{value} {attribute.units}"
        lines.append(f"  {attribute.tag}: {value}")
    return "\n".join(lines)


@app.command()
def fetch(
    sample_id: str = typer.Argument(..., help="Sample accession or alias."),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=False,
        help="Optional YAML settings override.",
    ),
    test: Optional[bool] = typer.Option(
        None,
        "--test/--no-test",
        help="Use the test submission service.",
    ),
    username: Optional[str] = typer.Option(
        None,
        "--username",
        "-u",
        help="Submission account; the password is read from settings.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the sample as JSON."),
) -> None:
    """Fetch a sample and print it."""
    settings = _settings(config_path, test, username)
    configure_logging(settings.log_level)

    client = SampleXmlClient(settings)
    try:
        sample = client.get_sample(sample_id)
    except SampleServiceValidationError as exc:
        logger.debug("Sample retrieval failed", exc_info=exc)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(sample.to_dict(), indent=2))
    else:
        typer.echo(_format_sample(sample))


@app.command("settings")
def show_settings(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=False,
        help="Optional YAML settings override.",
    ),
) -> None:
    """Print resolved settings for debugging."""
    settings = _settings(config_path, None)
    for key, value in settings.model_dump().items():
        typer.echo(f"{key}: {value}")


def main_cli() -> None:
    """Allow `python -m sample_retrieval` execution."""
    app()


if __name__ == "__main__":
    main_cli()
