"""Command line interface for FigDict."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from figdict.config import AppConfig
from figdict.errors import FigDictError
from figdict.export.formatters import (
    dictionary_to_csv,
    dictionary_to_json,
    text_layers_to_csv,
    text_layers_to_json,
)
from figdict.ingestion.figma_client import FigmaClient
from figdict.ingestion.tree import collect_text_leaves
from figdict.models import TargetSelector
from figdict.pipeline import analyze_file, root_for_selector
from figdict.utils.files import output_prefix, write_text_atomic
from figdict.web.app import app as web_app


console = Console()
app = typer.Typer(help="FigDict - data dictionaries from Figma text layers")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(exc: FigDictError) -> NoReturn:
    console.print(f"[red]Error: {escape(str(exc))}[/red]")
    raise typer.Exit(code=1)


def _build_config(
    token: Optional[str],
    file_key: Optional[str],
    target_type: str = "file",
    target_name: Optional[str] = None,
    target_id: Optional[str] = None,
    output_dir: Optional[Path] = None,
) -> AppConfig:
    config = AppConfig(
        token=token,
        file_key=file_key,
        target_type=target_type,
        target_name=target_name,
        target_id=target_id,
        output_dir=output_dir if output_dir is not None else Path("."),
    )
    config.validate()
    return config


def _client(config: AppConfig) -> FigmaClient:
    return FigmaClient(config.token or "", base_url=config.api_base, timeout=config.timeout)


@app.callback()
def main() -> None:
    # FIGMA_TOKEN, FILE_KEY and TARGET_* may come from .env in the working directory.
    load_dotenv(Path.cwd() / ".env")


@app.command()
def analyze(
    token: Optional[str] = typer.Option(None, envvar="FIGMA_TOKEN", help="Figma access token"),
    file_key: Optional[str] = typer.Option(None, envvar="FILE_KEY", help="Figma file key"),
    target_type: str = typer.Option(
        "file", envvar="TARGET_TYPE", help="What to analyze: file, page, frame or node"
    ),
    target_name: Optional[str] = typer.Option(None, envvar="TARGET_NAME", help="Page or frame name"),
    target_id: Optional[str] = typer.Option(None, envvar="TARGET_ID", help="Page, frame or node id"),
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-o", help="Where to write results"),
    top: int = typer.Option(5, help="Number of fields to display"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Generate a data dictionary of likely dynamic fields."""
    _setup_logging(verbose)
    try:
        config = _build_config(token, file_key, target_type, target_name, target_id, output_dir)
        selector = config.selector()
        console.print("Fetching Figma file...")
        result = analyze_file(
            _client(config),
            config.file_key or "",
            selector,
            use_nodes_endpoint=config.target_id is not None,
        )
    except FigDictError as exc:
        _fail(exc)

    console.print(f"Found target: [bold]{escape(result.target.name)}[/bold] ({result.target.type})")
    console.print(f"Found {len(result.text_layers)} text layers in {selector.kind.value}")
    console.print(f"Identified {len(result.dictionary)} potential dynamic fields")

    sorted_fields = result.sorted_fields()
    prefix = output_prefix(selector)
    json_path = write_text_atomic(config.output_dir / f"{prefix}.json", dictionary_to_json(sorted_fields))
    console.print(f"Data dictionary exported to [bold]{json_path}[/bold]")
    csv_path = write_text_atomic(
        config.output_dir / f"{prefix}-summary.csv", dictionary_to_csv(sorted_fields)
    )
    console.print(f"Summary exported to [bold]{csv_path}[/bold]")

    if not sorted_fields:
        console.print("[yellow]No dynamic fields found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta", title=f"Top {top} identified fields")
    table.add_column("Field")
    table.add_column("Confidence")
    table.add_column("Type")
    table.add_column("Figma Name")
    table.add_column("Original Text")
    for key, field in sorted_fields[:top]:
        table.add_row(
            escape(key),
            f"{field.confidence}%",
            field.category,
            escape(field.source_name),
            escape(field.original_text.replace("\n", " ")[:80]),
        )
    console.print(table)


@app.command()
def extract(
    token: Optional[str] = typer.Option(None, envvar="FIGMA_TOKEN", help="Figma access token"),
    file_key: Optional[str] = typer.Option(None, envvar="FILE_KEY", help="Figma file key"),
    fmt: str = typer.Option("csv", "--format", "-f", help="Output format: csv or json"),
    output: Optional[Path] = typer.Option(None, "--output", help="Output file path"),
    preview: int = typer.Option(5, help="Number of text layers to preview"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Export every text layer of a file."""
    _setup_logging(verbose)
    fmt = fmt.lower()
    if fmt not in ("csv", "json"):
        raise typer.BadParameter(f"Unsupported format: {fmt}")

    try:
        config = _build_config(token, file_key)
        payload = _client(config).fetch_file(config.file_key or "")
        root = root_for_selector(payload, TargetSelector())
    except FigDictError as exc:
        _fail(exc)

    leaves = collect_text_leaves(root)
    console.print(f"Found {len(leaves)} text layers:")
    for leaf in leaves[:preview]:
        console.print("----------------------------")
        console.print(f"Name: {leaf.name}", markup=False)
        console.print(f"ID: {leaf.id}", markup=False)
        console.print(f"Text: {leaf.characters}", markup=False)
    if len(leaves) > preview:
        console.print(f"... and {len(leaves) - preview} more")

    content = text_layers_to_csv(leaves) if fmt == "csv" else text_layers_to_json(leaves)
    target = output if output is not None else Path(f"figma-text-layers.{fmt}")
    write_text_atomic(target, content)
    console.print(f"Text layers exported to [bold]{target}[/bold]")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the HTTP analysis service."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    console.print(f"Starting web service on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":  # pragma: no cover
    app()
