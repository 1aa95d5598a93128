"""CLI for Bookchain.

Commands:
    serve    Run the HTTP API with uvicorn
    verify   Audit a chain exported from GET /v1/chain
"""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from bookchain import __version__
from bookchain.config.server_config import ServerConfig
from bookchain.domain.models.block import Block
from bookchain.domain.services.chain_audit import ChainAuditReport, audit_blocks


class OutputFormat(str, Enum):
    """Output format options."""

    text = "text"
    json = "json"


app = typer.Typer(
    name="bookchain",
    help="Append-only hash chain of book checkouts",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"bookchain version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Bookchain command line."""
    pass


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to listen on."),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    from bookchain.api.main import create_app

    config = ServerConfig.from_environment()
    api = create_app(config=config)
    uvicorn.run(
        api,
        host=host or config.host,
        port=port or config.port,
        log_config=None,
    )


def load_blocks(path: Path) -> list[Block]:
    """Load blocks from an exported chain file.

    Accepts either the ``GET /v1/chain`` response object or a bare list
    of blocks.

    Raises:
        ValueError: If the file is not a chain export.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("blocks")
    if not isinstance(data, list):
        raise ValueError("Expected a list of blocks or an object with 'blocks'")
    try:
        return [Block.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed block: {exc}") from exc


def _report_as_dict(report: ChainAuditReport) -> dict:
    return {
        "is_valid": report.is_valid,
        "blocks_verified": report.blocks_verified,
        "first_invalid_position": report.first_invalid_position,
        "error_type": report.error_type,
        "error_message": report.error_message,
    }


@app.command()
def verify(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Chain export (JSON)."),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text, "--format", "-f", help="Output format."
    ),
) -> None:
    """Verify hash chain integrity of an exported chain."""
    try:
        blocks = load_blocks(file)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)

    report = audit_blocks(blocks)

    if output_format == OutputFormat.json:
        console.print_json(json.dumps(_report_as_dict(report)))
    else:
        table = Table(title="Chain Verification")
        table.add_column("Check")
        table.add_column("Result")
        table.add_row("Blocks", str(len(blocks)))
        table.add_row("Verified", str(report.blocks_verified))
        if report.is_valid:
            table.add_row("Status", "[green]VALID[/green]")
        else:
            table.add_row("Status", "[red]INVALID[/red]")
            table.add_row("First invalid position", str(report.first_invalid_position))
            table.add_row("Error", f"{report.error_type}: {report.error_message}")
        console.print(table)

    if not report.is_valid:
        raise typer.Exit(code=1)
