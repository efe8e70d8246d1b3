# plutus_ledger/cli/main.py
"""
CLI for inspecting Data trees and decoding them as ledger types.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.tree import Tree

from plutus_ledger.core.canon import DataJsonError, canonical_json_str, loads_data
from plutus_ledger.core.data import Bytes, Constr, DataList, DataMap, Integer, PlutusData
from plutus_ledger.core.errors import PlutusDataError, render_path
from plutus_ledger.registry import build_codec_table
from plutus_ledger.verify.roundtrip import check_round_trip
from plutus_ledger.v1.value import Value

app = typer.Typer(
    name="plutus-data",
    help="Inspect Plutus Data trees and decode them as ledger types",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
logger = logging.getLogger("plutus_ledger.cli")

LOG_LEVEL_ENV = "PLUTUS_LEDGER_LOG_LEVEL"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_log_level(flag: Optional[str] = None) -> str:
    """Resolve log level in this order:
    1. --log-level flag
    2. PLUTUS_LEDGER_LOG_LEVEL environment variable
    3. Default: WARNING
    """
    level = (flag or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
    return level


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help=f"Logging level (overrides {LOG_LEVEL_ENV} env var)",
    ),
):
    """Work with Plutus Data trees in their JSON form."""
    logging.basicConfig(
        level=get_log_level(log_level),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def read_input(file: str) -> str:
    """Read a file, or stdin when the name is `-`."""
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def render_tree(data: PlutusData, label: str = "") -> Tree:
    prefix = f"{label}: " if label else ""
    if isinstance(data, Constr):
        node = Tree(f"{prefix}[bold magenta]Constr {data.tag}[/]")
        for i, f in enumerate(data.fields):
            node.children.append(render_tree(f, f"[{i}]"))
        return node
    if isinstance(data, DataMap):
        node = Tree(f"{prefix}[bold cyan]Map[/] ({len(data.entries)} entries)")
        for i, (k, v) in enumerate(data.entries):
            entry = node.add(f"[{i}]")
            entry.children.append(render_tree(k, "key"))
            entry.children.append(render_tree(v, "value"))
        return node
    if isinstance(data, DataList):
        node = Tree(f"{prefix}[bold cyan]List[/] ({len(data.items)} items)")
        for i, item in enumerate(data.items):
            node.children.append(render_tree(item, f"[{i}]"))
        return node
    if isinstance(data, Integer):
        return Tree(f"{prefix}[green]{data.value}[/]")
    if isinstance(data, Bytes):
        return Tree(f"{prefix}[yellow]0x{data.value.hex()}[/] ({len(data.value)} bytes)")
    raise TypeError(f"Not a Data tree: {type(data).__name__}")


def load_tree(file: str) -> PlutusData:
    try:
        return loads_data(read_input(file))
    except OSError as e:
        console.print(f"[red]Failed to read {file}: {e}[/]")
        raise typer.Exit(1)
    except DataJsonError as e:
        console.print(f"[red]Not a Data tree: {e}[/]")
        raise typer.Exit(1)


@app.command()
def types():
    """List every type name a tree can be decoded as."""
    table = Table(title="Registered Types")
    table.add_column("Type")
    table.add_column("Codec")

    for name, codec in sorted(build_codec_table().items()):
        table.add_row(name, codec.name)

    console.print(table)


@app.command()
def inspect(
    file: str = typer.Argument(..., help="JSON Data tree file, or - for stdin"),
):
    """Render a Data tree and print its canonical JSON."""
    data = load_tree(file)
    console.print(render_tree(data))
    console.print(canonical_json_str(data), soft_wrap=True, highlight=False)


@app.command()
def decode(
    type_name: str = typer.Argument(..., metavar="TYPE", help="Registered type name, e.g. v1.Value"),
    file: str = typer.Argument(..., help="JSON Data tree file, or - for stdin"),
):
    """Decode a Data tree as the given type and check that it re-encodes exactly."""
    table = build_codec_table()
    codec = table.get(type_name)
    if codec is None:
        console.print(f"[red]Unknown type '{type_name}'[/]")
        console.print("  Run [bold]plutus-data types[/] to list registered types.")
        raise typer.Exit(1)

    data = load_tree(file)
    try:
        value = codec.decode(data)
    except PlutusDataError as e:
        console.print(f"[red]✗ Failed to decode as {type_name}[/]")
        console.print(f"  • {render_path(e.path)}: {e.reason}", highlight=False)
        raise typer.Exit(1)

    console.print(value, highlight=False)
    logger.info("Decoded %s from %s", type_name, file)

    result = check_round_trip(codec, data)
    if result.is_valid:
        console.print(f"[green]✓ {type_name} round trip is exact[/]")
    else:
        console.print(f"[red]✗ {result.message}[/]")
        raise typer.Exit(1)


@app.command()
def value(
    text: str = typer.Argument(..., help="Value expression, e.g. '123+5 <cs>.<tn>'"),
    alternate: bool = typer.Option(False, "--utf8", help="Show token names as UTF-8 where possible"),
):
    """Parse a value expression and show its entries and encoded tree."""
    try:
        parsed = Value.parse(text)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)

    table = Table(title="Value")
    table.add_column("Currency Symbol")
    table.add_column("Token Name")
    table.add_column("Amount", justify="right")

    for cs, tn, amount in parsed.flatten():
        table.add_row(cs.display(alternate=True), tn.display(alternate), str(amount))

    console.print(table)
    console.print(canonical_json_str(parsed.to_plutus_data()), soft_wrap=True, highlight=False)


if __name__ == "__main__":
    app()
