"""Command-line interface for nibver."""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from ..codec import decode_parts, encode, part_count
from ..config import CodecConfig, load_config
from ..exceptions import ConfigError, InvalidFormatError
from ..nibble_version import NibbleVersion
from ..types import NIBBLE_BITS
from ._helpers import (
    configure_logging,
    console,
    parse_int_literal,
    print_error,
)

app = typer.Typer(help="Convert between nibble-packed integers and version strings")

SeparatorOption = Annotated[
    str | None,
    typer.Option(
        ...,
        "--separator",
        "-s",
        help="Component separator (default: from config, else '.')",
    ),
]


def _settings(ctx: typer.Context, separator: str | None) -> CodecConfig:
    config: CodecConfig = ctx.obj
    return config.merged(separator)


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            ...,
            "--config",
            "-c",
            help="Path to config file (nibver.toml or pyproject.toml)",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", help="Show debug logging")
    ] = False,
) -> None:
    """Convert between nibble-packed integers and version strings."""
    configure_logging(verbose)
    try:
        ctx.obj = load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command("decode")
def decode_command(
    ctx: typer.Context,
    value: Annotated[
        str, typer.Argument(..., help="Encoded version (decimal, 0x, 0o or 0b)")
    ],
    parts: Annotated[
        int | None,
        typer.Option(
            ...,
            "--parts",
            "-p",
            min=3,
            max=4,
            help="Number of components (default: detect)",
        ),
    ] = None,
    separator: SeparatorOption = None,
) -> None:
    """Decode an integer into a version string."""
    try:
        settings = _settings(ctx, separator)
        encoded = parse_int_literal(value)
        count = parts if parts is not None else part_count(encoded)
        console.print(decode_parts(count, encoded, settings.separator), markup=False)
    except (ConfigError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command("encode")
def encode_command(
    ctx: typer.Context,
    version: Annotated[str, typer.Argument(..., help="Version string")],
    separator: SeparatorOption = None,
    hex_output: Annotated[
        bool, typer.Option(..., "--hex", "-x", help="Print as 0xNNNN")
    ] = False,
) -> None:
    """Encode a version string into an integer."""
    try:
        settings = _settings(ctx, separator)
        encoded = encode(version, settings.separator)
    except (ConfigError, InvalidFormatError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    console.print(f"0x{encoded:04X}" if hex_output else str(encoded))


@app.command("inspect")
def inspect_command(
    ctx: typer.Context,
    value: Annotated[
        str, typer.Argument(..., help="Encoded integer or version string")
    ],
    separator: SeparatorOption = None,
) -> None:
    """Show the nibble layout of a version.

    Integer literals are read as encoded versions; anything else is parsed
    as a version string.
    """
    try:
        settings = _settings(ctx, separator)
        try:
            version = NibbleVersion.from_int(parse_int_literal(value))
        except ValueError:
            version = NibbleVersion.parse(value, settings.separator)
    except (ConfigError, InvalidFormatError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    table = Table(title=f"Version {escape(version.format(settings.separator))}")
    table.add_column("Nibble", style="cyan", justify="right")
    table.add_column("Bits", style="green")
    table.add_column("Value", justify="right")

    for index, component in enumerate(version.components):
        position = version.part_count - 1 - index
        low = position * NIBBLE_BITS
        table.add_row(str(position), f"{low}-{low + NIBBLE_BITS - 1}", str(component))

    console.print(table)
    console.print(f"\n[dim]Encoded: {int(version)} (0x{int(version):04X})[/dim]")


if __name__ == "__main__":
    app()
