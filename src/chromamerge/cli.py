import json
from pathlib import Path
from typing import List, Optional

import typer

from .color.code import ColorCode, ColorCodeError, parse_color_code
from .color.lab import color_to_lab
from .config import Settings
from .logging import get_logger
from .merge.distance import delta_e
from .merge.model import merge_colors
from .output.report import build_report, write_report_json

app = typer.Typer(help="ChromaMerge – group perceptually indistinguishable colors", no_args_is_help=True)

_DEFAULTS = Settings()
logger = get_logger(__name__)


def _read_colors(path: Path) -> List[str]:
    """Read one color per line, skipping blank lines and ``#!`` comments."""
    colors = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#!"):
            continue
        colors.append(line)
    return colors


def _parse_or_exit(text: str) -> ColorCode:
    try:
        return parse_color_code(text)
    except ColorCodeError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=2) from exc


@app.command()
def group(
    colors: Optional[List[str]] = typer.Argument(None, help="Hex color codes, e.g. '#ff0000' '#f00'"),
    input_file: Optional[Path] = typer.Option(
        None, "--input", "-i", exists=True, readable=True, dir_okay=False, help="File with one color per line"
    ),
    threshold: float = typer.Option(_DEFAULTS.threshold, "--threshold", "-t", min=0.0, help="Maximum CIEDE2000 distance to merge"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the JSON report to this file"),
    include_singletons: bool = typer.Option(
        True, "--include-singletons/--duplicates-only", help="List groups with a single color"
    ),
) -> None:
    """
    Group colors that are perceptually indistinguishable.

    Colors closer than the threshold (directly or through a chain of close
    colors) end up in the same group. The first color of each group is its
    canonical value.
    """
    codes = list(colors or [])
    if input_file is not None:
        codes.extend(_read_colors(input_file))

    if not codes:
        logger.error("No colors given; pass color codes or --input")
        raise typer.Exit(code=1)

    try:
        groups = merge_colors(codes, threshold=threshold)
    except ColorCodeError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=2) from exc

    report = build_report(groups, threshold, len(codes), include_singletons=include_singletons)

    if out is not None:
        write_report_json(report, out)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    typer.echo(f"{len(codes)} colors -> {report.group_count} groups (threshold {threshold})")
    for entry in report.groups:
        typer.echo(f"{entry['group_id']}: {entry['canonical']} <- {', '.join(entry['members'])}")


@app.command()
def distance(
    first: str = typer.Argument(..., help="First hex color code"),
    second: str = typer.Argument(..., help="Second hex color code"),
    precision: int = typer.Option(_DEFAULTS.precision, min=0, help="Decimal places to print"),
) -> None:
    """Print the CIEDE2000 distance between two colors."""
    lab_first = color_to_lab(_parse_or_exit(first))
    lab_second = color_to_lab(_parse_or_exit(second))
    typer.echo(f"{delta_e(lab_first, lab_second):.{precision}f}")


@app.command()
def lab(
    color: str = typer.Argument(..., help="Hex color code"),
    precision: int = typer.Option(_DEFAULTS.precision, min=0, help="Decimal places to print"),
) -> None:
    """Print the CIE L*a*b* value of a color."""
    value = color_to_lab(_parse_or_exit(color))
    typer.echo(f"L={value.l:.{precision}f} a={value.a:.{precision}f} b={value.b:.{precision}f}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
