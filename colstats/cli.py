"""colstats CLI - column statistics for CSV files."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from colstats import __version__
from colstats import datasets
from colstats.core.exceptions import ColStatsError
from colstats.descriptive import describe as describe_sequence
from colstats.descriptive import mean, stddev
from colstats.io import load_column
from colstats.regression import correlation, fit, regression_intercept, regression_slope

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def _fmt_list(values, precision: int) -> str:
    # integral values print without decimals, like the data files hold them
    return "[" + ",".join(f"{v:g}" if float(v).is_integer() else _fmt(v, precision) for v in values) + "]"


@click.group()
@click.version_option(version=__version__, prog_name="colstats")
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages to stderr.")
@click.option(
    "--precision",
    type=click.IntRange(0, 15),
    default=4,
    show_default=True,
    help="Decimal places in printed results.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, precision: int) -> None:
    """colstats - mean, standard deviation, regression and correlation for CSV columns.

    Columns are addressed by 0-based index.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    ctx.ensure_object(dict)
    ctx.obj["precision"] = precision


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--column", "-c", type=click.IntRange(min=0), default=0, show_default=True,
              help="0-based column index.")
@click.option("--header/--no-header", default=False, show_default=True,
              help="Skip the first line of the file.")
@click.pass_context
def describe(ctx: click.Context, path: str, column: int, header: bool) -> None:
    """Print descriptive statistics for one column of PATH."""
    precision = ctx.obj["precision"]
    try:
        values = load_column(path, has_header=header, column_index=column)
        solution = describe_sequence(values)
    except ColStatsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{path} column {column}")
    click.echo(solution.summary(digits=precision))


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--x", "x_column", type=click.IntRange(min=0), required=True,
              help="0-based column index of the predictor.")
@click.option("--y", "y_column", type=click.IntRange(min=0), required=True,
              help="0-based column index of the response.")
@click.option("--y-path", type=click.Path(dir_okay=False),
              help="Read the response column from this file instead of PATH.")
@click.option("--header/--no-header", default=False, show_default=True,
              help="Skip the first line of each file.")
@click.pass_context
def regress(
    ctx: click.Context,
    path: str,
    x_column: int,
    y_column: int,
    y_path: str | None,
    header: bool,
) -> None:
    """Fit y = intercept + slope * x over two columns and print the line."""
    precision = ctx.obj["precision"]
    try:
        x = load_column(path, has_header=header, column_index=x_column)
        y = load_column(y_path or path, has_header=header, column_index=y_column)
        solution = fit(x, y)
    except ColStatsError as e:
        raise click.ClickException(str(e)) from e
    logger.debug("fit %d pairs", solution.n)
    click.echo(solution.summary(digits=precision))


@cli.command()
@click.option("--data-dir", type=click.Path(exists=True, file_okay=False),
              help="Also load data1.csv, data2.csv and sat-gpa.csv from this directory.")
@click.pass_context
def demo(ctx: click.Context, data_dir: str | None) -> None:
    """Print statistics for the bundled SAT/GPA sample."""
    precision = ctx.obj["precision"]
    gpa, sat = datasets.gpa, datasets.sat

    rows = [
        ("mean(gpa)", mean(gpa)),
        ("mean(sat)", mean(sat)),
        ("stddev(gpa)", stddev(gpa)),
        ("stddev(sat)", stddev(sat)),
        ("regression_intercept(sat, gpa)", regression_intercept(sat, gpa)),
        ("regression_slope(sat, gpa)", regression_slope(sat, gpa)),
        ("correlation(gpa, sat)", correlation(gpa, sat)),
    ]
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        click.echo(f"{label.ljust(width)}  {_fmt(value, precision)}")

    if data_dir is None:
        return

    base = Path(data_dir)
    loads = [
        ("data1.csv", False, 0),
        ("data2.csv", True, 0),
        ("sat-gpa.csv", True, 1),
    ]
    for name, has_header, column in loads:
        try:
            values = load_column(base / name, has_header=has_header, column_index=column)
        except ColStatsError as e:
            raise click.ClickException(str(e)) from e
        click.echo(f"{name} column {column}: {_fmt_list(values, precision)}")


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
