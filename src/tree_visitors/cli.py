"""tree-visitors CLI: read a tree description, print the three statistics."""

from __future__ import annotations

import logging
from typing import TextIO

import click

from tree_visitors import __version__
from tree_visitors.api import evaluate
from tree_visitors.config import BuildConfig
from tree_visitors.errors import TreeInputError

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (logs go to stderr)",
)
@click.option("--red-code", default="0", show_default=True, help="Color code meaning RED")
@click.version_option(__version__, prog_name="tree-visitors")
def main(source: TextIO, log_level: str, red_code: str) -> None:
    """Build a tree from SOURCE (default: stdin) and print, one per line,
    the sum of leaf values, the product of RED internal node values and the
    fancy statistic.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = BuildConfig(red_code=red_code)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--red-code") from exc

    text = source.read()
    logger.info("Read %d characters from %s", len(text), source.name)

    try:
        result = evaluate(text, config=config)
    except TreeInputError as exc:
        raise click.ClickException(f"invalid tree description: {exc}") from exc

    for line in result.as_lines():
        click.echo(line)


if __name__ == "__main__":
    main()
