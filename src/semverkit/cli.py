# SPDX-License-Identifier: MIT
"""CLI entry point for the semverkit command."""

from __future__ import annotations

import json
import logging
import sys

import click

from .compare import sort_versions
from .models import encode_version
from .precedence import ComparisonMode
from .semver import Version

_COMPARISON_SYMBOLS = {-1: "<", 0: "=", 1: ">"}

order_option = click.option(
    "--order",
    type=click.Choice([mode.value for mode in ComparisonMode], case_sensitive=False),
    default=ComparisonMode.STRICT.value,
    show_default=True,
    help="Ordering of alphanumeric pre-release identifiers.",
)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _parse_or_exit(text: str) -> Version:
    version = Version.parse(text)
    if version is None:
        echo_error(f"Invalid semantic version: {text!r}")
        sys.exit(1)
    return version


@click.group()
@click.version_option(package_name="semverkit")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
def cli(verbose: bool) -> None:
    """Parse, validate, compare and sort semantic versions.

    \b
    Examples:
        semverkit parse 1.0.0-rc.1+build.5
        semverkit validate 1.2.3 1.2.3-01
        semverkit compare 1.0.0-rc10 1.0.0-rc9 --order natural
        semverkit sort 1.0.0 1.0.0-beta 0.9.0
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("version")
def parse(version: str) -> None:
    """Print the fields of VERSION as JSON."""
    parsed = _parse_or_exit(version)
    echo_info(json.dumps(encode_version(parsed), indent=2))


@cli.command()
@click.argument("versions", nargs=-1, required=True)
def validate(versions: tuple[str, ...]) -> None:
    """Check that every VERSION is a valid semantic version."""
    invalid = 0
    for text in versions:
        if Version.parse(text) is None:
            echo_error(f"{text!r} is not a valid semantic version")
            invalid += 1
        else:
            echo_success(f"{text} is valid")
    if invalid:
        sys.exit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
@order_option
def compare(version1: str, version2: str, order: str) -> None:
    """Compare the precedence of VERSION1 and VERSION2.

    Prints "<", "=" or ">". Build metadata is ignored.
    """
    left = _parse_or_exit(version1)
    right = _parse_or_exit(version2)
    result = left.compare(right, ComparisonMode.from_name(order))
    echo_info(_COMPARISON_SYMBOLS[result])


@cli.command(name="sort")
@click.argument("versions", nargs=-1)
@order_option
@click.option("--reverse", "-r", is_flag=True, help="Highest precedence first.")
def sort_command(versions: tuple[str, ...], order: str, reverse: bool) -> None:
    """Sort VERSIONS by precedence.

    Reads one version per line from stdin when no arguments are given.
    """
    texts = list(versions)
    if not texts:
        texts = [line.strip() for line in click.get_text_stream("stdin") if line.strip()]

    parsed = []
    invalid = 0
    for text in texts:
        version = Version.parse(text)
        if version is None:
            echo_error(f"Skipping invalid semantic version: {text!r}")
            invalid += 1
        else:
            parsed.append(version)

    for version in sort_versions(parsed, ComparisonMode.from_name(order), reverse=reverse):
        echo_info(str(version))

    if invalid:
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli(prog_name="semverkit")


if __name__ == "__main__":
    main()
