# SPDX-License-Identifier: MIT
"""CLI entry point for the semver-ranges command."""

from __future__ import annotations

import json
import sys

import click

from .exceptions import SemverError
from .factory import create_ranges_list
from .logger import setup_logging
from .semver import Semver, coerce as coerce_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _version_or_exit(version: str) -> Semver:
    try:
        return Semver.of(version)
    except SemverError as e:
        echo_error(str(e))
        sys.exit(2)


@click.group()
@click.version_option(package_name="semver-ranges")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log how range strings are rewritten.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic version parsing and range matching.

    \b
    Examples:
        semver-ranges parse 1.2.3-rc.1+build.5
        semver-ranges compare 1.0.0-alpha 1.0.0
        semver-ranges satisfies 1.2.3 "^1.0.0 || >=2.1.0 <3.0.0"
        semver-ranges range "~1.2 || 2.X"
    """
    ctx.verbose = verbose
    setup_logging(verbose=verbose)


@cli.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the components as JSON.")
def parse(version: str, as_json: bool) -> None:
    """Strictly parse VERSION and print its components."""
    semver = _version_or_exit(version)
    components = {
        "major": semver.major,
        "minor": semver.minor,
        "patch": semver.patch,
        "pre_release": list(semver.pre_release),
        "build": list(semver.build),
        "stable": semver.is_stable,
    }
    if as_json:
        echo_info(json.dumps(components, indent=2))
        return
    for key, value in components.items():
        if isinstance(value, list):
            value = ".".join(value)
        echo_info(f"{key}: {value}")


@cli.command()
@click.argument("text")
def coerce(text: str) -> None:
    """Extract a version from loosely formatted TEXT."""
    semver = coerce_version(text)
    if semver is None:
        echo_error(f"No version found in [{text}]")
        sys.exit(1)
    echo_info(semver.version)


@cli.command()
@click.argument("version")
@click.argument("other")
def compare(version: str, other: str) -> None:
    """Print -1, 0 or 1 comparing the precedence of VERSION and OTHER."""
    echo_info(str(_version_or_exit(version).compare_to(_version_or_exit(other))))


@cli.command()
@click.argument("version")
@click.argument("other")
def diff(version: str, other: str) -> None:
    """Print the most significant difference between VERSION and OTHER."""
    echo_info(_version_or_exit(version).diff(_version_or_exit(other)).name)


@cli.command()
@click.argument("version")
@click.argument("ranges")
def satisfies(version: str, ranges: str) -> None:
    """Exit with 0 if VERSION satisfies RANGES, 1 otherwise."""
    semver = _version_or_exit(version)
    try:
        ranges_list = create_ranges_list(ranges)
    except SemverError as e:
        echo_error(str(e))
        sys.exit(2)

    if ranges_list.is_satisfied_by(semver):
        echo_success(f"{semver} satisfies {ranges_list}")
    else:
        echo_info(f"{semver} does not satisfy {ranges_list}")
        sys.exit(1)


@cli.command(name="range")
@click.argument("ranges")
@pass_context
def range_(ctx: Context, ranges: str) -> None:
    """Print the normalized form of RANGES."""
    try:
        ranges_list = create_ranges_list(ranges)
    except SemverError as e:
        echo_error(str(e))
        sys.exit(2)

    echo_info(str(ranges_list))
    if ctx.verbose:
        for index, group in enumerate(ranges_list.get(), start=1):
            echo_info(f"  group {index}: {' '.join(str(r) for r in group)}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
