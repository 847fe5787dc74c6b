"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from saat import __version__
from saat.config import SaatConfig
from saat.core.errors import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="saat")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML config file (default: ./saat.yaml if present).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only print errors.")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """SAAT — static WCAG accessibility audits for Vue components."""
    if verbose and quiet:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_cli_config(ctx: click.Context) -> SaatConfig:
    """Load the config named by --config, turning errors into usage errors."""
    try:
        return SaatConfig.load(ctx.obj.get("config_path"))
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e


def _register_commands() -> None:
    from saat.cli.audit import audit  # noqa: F811
    from saat.cli.badge import badge  # noqa: F811
    from saat.cli.rules import rules  # noqa: F811

    main.add_command(audit)
    main.add_command(rules)
    main.add_command(badge)


_register_commands()
