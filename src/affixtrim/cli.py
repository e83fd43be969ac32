"""Root CLI group for affixtrim with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from affixtrim import __version__
from affixtrim.commands import register_commands
from affixtrim.commands._context import AppContext
from affixtrim.config.settings import AffixSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="affixtrim")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print trimmed values only, one per line.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--binary", is_flag=True, help="Trim encoded bytes instead of text.")
@click.option("--encoding", default=None, help="Codec for --binary (default: utf-8).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    binary: bool,
    encoding: str | None,
    config_path: str | None,
) -> None:
    """affixtrim — remove a prefix or suffix, if present."""
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
        "binary": binary,
    }
    try:
        settings = AffixSettings.from_cli(
            config_path=config_path,
            encoding=encoding,
            # Unset flags defer to env vars and TOML.
            **{name: True for name, value in flags.items() if value},
        )
    except ValidationError as exc:
        raise click.BadParameter(str(exc), ctx=ctx) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
