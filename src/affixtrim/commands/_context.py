"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns logging setup, subject input, and result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import click

from affixtrim.domain.affixes import cut_suffix
from affixtrim.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from affixtrim.config.settings import AffixSettings
    from affixtrim.services.result import ServiceResult
    from affixtrim.services.trim import TrimService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: AffixSettings) -> None:
        self.settings = settings

        from affixtrim.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def trimmer(self) -> TrimService:
        from affixtrim.services.trim import TrimService

        return TrimService(self.settings)

    def subjects(self, given: Sequence[str]) -> list[str]:
        """Return *given* subjects, or stdin lines when none were passed.

        With ``[trim] strip_newlines`` (the default) each line loses its
        terminator; otherwise lines are passed through as read.
        """
        if given:
            return list(given)
        with click.open_file("-") as stream:
            lines = stream.readlines()
        if self.settings.trim.strip_newlines:
            return [cut_suffix(cut_suffix(line, "\n"), "\r") for line in lines]
        return lines

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            # A single empty result is still one line in quiet mode.
            if output or (settings.quiet and result.data.get("items")):
                click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
