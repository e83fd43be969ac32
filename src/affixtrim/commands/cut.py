"""Commands: single-affix removal (cut-prefix, cut-suffix)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from affixtrim.commands._base import AffixCommand

if TYPE_CHECKING:
    from affixtrim.commands._context import AppContext


@click.command(
    "cut-prefix",
    cls=AffixCommand,
    examples="""\
  affixtrim cut-prefix test_ test_case test_parser
  affixtrim -q cut-prefix "refs/heads/" < branches.txt
  affixtrim --json cut-prefix "https://" https://example.org""",
)
@click.argument("prefix")
@click.argument("subjects", nargs=-1)
@click.pass_obj
def cut_prefix(app: AppContext, prefix: str, subjects: tuple[str, ...]) -> None:
    """Remove PREFIX from the start of each SUBJECT (or stdin line)."""
    app.emit(app.trimmer.cut_prefix(app.subjects(subjects), prefix))


@click.command(
    "cut-suffix",
    cls=AffixCommand,
    examples="""\
  affixtrim cut-suffix Tests FooTests BarTests
  affixtrim -q cut-suffix .txt < files.txt
  affixtrim --binary --encoding latin-1 cut-suffix "\\xff" data""",
)
@click.argument("suffix")
@click.argument("subjects", nargs=-1)
@click.pass_obj
def cut_suffix(app: AppContext, suffix: str, subjects: tuple[str, ...]) -> None:
    """Remove SUFFIX from the end of each SUBJECT (or stdin line).

    An empty SUFFIX leaves every subject unchanged.
    """
    app.emit(app.trimmer.cut_suffix(app.subjects(subjects), suffix))
