"""Command: ordered chain of prefix/suffix cuts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from affixtrim.commands._base import AffixCommand
from affixtrim.domain.steps import TrimStep

if TYPE_CHECKING:
    from affixtrim.commands._context import AppContext


class StepType(click.ParamType):
    """Click parameter type for ``prefix=VALUE`` / ``suffix=VALUE``."""

    name = "step"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> TrimStep:
        if isinstance(value, TrimStep):
            return value
        try:
            return TrimStep.parse(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


@click.command(
    cls=AffixCommand,
    examples="""\
  affixtrim chain '"value"' --step 'suffix="' --step 'prefix="'
  affixtrim -q chain --step prefix=test_ --step suffix=.py < files.txt""",
)
@click.argument("subjects", nargs=-1)
@click.option(
    "-s",
    "--step",
    "steps",
    type=StepType(),
    multiple=True,
    required=True,
    help="Cut to apply, as prefix=VALUE or suffix=VALUE. Repeatable; applied in order.",
)
@click.pass_obj
def chain(app: AppContext, subjects: tuple[str, ...], steps: tuple[TrimStep, ...]) -> None:
    """Apply each --step once, in order, to each SUBJECT (or stdin line)."""
    app.emit(app.trimmer.chain(app.subjects(subjects), steps))
