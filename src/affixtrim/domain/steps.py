"""Trim steps — ordered compositions of prefix and suffix cuts."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel

from affixtrim.domain.affixes import Subject, cut_prefix, cut_suffix


class Side(StrEnum):
    """Edge of the subject a step trims."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


class TrimStep(BaseModel):
    """A single cut: which edge, and which affix."""

    model_config = {"frozen": True}

    side: Side
    affix: str

    @classmethod
    def parse(cls, spec: str) -> TrimStep:
        """Parse the ``side=affix`` form used on the command line.

        Examples:
            >>> TrimStep.parse("suffix=.txt")
            TrimStep(side=<Side.SUFFIX: 'suffix'>, affix='.txt')
            >>> TrimStep.parse("prefix=")
            TrimStep(side=<Side.PREFIX: 'prefix'>, affix='')
        """
        side, sep, affix = spec.partition("=")
        if not sep:
            msg = f"expected 'prefix=VALUE' or 'suffix=VALUE', got {spec!r}"
            raise ValueError(msg)
        try:
            return cls(side=Side(side.strip().lower()), affix=affix)
        except ValueError as exc:
            msg = f"unknown side {side!r}; expected 'prefix' or 'suffix'"
            raise ValueError(msg) from exc

    def apply(self, subject: Subject, affix: str | bytes | None = None) -> Subject:
        """Apply this step to *subject*.

        *affix* overrides the stored text affix, e.g. with its encoded form
        when trimming binary subjects.
        """
        target = self.affix if affix is None else affix
        if self.side is Side.PREFIX:
            return cut_prefix(subject, target)
        return cut_suffix(subject, target)


def apply_steps(subject: Subject, steps: Iterable[TrimStep]) -> Subject:
    """Apply *steps* left to right, each exactly once.

    Examples:
        >>> apply_steps('"value"', [TrimStep.parse('suffix="'), TrimStep.parse('prefix="')])
        'value'
    """
    result = subject
    for step in steps:
        result = step.apply(result)
    return result
