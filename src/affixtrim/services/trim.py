"""TrimService — batch prefix/suffix removal behind the service contract.

In text mode subjects and affixes are compared as ``str``. In binary mode
(``settings.binary``) both are encoded with ``[trim] encoding`` first and
compared as ``bytes``, so a cut never splits on a character boundary that
differs from the byte boundary.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

import structlog

from affixtrim.domain.kinds import AffixKindError, SequenceKind
from affixtrim.domain.steps import Side, TrimStep
from affixtrim.services.result import ServiceResult

if TYPE_CHECKING:
    from affixtrim.config.settings import AffixSettings

logger = structlog.get_logger(__name__)


class TrimService:
    """Apply trim steps to batches of subjects.

    Usage::

        svc = TrimService(settings)
        result = svc.cut_suffix(["report.txt", "notes.md"], ".txt")
    """

    def __init__(self, settings: AffixSettings) -> None:
        self._settings = settings

    @property
    def kind(self) -> SequenceKind:
        return SequenceKind.BYTES if self._settings.binary else SequenceKind.TEXT

    def cut_prefix(self, subjects: Iterable[str | bytes], prefix: str) -> ServiceResult:
        """Remove *prefix* from the start of each subject that has it."""
        return self._run("cut_prefix", subjects, [TrimStep(side=Side.PREFIX, affix=prefix)])

    def cut_suffix(self, subjects: Iterable[str | bytes], suffix: str) -> ServiceResult:
        """Remove *suffix* from the end of each subject that has it."""
        return self._run("cut_suffix", subjects, [TrimStep(side=Side.SUFFIX, affix=suffix)])

    def chain(self, subjects: Iterable[str | bytes], steps: Sequence[TrimStep]) -> ServiceResult:
        """Apply *steps* in order to each subject, each step once."""
        if not steps:
            return ServiceResult.failure("chain", "NO_STEPS", "At least one trim step is required")
        return self._run("chain", subjects, steps)

    # ── Internals ──────────────────────────────────────────────────────

    def _run(
        self,
        op: str,
        subjects: Iterable[str | bytes],
        steps: Sequence[TrimStep],
    ) -> ServiceResult:
        trim = self._settings.trim
        items: list[dict[str, Any]] = []
        try:
            affixes = [self._encode(step.affix) for step in steps]
            for subject in subjects:
                value = self._encode(subject)
                result = value
                for step, affix in zip(steps, affixes, strict=True):
                    result = step.apply(result, affix)
                items.append(self._outcome(subject, value, result))
        except UnicodeEncodeError as exc:
            return ServiceResult.failure(
                op,
                "ENCODING_ERROR",
                f"Cannot encode input as {trim.encoding}: {exc.reason}",
                encoding=trim.encoding,
                errors=trim.errors,
            )
        except AffixKindError as exc:
            return ServiceResult.failure(op, "KIND_MISMATCH", str(exc))

        changed = sum(1 for item in items if item["changed"])
        logger.debug(
            "trim applied", op=op, kind=self.kind.value, count=len(items), changed=changed
        )
        warnings = [] if items else ["No subjects to trim"]
        return ServiceResult(
            ok=True,
            op=op,
            warnings=warnings,
            data={
                "kind": self.kind.value,
                "steps": [step.model_dump(mode="json") for step in steps],
                "items": items,
                "count": len(items),
                "changed": changed,
            },
        )

    def _encode(self, value: str | bytes) -> str | bytes:
        if self.kind.is_binary and isinstance(value, str):
            trim = self._settings.trim
            return value.encode(trim.encoding, trim.errors)
        return value

    def _decode(self, value: str | bytes) -> str:
        if isinstance(value, str):
            return value
        return value.decode(self._settings.trim.encoding, "backslashreplace")

    def _outcome(
        self, subject: str | bytes, value: str | bytes, result: str | bytes
    ) -> dict[str, Any]:
        outcome: dict[str, Any] = {
            "subject": self._decode(subject),
            "result": self._decode(result),
            "changed": result != value,
        }
        if self.kind.is_binary and isinstance(result, bytes):
            outcome["result_hex"] = result.hex()
        return outcome
