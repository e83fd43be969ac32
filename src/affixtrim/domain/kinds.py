"""Sequence kinds and affix normalization.

Three kinds of subject are supported:
- TEXT: ``str`` (and subclasses)
- BYTES: ``bytes`` (and subclasses)
- MUTABLE_BYTES: ``bytearray``

INVARIANT: a subject and its affix must share an element kind. Text is
never compared against bytes and no implicit encoding ever happens here.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class AffixKindError(TypeError):
    """Subject and affix are not of compatible sequence kinds."""


class SequenceKind(StrEnum):
    """Representation family of a trimmable subject."""

    TEXT = "text"
    BYTES = "bytes"
    MUTABLE_BYTES = "bytearray"

    @property
    def is_binary(self) -> bool:
        return self is not SequenceKind.TEXT


def kind_of(subject: Any) -> SequenceKind:
    """Classify *subject*, raising :class:`AffixKindError` if unsupported.

    Examples:
        >>> kind_of("abc")
        <SequenceKind.TEXT: 'text'>
        >>> kind_of(bytearray(b"abc"))
        <SequenceKind.MUTABLE_BYTES: 'bytearray'>
    """
    if isinstance(subject, str):
        return SequenceKind.TEXT
    if isinstance(subject, bytearray):
        return SequenceKind.MUTABLE_BYTES
    if isinstance(subject, bytes):
        return SequenceKind.BYTES
    msg = f"cannot trim a {type(subject).__name__!r} subject; expected str, bytes or bytearray"
    raise AffixKindError(msg)


def coerce_affix(kind: SequenceKind, affix: Any) -> str | bytes:
    """Normalize *affix* to the comparison form used for subjects of *kind*.

    Text subjects accept only ``str`` affixes. Binary subjects accept any
    object exposing the buffer protocol, flattened to ``bytes`` so that
    length is measured in bytes rather than in buffer items.
    """
    if kind is SequenceKind.TEXT:
        if isinstance(affix, str):
            return affix
        msg = f"cannot cut a {type(affix).__name__!r} affix from a str subject"
        raise AffixKindError(msg)

    if isinstance(affix, str):
        msg = f"cannot cut a 'str' affix from a {kind.value} subject"
        raise AffixKindError(msg)
    if isinstance(affix, bytes):
        return affix
    try:
        with memoryview(affix) as view:
            return view.tobytes()
    except TypeError as exc:
        msg = f"cannot cut a {type(affix).__name__!r} affix from a {kind.value} subject"
        raise AffixKindError(msg) from exc
