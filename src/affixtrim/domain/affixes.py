"""Prefix and suffix removal over text and byte sequences.

Both operations are single-pass: compare once, slice once. They never
loop, never raise when the affix is absent, and never mutate the subject.

INVARIANT: the result belongs to the subject's representation family.
A ``bytearray`` subject always yields a fresh ``bytearray``.
"""

from __future__ import annotations

from typing import Any, TypeVar

from affixtrim.domain.kinds import coerce_affix, kind_of

Subject = TypeVar("Subject", str, bytes, bytearray)


def cut_prefix(subject: Subject, prefix: Any) -> Subject:
    """Return *subject* without a leading *prefix*, if present.

    Examples:
        >>> cut_prefix("test_case", "test_")
        'case'
        >>> cut_prefix("testcase", "test_")
        'testcase'
        >>> cut_prefix(b"\\x00payload", b"\\x00")
        b'payload'
    """
    affix = coerce_affix(kind_of(subject), prefix)
    if subject.startswith(affix):
        return subject[len(affix) :]
    return subject[:]


def cut_suffix(subject: Subject, suffix: Any) -> Subject:
    """Return *subject* without a trailing *suffix*, if present.

    An empty suffix leaves the subject unchanged; ``subject[:-0]`` would
    be empty, so the length check comes before the slice.

    Examples:
        >>> cut_suffix("FooTests", "Tests")
        'Foo'
        >>> cut_suffix("hello", "")
        'hello'
    """
    affix = coerce_affix(kind_of(subject), suffix)
    if affix and subject.endswith(affix):
        return subject[: -len(affix)]
    return subject[:]
