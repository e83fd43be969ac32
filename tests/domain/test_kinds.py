"""Tests for sequence kind classification and affix normalization."""

import pytest

from affixtrim.domain.kinds import AffixKindError, SequenceKind, coerce_affix, kind_of


class TestKindOf:
    @pytest.mark.parametrize(
        "subject,kind",
        [
            ("abc", SequenceKind.TEXT),
            ("", SequenceKind.TEXT),
            (b"abc", SequenceKind.BYTES),
            (bytearray(b"abc"), SequenceKind.MUTABLE_BYTES),
        ],
    )
    def test_supported(self, subject: object, kind: SequenceKind) -> None:
        assert kind_of(subject) is kind

    @pytest.mark.parametrize("subject", [None, 1, ["a"], ("a",), memoryview(b"a")])
    def test_unsupported(self, subject: object) -> None:
        with pytest.raises(AffixKindError):
            kind_of(subject)

    def test_is_binary(self) -> None:
        assert not SequenceKind.TEXT.is_binary
        assert SequenceKind.BYTES.is_binary
        assert SequenceKind.MUTABLE_BYTES.is_binary


class TestCoerceAffix:
    def test_text_passthrough(self) -> None:
        assert coerce_affix(SequenceKind.TEXT, "ab") == "ab"

    def test_bytes_passthrough(self) -> None:
        affix = b"ab"
        assert coerce_affix(SequenceKind.BYTES, affix) is affix

    @pytest.mark.parametrize("kind", [SequenceKind.BYTES, SequenceKind.MUTABLE_BYTES])
    def test_buffers_become_bytes(self, kind: SequenceKind) -> None:
        assert coerce_affix(kind, bytearray(b"ab")) == b"ab"
        assert coerce_affix(kind, memoryview(b"ab")) == b"ab"
        assert type(coerce_affix(kind, bytearray(b"ab"))) is bytes

    def test_text_rejects_bytes(self) -> None:
        with pytest.raises(AffixKindError, match="'bytes' affix from a str subject"):
            coerce_affix(SequenceKind.TEXT, b"a")

    def test_bytes_rejects_text(self) -> None:
        with pytest.raises(AffixKindError, match="'str' affix from a bytes subject"):
            coerce_affix(SequenceKind.BYTES, "a")

    def test_bytes_rejects_non_buffer(self) -> None:
        with pytest.raises(AffixKindError, match="'list' affix"):
            coerce_affix(SequenceKind.MUTABLE_BYTES, [1, 2])
