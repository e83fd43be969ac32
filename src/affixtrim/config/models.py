"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, affixtrim.toml only contains overrides.
"""

from __future__ import annotations

import codecs
from typing import Literal

from pydantic import BaseModel, field_validator

ErrorHandler = Literal["strict", "replace", "ignore", "surrogateescape"]


class TrimConfig(BaseModel):
    """[trim] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"
    errors: ErrorHandler = "strict"
    strip_newlines: bool = True

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            msg = f"unknown encoding: {value}"
            raise ValueError(msg) from exc
