"""affixtrim — remove a prefix or suffix from text and bytes, if present."""

from affixtrim.domain.affixes import cut_prefix, cut_suffix
from affixtrim.domain.kinds import AffixKindError, SequenceKind
from affixtrim.domain.steps import TrimStep, apply_steps

__version__ = "0.1.0"

__all__ = [
    "AffixKindError",
    "SequenceKind",
    "TrimStep",
    "__version__",
    "apply_steps",
    "cut_prefix",
    "cut_suffix",
]
