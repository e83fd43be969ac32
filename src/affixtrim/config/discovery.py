"""Config file discovery.

Walk-up finder locates affixtrim.toml, similar to how git finds .git/.
Supports the AFFIXTRIM_CONFIG env var and the --config CLI flag.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "affixtrim.toml"
CONFIG_ENV_VAR = "AFFIXTRIM_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for affixtrim.toml.

    Returns the path to the config file, or None if not found.
    Checks AFFIXTRIM_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
