"""Config file discovery.

The user config lives at ``~/.biclog.toml``. The ``BICLOG_CONFIG`` env
var and the ``--config`` CLI flag point elsewhere.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = ".biclog.toml"
CONFIG_ENV_VAR = "BICLOG_CONFIG"


def find_config(home: Path | None = None) -> Path | None:
    """Locate the user config file.

    Checks ``BICLOG_CONFIG`` first, then ``.biclog.toml`` in *home*
    (default: the user's home directory). Returns None if neither exists.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path).expanduser()
        if p.is_file():
            return p
        return None

    candidate = (home or Path.home()) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None
