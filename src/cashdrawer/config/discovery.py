"""Locating and reading ``cashdrawer.toml``.

Lookup order: an explicit ``--config`` path, then the file named by
``CASHDRAWER_CONFIG``, then the nearest ``cashdrawer.toml`` in the
working directory or one of its parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from cashdrawer.config.models import CashDrawerConfig

CONFIG_FILENAME = "cashdrawer.toml"
CONFIG_ENV_VAR = "CASHDRAWER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any.

    A ``CASHDRAWER_CONFIG`` pointing at a missing file means no config;
    the walk-up is not tried in that case.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        named = Path(env_path)
        return named if named.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the file for one CLI run. An explicit path that does not
    exist yields None rather than falling back to discovery."""
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None
    return find_config(start)


def load_config(path: Path) -> CashDrawerConfig:
    """Parse and validate one config file.

    Raises:
        tomllib.TOMLDecodeError: The file is not TOML.
        pydantic.ValidationError: The TOML has unknown keys or bad values.
    """
    with path.open("rb") as fh:
        return CashDrawerConfig.model_validate(tomllib.load(fh))
