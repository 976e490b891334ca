"""Config file discovery and reading.

Walk-up finder locates surveyctl.toml, similar to how git finds .git/.
Supports SURVEYCTL_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "surveyctl.toml"
CONFIG_ENV_VAR = "SURVEYCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for surveyctl.toml.

    SURVEYCTL_CONFIG, when set, replaces the walk-up entirely: it names
    the file, and a missing file means no config at all.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(config_path: str | None, start: Path | None = None) -> Path | None:
    """Pick the TOML file for one invocation.

    An explicit ``--config`` path wins when it names a file; otherwise
    the file is discovered with :func:`find_config`.
    """
    if config_path:
        p = Path(config_path)
        return p if p.is_file() else None
    return find_config(start)


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into raw section tables; ``{}`` when there is no file.

    Raises:
        click.ClickException: The file is not valid TOML.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
