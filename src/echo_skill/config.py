"""
Skill configuration — the application id a deployment answers to.

Stored as JSON in ~/.echo_skill/config.json; ECHO_SKILL_APP_ID overrides it.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

CONFIG_FILE = Path.home() / ".echo_skill" / "config.json"
APP_ID_ENV = "ECHO_SKILL_APP_ID"


def load_config(path: Optional[Path] = None) -> dict[str, Any]:
    try:
        cfg = json.loads((path or CONFIG_FILE).read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return cfg if isinstance(cfg, dict) else {}


def save_config(cfg: dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg, indent=2))


def resolve_app_id(explicit: Optional[str] = None, path: Optional[Path] = None) -> Optional[str]:
    """Pick the application id: explicit argument, then environment, then config file."""
    if explicit:
        return explicit
    env_value = os.environ.get(APP_ID_ENV)
    if env_value:
        return env_value
    return load_config(path).get("application_id") or None
