"""
Simple configuration management.

``Settings`` is a plain dataclass built once at process entry by
``Settings.load`` and handed to ``create_app``.  Values come from an
optional JSON file (``appsettings.json`` style, flat keys matching the
field names) and are then overlaid by ``CODECAMP_*`` environment
variables, so a deployment can ship a file with defaults and override
individual values per environment.

Nothing in the application reads a module level settings object; the
instance lives on ``app.state.settings``.
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional

ENV_PREFIX = "CODECAMP_"
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings."""

    project_name: str = "Code Camp API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api"
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Path to the SQLite database.  Relative paths are resolved against
    # the current working directory by the ``db`` module.
    database_path: str = "code_camp.db"
    seed_database: bool = True

    # Bearer token validation.  When ``auth_enabled`` is false every
    # mutating endpoint is open, which is only meant for local use.
    auth_enabled: bool = True
    token_key: str = "change_me"
    token_issuer: str = "code-camp-api"
    token_audience: str = "code-camp-clients"
    access_token_expire_minutes: int = 60 * 24

    # Cross-origin access.  ``cors_origins`` may call every method;
    # ``cors_allow_any_get`` instead lets any origin read with GET only
    # and takes precedence over the origin list.
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:8000"])
    cors_allow_any_get: bool = False
    force_https: bool = False

    @classmethod
    def load(cls, config_file: Optional[str] = None, environ: Optional[dict] = None) -> "Settings":
        """Build settings from an optional JSON file and the environment.

        ``config_file`` defaults to ``CODECAMP_CONFIG_FILE`` if set.  A
        missing file is not an error; unknown keys are ignored.
        """
        environ = os.environ if environ is None else environ
        values: dict = {}

        config_file = config_file or environ.get(f"{ENV_PREFIX}CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.is_file():
                with path.open(encoding="utf-8") as fh:
                    values.update(json.load(fh))

        known = {f.name: f for f in fields(cls)}
        for name, f in known.items():
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw

        kwargs = {name: _coerce(known[name].type, value) for name, value in values.items() if name in known}
        return cls(**kwargs)


def _coerce(annotation, value):
    """Convert a raw config value (usually a string) to the field type."""
    if not isinstance(value, str):
        return value
    if annotation in (bool, "bool"):
        return value.strip().lower() in _TRUE_VALUES
    if annotation in (int, "int"):
        return int(value)
    if annotation in (List[str], "List[str]"):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value
