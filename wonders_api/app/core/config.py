"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables each time it is instantiated.  Defaults are
provided for all fields.  Tests construct ``Settings`` with explicit
keyword arguments instead of touching the environment.
"""

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Wonders API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Routes are mounted under this prefix, e.g. ``/api/wonders``.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api"))

    # Optional log destinations.  ``json_log_file`` receives one JSON
    # object per line; ``log_file`` uses the console format.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))
    json_log_file: str = field(default_factory=lambda: os.getenv("JSON_LOG_FILE", ""))

    # JSON array of wonders used to populate an empty store at startup.
    # Relative paths are resolved against the current working directory.
    seed_data_path: str = field(default_factory=lambda: os.getenv("SEED_DATA_PATH", "seed-data.json"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Shared instance for entry points such as ``run.py``.  The application
# factory accepts its own ``Settings`` so tests never depend on this one.
settings = Settings()
