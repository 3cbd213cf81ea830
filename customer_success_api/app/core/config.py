"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment you
should override these via environment variables.

Values are read when a ``Settings`` instance is created, not when this
module is imported, so ``Settings()`` always reflects the current
environment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Customer Success Platform API")
    api_version: str = _env("API_VERSION", "1.0.0")
    api_prefix: str = _env("API_PREFIX", "/api")
    log_level: str = _env("LOG_LEVEL", "INFO")
    log_file: str = _env("LOG_FILE", "")

    # Listen address for ``run.py``.  The port defaults to 3000 to match
    # the dashboard's development proxy.
    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Seed for the placeholder churn model weights.  Leave unset for a
    # different random network on every start.
    churn_model_seed: Optional[int] = field(default_factory=lambda: _optional_int("CHURN_MODEL_SEED"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
