"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
portal runs out of the box with seeded demo data.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Class Portal API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    # All resource routers are mounted under this prefix, e.g. ``/api/announcements``.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # Optional path of a log file in addition to the console handler.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Load the fixture records when the application is created.  Tests
    # that want an empty store switch this off.
    seed_on_startup: bool = field(default_factory=lambda: _env_bool("SEED_ON_STARTUP", "true"))

    # Monthly class fee paid by one member, in the same unit as
    # transaction amounts.  Used to derive how many members paid their
    # dues in the latest month of the finance summary.
    dues_amount: float = field(default_factory=lambda: float(os.getenv("DUES_AMOUNT", "50000")))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
