"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Student Registry API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # Empty means console logging only.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Remote source of the seed data.  Each user record becomes one
    # student (``id`` and ``name`` are kept, everything else dropped).
    seed_url: str = field(
        default_factory=lambda: os.getenv("SEED_URL", "https://jsonplaceholder.typicode.com/users")
    )
    seed_timeout: float = field(default_factory=lambda: float(os.getenv("SEED_TIMEOUT", "10")))

    # Fetch the seed data while the application starts instead of on
    # the first request.  A failed preload is logged and the store stays
    # lazy.
    preload_students: bool = field(default_factory=lambda: _env_bool("PRELOAD_STUDENTS"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests build their own
# ``Settings`` and pass it to ``create_app``.
settings = Settings()
