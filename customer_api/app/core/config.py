"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all.  Tests and embedding
applications may construct their own ``Settings`` and hand it to
``create_app`` instead of relying on the module‑level instance.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Customer API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Prefix under which the versioned router is mounted.  The customer
    # collection therefore lives at ``<api_prefix>/customers``.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api/v1"))

    # When enabled, ``POST /customers`` may carry an ``id`` which is used
    # as the key of the new record.  Otherwise ids are always taken from
    # the store's sequence and a supplied id is rejected.
    allow_client_ids: bool = field(default_factory=lambda: _env_flag("ALLOW_CLIENT_IDS"))

    # Emit uvicorn's per-request access lines.  When off, only warnings
    # and errors from ``uvicorn.access`` are logged.
    access_log: bool = field(default_factory=lambda: _env_flag("ACCESS_LOG", "true"))

    # Populate the store with a couple of sample customers at startup.
    seed_customers: bool = field(default_factory=lambda: _env_flag("SEED_CUSTOMERS"))

    # Gzip responses above ``compression_minimum_size`` bytes.
    enable_compression: bool = field(default_factory=lambda: _env_flag("ENABLE_COMPRESSION", "true"))
    compression_minimum_size: int = field(
        default_factory=lambda: int(os.getenv("COMPRESSION_MINIMUM_SIZE", "500"))
    )

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
