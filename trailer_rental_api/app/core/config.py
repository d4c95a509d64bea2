"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
API runs out of the box against a ``Data`` directory in the project
root.  In a production deployment you should override these via
environment variables.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Trailer Rental API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Host and port used by ``run.py`` when serving the API with uvicorn.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))

    # Directory that holds the data folder.  A relative path is resolved
    # against the project root by ``core.storage``.
    content_root: str = os.getenv("CONTENT_ROOT", ".")
    data_dir: str = os.getenv("DATA_DIR", "Data")

    # When true, unreadable data files and failed writes raise
    # ``StorageError``.  When false they are logged and treated as an
    # empty collection (reads) or ignored (writes).
    strict_storage: bool = _env_flag("STRICT_STORAGE", "true")

    # Seed missing data files with the default records on startup.
    seed_on_startup: bool = _env_flag("SEED_ON_STARTUP", "true")

    # Pricing.  Fees are in ``currency`` units; the excess fee is charged
    # per started hour of late return.
    insurance_fee: float = float(os.getenv("INSURANCE_FEE", "50.0"))
    excess_fee_per_hour: float = float(os.getenv("EXCESS_FEE_PER_HOUR", "100.0"))
    currency: str = os.getenv("CURRENCY", "DKK")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
