"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
site runs out of the box for local development.  In a production
deployment you should at least override ``SECRET_KEY`` and the admin
credentials.

Note that ``Settings`` here is the *process* configuration.  The
admin‑editable site setting (``numberOfHighlights``) lives in the
settings JSON file and is handled by ``services.settings_service``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Project root (the directory containing the ``portfolio_site`` package).
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Portfolio Site")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 12)))

    # Single admin identity.  The login endpoint compares against these
    # values; there is no user table.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin")

    # When false, mutation routes are open (handy for local tinkering).
    admin_auth_required: bool = os.getenv("ADMIN_AUTH_REQUIRED", "true").lower() in {"1", "true", "yes"}

    # Storage locations.  Relative paths are resolved against the
    # project root by ``core.storage`` each time a file is touched.
    data_dir: str = os.getenv("DATA_DIR", "data")
    cards_file: str = os.getenv("CARDS_FILE", "cards.json")
    settings_file: str = os.getenv("SETTINGS_FILE", "settings.json")
    upload_dir: str = os.getenv("UPLOAD_DIR", os.path.join("public", "uploads"))

    # Public URL prefix under which uploaded files are served.
    upload_url_prefix: str = "/uploads"

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module; tests patch attributes instead.
settings = Settings()
