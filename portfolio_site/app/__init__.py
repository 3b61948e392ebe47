"""
Application package initializer.

This package contains the main entrypoint for the portfolio site and
all of its submodules.  The JSON API lives under ``api/v1``, the
business rules under ``services``, the pydantic payloads under
``schemas`` and the server‑rendered pages under ``web``.  Persistence
is handled by ``core.storage``, which keeps the whole catalog in two
JSON files.
"""

from .main import app  # noqa: F401
