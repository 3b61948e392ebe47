"""
Service layer for admin authentication.

There is exactly one admin identity, configured through
``ADMIN_USERNAME`` and ``ADMIN_PASSWORD``.  A successful login yields a
signed bearer token; nothing is stored server‑side.
"""

import logging
from typing import Optional

from portfolio_site.app.core.config import settings
from portfolio_site.app.core.security import create_access_token, verify_admin_credentials

logger = logging.getLogger(__name__)


class AuthService:
    """Login for the single site admin."""

    @classmethod
    async def login(cls, username: str, password: str) -> Optional[str]:
        """Return an access token, or ``None`` for bad credentials."""
        if not verify_admin_credentials(username, password):
            logger.warning("Failed admin login for %r", username)
            return None
        logger.info("Admin %s logged in", username)
        return create_access_token({"sub": settings.admin_username})
