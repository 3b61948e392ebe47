"""
Service layer for the site settings.

The site has one settings object, stored as a JSON document and
replaced wholesale on update.  Reading never fails: a missing or
damaged file yields the defaults (one highlight).
"""

import logging

from portfolio_site.app.core import storage
from portfolio_site.app.schemas.settings import SiteSettings


class SettingsService:
    """Service for reading and replacing the site settings."""

    @classmethod
    async def get_settings(cls) -> SiteSettings:
        return storage.load_settings()

    @classmethod
    async def update_settings(cls, site_settings: SiteSettings) -> SiteSettings:
        """Persist ``site_settings`` and echo it back.

        ``numberOfHighlights >= 0`` is enforced by the schema before the
        call reaches this point.
        """
        logger = logging.getLogger(__name__)
        storage.save_settings(site_settings)
        logger.info("Settings updated: numberOfHighlights=%s", site_settings.number_of_highlights)
        return site_settings
