"""
Settings endpoints for API v1.

The public pages read the settings to know how many highlights to
show; only the admin may change them.  A negative
``numberOfHighlights`` is rejected with 422 by the schema.
"""

from fastapi import APIRouter, Depends

from portfolio_site.app.core.security import require_admin
from portfolio_site.app.schemas.settings import SiteSettings
from portfolio_site.app.services.settings_service import SettingsService


router = APIRouter()


@router.get("", response_model=SiteSettings)
async def get_settings() -> SiteSettings:
    """Return the current site settings."""
    return await SettingsService.get_settings()


@router.put("", response_model=SiteSettings)
async def update_settings(body: SiteSettings, admin: dict = Depends(require_admin)) -> SiteSettings:
    """Replace the site settings (admin only)."""
    return await SettingsService.update_settings(body)
