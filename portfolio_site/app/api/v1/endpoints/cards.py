"""
Card endpoints for API v1.

Anyone may read the catalog; creating, replacing and deleting cards
requires the admin token.  Updates replace the whole record keyed by
``id``.  Deleting an unknown id succeeds without effect, while
updating one answers 404 so the admin page can tell the edit was lost.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from portfolio_site.app.core.security import require_admin
from portfolio_site.app.schemas.card import Card, CardCreate, CardDelete
from portfolio_site.app.services.card_service import CardService
from portfolio_site.app.services.settings_service import SettingsService

router = APIRouter()


@router.get("", response_model=List[Card], response_model_exclude_none=True)
async def list_cards() -> List[Card]:
    """Return every card in stored order."""
    return await CardService.list_cards()


@router.get("/highlights", response_model=List[Card], response_model_exclude_none=True)
async def list_highlights(n: Optional[int] = Query(None, description="Defaults to the numberOfHighlights setting")) -> List[Card]:
    """Return the ``n`` most recently created cards, newest first."""
    if n is None:
        n = (await SettingsService.get_settings()).number_of_highlights
    return await CardService.highlights(n)


@router.post("", response_model=Card, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
async def create_card(card_in: CardCreate, admin: dict = Depends(require_admin)) -> Card:
    """Create a card (admin only).

    ``id`` and ``createdAt`` are assigned by the server.  Upload the
    image first via ``POST /upload`` and pass the returned path as
    ``imagePath``.
    """
    return await CardService.create_card(card_in)


@router.put("", response_model=Card, response_model_exclude_none=True)
async def update_card(card: Card, admin: dict = Depends(require_admin)) -> Card:
    """Replace an existing card (admin only)."""
    updated = await CardService.update_card(card)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found")
    return updated


@router.delete("")
async def delete_card(body: CardDelete, admin: dict = Depends(require_admin)) -> dict:
    """Delete a card by id (admin only)."""
    await CardService.delete_card(body.id)
    return {"message": "Card deleted"}
