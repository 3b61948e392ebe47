"""
Public pages and the admin page.

Every page reads the catalog through ``CardService`` and renders a
Jinja2 template.  Empty sections show a placeholder instead of an
error.  The admin page is a static shell; its script logs in against
``/auth`` and drives the JSON API with the returned token, which it
keeps in memory only (a reload asks for the password again).
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates

from portfolio_site.app.core import storage
from portfolio_site.app.core.config import settings
from portfolio_site.app.schemas.card import Category
from portfolio_site.app.services.card_service import CardService
from portfolio_site.app.services.settings_service import SettingsService
from portfolio_site.app.web import display

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals.update(
    youtube_embed_url=display.youtube_embed_url,
    link_label=display.link_label,
    safe_url=display.safe_url,
    favicon_url=display.favicon_url,
    project_name=settings.project_name,
)

router = APIRouter()

CATEGORY_TITLES = {
    Category.SOFTWARE: "Our Software",
    Category.GAMES: "Our Games",
}


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    cards = await CardService.list_cards()
    site_settings = await SettingsService.get_settings()
    highlights = await CardService.highlights(site_settings.number_of_highlights)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "highlights": highlights,
            "software": [card for card in cards if card.category == Category.SOFTWARE],
            "games": [card for card in cards if card.category == Category.GAMES],
            "home_cards": CardService.home_cards(cards, highlights),
        },
    )


@router.get("/software", response_class=HTMLResponse)
async def software(request: Request):
    return await _category_page(request, Category.SOFTWARE)


@router.get("/games", response_class=HTMLResponse)
async def games(request: Request):
    return await _category_page(request, Category.GAMES)


async def _category_page(request: Request, category: Category):
    cards = await CardService.by_category(category)
    return templates.TemplateResponse(
        request,
        "category.html",
        {"title": CATEGORY_TITLES[category], "category": category.value, "cards": cards},
    )


@router.get("/highlight", response_class=HTMLResponse)
async def highlight(request: Request):
    site_settings = await SettingsService.get_settings()
    cards = await CardService.highlights(site_settings.number_of_highlights)
    return templates.TemplateResponse(request, "highlight.html", {"cards": cards})


@router.get("/cards/{card_id}", response_class=HTMLResponse)
async def card_detail(request: Request, card_id: str):
    card = await CardService.get_card(card_id)
    if card is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Card not found")
    return templates.TemplateResponse(request, "card_detail.html", {"card": card})


@router.get("/admin", response_class=HTMLResponse)
async def admin(request: Request):
    return templates.TemplateResponse(
        request,
        "admin.html",
        {"api_prefix": settings.api_prefix, "categories": [c.value for c in Category]},
    )


@router.get("/uploads/{filename}", include_in_schema=False)
async def uploaded_file(filename: str):
    """Serve a previously uploaded file from the upload directory."""
    upload_dir = storage.get_upload_dir().resolve()
    path = (upload_dir / filename).resolve()
    if path.parent != upload_dir or not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    return FileResponse(path)
