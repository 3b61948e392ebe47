"""
Service layer for portfolio cards.

This module owns every rule about cards: identity and creation time
for new cards, the short‑description derivation, full replace‑by‑id
updates, deletes, and the two read views used by the pages (the N most
recent cards, and the cards of one category).

Each operation is a whole‑file read‑modify‑write through
``core.storage``.  Read views never fail (the store substitutes an empty
catalog).  Mutations read strictly, so a damaged cards file surfaces as
``StorageError`` instead of being overwritten, as does a failed write.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import List, Optional

from portfolio_site.app.core import storage
from portfolio_site.app.schemas.card import Card, CardCreate, Category

logger = logging.getLogger(__name__)

SHORT_DESCRIPTION_WORDS = 10
ELLIPSIS = "..."


def derive_short_description(description: str) -> str:
    """First ten whitespace‑separated words of ``description`` plus ``...``.

    >>> derive_short_description("one two three four five six seven eight nine ten eleven")
    'one two three four five six seven eight nine ten...'
    """
    words = description.split()
    return " ".join(words[:SHORT_DESCRIPTION_WORDS]) + ELLIPSIS


def _now_ms() -> int:
    return int(time.time() * 1000)


class CardService:
    """Service class for managing the card catalog."""

    @classmethod
    async def list_cards(cls) -> List[Card]:
        """Return the full catalog in stored order."""
        return storage.load_cards()

    @classmethod
    async def get_card(cls, card_id: str) -> Optional[Card]:
        for card in storage.load_cards():
            if card.id == card_id:
                return card
        return None

    @classmethod
    async def create_card(cls, data: CardCreate, image_path: Optional[str] = None) -> Card:
        """Append a new card and return it.

        ``shortDescription`` is derived from the description when the
        caller left it out.  ``image_path`` is the reference returned by
        an earlier upload; when omitted the payload's own ``imagePath``
        (if any) is kept.

        The creation timestamp never goes below the newest stored
        ``createdAt``, so highlights keep insertion order even if the
        wall clock steps back.
        """
        cards = storage.load_cards_for_update()
        created_at = max([_now_ms()] + [card.created_at for card in cards])
        fields = data.model_dump()
        if not fields.get("short_description"):
            fields["short_description"] = derive_short_description(data.description)
        if image_path:
            fields["image_path"] = image_path
        card = Card(id=uuid.uuid4().hex, created_at=created_at, **fields)
        cards.append(card)
        storage.save_cards(cards)
        logger.info("Created card %s (%s)", card.id, card.category.value)
        return card

    @classmethod
    async def update_card(cls, card: Card) -> Optional[Card]:
        """Replace the stored card with the same ``id``.

        The whole record is replaced.  Returns ``None`` (and writes
        nothing) when no card has that id.
        """
        cards = storage.load_cards_for_update()
        found = False
        updated: List[Card] = []
        for existing in cards:
            if existing.id == card.id:
                updated.append(card)
                found = True
            else:
                updated.append(existing)
        if not found:
            logger.info("Update skipped, card %s not found", card.id)
            return None
        storage.save_cards(updated)
        logger.info("Updated card %s", card.id)
        return card

    @classmethod
    async def delete_card(cls, card_id: str) -> int:
        """Remove every card with ``card_id``.

        Unknown ids are not an error.  Returns the number of cards
        removed.
        """
        cards = storage.load_cards_for_update()
        remaining = [card for card in cards if card.id != card_id]
        storage.save_cards(remaining)
        removed = len(cards) - len(remaining)
        logger.info("Deleted card %s (%d removed)", card_id, removed)
        return removed

    @classmethod
    async def highlights(cls, n: int) -> List[Card]:
        """The ``n`` most recently created cards, newest first."""
        if n <= 0:
            return []
        cards = sorted(storage.load_cards(), key=lambda card: card.created_at, reverse=True)
        return cards[:n]

    @classmethod
    async def by_category(cls, category: Category | str) -> List[Card]:
        """Cards whose category equals ``category``, in stored order."""
        return [card for card in storage.load_cards() if card.category == category]

    @staticmethod
    def home_cards(cards: List[Card], highlights: List[Card]) -> List[Card]:
        """Cards for the home section of the landing page.

        These are the cards that are neither highlighted nor filed under
        Software or Games.
        """
        highlighted = {card.id for card in highlights}
        return [
            card
            for card in cards
            if card.id not in highlighted and card.category not in (Category.SOFTWARE, Category.GAMES)
        ]
