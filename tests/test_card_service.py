import asyncio

import pytest

from portfolio_site.app.core import storage
from portfolio_site.app.core.storage import StorageError
from portfolio_site.app.schemas.card import Card, CardCreate, Category
from portfolio_site.app.services import card_service
from portfolio_site.app.services.card_service import CardService, derive_short_description


def _card(card_id, created_at, category="Home", title=None):
    return Card(
        id=card_id,
        title=title or f"Card {card_id}",
        description=f"Description of {card_id}",
        shortDescription=f"Short {card_id}",
        category=category,
        createdAt=created_at,
    )


def test_short_description_keeps_first_ten_words():
    description = "one two three four five six seven eight nine ten eleven twelve"
    assert derive_short_description(description) == "one two three four five six seven eight nine ten..."


def test_short_description_collapses_whitespace_and_keeps_short_text():
    assert derive_short_description("  a\tb\n\nc  ") == "a b c..."


def test_create_derives_short_description_and_assigns_identity():
    card = asyncio.run(CardService.create_card(CardCreate(
        title="Photon Fury",
        description="A fast paced 2D shooting game published on itch io with twelve levels",
        category="Games",
    )))
    assert card.id
    assert card.created_at > 0
    assert card.short_description == "A fast paced 2D shooting game published on itch io..."
    assert card.image_path is None
    assert storage.load_cards() == [card]


def test_create_keeps_given_short_description_and_attaches_upload():
    data = CardCreate(
        title="Tic-Tac-Duel",
        description="A strategy card game",
        shortDescription="Card game",
        category="Games",
    )
    card = asyncio.run(CardService.create_card(data, image_path="/uploads/1-cover.png"))
    assert card.short_description == "Card game"
    assert card.image_path == "/uploads/1-cover.png"


def test_blank_short_description_is_derived():
    data = CardCreate(title="T", description="just three words", shortDescription="  ", category="Home")
    card = asyncio.run(CardService.create_card(data))
    assert card.short_description == "just three words..."


def test_create_ids_are_unique_and_timestamps_do_not_go_back(monkeypatch):
    storage.save_cards([_card("old", 5_000)])
    # Clock behind the newest stored card.
    monkeypatch.setattr(card_service, "_now_ms", lambda: 1_000)
    data = CardCreate(title="T", description="d", category="Home")
    first = asyncio.run(CardService.create_card(data))
    second = asyncio.run(CardService.create_card(data))
    ids = [card.id for card in storage.load_cards()]
    assert len(ids) == len(set(ids)) == 3
    assert first.created_at >= 5_000
    assert second.created_at >= first.created_at


def test_highlights_returns_newest_first():
    storage.save_cards([_card("a", 10), _card("b", 30), _card("c", 20), _card("d", 40)])
    result = asyncio.run(CardService.highlights(2))
    assert [card.id for card in result] == ["d", "b"]


def test_highlights_edge_counts():
    storage.save_cards([_card("a", 10), _card("b", 30), _card("c", 20)])
    assert asyncio.run(CardService.highlights(0)) == []
    assert asyncio.run(CardService.highlights(-3)) == []
    assert [card.id for card in asyncio.run(CardService.highlights(10))] == ["b", "c", "a"]


def test_by_category_preserves_order():
    storage.save_cards([
        _card("g1", 1, "Games"),
        _card("s1", 2, "Software"),
        _card("g2", 3, "Games"),
    ])
    assert [card.id for card in asyncio.run(CardService.by_category("Games"))] == ["g1", "g2"]
    assert [card.id for card in asyncio.run(CardService.by_category(Category.SOFTWARE))] == ["s1"]
    assert asyncio.run(CardService.by_category(Category.HOME)) == []


def test_update_replaces_whole_record():
    storage.save_cards([_card("a", 1), _card("b", 2)])
    replacement = Card(id="b", title="New", description="Fresh text", category="Software", createdAt=2)
    assert asyncio.run(CardService.update_card(replacement)) == replacement
    stored = storage.load_cards()
    assert stored[1] == replacement
    assert stored[1].short_description is None
    assert stored[0].id == "a"


def test_update_unknown_id_leaves_collection_alone():
    before = [_card("a", 1), _card("b", 2)]
    storage.save_cards(before)
    assert asyncio.run(CardService.update_card(_card("zzz", 3))) is None
    assert storage.load_cards() == before


def test_delete_unknown_id_is_a_noop():
    before = [_card("a", 1), _card("b", 2)]
    storage.save_cards(before)
    assert asyncio.run(CardService.delete_card("zzz")) == 0
    assert storage.load_cards() == before


def test_delete_removes_every_matching_entry():
    storage.save_cards([_card("a", 1), _card("b", 2), _card("a", 3)])
    assert asyncio.run(CardService.delete_card("a")) == 2
    assert [card.id for card in storage.load_cards()] == ["b"]


def test_create_refuses_to_overwrite_damaged_catalog():
    path = storage.get_cards_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("[{\"id\": \"a\", \"title\": \"A\"", encoding="utf-8")
    data = CardCreate(title="New", description="Fresh card", category="Home")
    with pytest.raises(StorageError):
        asyncio.run(CardService.create_card(data))
    assert path.read_text(encoding="utf-8") == "[{\"id\": \"a\", \"title\": \"A\""


def test_get_card():
    storage.save_cards([_card("a", 1)])
    assert asyncio.run(CardService.get_card("a")).id == "a"
    assert asyncio.run(CardService.get_card("b")) is None


def test_home_cards_excludes_highlights_and_other_categories():
    cards = [_card("h1", 1, "Home"), _card("h2", 2, "Home"), _card("s", 3, "Software"), _card("g", 4, "Games")]
    highlights = [cards[1]]
    assert [card.id for card in CardService.home_cards(cards, highlights)] == ["h1"]
