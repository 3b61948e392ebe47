import pytest

import manage_cards
from portfolio_api import PortfolioAPI
from tests.test_portfolio_api import FakeResponse, FakeSession


@pytest.fixture
def session(monkeypatch):
    session = FakeSession()

    def client_factory(base_url, api_key=None):
        return PortfolioAPI(base_url=base_url, api_key=api_key, session=session)

    monkeypatch.setattr(manage_cards, "PortfolioAPI", client_factory)
    return session


def test_list_highlights(session, capsys):
    session.responses.append(FakeResponse(200, [{"id": "4", "category": "Games", "title": "Photon Fury"}]))
    manage_cards.main(["--url", "http://site", "list", "--highlights", "--count", "1"])
    assert session.calls[0]["url"] == "http://site/api/cards/highlights"
    assert session.calls[0]["params"] == {"n": 1}
    assert "Photon Fury" in capsys.readouterr().out


def test_list_all_cards(session, capsys):
    session.responses.append(FakeResponse(200, [{"id": "1", "category": "Home", "title": "Robotics"}]))
    manage_cards.main(["--url", "http://site", "list"])
    assert session.calls[0]["url"] == "http://site/api/cards"
    assert "Robotics" in capsys.readouterr().out


def test_highlights_without_count_shows_setting(session, capsys):
    session.responses.append(FakeResponse(200, {"numberOfHighlights": 3}))
    manage_cards.main(["--url", "http://site", "highlights"])
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://site/api/settings"
    assert "Showing 3 highlight(s)" in capsys.readouterr().out


def test_highlights_with_count_updates_setting(session, capsys):
    session.responses.append(FakeResponse(200, {"numberOfHighlights": 2}))
    manage_cards.main(["--url", "http://site", "--token", "tok", "highlights", "2"])
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["json"] == {"numberOfHighlights": 2}
    assert session.calls[0]["headers"]["Authorization"] == "Bearer tok"
    assert "[+] Showing 2 highlight(s)" in capsys.readouterr().out


def test_api_error_exits_nonzero(session, capsys):
    session.responses.append(FakeResponse(500, {"message": "Storage unavailable"}))
    with pytest.raises(SystemExit) as exc_info:
        manage_cards.main(["--url", "http://site", "highlights"])
    assert exc_info.value.code == 1
    assert "Storage unavailable" in capsys.readouterr().err
