import json
from pathlib import Path

import pytest
from django.http import Http404
from django.test import RequestFactory, override_settings
from django.urls import resolve

from django_apps.pages import views


@pytest.fixture
def rf() -> RequestFactory:
    return RequestFactory()


def _embedded_deck(html: str) -> dict:
    start = html.index('<script id="deck-source" type="application/json">')
    start = html.index(">", start) + 1
    end = html.index("</script>", start)
    return json.loads(html[start:end])


def test_deck_page_embeds_validated_deck(rf: RequestFactory, tmp_path: Path) -> None:
    (tmp_path / "tiny.yaml").write_text(
        "title: Tiny <Deck>\n"
        "items:\n"
        "  - section: Start\n"
        "  - question: <p>Ready?</p>\n"
        "    answer:\n"
        "      choice: [Sure, Not yet]\n",
        encoding="utf-8",
    )

    with override_settings(DECKS_DIR=tmp_path):
        response = views.deck(rf.get("/deck/tiny/"), "tiny")

    assert response.status_code == 200
    html = response.content.decode("utf-8")
    assert "<title>Tiny &lt;Deck&gt;</title>" in html
    embedded = _embedded_deck(html)
    assert embedded["title"] == "Tiny <Deck>"
    assert embedded["items"][0] == {"type": "section", "title": "Start"}
    assert embedded["items"][1]["answer"] == {"type": "choice", "options": ["Sure", "Not yet"]}
    assert "bootstrap.py" in html
    assert "<body>" in html


def test_unknown_deck_is_404(rf: RequestFactory, tmp_path: Path) -> None:
    with override_settings(DECKS_DIR=tmp_path):
        with pytest.raises(Http404):
            views.deck(rf.get("/deck/missing/"), "missing")


def test_invalid_deck_is_500(rf: RequestFactory, tmp_path: Path) -> None:
    (tmp_path / "broken.yaml").write_text("items:\n  - slide: nope\n", encoding="utf-8")

    with override_settings(DECKS_DIR=tmp_path):
        response = views.deck(rf.get("/deck/broken/"), "broken")

    assert response.status_code == 500


def test_home_serves_default_deck(rf: RequestFactory) -> None:
    response = views.home(rf.get("/"))
    assert response.status_code == 200
    assert _embedded_deck(response.content.decode("utf-8"))["title"] == "The Little Rustacean"


def test_urls_route_to_views() -> None:
    assert resolve("/").func is views.home
    match = resolve("/deck/little-rustacean/")
    assert match.func is views.deck
    assert match.kwargs == {"deck_id": "little-rustacean"}
