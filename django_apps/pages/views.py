# django_apps/pages/views.py

import logging
from pathlib import Path

from django.conf import settings
from django.http import Http404, HttpResponseServerError
from django.shortcuts import render

from core.deck_loader import DeckLoadError, load_deck_file

logger = logging.getLogger(__name__)


def deck_path(deck_id):
    """Location of a deck's YAML file inside DECKS_DIR"""
    return Path(settings.DECKS_DIR) / f"{deck_id}.yaml"


def home(request):
    """Default deck"""
    return deck(request, settings.DEFAULT_DECK_ID)


def deck(request, deck_id):
    """
    Deck page. The YAML is validated here and embedded as JSON; the
    presentation engine itself runs in the browser.
    """
    path = deck_path(deck_id)
    if not path.is_file():
        raise Http404(f"No deck named {deck_id}")

    try:
        loaded = load_deck_file(path)
    except DeckLoadError:
        logger.exception("Deck %s could not be loaded", deck_id)
        return HttpResponseServerError("Deck content could not be loaded.")

    context = {
        'deck_id': deck_id,
        'deck_title': loaded.title,
        'deck_data': loaded.model_dump(mode="json"),
    }
    return render(request, 'views/deck.html', context)
