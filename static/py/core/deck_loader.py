"""
Deck loader - parses authored deck content into a validated Deck.

Decks are YAML files under static/yaml/decks/. The server validates them
before embedding them in the page; the browser re-validates the embedded
JSON with load_deck_from_data.
"""

import yaml
from pathlib import Path
from pydantic import ValidationError
from models.deck import Deck


class DeckLoadError(Exception):
    """Deck content is missing, is not valid YAML, or does not match the item shapes"""


def load_deck_from_data(data) -> Deck:
    """
    Validate already-parsed deck data.

    Args:
        data: Either a mapping {title, items} or a bare list of items

    Raises:
        DeckLoadError: If the data does not describe a deck
    """
    if isinstance(data, list):
        data = {"items": data}
    if not isinstance(data, dict):
        raise DeckLoadError(f"Deck must be a mapping or a list of items, got {type(data).__name__}")

    try:
        return Deck.model_validate(data)
    except ValidationError as e:
        raise DeckLoadError(f"Invalid deck content: {e}") from e


def load_deck_from_text(text) -> Deck:
    """Parse and validate deck YAML (JSON works too, it is valid YAML)"""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeckLoadError(f"Deck is not valid YAML: {e}") from e

    if data is None:
        raise DeckLoadError("Deck is empty")
    return load_deck_from_data(data)


def load_deck_file(path) -> Deck:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DeckLoadError(f"Could not read deck {path.name}: {e}") from e
    return load_deck_from_text(text)
