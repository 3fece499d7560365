"""
Session-level flags, computed once at page load and passed down explicitly.
"""

from urllib.parse import parse_qs
from core.config import PRESENTER_PARAM


def presenter_mode_from_query(search) -> bool:
    """
    Presenter mode is on when the query string carries the presenter
    parameter, with any value or none at all ("?presenter").

    Args:
        search (str): window.location.search, with or without the leading "?"
    """
    if not search:
        return False
    params = parse_qs(search.lstrip("?"), keep_blank_values=True)
    return PRESENTER_PARAM in params
