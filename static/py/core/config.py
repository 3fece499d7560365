"""
Deck engine constants.
Storage layout, input bindings and presentation values shared by core and ui.
"""

# Persisted state layout (client-local key/value storage)
STEP_KEY = "step"
HIGHLIGHTS_KEY = "highlights"
STATE_KEYS = (STEP_KEY, HIGHLIGHTS_KEY)

# Seconds between the first pick on a choice and the automatic "next"
CHOICE_ADVANCE_DELAY = 0.5

# Any value (even empty) of this query parameter turns on presenter mode
PRESENTER_PARAM = "presenter"

# KeyboardEvent.key -> NavigationController method name
KEY_BINDINGS = {
    " ": "next",
    "ArrowRight": "next",
    "Backspace": "previous",
    "ArrowLeft": "previous",
    "Home": "reset",
}

# Opacity values used by the render projection
ANSWER_SHOWN_OPACITY = 1.0
ANSWER_PEEK_OPACITY = 0.1  # presenter mode, answer not yet revealed
ANSWER_HIDDEN_OPACITY = 0.0
PAST_ROW_OPACITY = 0.3
FUTURE_ROW_OPACITY = 0.5

# DOM ids the page template provides
DECK_CONTAINER_ID = "deck-container"
DECK_SOURCE_ID = "deck-source"
DEBUG_OUTPUT_ID = "debug-output"
