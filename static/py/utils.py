"""
Utility functions for the deck runtime.
"""

from core.config import DEBUG_OUTPUT_ID


def update_debug(message):
    """Update the debug output with a message."""
    from pyscript import document # type: ignore

    debug_output = document.querySelector(f"#{DEBUG_OUTPUT_ID}")
    if debug_output:
        current = debug_output.innerHTML
        debug_output.innerHTML = current + f"<p class='debug-line'>{message}</p>"
    print(message)
