"""
Error Display - shown in place of the deck when its content cannot be loaded
Engine failures (storage, fullscreen) never reach this; they degrade silently
"""

import js
from core.config import DECK_CONTAINER_ID


class ErrorDisplay:
    """Manages error display UI inside the deck container"""

    def __init__(self, container_id=DECK_CONTAINER_ID):
        self.container_id = container_id

    def show_system_error(self, error_id="system", context="", details=""):
        """Display a system error (deck YAML loading, PyScript issues, etc.)"""
        self._show_error(
            error_id=error_id,
            title="System Error",
            message="We're having trouble loading the deck content.",
            context=context,
            details=details,
        )

    def _show_error(self, error_id, title, message, context="", details=""):
        """Internal method to display an error in the deck container"""
        container = js.document.getElementById(self.container_id)
        if not container:
            # Nothing to attach to, the console is all we have
            js.console.error(f"{title}: {message} {context}")
            return

        container.insertAdjacentHTML('beforeend', self._build_error_html(error_id, title, message, context, details))

    def _build_error_html(self, error_id, title, message, context, details):
        """Build the HTML for an error display"""
        context_html = f"<p class='error-context'><strong>Context:</strong> {context}</p>" if context else ""
        details_html = f"<details class='error-details'><summary>Technical Details</summary><pre>{details}</pre></details>" if details else ""

        return f'''
        <div id="error-{error_id}" class="error-item">
            <h3 class="error-title">{title}</h3>
            <p class="error-message">{message}</p>
            {context_html}
            {details_html}
            <button onclick="location.reload()" class="error-action">
                Refresh Page
            </button>
        </div>
        '''
