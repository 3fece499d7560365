"""
Deck View - DOM rendering of the projected deck
Draws rows from a ViewModel and owns the lifetime of embedded choice widgets,
but NOT the state machine (that is core.step_state / core.navigation)
"""

import js
from pyodide.ffi import create_proxy
from components.choice_widget import ChoiceConfig, ChoiceWidget
from core.config import ANSWER_HIDDEN_OPACITY, DECK_CONTAINER_ID


class DeckView:
    """Renders the visible slice of the deck as a growing list of rows"""

    def __init__(self, navigation, scheduler, container_id=DECK_CONTAINER_ID, debug_callback=None):
        self.navigation = navigation
        self.scheduler = scheduler
        self.container_id = container_id
        self.title_id = f"{container_id}-title"
        self.rows_id = f"{container_id}-rows"
        self.debug = debug_callback if debug_callback else print
        self.widgets = {}  # question index -> mounted ChoiceWidget
        self.last_view = None
        self._setup_structure()

        self._click_proxy = create_proxy(self._on_click)
        js.document.getElementById(self.rows_id).addEventListener("click", self._click_proxy)

    def _setup_structure(self):
        """Create the basic deck DOM structure"""
        container = js.document.getElementById(self.container_id)
        if not container:
            raise ValueError(f"Container {self.container_id} not found")

        container.innerHTML = f'''
        <main class="deck-main">
            <h1 id="{self.title_id}" class="deck-title"></h1>
            <div id="{self.rows_id}" class="deck-rows"></div>
        </main>
        '''

    # --- Rendering ---

    def render(self, view, scroll_to_bottom=False):
        self.last_view = view
        self._sync_widgets(view)

        js.document.title = view.title
        js.document.getElementById(self.title_id).innerHTML = view.title
        rows_html = "".join(self._render_row(row) for row in view.rows)
        js.document.getElementById(self.rows_id).innerHTML = rows_html

        if scroll_to_bottom:
            js.window.scrollTo(0, js.document.body.scrollHeight)

    def _sync_widgets(self, view):
        """Mount widgets for rows entering the view, tear down the ones that left"""
        visible = {
            row.question_index: row.answer
            for row in view.question_rows()
            if isinstance(row.answer, ChoiceConfig)
        }

        for question_index in list(self.widgets):
            if question_index not in visible:
                widget = self.widgets.pop(question_index)
                if widget.advance_pending:
                    self.debug(f"Choice {question_index} left the view, dropping its pending advance")
                widget.teardown()

        for question_index, config in visible.items():
            if question_index not in self.widgets:
                self.widgets[question_index] = ChoiceWidget(
                    question_index, config, self.navigation.next, self.scheduler
                )

    def _render_row(self, row):
        if row.kind == "section":
            return f'<h2 class="deck-section">{row.title}</h2>'
        if row.kind == "block":
            return f'<div class="deck-block">{row.content}</div>'

        if isinstance(row.answer, ChoiceConfig):
            answer_html = self.widgets[row.question_index].render()
        else:
            answer_html = row.answer

        answer_style = f"opacity: {row.answer_opacity};"
        if row.answer_opacity == ANSWER_HIDDEN_OPACITY:
            answer_style += " visibility: hidden;"

        classes = "deck-row"
        if row.is_past:
            classes += " past"
        if row.is_future:
            classes += " future"

        return f'''
        <div class="{classes}" data-question-index="{row.question_index}" style="opacity: {row.row_opacity};">
            <div class="index">{row.question_index}</div>
            <div class="question">{row.question}</div>
            <div class="answer" style="{answer_style}">{answer_html}</div>
        </div>
        '''

    # --- Pointer input ---

    def _on_click(self, event):
        target = event.target
        if not hasattr(target, "closest"):
            return

        option = target.closest("[data-option]")
        if option:
            widget = self.widgets.get(int(option.dataset.choice))
            if widget:
                widget.select(int(option.dataset.option))
                self.render(self.last_view)
            return

        row = target.closest(".deck-row")
        if row:
            self.navigation.acknowledge(int(row.dataset.questionIndex))

