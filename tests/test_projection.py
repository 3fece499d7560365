import pytest

from core.config import ANSWER_PEEK_OPACITY, PAST_ROW_OPACITY
from core.navigation import NavigationController
from core.projection import project, visible_item_count
from models.deck import Deck


def _kinds(view):
    return [row.kind for row in view.rows]


def test_intro_scenario_start(intro_deck: Deck) -> None:
    view = project(intro_deck, 0, [])

    assert _kinds(view) == ["section", "qa"]
    question = view.rows[1]
    assert question.question_index == 0
    assert not question.show_answer
    assert question.answer_opacity == 0
    assert not question.is_past


def test_intro_scenario_after_three_nexts(intro_deck: Deck, make_store) -> None:
    store = make_store(intro_deck)
    navigation = NavigationController(store)
    for _ in range(3):
        navigation.next()

    state = store.state
    assert state.step == 3
    assert state.question_number == 1
    assert state.is_answer_phase

    view = project(intro_deck, state.step, state.highlights)
    assert _kinds(view) == ["section", "qa", "qa"]
    first, second = view.question_rows()
    assert first.show_answer and first.is_past
    assert first.row_opacity == PAST_ROW_OPACITY
    assert second.show_answer and not second.is_past and not second.is_future


def test_acknowledged_row_is_no_longer_past(intro_deck: Deck, make_store) -> None:
    store = make_store(intro_deck)
    navigation = NavigationController(store)
    store.set_step(3)

    navigation.acknowledge(0)

    first = project(intro_deck, store.state.step, store.state.highlights).question_rows()[0]
    assert not first.is_past
    assert first.row_opacity == 1.0
    assert first.show_answer


def test_answer_visibility_matches_step(long_deck: Deck) -> None:
    for step in range(long_deck.last_step + 1):
        view = project(long_deck, step, [])
        for row in view.question_rows():
            expected = row.question_index < step // 2 or (
                row.question_index == step // 2 and step % 2 == 1
            )
            assert row.show_answer == expected
        assert view.question_rows()[-1].question_index == step // 2


def test_sections_between_questions_are_kept_in_place(long_deck: Deck) -> None:
    view = project(long_deck, 4, [])
    assert _kinds(view) == ["qa", "qa", "section", "qa"]
    assert [row.position for row in view.rows] == [0, 1, 2, 3]


def test_presenter_mode_shows_one_future_item_with_peek(long_deck: Deck) -> None:
    normal = project(long_deck, 2, [])
    presenter = project(long_deck, 2, [], presenter_mode=True)

    assert len(presenter.question_rows()) == len(normal.question_rows()) + 1
    future = presenter.question_rows()[-1]
    assert future.is_future
    assert future.question_index == 2
    assert not future.show_answer
    assert future.answer_opacity == ANSWER_PEEK_OPACITY
    assert 0 < future.answer_opacity < 1


def test_presenter_mode_peeks_current_unrevealed_answer(long_deck: Deck) -> None:
    current = project(long_deck, 0, [], presenter_mode=True).question_rows()[0]
    assert not current.show_answer
    assert current.answer_opacity == ANSWER_PEEK_OPACITY


def test_presenter_mode_at_last_question_shows_everything(long_deck: Deck) -> None:
    view = project(long_deck, long_deck.last_step, [], presenter_mode=True)
    assert len(view.rows) == len(long_deck.items)
    assert not any(row.is_future for row in view.question_rows())


@pytest.mark.parametrize("cutoff, expected", [(0, 1), (1, 2), (2, 4), (3, 6), (4, 6)])
def test_visible_item_count(long_deck: Deck, cutoff: int, expected: int) -> None:
    assert visible_item_count(long_deck, cutoff) == expected


def test_choice_answer_passes_through(long_deck: Deck) -> None:
    row = project(long_deck, 3, []).question_rows()[1]
    assert row.answer == long_deck.items[1].answer
    assert row.show_answer


def test_view_header_fields(long_deck: Deck) -> None:
    view = project(long_deck, 5, [], presenter_mode=True)
    assert view.title == "Long"
    assert view.step == 5
    assert view.last_step == 7
    assert view.question_number == 2
    assert view.is_answer_phase
    assert view.presenter_mode
