from wrathword.models import Feedback, HintCell
from wrathword.services import HintProvider


def _fb(*states):
    return Feedback.from_states(states)


def test_hint_on_empty_board_reveals_first_letter():
    hint = HintProvider().get_hint("CRANE", 0, [])
    assert hint.success is True
    assert hint.position == HintCell(row=0, col=0)
    assert hint.letter == "C"


def test_hint_skips_columns_already_correct():
    history = [_fb("correct", "correct", "absent", "present", "absent")]
    hint = HintProvider().get_hint("crane", 1, history)
    assert hint.position == HintCell(row=1, col=2)
    assert hint.letter == "A"


def test_hint_uses_union_across_rows():
    history = [
        _fb("correct", "correct", "absent", "absent", "absent"),
        _fb("absent", "absent", "correct", "correct", "absent"),
    ]
    hint = HintProvider().get_hint("CRANE", 2, history)
    assert hint.position == HintCell(row=2, col=4)
    assert hint.letter == "E"


def test_no_hint_when_every_column_was_correct():
    history = [
        _fb("correct", "correct", "correct", "absent", "correct"),
        _fb("absent", "correct", "absent", "correct", "absent"),
    ]
    hint = HintProvider().get_hint("CRANE", 2, history)
    assert hint.success is False
    assert hint.position is None
    assert "no positions available for hint" in hint.reason
