import pytest
from hypothesis import given
from hypothesis import strategies as st

from mirror.mirror_fsm import (
    FSM,
    NO_NEXT_STATE,
    NUMBER_RECOGNIZER,
    NumberState,
    classify_number_char,
)


def test_integer_is_recognized() -> None:
    result = NUMBER_RECOGNIZER.run("12345")
    assert result.recognized
    assert result.matched_text == "12345"
    assert result.final_state is NumberState.INTEGER
    assert result.scanned == 5


def test_decimal_is_recognized() -> None:
    result = NUMBER_RECOGNIZER.run("3.14159")
    assert result.recognized
    assert result.matched_text == "3.14159"
    assert result.final_state is NumberState.FRACTIONAL


def test_leading_dot_decimal() -> None:
    result = NUMBER_RECOGNIZER.run(".5")
    assert result.recognized
    assert result.matched_text == ".5"
    assert result.final_state is NumberState.FRACTIONAL


@pytest.mark.parametrize("text", ["1e10", "1E10", "2.5e-3", "2.5e+3", "7e0"])
def test_exponent_forms(text: str) -> None:
    result = NUMBER_RECOGNIZER.run(text)
    assert result.recognized
    assert result.matched_text == text
    assert result.final_state is NumberState.EXPONENT


def test_prefix_matching_stops_at_first_unmatched_char() -> None:
    result = NUMBER_RECOGNIZER.run("42)")
    assert result.matched_text == "42"
    assert result.scanned == 2


def test_trailing_dot_backs_off_to_integer() -> None:
    result = NUMBER_RECOGNIZER.run("12.")
    assert result.recognized
    assert result.matched_text == "12"
    assert result.final_state is NumberState.INTEGER
    assert result.scanned == 3


def test_dangling_exponent_backs_off() -> None:
    result = NUMBER_RECOGNIZER.run("3e+x")
    assert result.recognized
    assert result.matched_text == "3"
    assert result.scanned == 3


def test_lone_dot_is_not_recognized() -> None:
    result = NUMBER_RECOGNIZER.run(".x")
    assert not result.recognized
    assert result.matched_text == "."
    assert result.final_state is NumberState.BEGIN_FRACTIONAL


def test_run_from_offset() -> None:
    result = NUMBER_RECOGNIZER.run("x = 10.5;", start=4)
    assert result.matched_text == "10.5"


def test_next_state_returns_no_next_state() -> None:
    assert NUMBER_RECOGNIZER.next_state(NumberState.INITIAL, "a") is NO_NEXT_STATE
    assert (
        NUMBER_RECOGNIZER.next_state(NumberState.INTEGER, "7") is NumberState.INTEGER
    )


def test_classify_number_char() -> None:
    assert classify_number_char("5") == "digit"
    assert classify_number_char(".") == "point"
    assert classify_number_char("e") == "exponent"
    assert classify_number_char("-") == "sign"
    assert classify_number_char("x") == "other"


def test_generic_fsm_with_identity_classes() -> None:
    # recognizes "ab" followed by any number of "b"
    fsm = FSM(
        states={0, 1, 2},
        initial_state=0,
        accepting_states={2},
        transitions={(0, "a"): 1, (1, "b"): 2, (2, "b"): 2},
    )
    assert fsm.run("abbbc").matched_text == "abbb"
    assert not fsm.run("ac").recognized
    assert fsm.run("ac").matched_text == "a"


def test_accepting_initial_state_matches_empty_prefix() -> None:
    fsm = FSM(states={0}, initial_state=0, accepting_states={0}, transitions={})
    result = fsm.run("zzz")
    assert result.recognized
    assert result.matched_text == ""


def test_unknown_initial_state_rejected() -> None:
    with pytest.raises(ValueError, match="Initial state"):
        FSM(states={0}, initial_state=1, accepting_states=set(), transitions={})


def test_unknown_accepting_state_rejected() -> None:
    with pytest.raises(ValueError, match="Accepting states"):
        FSM(states={0}, initial_state=0, accepting_states={5}, transitions={})


def test_transition_to_unknown_state_rejected() -> None:
    with pytest.raises(ValueError, match="unknown state"):
        FSM(states={0}, initial_state=0, accepting_states={0}, transitions={(0, "a"): 9})


def test_transition_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        NUMBER_RECOGNIZER.transitions[(NumberState.INITIAL, "x")] = NumberState.INTEGER  # type: ignore[index]


@given(st.from_regex(r"[0-9]+", fullmatch=True))  # type: ignore[misc]
def test_digit_runs_are_integers(digits: str) -> None:
    result = NUMBER_RECOGNIZER.run(digits)
    assert result.recognized
    assert result.matched_text == digits
    assert result.final_state is NumberState.INTEGER


@given(st.text(max_size=30))  # type: ignore[misc]
def test_match_is_always_a_prefix(text: str) -> None:
    result = NUMBER_RECOGNIZER.run(text)
    assert text.startswith(result.matched_text)
    assert len(result.matched_text) <= result.scanned <= len(text)
