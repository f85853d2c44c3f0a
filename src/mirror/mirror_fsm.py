"""
Table-driven finite state machines for lexical sub-grammars.

The engine is generic: an `FSM` is a set of states, an initial state, a set of
accepting states and an immutable transition table keyed by
``(state, character class)``. A `classify` function maps each input character
to its class, so a table stays small even when the alphabet is large.

`FSM.run()` performs longest-prefix matching with back-off: it follows
transitions until none applies and then reports the text up to the last
accepting state it passed through. It never looks past the first character
without a transition.

The numeric literal grammar used by the MIRROR lexer is defined at the bottom
of this module as `NUMBER_RECOGNIZER`:

    Initial -digit-> Integer -digit-> Integer
    Initial -.-> BeginFractional        Integer -.-> BeginFractional
    BeginFractional -digit-> Fractional -digit-> Fractional
    Integer -e/E-> BeginExponent        Fractional -e/E-> BeginExponent
    BeginExponent -+/- -> BeginSignedExponent
    BeginExponent -digit-> Exponent     BeginSignedExponent -digit-> Exponent
    Exponent -digit-> Exponent

Accepting: Integer, Fractional, Exponent.

Example:
    >>> NUMBER_RECOGNIZER.run("3.14)")
    FSMResult(recognized=True, matched_text='3.14', final_state=<NumberState.FRACTIONAL: 'fractional'>, scanned=4)
"""

from collections.abc import Callable, Hashable, Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Generic, NamedTuple, TypeVar

from mirror.mirror_chars import is_digit

S = TypeVar("S", bound=Hashable)

NO_NEXT_STATE = None
"""Returned by `FSM.next_state` when no transition exists."""


class FSMResult(NamedTuple):
    """Outcome of `FSM.run`.

    Attributes:
        recognized (bool): True if an accepting state was reached.
        matched_text (str): The longest accepted prefix, or, when nothing was
            accepted, everything scanned before the machine got stuck.
        final_state (Hashable): The accepting state the match ended in, or the last
            state reached when nothing was accepted.
        scanned (int): Number of characters consumed before the dead end.
            Greater than ``len(matched_text)`` when the machine backed off.
    """

    recognized: bool
    matched_text: str
    final_state: Hashable
    scanned: int


class FSM(Generic[S]):
    """A deterministic finite state machine over character classes.

    Args:
        states (Iterable[S]): Every state the machine can be in.
        initial_state (S): Where each run starts.
        accepting_states (Iterable[S]): States that end a valid match.
        transitions (Mapping[tuple[S, str], S]): ``(state, class) -> state``.
            Pairs that are absent are implicit failures.
        classify (Callable[[str], str]): Maps a character to its class.
            Defaults to the identity, i.e. the table is keyed by characters.

    Raises:
        ValueError: If the initial state, an accepting state or a transition
            endpoint is not one of ``states``.
    """

    def __init__(
        self,
        states: Iterable[S],
        initial_state: S,
        accepting_states: Iterable[S],
        transitions: Mapping[tuple[S, str], S],
        classify: Callable[[str], str] | None = None,
    ) -> None:
        self.states: frozenset[S] = frozenset(states)
        self.initial_state = initial_state
        self.accepting_states: frozenset[S] = frozenset(accepting_states)
        self.transitions: Mapping[tuple[S, str], S] = MappingProxyType(
            dict(transitions)
        )
        self.classify: Callable[[str], str] = classify or (lambda ch: ch)

        if initial_state not in self.states:
            raise ValueError(f"Initial state {initial_state!r} is not a known state")
        unknown = self.accepting_states - self.states
        if unknown:
            raise ValueError(
                f"Accepting states {sorted(map(str, unknown))} are not known states"
            )
        for (source, char_class), target in self.transitions.items():
            if source not in self.states or target not in self.states:
                raise ValueError(
                    f"Transition {source!r} --{char_class}--> {target!r} uses an unknown state"
                )

    def __repr__(self) -> str:
        return (
            f"FSM(states={len(self.states)}, initial={self.initial_state!r}, "
            f"transitions={len(self.transitions)})"
        )

    def is_accepting(self, state: S) -> bool:
        return state in self.accepting_states

    def next_state(self, state: S, char: str) -> S | None:
        """Returns the state reached from `state` on `char`, or `NO_NEXT_STATE`."""
        return self.transitions.get((state, self.classify(char)), NO_NEXT_STATE)

    def run(self, text: str, start: int = 0) -> FSMResult:
        """Matches the longest accepted prefix of ``text[start:]``.

        Args:
            text (str): The input. Only ``text[start:]`` is examined.
            start (int, optional): Offset to begin at. Defaults to 0.

        Returns:
            FSMResult: See `FSMResult`.
        """
        state = self.initial_state
        accepted_state: S | None = state if self.is_accepting(state) else None
        accepted_end = start if accepted_state is not None else -1

        position = start
        while position < len(text):
            target = self.next_state(state, text[position])
            if target is NO_NEXT_STATE:
                break
            state = target
            position += 1
            if self.is_accepting(state):
                accepted_state, accepted_end = state, position

        scanned = position - start
        if accepted_state is None:
            return FSMResult(False, text[start:position], state, scanned)
        return FSMResult(True, text[start:accepted_end], accepted_state, scanned)


class NumberState(str, Enum):
    """States of the numeric literal recognizer."""

    INITIAL = "initial"
    INTEGER = "integer"
    BEGIN_FRACTIONAL = "begin_fractional"
    FRACTIONAL = "fractional"
    BEGIN_EXPONENT = "begin_exponent"
    BEGIN_SIGNED_EXPONENT = "begin_signed_exponent"
    EXPONENT = "exponent"


DIGIT = "digit"
POINT = "point"
EXPONENT_MARK = "exponent"
SIGN = "sign"
OTHER = "other"


def classify_number_char(ch: str) -> str:
    """Maps a character to its column in the number transition table."""
    if is_digit(ch):
        return DIGIT
    if ch == ".":
        return POINT
    if ch in ("e", "E"):
        return EXPONENT_MARK
    if ch in ("+", "-"):
        return SIGN
    return OTHER


def build_number_recognizer() -> FSM[NumberState]:
    """Builds the integer / decimal / exponent recognizer."""
    N = NumberState
    transitions = {
        (N.INITIAL, DIGIT): N.INTEGER,
        (N.INITIAL, POINT): N.BEGIN_FRACTIONAL,
        (N.INTEGER, DIGIT): N.INTEGER,
        (N.INTEGER, POINT): N.BEGIN_FRACTIONAL,
        (N.INTEGER, EXPONENT_MARK): N.BEGIN_EXPONENT,
        (N.BEGIN_FRACTIONAL, DIGIT): N.FRACTIONAL,
        (N.FRACTIONAL, DIGIT): N.FRACTIONAL,
        (N.FRACTIONAL, EXPONENT_MARK): N.BEGIN_EXPONENT,
        (N.BEGIN_EXPONENT, SIGN): N.BEGIN_SIGNED_EXPONENT,
        (N.BEGIN_EXPONENT, DIGIT): N.EXPONENT,
        (N.BEGIN_SIGNED_EXPONENT, DIGIT): N.EXPONENT,
        (N.EXPONENT, DIGIT): N.EXPONENT,
    }
    return FSM(
        states=N,
        initial_state=N.INITIAL,
        accepting_states={N.INTEGER, N.FRACTIONAL, N.EXPONENT},
        transitions=transitions,
        classify=classify_number_char,
    )


NUMBER_RECOGNIZER: FSM[NumberState] = build_number_recognizer()


__all__ = [
    "FSM",
    "FSMResult",
    "NO_NEXT_STATE",
    "NUMBER_RECOGNIZER",
    "NumberState",
    "build_number_recognizer",
    "classify_number_char",
]
