"""Single-player guessing session.

A session holds a secret drawn from an inclusive range and narrates each
guess as too low, too high or correct. It has two states: active (accepting
guesses) and over (rejecting them until ``start()`` is called again).
"""

import random
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union


class Feedback(str, Enum):
    PROMPT = 'prompt'
    INVALID = 'invalid'
    TOO_LOW = 'too_low'
    TOO_HIGH = 'too_high'
    WON = 'won'


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class InvalidGuess(ValueError):
    """Raw input that is not an integer inside the session range."""


@dataclass(frozen=True)
class SessionState:
    secret: int
    guess_count: int = 0
    is_over: bool = False
    last_feedback: Feedback = Feedback.PROMPT


def parse_guess(raw: Union[str, int, float], low: int, high: int) -> int:
    """Parse ``raw`` as an integer in ``[low, high]`` or raise InvalidGuess.

    Strings are read like a browser reads a number field: optional leading
    whitespace and sign, then the leading ASCII digits. Anything after them
    is ignored, so ``"4.5"`` is 4 and ``"1e2"`` is 1.
    """
    if isinstance(raw, bool):
        raise InvalidGuess(f'not a number: {raw!r}')
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if not match:
            raise InvalidGuess(f'not a number: {raw!r}')
        value = int(match.group(1))
    if value < low or value > high:
        raise InvalidGuess(f'{value} is outside {low}-{high}')
    return value


class GameSession:
    def __init__(self, rng: Optional[random.Random] = None, low: int = 1, high: int = 100):
        if low > high:
            raise ValueError(f'empty guess range {low}-{high}')
        self.rng = rng or random.Random()
        self.low = low
        self.high = high
        self._state: Optional[SessionState] = None

    @classmethod
    def from_state(cls, state: SessionState, rng: Optional[random.Random] = None,
                   low: int = 1, high: int = 100) -> 'GameSession':
        """Resume a session from a stored snapshot."""
        session = cls(rng=rng, low=low, high=high)
        session._state = state
        return session

    @property
    def state(self) -> SessionState:
        # Only start() and from_state() create a session
        if self._state is None:
            raise RuntimeError('session has not been started')
        return self._state

    def start(self) -> SessionState:
        self._state = SessionState(secret=self.rng.randint(self.low, self.high))
        return self._state

    def submit_guess(self, raw: Union[str, int, None]) -> SessionState:
        """Apply one guess and return the resulting state.

        Blank input and guesses after a win leave the state untouched. Input
        that is not a number in range sets INVALID without using a turn.
        """
        state = self.state
        if state.is_over or raw is None or (isinstance(raw, str) and not raw.strip()):
            return state

        try:
            guess = parse_guess(raw, self.low, self.high)
        except InvalidGuess:
            self._state = replace(state, last_feedback=Feedback.INVALID)
            return self._state

        count = state.guess_count + 1
        if guess == state.secret:
            self._state = replace(state, guess_count=count, is_over=True, last_feedback=Feedback.WON)
        elif guess < state.secret:
            self._state = replace(state, guess_count=count, last_feedback=Feedback.TOO_LOW)
        else:
            self._state = replace(state, guess_count=count, last_feedback=Feedback.TOO_HIGH)
        return self._state
