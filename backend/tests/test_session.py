import random

import pytest

from numberguess.services.games.session import (
    Feedback,
    GameSession,
    InvalidGuess,
    SessionState,
    parse_guess,
)
from conftest import FixedRandom


def make_session(secret=42):
    session = GameSession(rng=FixedRandom(secret))
    session.start()
    return session


def test_start_resets_state():
    session = make_session()
    session.submit_guess('42')
    state = session.start()
    assert state.guess_count == 0
    assert state.is_over is False
    assert state.last_feedback == Feedback.PROMPT


def test_seeded_secret_is_reproducible_and_in_range():
    a = GameSession(rng=random.Random(7)).start()
    b = GameSession(rng=random.Random(7)).start()
    assert a.secret == b.secret
    assert 1 <= a.secret <= 100


def test_secret_stays_in_custom_range():
    session = GameSession(rng=random.Random(3), low=5, high=6)
    for _ in range(20):
        assert session.start().secret in (5, 6)


def test_empty_range_rejected():
    with pytest.raises(ValueError):
        GameSession(low=10, high=9)


def test_unstarted_session_has_no_state():
    session = GameSession(rng=FixedRandom(9))
    with pytest.raises(RuntimeError):
        session.state
    with pytest.raises(RuntimeError):
        session.submit_guess('9')
    assert session.start().secret == 9


def test_scenario_secret_42():
    session = make_session(42)

    state = session.submit_guess('50')
    assert state.last_feedback == Feedback.TOO_HIGH
    assert state.guess_count == 1

    state = session.submit_guess('10')
    assert state.last_feedback == Feedback.TOO_LOW
    assert state.guess_count == 2

    state = session.submit_guess('42')
    assert state.last_feedback == Feedback.WON
    assert state.guess_count == 3
    assert state.is_over is True


@pytest.mark.parametrize('raw', ['abc', '150', '0', '-3', '101', '.5', 'e5', '\uff14\uff12'])
def test_invalid_input_does_not_use_a_turn(raw):
    session = make_session()
    state = session.submit_guess(raw)
    assert state.last_feedback == Feedback.INVALID
    assert state.guess_count == 0
    assert state.is_over is False


@pytest.mark.parametrize('raw', ['', '   ', None])
def test_blank_input_is_a_noop(raw):
    session = make_session()
    session.submit_guess('10')
    before = session.state
    assert session.submit_guess(raw) == before


def test_invalid_after_valid_keeps_count():
    session = make_session()
    session.submit_guess('10')
    state = session.submit_guess('nope')
    assert state.guess_count == 1
    assert state.last_feedback == Feedback.INVALID


def test_boundaries_are_valid_guesses():
    session = make_session(50)
    assert session.submit_guess('1').last_feedback == Feedback.TOO_LOW
    assert session.submit_guess('100').last_feedback == Feedback.TOO_HIGH
    assert session.state.guess_count == 2


def test_whitespace_around_number_is_accepted():
    session = make_session(42)
    assert session.submit_guess(' 42 ').last_feedback == Feedback.WON


def test_integer_guesses_are_accepted():
    session = make_session(42)
    assert session.submit_guess(41).last_feedback == Feedback.TOO_LOW
    assert session.submit_guess(True).last_feedback == Feedback.INVALID
    assert session.state.guess_count == 1


def test_guesses_after_win_are_ignored():
    session = make_session(42)
    won = session.submit_guess('42')
    assert session.submit_guess('10') == won
    assert session.submit_guess('abc') == won
    assert session.state.guess_count == 1
    assert session.state.last_feedback == Feedback.WON


def test_start_after_win_reopens_session():
    session = GameSession(rng=random.Random(11))
    state = session.start()
    session.submit_guess(str(state.secret))
    assert session.state.is_over
    fresh = session.start()
    assert fresh.is_over is False
    assert session.submit_guess('1').guess_count == 1


def test_every_wrong_guess_points_towards_secret():
    for secret in (1, 37, 100):
        session = make_session(secret)
        for guess in range(1, 101):
            if guess == secret:
                continue
            state = session.submit_guess(str(guess))
            expected = Feedback.TOO_LOW if guess < secret else Feedback.TOO_HIGH
            assert state.last_feedback == expected
        assert session.state.guess_count == 99
        assert not session.state.is_over


def test_from_state_resumes_snapshot():
    snapshot = SessionState(secret=7, guess_count=2, last_feedback=Feedback.TOO_LOW)
    session = GameSession.from_state(snapshot)
    state = session.submit_guess('7')
    assert state.guess_count == 3
    assert state.last_feedback == Feedback.WON


def test_parse_guess():
    assert parse_guess('17', 1, 100) == 17
    with pytest.raises(InvalidGuess):
        parse_guess('a17', 1, 100)
    with pytest.raises(InvalidGuess):
        parse_guess('200', 1, 100)


@pytest.mark.parametrize('raw, feedback', [
    ('4.5', Feedback.TOO_LOW),
    ('42abc', Feedback.WON),
    ('1e2', Feedback.TOO_LOW),
    ('1_00', Feedback.TOO_LOW),
    ('+42', Feedback.WON),
    (4.5, Feedback.TOO_LOW),
])
def test_leading_digits_are_the_guess(raw, feedback):
    session = make_session(42)
    state = session.submit_guess(raw)
    assert state.last_feedback == feedback
    assert state.guess_count == 1


def test_parse_guess_reads_leading_ascii_digits():
    assert parse_guess('  7 apples', 1, 100) == 7
    assert parse_guess('99.9', 1, 100) == 99
    with pytest.raises(InvalidGuess):
        parse_guess('４２', 1, 100)
    with pytest.raises(InvalidGuess):
        parse_guess('-0', 1, 100)
