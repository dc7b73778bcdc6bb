from .session import Feedback, SessionState


def feedback_message(state: SessionState, low: int = 1, high: int = 100) -> str:
    """Human-readable text for the session's last feedback."""
    feedback = state.last_feedback
    if feedback == Feedback.WON:
        return f'You got it in {state.guess_count} guesses!'
    if feedback == Feedback.TOO_LOW:
        return 'Too low! Try again.'
    if feedback == Feedback.TOO_HIGH:
        return 'Too high! Try again.'
    if feedback == Feedback.INVALID:
        return f'Please enter a valid number between {low} and {high}.'
    return f'Guess a number between {low} and {high}.'
