from numberguess import db
from numberguess.services.games.session import Feedback, SessionState
import string
import random


def generate_game_code(length=4):
    """Generate a unique, short game code."""
    while True:
        code = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))
        if not Game.query.filter_by(game_code=code).first():
            return code


class Game(db.Model):
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    game_code = db.Column(db.String(4), unique=True, index=True)
    secret = db.Column(db.Integer, nullable=False)
    guess_count = db.Column(db.Integer, default=0, nullable=False)
    is_over = db.Column(db.Boolean, default=False, nullable=False)
    last_feedback = db.Column(db.String(16), default=Feedback.PROMPT.value, nullable=False)

    def __init__(self, **kwargs):
        super(Game, self).__init__(**kwargs)
        if not self.game_code:
            self.game_code = generate_game_code()

    def to_state(self) -> SessionState:
        return SessionState(
            secret=self.secret,
            guess_count=self.guess_count or 0,
            is_over=bool(self.is_over),
            last_feedback=Feedback(self.last_feedback or Feedback.PROMPT.value),
        )

    def apply_state(self, state: SessionState) -> None:
        self.secret = state.secret
        self.guess_count = state.guess_count
        self.is_over = state.is_over
        self.last_feedback = state.last_feedback.value

    def to_dict(self):
        # The secret stays server-side
        return {
            'id': self.id,
            'game_code': self.game_code,
            'guess_count': self.guess_count,
            'is_over': self.is_over,
            'feedback': self.last_feedback,
        }


class StoredValue(db.Model):
    __tablename__ = 'stored_value'
    key = db.Column(db.String(64), primary_key=True)
    value = db.Column(db.Text, nullable=True)
