from flask import Blueprint, jsonify, request, current_app
from numberguess import db, socketio
from numberguess.models import Game
from numberguess.services.games.messages import feedback_message
from numberguess.services.games.session import GameSession


games = Blueprint('games', __name__)


def _extension():
    return current_app.extensions['numberguess']

def _bounds():
    cfg = current_app.config
    return int(cfg.get('GUESS_MIN', 1)), int(cfg.get('GUESS_MAX', 100))

def _session_for(game: Game) -> GameSession:
    low, high = _bounds()
    return GameSession.from_state(game.to_state(), rng=_extension()['rng'], low=low, high=high)

def _serialize(game: Game):
    low, high = _bounds()
    payload = game.to_dict()
    payload['message'] = feedback_message(game.to_state(), low, high)
    payload['high_score'] = _extension()['high_score'].load()
    payload['range'] = [low, high]
    return payload

def _notify(game: Game) -> None:
    socketio.emit('state_update', {'game_code': game.game_code}, to=f"game:{game.game_code}", namespace='/ws')


@games.errorhandler(404)
def not_found(_error):
    return jsonify({'error': 'Game not found'}), 404


@games.route('/create', methods=['POST'])
def create_game():
    low, high = _bounds()
    session = GameSession(rng=_extension()['rng'], low=low, high=high)
    new_game = Game()
    new_game.apply_state(session.start())
    db.session.add(new_game)
    db.session.commit()
    current_app.logger.info(f"[create] game={new_game.game_code}")
    return jsonify(_serialize(new_game)), 201


@games.route('/high-score', methods=['GET'])
def get_high_score():
    return jsonify({'high_score': _extension()['high_score'].load()})


@games.route('/<string:game_code>/state', methods=['GET'])
def get_game_state(game_code):
    game = Game.query.filter_by(game_code=game_code.upper()).first_or_404()
    return jsonify(_serialize(game))


@games.route('/<string:game_code>/guess', methods=['POST'])
def submit_guess(game_code):
    data = request.get_json(silent=True) or {}
    raw = data.get('guess')

    game = Game.query.filter_by(game_code=game_code.upper()).first_or_404()
    session = _session_for(game)
    was_over = session.state.is_over
    state = session.submit_guess(raw)
    game.apply_state(state)
    db.session.add(game)

    # Winning row and best score commit together
    if state.is_over and not was_over:
        try:
            best = _extension()['high_score'].record_if_better(state.guess_count)
        except Exception:
            db.session.rollback()
            current_app.logger.error(f"[win] game={game_code.upper()} best score not saved, guess rolled back")
            raise
        current_app.logger.info(f"[win] game={game.game_code} guesses={state.guess_count} best={best}")

    db.session.commit()
    current_app.logger.info(
        f"[guess] game={game.game_code} raw={raw!r} feedback={state.last_feedback.value} count={state.guess_count}"
    )
    _notify(game)
    return jsonify(_serialize(game))


@games.route('/<string:game_code>/start', methods=['POST'])
def restart_game(game_code):
    game = Game.query.filter_by(game_code=game_code.upper()).first_or_404()
    session = _session_for(game)
    game.apply_state(session.start())
    db.session.add(game)
    db.session.commit()
    current_app.logger.info(f"[restart] game={game.game_code}")
    _notify(game)
    return jsonify(_serialize(game))
