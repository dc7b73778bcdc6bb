from flask import Blueprint, jsonify, current_app

main = Blueprint('main', __name__)

@main.route('/')
def index():
    cfg = current_app.config
    return jsonify({
        'message': 'Welcome to the Guess the Number server!',
        'range': [cfg.get('GUESS_MIN', 1), cfg.get('GUESS_MAX', 100)],
    })
