import os
import sys
import pytest

# Ensure the backend root (containing the `numberguess` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from numberguess import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    GUESS_MIN = 1
    GUESS_MAX = 100
    HIGH_SCORE_KEY = 'guessTheNumberHighScore'
    RANDOM_SEED = 1234
    CORS_ORIGINS = ['http://localhost:5173']


class FixedRandom:
    """Stands in for random.Random; always draws the same secret."""

    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        return self.value


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import numberguess.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def fixed_secret(flask_app):
    """Make every new secret in the app equal 42."""
    flask_app.extensions['numberguess']['rng'] = FixedRandom(42)
    return 42


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
