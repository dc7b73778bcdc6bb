import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///numberguess.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Inclusive range the secret is drawn from
    GUESS_MIN = int(os.environ.get('GUESS_MIN', '1'))
    GUESS_MAX = int(os.environ.get('GUESS_MAX', '100'))
    # Storage key holding the JSON-encoded best score
    HIGH_SCORE_KEY = os.environ.get('HIGH_SCORE_KEY', 'guessTheNumberHighScore')
    # Optional: fixed seed for the secret draw. Unset means OS entropy.
    RANDOM_SEED = int(os.environ['RANDOM_SEED']) if os.environ.get('RANDOM_SEED') else None
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
        ).split(',') if o.strip()
    ]
