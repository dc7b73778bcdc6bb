"""Best-score tracking.

The best score is the fewest guesses needed to win, kept as a JSON-encoded
integer under a single storage key. Anything unreadable under that key counts
as "no best score yet" so a damaged store never stops a game.
"""

import json
import logging
from typing import Dict, Optional

from numberguess import db
from numberguess.models import StoredValue

logger = logging.getLogger(__name__)

DEFAULT_KEY = 'guessTheNumberHighScore'


class MemoryStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class DatabaseStorage:
    """Key/value storage on the ``stored_value`` table. Needs an app context."""

    def get(self, key: str) -> Optional[str]:
        row = db.session.get(StoredValue, key)
        return row.value if row else None

    def set(self, key: str, value: str) -> None:
        row = db.session.get(StoredValue, key)
        if row is None:
            row = StoredValue(key=key)
        row.value = value
        db.session.add(row)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise


def _decode_score(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("[high-score] ignoring unparsable stored value %r", raw)
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        logger.warning("[high-score] ignoring non-score stored value %r", raw)
        return None
    return value


class ScorePersistence:
    def __init__(self, storage, key: str = DEFAULT_KEY):
        self.storage = storage
        self.key = key
        self._best: Optional[int] = None
        self._loaded = False

    def load(self) -> Optional[int]:
        """Return the stored best score, reading storage until a read succeeds.

        A failed read reports no best score but is not cached, so the next
        call tries storage again.
        """
        if not self._loaded:
            try:
                raw = self.storage.get(self.key)
            except Exception:
                logger.warning("[high-score] storage read failed, reporting no best score", exc_info=True)
                return None
            self._best = _decode_score(raw)
            self._loaded = True
        return self._best

    def record_if_better(self, count: int) -> int:
        best = self.load()
        if not self._loaded:
            # Without a successful read a write could replace a better score
            logger.warning("[high-score] not recording %s, stored best is unreadable", count)
            return count
        if best is not None and count >= best:
            return best
        self.storage.set(self.key, json.dumps(count))
        self._best = count
        logger.info("[high-score] new best %s (was %s)", count, best)
        return count
