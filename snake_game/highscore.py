"""Durable storage for the best score."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Keeps a single high score in a small JSON file."""

    def __init__(self, path):
        self.path = Path(path).expanduser()

    def load(self):
        """Return the stored score, or 0 if it is missing or unreadable."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            score = data["high_score"]
        except FileNotFoundError:
            return 0
        except (OSError, ValueError, TypeError, KeyError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            return 0
        # Only a whole, non-negative JSON number counts; bool is an int subclass.
        if not isinstance(score, int) or isinstance(score, bool) or score < 0:
            logger.warning("Ignoring invalid high score %r in %s", score, self.path)
            return 0
        return score

    def save(self, score):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"high_score": int(score)}), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
