"""
storage.py: Persistence layer for the high score and the shield key binding.
"""

import logging
import sqlite3
from typing import Optional

from .constants import DEFAULT_ABILITY_KEY

logger = logging.getLogger(__name__)

DB_FILE = "flappy_shield.db"


class Database:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates tables if they don't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                best INTEGER DEFAULT 0
            )
        """)
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                name TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.cur.execute("INSERT OR IGNORE INTO Scores (id, best) VALUES (1, 0)")
        self.conn.commit()

    def get_high_score(self) -> int:
        try:
            self.cur.execute("SELECT best FROM Scores WHERE id = 1")
            row = self.cur.fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read high score: %s", e)
            return 0
        return int(row[0]) if row else 0

    def set_high_score(self, score: int):
        """Stores ``score`` if it beats the stored best."""
        try:
            self.cur.execute(
                "UPDATE Scores SET best = MAX(best, ?) WHERE id = 1", (int(score),))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not save high score %d: %s", score, e)

    def _get_setting(self, name: str) -> Optional[str]:
        try:
            self.cur.execute("SELECT value FROM Settings WHERE name = ?", (name,))
            row = self.cur.fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read setting %s: %s", name, e)
            return None
        return row[0] if row else None

    def _set_setting(self, name: str, value: str):
        try:
            self.cur.execute(
                "INSERT OR REPLACE INTO Settings (name, value) VALUES (?, ?)", (name, value))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not save setting %s: %s", name, e)

    def load_ability_key(self) -> str:
        return self._get_setting("ability_key") or DEFAULT_ABILITY_KEY

    def save_ability_key(self, code: str):
        self._set_setting("ability_key", code)

    def close(self):
        self.conn.close()
