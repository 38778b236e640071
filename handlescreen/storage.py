"""Training corpus persistence: labeled (normalized text, intent) pairs in SQLite.
Every mutation commits on its own, so one confirmation is one atomic write."""

import os, sqlite3, time
from typing import List, Optional, Tuple

from .labels import LABELS


def _check(intent: str):
    if intent not in LABELS:
        raise ValueError(f"unknown intent {intent!r}; expected one of {LABELS}")


class TrainingCorpus:
    def __init__(self, db_file: str):
        d = os.path.dirname(db_file)
        if d:
            os.makedirs(d, exist_ok=True)
        self.db_file = db_file
        self._init()

    def _conn(self):
        con = sqlite3.connect(self.db_file)
        con.execute("PRAGMA journal_mode=WAL;")
        return con

    def _init(self):
        con = self._conn()
        con.execute("""
        CREATE TABLE IF NOT EXISTS examples(
            text TEXT NOT NULL, intent TEXT NOT NULL, created_at INTEGER,
            PRIMARY KEY (text, intent)
        );
        """)
        con.commit(); con.close()

    def contains(self, text: str, intent: str) -> bool:
        _check(intent)
        con = self._conn()
        row = con.execute("SELECT 1 FROM examples WHERE text=? AND intent=?", (text, intent)).fetchone()
        con.close()
        return row is not None

    def add(self, text: str, intent: str):
        """No-op when the pair is already stored."""
        _check(intent)
        con = self._conn()
        con.execute("INSERT OR IGNORE INTO examples VALUES(?,?,?)", (text, intent, int(time.time())))
        con.commit(); con.close()

    def remove(self, text: str, intent: str):
        _check(intent)
        con = self._conn()
        con.execute("DELETE FROM examples WHERE text=? AND intent=?", (text, intent))
        con.commit(); con.close()

    def list_by_intent(self, intent: str) -> List[str]:
        _check(intent)
        con = self._conn()
        rows = con.execute("SELECT text FROM examples WHERE intent=? ORDER BY created_at, rowid", (intent,)).fetchall()
        con.close()
        return [r[0] for r in rows]

    def label_of(self, text: str) -> Optional[str]:
        for intent in LABELS:
            if self.contains(text, intent):
                return intent
        return None

    def examples(self) -> List[Tuple[str, str]]:
        con = self._conn()
        rows = con.execute("SELECT text, intent FROM examples ORDER BY created_at, rowid").fetchall()
        con.close()
        return [(t, i) for t, i in rows]

    def __len__(self):
        con = self._conn()
        (n,) = con.execute("SELECT COUNT(*) FROM examples").fetchone()
        con.close()
        return n
