"""Store: the single, lock-guarded handle every lookup and write goes through."""

import pathlib
import sqlite3
import threading

from kardex.db import init_db
from kardex.errors import NotFound, StorageError
from kardex.models import CardRecord, EdgeKind, PendingCard, Topic


class Store:
    """Wraps one SQLite connection.

    Every public method takes the lock for the duration of its query and
    releases it before returning, so two editors sharing a store never
    interleave reads and writes on the connection.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self._lock = threading.Lock()

    @classmethod
    def open(cls, db_path: pathlib.Path | str) -> "Store":
        return cls(init_db(db_path))

    def close(self):
        with self._lock:
            self.conn.close()

    # -- lookups ----------------------------------------------------------

    def _read(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        with self._lock:
            try:
                return self.conn.execute(sql, params).fetchall()
            except sqlite3.Error as e:
                raise StorageError(str(e)) from e

    def fetch_card(self, card_id: int) -> CardRecord:
        rows = self._read(
            "SELECT id, question, answer, topic_id, status, source_id FROM cards WHERE id=?",
            (card_id,))
        if not rows:
            raise NotFound("card", card_id)
        return CardRecord(**dict(rows[0]))

    def fetch_source_topic(self, source_id: int) -> int:
        rows = self._read("SELECT topic_id FROM sources WHERE id=?", (source_id,))
        if not rows:
            raise NotFound("source", source_id)
        return rows[0]["topic_id"]

    def fetch_source_title(self, source_id: int, max_len: int) -> str:
        rows = self._read("SELECT title FROM sources WHERE id=?", (source_id,))
        if not rows:
            raise NotFound("source", source_id)
        return rows[0]["title"][:max_len]

    def list_topics(self) -> list[Topic]:
        rows = self._read("SELECT id, name FROM topics ORDER BY id")
        return [Topic(id=r["id"], name=r["name"]) for r in rows]

    def search_cards(self, text: str, limit: int = 10) -> list[CardRecord]:
        pattern = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        rows = self._read("""
            SELECT id, question, answer, topic_id, status, source_id FROM cards
            WHERE question LIKE ? ESCAPE '\\' ORDER BY id LIMIT ?
        """, (f"%{pattern}%", limit))
        return [CardRecord(**dict(r)) for r in rows]

    def fetch_edges(self, card_id: int) -> dict[str, list[int]]:
        """Return {"dependencies": [...], "dependents": [...]} for a card."""
        deps = self._read(
            "SELECT dependency_id FROM card_relations WHERE dependent_id=? ORDER BY dependency_id",
            (card_id,))
        dependents = self._read(
            "SELECT dependent_id FROM card_relations WHERE dependency_id=? ORDER BY dependent_id",
            (card_id,))
        return {
            "dependencies": [r["dependency_id"] for r in deps],
            "dependents": [r["dependent_id"] for r in dependents],
        }

    def fetch_finished_info(self, card_id: int) -> dict | None:
        rows = self._read(
            "SELECT ease_factor, interval_days, repetitions FROM finished_info WHERE card_id=?",
            (card_id,))
        return dict(rows[0]) if rows else None

    def counts(self) -> dict:
        """Card, edge and per-topic totals for the status command."""
        total = self._read("SELECT COUNT(*) as cnt FROM cards")[0]["cnt"]
        finished = self._read(
            "SELECT COUNT(*) as cnt FROM cards WHERE status = 'finished'")[0]["cnt"]
        sourced = self._read(
            "SELECT COUNT(*) as cnt FROM cards WHERE source_id IS NOT NULL")[0]["cnt"]
        edges = self._read("SELECT COUNT(*) as cnt FROM card_relations")[0]["cnt"]
        topics = self._read("""
            SELECT t.name, COUNT(c.id) as cnt
            FROM topics t LEFT JOIN cards c ON c.topic_id = t.id
            GROUP BY t.id ORDER BY t.name
        """)
        return {
            "total": total,
            "finished": finished,
            "sourced": sourced,
            "edges": edges,
            "topics": [(r["name"], r["cnt"]) for r in topics],
        }

    # -- writes -----------------------------------------------------------

    def add_topic(self, name: str) -> int:
        with self._lock:
            try:
                cur = self.conn.execute("INSERT INTO topics (name) VALUES (?)", (name,))
                self.conn.commit()
            except sqlite3.Error as e:
                self.conn.rollback()
                raise StorageError(str(e)) from e
        return cur.lastrowid

    def add_source(self, title: str, topic_id: int) -> int:
        with self._lock:
            try:
                cur = self.conn.execute(
                    "INSERT INTO sources (title, topic_id) VALUES (?, ?)", (title, topic_id))
                self.conn.commit()
            except sqlite3.Error as e:
                self.conn.rollback()
                raise StorageError(str(e)) from e
        return cur.lastrowid

    def write_card_with_edges(self, pending: PendingCard) -> int:
        """Insert the card, its completion metadata and all its edges in one transaction."""
        status = "finished" if pending.finished else "unfinished"
        with self._lock:
            try:
                cur = self.conn.execute("""
                    INSERT INTO cards (question, answer, topic_id, source_id, status)
                    VALUES (?, ?, ?, ?, ?)
                """, (pending.question, pending.answer, pending.topic_id,
                      pending.source_id, status))
                card_id = cur.lastrowid
                if pending.finished_info is not None:
                    info = pending.finished_info
                    self.conn.execute("""
                        INSERT INTO finished_info (card_id, ease_factor, interval_days, repetitions)
                        VALUES (?, ?, ?, ?)
                    """, (card_id, info.ease_factor, info.interval_days, info.repetitions))
                for edge in pending.edges:
                    if edge.kind is EdgeKind.DEPENDENCY:
                        pair = (edge.target, card_id)
                    else:
                        pair = (card_id, edge.target)
                    self.conn.execute(
                        "INSERT INTO card_relations (dependent_id, dependency_id) VALUES (?, ?)",
                        pair)
                self.conn.commit()
            except sqlite3.Error as e:
                self.conn.rollback()
                raise StorageError(str(e)) from e
        return card_id
