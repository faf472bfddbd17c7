"""Shared test fixtures."""

import pytest

from kardex.app import App
from kardex.store import Store


def insert_topic(conn, topic_id, name):
    conn.execute("INSERT INTO topics (id, name) VALUES (?, ?)", (topic_id, name))
    conn.commit()


def insert_source(conn, source_id, title, topic_id):
    conn.execute("INSERT INTO sources (id, title, topic_id) VALUES (?, ?, ?)",
                 (source_id, title, topic_id))
    conn.commit()


def insert_card(conn, card_id, question, topic_id, answer="", status="finished"):
    conn.execute(
        "INSERT INTO cards (id, question, answer, topic_id, status) VALUES (?, ?, ?, ?, ?)",
        (card_id, question, answer, topic_id, status))
    conn.commit()


@pytest.fixture
def store():
    """Store over an in-memory database with the schema applied."""
    s = Store.open(":memory:")
    yield s
    s.close()


@pytest.fixture
def graph(store):
    """Store seeded with three topics, one source and a few cards.

    topics: 1 general, 3 arithmetic, 7 biology
    source 5 "The Selfish Gene and other essays" (topic 7)
    cards: 10 "What is a gene?" (7), 11 "What is DNA?" (7), 42 "What is a cell?" (7)
    """
    conn = store.conn
    insert_topic(conn, 1, "general")
    insert_topic(conn, 3, "arithmetic")
    insert_topic(conn, 7, "biology")
    insert_source(conn, 5, "The Selfish Gene and other essays", 7)
    insert_card(conn, 10, "What is a gene?", 7)
    insert_card(conn, 11, "What is DNA?", 7)
    insert_card(conn, 42, "What is a cell?", 7)
    return store


@pytest.fixture
def tmp_kardex_dir(tmp_path):
    kardex_dir = tmp_path / "kardex_dir"
    kardex_dir.mkdir()
    return kardex_dir


@pytest.fixture
def app(tmp_kardex_dir):
    """App instance with tmp kardex_dir and in-memory DB."""
    a = App(kardex_dir=tmp_kardex_dir)
    a.open_store(":memory:")
    yield a
    a.close()
