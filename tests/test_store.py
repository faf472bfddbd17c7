"""Tests for kardex.store."""

import pytest

from kardex.errors import NotFound, StorageError
from kardex.models import Edge, EdgeKind, FinishedInfo, PendingCard

from conftest import insert_card


def _count(store, table):
    return store.conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def test_fetch_card(graph):
    card = graph.fetch_card(10)
    assert card.question == "What is a gene?"
    assert card.topic_id == 7
    assert card.source_id is None


def test_fetch_card_missing(graph):
    with pytest.raises(NotFound) as exc:
        graph.fetch_card(999)
    assert exc.value.kind == "card"
    assert exc.value.item_id == 999


def test_fetch_source_topic(graph):
    assert graph.fetch_source_topic(5) == 7


def test_fetch_source_missing(graph):
    with pytest.raises(NotFound):
        graph.fetch_source_topic(6)
    with pytest.raises(NotFound):
        graph.fetch_source_title(6, 15)


def test_fetch_source_title_truncates(graph):
    assert graph.fetch_source_title(5, 15) == "The Selfish Gen"
    assert graph.fetch_source_title(5, 100) == "The Selfish Gene and other essays"


def test_add_and_list_topics(store):
    a = store.add_topic("math")
    b = store.add_topic("history")
    assert [(t.id, t.name) for t in store.list_topics()] == [(a, "math"), (b, "history")]


def test_duplicate_topic_raises_storage_error(store):
    store.add_topic("math")
    with pytest.raises(StorageError):
        store.add_topic("math")


def test_add_source_unknown_topic(store):
    with pytest.raises(StorageError):
        store.add_source("Orphan", 99)


def test_search_cards(graph):
    found = graph.search_cards("DNA")
    assert [c.id for c in found] == [11]
    assert len(graph.search_cards("")) == 3
    assert len(graph.search_cards("", limit=2)) == 2


def test_write_plain_card(graph):
    pending = PendingCard(question="2+2?", answer="4", topic_id=3, finished=True,
                          finished_info=FinishedInfo())
    card_id = graph.write_card_with_edges(pending)
    card = graph.fetch_card(card_id)
    assert card.status == "finished"
    assert card.source_id is None
    assert graph.fetch_finished_info(card_id) == {
        "ease_factor": 2.5, "interval_days": 0, "repetitions": 0}
    assert graph.fetch_edges(card_id) == {"dependencies": [], "dependents": []}


def test_write_unfinished_card_has_no_metadata(graph):
    pending = PendingCard(question="q", answer="a", topic_id=1, finished=False)
    card_id = graph.write_card_with_edges(pending)
    assert graph.fetch_card(card_id).status == "unfinished"
    assert graph.fetch_finished_info(card_id) is None


def test_write_edges_direction(graph):
    dependency = PendingCard(question="What is a base pair?", answer="", topic_id=7,
                             finished=False, edges=[Edge(EdgeKind.DEPENDENCY, 11)])
    new_id = graph.write_card_with_edges(dependency)
    assert graph.fetch_edges(11)["dependencies"] == [new_id]
    assert graph.fetch_edges(new_id)["dependents"] == [11]

    dependent = PendingCard(question="What is a genome?", answer="", topic_id=7,
                            finished=False, edges=[Edge(EdgeKind.DEPENDENT, 10)])
    other_id = graph.write_card_with_edges(dependent)
    assert graph.fetch_edges(other_id)["dependencies"] == [10]
    assert graph.fetch_edges(10)["dependents"] == [other_id]


def test_write_is_atomic(graph):
    """A failing edge leaves neither the card nor any of its edges behind."""
    cards_before = _count(graph, "cards")
    pending = PendingCard(question="q", answer="a", topic_id=7, finished=True,
                          finished_info=FinishedInfo(),
                          edges=[Edge(EdgeKind.DEPENDENCY, 10), Edge(EdgeKind.DEPENDENCY, 999)])
    with pytest.raises(StorageError):
        graph.write_card_with_edges(pending)
    assert _count(graph, "cards") == cards_before
    assert _count(graph, "card_relations") == 0
    assert _count(graph, "finished_info") == 0


def test_write_with_source(graph):
    pending = PendingCard(question="q", answer="a", topic_id=7, finished=False, source_id=5)
    card_id = graph.write_card_with_edges(pending)
    assert graph.fetch_card(card_id).source_id == 5


def test_search_treats_wildcards_literally(graph):
    insert_card(graph.conn, 50, "Is 100% of DNA coding?", 7)
    insert_card(graph.conn, 51, "What does snake_case mean?", 1)
    assert [c.id for c in graph.search_cards("%")] == [50]
    assert [c.id for c in graph.search_cards("_")] == [51]
    assert [c.id for c in graph.search_cards("e_c")] == [51]
    assert graph.search_cards("\\") == []


def test_read_failure_raises_storage_error(graph):
    graph.conn.execute("ALTER TABLE sources RENAME TO sources_old")
    graph.conn.commit()
    with pytest.raises(StorageError):
        graph.fetch_source_topic(5)
    with pytest.raises(StorageError):
        graph.fetch_source_title(5, 15)


def test_counts(graph):
    graph.write_card_with_edges(PendingCard(
        question="q", answer="a", topic_id=7, finished=False, source_id=5,
        edges=[]))
    graph.write_card_with_edges(PendingCard(
        question="r", answer="b", topic_id=7, finished=True,
        finished_info=FinishedInfo(), edges=[Edge(EdgeKind.DEPENDENT, 10)]))
    counts = graph.counts()
    assert counts["total"] == 5
    assert counts["finished"] == 4
    assert counts["sourced"] == 1
    assert counts["edges"] == 1
    assert counts["topics"] == [("arithmetic", 0), ("biology", 5), ("general", 0)]
