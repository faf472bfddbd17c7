"""Tests for kardex.models and kardex.keys."""

from kardex.keys import Direction, Key
from kardex.models import Edge, EdgeKind, FinishedInfo, PendingCard


def test_finished_info_defaults():
    info = FinishedInfo()
    assert info.ease_factor == 2.5
    assert info.interval_days == 0
    assert info.repetitions == 0


def test_pending_card_defaults():
    p = PendingCard(question="q", answer="a", topic_id=1, finished=False)
    assert p.source_id is None
    assert p.finished_info is None
    assert p.edges == []


def test_edges_compare_by_value():
    assert Edge(EdgeKind.DEPENDENT, 42) == Edge(EdgeKind.DEPENDENT, 42)
    assert Edge(EdgeKind.DEPENDENT, 42) != Edge(EdgeKind.DEPENDENCY, 42)


def test_key_kinds():
    assert Key.char("a").is_char
    assert not Key.named("enter").is_char
    assert not Key.alt_chord("f").is_char
    nav = Key.navigate(Direction.UP)
    assert nav.nav is Direction.UP
    assert not nav.is_char
