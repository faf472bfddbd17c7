"""EditorState: the question/answer/topic form for one new card."""

import enum

from kardex.context import (ChildOfSource, CreationContext, DependencyOf, DependentOf,
                            Plain, prompt_label)
from kardex.keys import Direction, Key
from kardex.models import EdgeKind
from kardex.widgets import CardPicker, TextField, TopicSelector


class Focus(enum.Enum):
    QUESTION = "question"
    ANSWER = "answer"
    TOPIC = "topic"
    GRAPH_PICKER = "graph_picker"


TRANSITIONS = {
    (Focus.QUESTION, Direction.RIGHT): Focus.TOPIC,
    (Focus.QUESTION, Direction.DOWN): Focus.ANSWER,
    (Focus.ANSWER, Direction.UP): Focus.QUESTION,
    (Focus.ANSWER, Direction.RIGHT): Focus.TOPIC,
    (Focus.TOPIC, Direction.LEFT): Focus.QUESTION,
}

PICKER_KEYS = {"d": EdgeKind.DEPENDENCY, "t": EdgeKind.DEPENDENT}


class EditorState:
    """Owns the widgets and focus for a single card being written.

    Build one with new_editor(); after a successful submit the old
    instance is dropped and a fresh one takes its place.
    """

    def __init__(self, store, context: CreationContext, prompt: str,
                 title_len: int = 15, default_topic: str = ""):
        self.store = store
        self.context = context
        self.prompt = prompt
        self.title_len = title_len
        self.default_topic = default_topic
        self.question = TextField()
        self.answer = TextField()
        self.topics = TopicSelector(store, default_topic)
        self.focus = Focus.QUESTION
        self.picker: CardPicker | None = None
        self._picker_kind: EdgeKind | None = None

    def current_focus_area(self) -> Focus:
        return self.focus

    def navigate(self, direction: Direction):
        self.focus = TRANSITIONS.get((self.focus, direction), self.focus)

    def handle_key(self, key: Key):
        if key.nav is not None:
            self.navigate(key.nav)
        elif key.alt and key.code in PICKER_KEYS:
            self.open_graph_picker(PICKER_KEYS[key.code])
        elif self.focus is Focus.QUESTION:
            self.question.handle_key(key)
        elif self.focus is Focus.ANSWER:
            self.answer.handle_key(key)
        elif self.focus is Focus.TOPIC:
            self.topics.handle_key(key)
        elif self.focus is Focus.GRAPH_PICKER:
            self._picker_key(key)

    def open_graph_picker(self, kind: EdgeKind):
        # a card sourced from a reading item never carries card edges
        if isinstance(self.context, ChildOfSource):
            return
        self.picker = CardPicker(self.store)
        self._picker_kind = kind
        self.focus = Focus.GRAPH_PICKER

    def _picker_key(self, key: Key):
        self.picker.handle_key(key)
        if self.picker.picked is not None:
            self.link(self.picker.picked, self._picker_kind)
            self._close_picker()
        elif self.picker.cancelled:
            self._close_picker()

    def _close_picker(self):
        self.picker = None
        self._picker_kind = None
        self.focus = Focus.QUESTION

    def link(self, card_id: int, kind: EdgeKind):
        """Point the new card at an existing one, widening or switching the context."""
        if kind is EdgeKind.DEPENDENCY:
            variant = DependencyOf
        else:
            variant = DependentOf
        ids = self.context.card_ids if isinstance(self.context, variant) else ()
        if card_id not in ids:
            ids = ids + (card_id,)
        context = variant(ids)
        self.prompt = prompt_label(context, self.store, self.title_len)
        self.context = context


def new_editor(store, context: CreationContext | None = None,
               title_len: int = 15, default_topic: str = "") -> EditorState:
    """Build a fresh editor; raises ConstructionError on a dangling reference."""
    if context is None:
        context = Plain()
    prompt = prompt_label(context, store, title_len)
    return EditorState(store, context, prompt, title_len, default_topic)


def editor_from_settings(store, settings: dict,
                         context: CreationContext | None = None) -> EditorState:
    return new_editor(store, context,
                      title_len=int(settings.get("source_title_len", 15)),
                      default_topic=settings.get("default_topic", ""))
