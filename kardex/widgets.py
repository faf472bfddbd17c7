"""Input widgets owned by the editor: text fields, topic list, card picker."""

from kardex.keys import Key
from kardex.models import CardRecord, Topic


class TextField:
    def __init__(self, text: str = ""):
        self.text = text
        self.cursor = len(text)

    def get_text(self) -> str:
        return self.text

    def replace_text(self, text: str):
        self.text = text
        self.cursor = len(text)

    def return_text(self) -> str:
        return str(self.text)

    def handle_key(self, key: Key):
        if key.is_char:
            self._insert(key.code)
        elif key.alt or key.nav is not None:
            return
        elif key.code == "enter":
            self._insert("\n")
        elif key.code == "backspace":
            if self.cursor > 0:
                self.text = self.text[:self.cursor - 1] + self.text[self.cursor:]
                self.cursor -= 1
        elif key.code == "delete":
            self.text = self.text[:self.cursor] + self.text[self.cursor + 1:]
        elif key.code == "left":
            self.cursor = max(0, self.cursor - 1)
        elif key.code == "right":
            self.cursor = min(len(self.text), self.cursor + 1)
        elif key.code == "home":
            self.cursor = self.text.rfind("\n", 0, self.cursor) + 1
        elif key.code == "end":
            end = self.text.find("\n", self.cursor)
            self.cursor = len(self.text) if end == -1 else end

    def _insert(self, s: str):
        self.text = self.text[:self.cursor] + s + self.text[self.cursor:]
        self.cursor += len(s)


class TopicSelector:
    """Navigable list over the topics table."""

    def __init__(self, store, default_topic: str = ""):
        self.store = store
        self.default_topic = default_topic
        self.topics: list[Topic] = []
        self.index: int | None = None
        self.reload()

    def reload(self):
        self.topics = self.store.list_topics()
        self.index = self._default_index()

    def _default_index(self) -> int | None:
        if not self.topics:
            return None
        for i, topic in enumerate(self.topics):
            if topic.name == self.default_topic:
                return i
        return 0

    def selected_id(self) -> int | None:
        if self.index is None:
            return None
        return self.topics[self.index].id

    def select(self, topic_id: int):
        for i, topic in enumerate(self.topics):
            if topic.id == topic_id:
                self.index = i
                return
        raise ValueError(f"Topic {topic_id} is not in the list")

    def next(self):
        if self.topics:
            self.index = 0 if self.index is None else min(self.index + 1, len(self.topics) - 1)

    def previous(self):
        if self.topics:
            self.index = 0 if self.index is None else max(self.index - 1, 0)

    def handle_key(self, key: Key):
        if key.alt or key.nav is not None:
            return
        if key.code in ("down", "j"):
            self.next()
        elif key.code in ("up", "k"):
            self.previous()


class CardPicker:
    """Search box over existing cards; Enter picks the highlighted one."""

    def __init__(self, store, limit: int = 10):
        self.store = store
        self.limit = limit
        self.query = TextField()
        self.matches: list[CardRecord] = []
        self.index = 0
        self.picked: int | None = None
        self.cancelled = False
        self._refresh()

    def _refresh(self):
        self.matches = self.store.search_cards(self.query.get_text(), self.limit)
        self.index = 0

    def highlighted(self) -> CardRecord | None:
        if not self.matches:
            return None
        return self.matches[self.index]

    def handle_key(self, key: Key):
        if key.alt or key.nav is not None:
            return
        if key.code == "escape":
            self.cancelled = True
        elif key.code == "enter":
            card = self.highlighted()
            if card is not None:
                self.picked = card.id
        elif key.code == "down":
            if self.matches:
                self.index = min(self.index + 1, len(self.matches) - 1)
        elif key.code == "up":
            self.index = max(self.index - 1, 0)
        else:
            before = self.query.get_text()
            self.query.handle_key(key)
            if self.query.get_text() != before:
                self._refresh()
