"""AddCardScreen: the tab that hosts the authoring workflow."""

from kardex.context import CreationContext
from kardex.editor import EditorState, editor_from_settings
from kardex.errors import NoTopicSelected, SubmitError
from kardex.keys import Key
from kardex.writer import CardGraphWriter

MANUAL = """
Topic of card is as selected in the topic widget.
Cards linked to a source or to other cards take that item's topic.

Upper textbox is question, lower is answer.

Add card as finished: Alt+f
Add card as unfinished: Alt+u
Make new card a dependency of an existing card: Alt+d
Make new card a dependent of an existing card: Alt+t
"""


class AddCardScreen:
    title = "Add card"
    manual = MANUAL

    def __init__(self, store, settings: dict | None = None,
                 context: CreationContext | None = None):
        self.store = store
        self.settings = settings or {}
        self.writer = CardGraphWriter(store)
        self.editor: EditorState = editor_from_settings(store, self.settings, context)
        self.message: str | None = None
        self.added: list[int] = []

    def handle_key(self, key: Key):
        if key.alt and key.code == "f":
            self.submit(True)
        elif key.alt and key.code == "u":
            self.submit(False)
        else:
            self.editor.handle_key(key)

    def submit(self, finished: bool) -> int | None:
        try:
            card_id, self.editor = self.writer.submit(self.editor, finished)
        except (NoTopicSelected, SubmitError) as e:
            self.message = str(e)
            return None
        self.message = f"Added card {card_id}"
        self.added.append(card_id)
        return card_id
