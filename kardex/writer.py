"""CardGraphWriter: turns a finished editor into a stored card plus its graph edges."""

from kardex.context import ChildOfSource, DependencyOf, DependentOf, Plain
from kardex.editor import EditorState, new_editor
from kardex.errors import NoTopicSelected, NotFound, StorageError, SubmitError
from kardex.models import Edge, EdgeKind, FinishedInfo, PendingCard


class CardGraphWriter:
    def __init__(self, store):
        self.store = store

    def resolve_topic(self, editor: EditorState) -> int:
        """Topic for the new card.

        Linked cards inherit the topic of their source or of the first
        referenced card; the topic selector only counts for plain cards.
        """
        context = editor.context
        if isinstance(context, Plain):
            topic_id = editor.topics.selected_id()
            if topic_id is None:
                raise NoTopicSelected()
            return topic_id
        if isinstance(context, ChildOfSource):
            return self.store.fetch_source_topic(context.source_id)
        if isinstance(context, (DependencyOf, DependentOf)):
            return self.store.fetch_card(context.card_ids[0]).topic_id
        raise TypeError(f"Unknown creation context: {context!r}")

    def build_pending(self, editor: EditorState, finished: bool) -> PendingCard:
        topic_id = self.resolve_topic(editor)
        context = editor.context

        source_id = context.source_id if isinstance(context, ChildOfSource) else None

        if isinstance(context, DependencyOf):
            edges = [Edge(EdgeKind.DEPENDENCY, cid) for cid in context.card_ids]
        elif isinstance(context, DependentOf):
            edges = [Edge(EdgeKind.DEPENDENT, cid) for cid in context.card_ids]
        else:
            edges = []

        return PendingCard(
            question=editor.question.return_text(),
            answer=editor.answer.return_text(),
            topic_id=topic_id,
            finished=finished,
            source_id=source_id,
            finished_info=FinishedInfo() if finished else None,
            edges=edges,
        )

    def submit(self, editor: EditorState, finished: bool) -> tuple[int, EditorState]:
        """Store the card and return (card_id, fresh plain editor).

        On any failure the given editor is left exactly as it was.
        """
        try:
            pending = self.build_pending(editor, finished)
            card_id = self.store.write_card_with_edges(pending)
        except (NotFound, StorageError) as e:
            raise SubmitError(e) from e
        fresh = new_editor(self.store, Plain(), editor.title_len, editor.default_topic)
        return card_id, fresh


def handle_submit(store, editor: EditorState, finished: bool) -> tuple[int, EditorState]:
    return CardGraphWriter(store).submit(editor, finished)
