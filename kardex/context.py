"""Creation contexts: what a new card is being made for."""

from dataclasses import dataclass

from kardex.errors import ConstructionError, NotFound


@dataclass(frozen=True)
class Plain:
    pass


@dataclass(frozen=True)
class ChildOfSource:
    source_id: int


@dataclass(frozen=True)
class DependencyOf:
    card_ids: tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "card_ids", tuple(dict.fromkeys(self.card_ids)))
        if not self.card_ids:
            raise ValueError("DependencyOf needs at least one card id")


@dataclass(frozen=True)
class DependentOf:
    card_ids: tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "card_ids", tuple(dict.fromkeys(self.card_ids)))
        if not self.card_ids:
            raise ValueError("DependentOf needs at least one card id")


CreationContext = Plain | ChildOfSource | DependencyOf | DependentOf


def prompt_label(context: CreationContext, store, title_len: int = 15) -> str:
    """Header text for the add-card screen.

    Contexts that point at an existing card or source look it up; a
    dangling reference raises ConstructionError.
    """
    try:
        if isinstance(context, Plain):
            return "Add new card"
        if isinstance(context, DependencyOf):
            card = store.fetch_card(context.card_ids[0])
            return f"Add new dependency for: {card.question}"
        if isinstance(context, DependentOf):
            card = store.fetch_card(context.card_ids[0])
            return f"Add new dependent of: {card.question}"
        if isinstance(context, ChildOfSource):
            title = store.fetch_source_title(context.source_id, title_len)
            return f"Add new child of source: {title}"
    except NotFound as e:
        raise ConstructionError(f"Cannot add card: {e}") from e
    raise TypeError(f"Unknown creation context: {context!r}")
