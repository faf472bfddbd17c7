"""Exceptions raised by the authoring workflow and the store."""


class KardexError(Exception):
    """Base class for kardex errors."""


class NotFound(KardexError, LookupError):
    def __init__(self, kind: str, item_id: int):
        super().__init__(f"{kind} {item_id} not found")
        self.kind = kind
        self.item_id = item_id


class StorageError(KardexError):
    """The underlying database rejected a read or write."""


class ConstructionError(KardexError):
    """A creation context references a card or source that does not exist."""


class NoTopicSelected(KardexError):
    def __init__(self):
        super().__init__("No topic selected")


class SubmitError(KardexError):
    """Submission failed; the editor keeps the user's text."""

    def __init__(self, cause: Exception):
        super().__init__(f"Could not save card: {cause}")
        self.cause = cause
