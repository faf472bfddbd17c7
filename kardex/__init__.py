"""kardex — card authoring for a personal knowledge graph."""

__version__ = "0.1.0"

from kardex.app import App
from kardex.context import ChildOfSource, DependencyOf, DependentOf, Plain
from kardex.editor import EditorState, Focus, new_editor
from kardex.writer import CardGraphWriter, handle_submit

__all__ = [
    "App", "CardGraphWriter", "ChildOfSource", "DependencyOf", "DependentOf",
    "EditorState", "Focus", "Plain", "handle_submit", "new_editor",
]
