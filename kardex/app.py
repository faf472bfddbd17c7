"""App: central object that wires together the data dir, settings and store."""

import pathlib

from kardex.config import get_kardex_dir, load_settings
from kardex.context import CreationContext
from kardex.store import Store


class App:
    """Holds all shared state for a kardex session.

    Usage:
        app = App(kardex_dir="/path/to/kardex")
        app.open_store()                 # uses kardex_dir/kardex.db
        screen = app.add_card_screen()
        app.close()

    For testing:
        app = App(kardex_dir=tmp_path)
        app.open_store(":memory:")
    """

    def __init__(self, kardex_dir: pathlib.Path | str | None = None):
        if kardex_dir is None:
            kardex_dir = get_kardex_dir()
        self.kardex_dir = pathlib.Path(kardex_dir)
        self.settings = load_settings(self.kardex_dir)
        self.store: Store | None = None

    @property
    def db_path(self) -> pathlib.Path:
        return self.kardex_dir / self.settings.get("db_name", "kardex.db")

    def open_store(self, db_path: pathlib.Path | str | None = None) -> Store:
        """Open (or create) the database.

        Args:
            db_path: Path to the SQLite database file, or ":memory:" for
                     in-memory databases (useful for testing). Defaults to
                     kardex_dir/<db_name>.
        """
        if db_path is None:
            db_path = self.db_path
        self.store = Store.open(db_path)
        return self.store

    def add_card_screen(self, context: CreationContext | None = None):
        from kardex.screen import AddCardScreen
        return AddCardScreen(self.store, self.settings, context)

    def close(self):
        """Close the database connection."""
        if self.store:
            self.store.close()
            self.store = None
