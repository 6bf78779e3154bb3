"""A named database as a plugin."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Optional

from hivemimic.aggregate import Plugin
from hivemimic.utils.promise import resolved


class DbInstance(Plugin):
    """Resolves a named database from a ``Db`` on init."""

    def __init__(self, db: Any, name: str) -> None:
        self.db = db
        self.name = name
        self.database: Optional[Any] = None

    def init(self) -> None:
        self.database = self.db.database(self.name)

    def start(self) -> Future:
        return resolved(None)

    def stop(self) -> None:
        return None

    def clear(self) -> None:
        """Drop the whole database."""
        if self.database is None:
            raise RuntimeError(f"database {self.name!r} is not initialised")
        self.database.client.drop_database(self.database.name)