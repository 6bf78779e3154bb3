"""A named collection as a plugin."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Any, Optional

from hivemimic.aggregate import Plugin
from hivemimic.db.instance import DbInstance
from hivemimic.utils.promise import resolved


class Collection(Plugin):
    """Resolves a named collection from a ``DbInstance`` on init."""

    def __init__(self, db: DbInstance, name: str) -> None:
        self.db = db
        self.name = name
        self.collection: Optional[Any] = None

    def init(self) -> None:
        if self.db.database is None:
            raise RuntimeError(f"database {self.db.name!r} is not initialised")
        self.collection = self.db.database.get_collection(self.name)

    def start(self) -> Future:
        return resolved(None)

    def stop(self) -> None:
        return None

    def _handle(self) -> Any:
        if self.collection is None:
            raise RuntimeError(f"collection {self.name!r} is not initialised")
        return self.collection