"""The simulator's own database."""

from __future__ import annotations

from typing import Any

from hivemimic.db.instance import DbInstance

DATABASE_NAME = "go-mimic"


class MimicDb(DbInstance):
    """The database holding the simulator's blocks and state."""

    def __init__(self, db: Any) -> None:
        super().__init__(db, DATABASE_NAME)