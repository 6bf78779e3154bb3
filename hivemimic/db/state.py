"""Storage of simulated chain state."""

from __future__ import annotations

from hivemimic.db.collection import Collection
from hivemimic.db.mimic import MimicDb


class StateDb(Collection):
    """The ``state`` collection."""

    def __init__(self, mimic_db: MimicDb) -> None:
        super().__init__(mimic_db, "state")