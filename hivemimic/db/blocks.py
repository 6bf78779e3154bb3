"""Storage of simulated Hive blocks."""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Mapping

from hivemimic.db.collection import Collection
from hivemimic.db.mimic import MimicDb

# Mapping of HiveBlock field names to their keys in the stored document.
_DOCUMENT_KEYS = {
    "block_id": "id",
    "witness": "witness",
    "timestamp": "ts",
    "merkle_root": "merkle_root",
    "previous": "previous",
    "transaction_ids": "tx_ids",
    "height": "height",
}


class BlockNotFoundError(LookupError):
    """Raised when no block exists at the requested height."""


@dataclasses.dataclass
class HiveBlock:
    """A stored block header."""

    block_id: str = ""
    witness: str = ""
    timestamp: str = ""
    merkle_root: str = ""
    previous: str = ""
    transaction_ids: str = ""
    height: int = 0

    def to_document(self) -> Dict[str, Any]:
        """Return the block as a database document."""
        return {key: getattr(self, field) for field, key in _DOCUMENT_KEYS.items()}

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "HiveBlock":
        """Build a block from a database document; missing keys keep defaults."""
        values = {
            field: document[key]
            for field, key in _DOCUMENT_KEYS.items()
            if key in document
        }
        return cls(**values)


class Blocks(Collection):
    """The ``blocks`` collection, keyed by height."""

    def __init__(self, mimic_db: MimicDb) -> None:
        super().__init__(mimic_db, "blocks")

    def get_block_by_height(self, height: int) -> HiveBlock:
        """Return the block at ``height``; raise ``BlockNotFoundError`` if absent."""
        document = self._handle().find_one({"height": height})
        if document is None:
            raise BlockNotFoundError(f"no block at height {height}")
        return HiveBlock.from_document(document)

    def insert_block(self, block: HiveBlock) -> None:
        """Insert ``block``, replacing the fields of any block at the same height."""
        self._handle().find_one_and_update(
            {"height": block.height},
            {"$set": block.to_document()},
            upsert=True,
        )