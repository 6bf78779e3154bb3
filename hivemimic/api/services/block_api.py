"""The ``block_api`` service, answering from canned block data."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Any, Dict, Mapping, Union

from hivemimic.api.services.base import (
    RegisterMethod,
    ServiceHandler,
    _int_param,
    _params_object,
    load_mock_data,
)

logger = logging.getLogger(__name__)

DEFAULT_MOCK_PATH = "mockdata/block_api.get_block.mock.json"

# Block fields in reply order, with the value used when a field is absent.
_BLOCK_FIELDS = (
    ("previous", ""),
    ("timestamp", ""),
    ("witness", ""),
    ("transaction_merkle_root", ""),
    ("extensions", None),
    ("witness_signature", ""),
    ("transactions", None),
    ("block_id", ""),
    ("signing_key", ""),
    ("transaction_ids", None),
)


def _block_of(entry: Any) -> Dict[str, Any]:
    """Return the block held by a mock ``{"block": {...}}`` entry, in reply shape."""
    if entry is None:
        entry = {}
    if not isinstance(entry, Mapping):
        raise ValueError("mock block entry must be a JSON object")
    block = entry.get("block") or {}
    if not isinstance(block, Mapping):
        raise ValueError("mock block must be a JSON object")
    return {
        name: default if block.get(name) is None else block[name]
        for name, default in _BLOCK_FIELDS
    }


class BlockApi(ServiceHandler):
    """Serves blocks from a JSON file keyed by block number."""

    def __init__(self, mock_path: Union[str, PathLike] = DEFAULT_MOCK_PATH) -> None:
        self.mock_path = mock_path

    def get_block_range(self, params: Any) -> Dict[str, Any]:
        """Return the known blocks numbered ``starting_block_num`` to ``+count``."""
        args = _params_object(params)
        start = _int_param(args, "starting_block_num")
        count = _int_param(args, "count")
        data = load_mock_data(self.mock_path)
        keys = (str(start + offset) for offset in range(count + 1))
        blocks = [_block_of(data[key]) for key in keys if key in data]
        return {"blocks": blocks or None}

    def get_block(self, params: Any) -> Dict[str, Any]:
        """Return the block numbered ``block_num``, or an empty block if unknown."""
        args = _params_object(params)
        block_num = _int_param(args, "block_num")
        data = load_mock_data(self.mock_path)
        key = str(block_num)
        if key not in data:
            logger.error("Block not found. block_num=%d", block_num)
            return {"block": _block_of(None)}
        return {"block": _block_of(data[key])}

    def expose(self, register: RegisterMethod) -> None:
        register("get_block_range", "get_block_range")
        register("get_block", "get_block")