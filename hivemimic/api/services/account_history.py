"""The ``account_history_api`` service."""

from __future__ import annotations

from typing import Any, Dict

from hivemimic.api.services.base import (
    RegisterMethod,
    ServiceHandler,
    _int_param,
    _params_object,
)


class AccountHistoryApi(ServiceHandler):
    """Account history queries; no history is recorded yet."""

    def get_ops_in_block(self, params: Any) -> Dict[str, Any]:
        """Validate ``starting_block_range`` and ``count``; no blocks are returned."""
        args = _params_object(params)
        _int_param(args, "starting_block_range", unsigned=True)
        _int_param(args, "count", unsigned=True)
        return {"blocks": None}

    def expose(self, register: RegisterMethod) -> None:
        register("get_ops_in_block", "get_ops_in_block")