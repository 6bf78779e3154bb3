"""Common pieces of the RPC services: method registration, params and mock data."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from os import PathLike
from typing import Any, Callable, Dict, List, Mapping, Union

RegisterMethod = Callable[[str, str], None]
"""Called as ``register(alias, method_name)`` for each RPC method a service offers."""

_INT64_RANGE = (-(2**63), 2**63 - 1)
_UINT64_RANGE = (0, 2**64 - 1)


class ServiceHandler(ABC):
    """A service whose methods are reachable over JSON-RPC."""

    @abstractmethod
    def expose(self, register: RegisterMethod) -> None:
        """Call ``register(alias, method_name)`` once per offered method."""


def load_mock_data(path: Union[str, PathLike]) -> Dict[str, Any]:
    """Read a JSON object of canned records keyed by string."""
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"mock data in {path} is not a JSON object")
    return data


def _params_object(params: Any) -> Mapping[str, Any]:
    """Return ``params`` as an object; ``None`` counts as an empty one."""
    if params is None:
        return {}
    if not isinstance(params, Mapping):
        raise ValueError("params must be a JSON object")
    return params


def _int_param(params: Mapping[str, Any], key: str, *, unsigned: bool = False) -> int:
    """Return the 64-bit integer at ``key``; absent or null gives 0."""
    value = params.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"param {key!r} must be an integer")
    low, high = _UINT64_RANGE if unsigned else _INT64_RANGE
    if not low <= value <= high:
        raise ValueError(f"param {key!r} is out of range")
    return value


def _string_list(value: Any, what: str = "params") -> List[str]:
    """Return ``value`` as a list of strings; ``None`` gives an empty list."""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{what} must be a list of strings")
    return list(value)