"""JSON-file backed configuration values."""

from __future__ import annotations

import copy
import dataclasses
import json
import os
from concurrent.futures import Future
from typing import Any, Callable, Generic, Optional, TypeVar

from hivemimic.aggregate import Plugin
from hivemimic.utils.promise import resolved

T = TypeVar("T")

DATA_DIR = "data"
CONFIG_DIR = os.path.join(DATA_DIR, "config")


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


class Config(Plugin, Generic[T]):
    """A value persisted as ``<data_dir>/<TypeName>.json``.

    The file is created from the default value the first time it is missing.
    """

    def __init__(self, default_value: T, data_dir: Optional[str] = None) -> None:
        self._default = default_value
        self._value: T = copy.deepcopy(default_value)
        self._loaded = False
        self.data_dir = CONFIG_DIR if data_dir is None else data_dir

    @property
    def file_path(self) -> str:
        name = type(self._default).__name__
        return os.path.join(self.data_dir, f"{name}.json")

    def _encode(self, value: T) -> Any:
        return dataclasses.asdict(value) if _is_dataclass_instance(value) else value

    def _decode(self, data: Any) -> T:
        if _is_dataclass_instance(self._default) and isinstance(data, dict):
            names = {field.name for field in dataclasses.fields(self._default)}
            known = {key: value for key, value in data.items() if key in names}
            return dataclasses.replace(self._default, **known)
        return data

    def init(self) -> None:
        try:
            with open(self.file_path, "r", encoding="utf-8") as handle:
                content = handle.read()
        except FileNotFoundError:
            default = self._default
            self.update(lambda _: copy.deepcopy(default))
        else:
            self._value = self._decode(json.loads(content))
        self._loaded = True

    def start(self) -> Future:
        return resolved(None)

    def stop(self) -> None:
        return None

    def get(self) -> T:
        """Return the loaded value, or the default before ``init``."""
        return self._value if self._loaded else self._default

    def update(self, updater: Callable[[T], T]) -> None:
        """Replace the value with ``updater(copy_of_value)`` and write it to disk.

        The stored value changes only if the write succeeds.
        """
        candidate = updater(copy.deepcopy(self._value))
        text = json.dumps(self._encode(candidate), indent=2)
        directory = os.path.dirname(self.file_path)
        if directory:
            os.makedirs(directory, mode=0o755, exist_ok=True)
        with open(self.file_path, "w", encoding="utf-8") as handle:
            handle.write(text)
        self._value = candidate