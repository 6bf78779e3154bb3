"""Lifecycle management for a set of plugins."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from concurrent.futures import CancelledError, Future
from typing import Any, List, Sequence


class Plugin(ABC):
    """A component with an init/start/stop lifecycle."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the plugin; run in the order plugins are given."""

    @abstractmethod
    def start(self) -> Future:
        """Start the plugin without blocking; return a future of its result."""

    @abstractmethod
    def stop(self) -> None:
        """Clean up once the aggregate is finished."""


def _gather(futures: Sequence[Future]) -> Future:
    """Combine futures into one resolving to their results, or the first failure."""
    combined: Future = Future()
    if not futures:
        combined.set_result([])
        return combined

    lock = threading.Lock()
    remaining = len(futures)

    def _on_done(future: Future) -> None:
        nonlocal remaining
        with lock:
            if combined.done():
                return
            if future.cancelled():
                combined.set_exception(CancelledError())
                return
            error = future.exception()
            if error is not None:
                combined.set_exception(error)
                return
            remaining -= 1
            if remaining == 0:
                combined.set_result([f.result() for f in futures])

    for future in futures:
        future.add_done_callback(_on_done)
    return combined


class Aggregate(Plugin):
    """Runs the lifecycle of several plugins as one."""

    def __init__(self, plugins: Sequence[Plugin]) -> None:
        self.plugins: List[Plugin] = list(plugins)

    def run(self) -> None:
        """Initialise, start and wait for all plugins, then stop them."""
        self.init()
        self.start().result()
        self.stop()

    def init(self) -> None:
        for plugin in self.plugins:
            plugin.init()

    def start(self) -> Future:
        return _gather([plugin.start() for plugin in self.plugins])

    def stop(self) -> None:
        for plugin in self.plugins:
            plugin.stop()

    def __repr__(self) -> str:
        return f"Aggregate(plugins={self.plugins!r})"


__all__: Any = ["Plugin", "Aggregate"]