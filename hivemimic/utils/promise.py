"""Small helpers producing ``concurrent.futures.Future`` objects."""

from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import Any, TypeVar

T = TypeVar("T")


def sleep(seconds: float) -> Future[None]:
    """Return a future that resolves to ``None`` after ``seconds``."""
    future: Future[None] = Future()

    def _fire() -> None:
        if not future.done():
            future.set_result(None)

    timer = threading.Timer(seconds, _fire)
    timer.daemon = True
    timer.start()
    return future


def resolved(value: T) -> Future[T]:
    """Return a future already completed with ``value``."""
    future: Future[T] = Future()
    future.set_result(value)
    return future


def rejected(error: BaseException) -> Future[Any]:
    """Return a future already failed with ``error``."""
    future: Future[Any] = Future()
    future.set_exception(error)
    return future