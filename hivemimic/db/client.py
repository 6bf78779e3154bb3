"""The MongoDB client plugin."""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Any, Optional

from pymongo import MongoClient

from hivemimic.aggregate import Plugin
from hivemimic.config import Config
from hivemimic.utils.promise import resolved

logger = logging.getLogger(__name__)


class Db(Plugin):
    """Connects to MongoDB on init and hands out databases."""

    def __init__(self, conf: Config) -> None:
        self.conf = conf
        self.client: Optional[Any] = None

    def init(self) -> None:
        uri = self.conf.get().db_uri
        client = MongoClient(uri)
        client.admin.command("ping")
        self.client = client
        logger.info("Connected to MongoDB. url=%s", uri)

    def start(self) -> Future:
        return resolved(self)

    def stop(self) -> None:
        if self.client is not None:
            self.client.close()

    def database(self, name: str) -> Any:
        """Return the database called ``name``."""
        if self.client is None:
            raise RuntimeError("database client is not connected")
        return self.client.get_database(name)