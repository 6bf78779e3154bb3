"""Database connection settings, persisted as a JSON config file."""

from __future__ import annotations

import dataclasses
import os
from typing import Optional

from hivemimic.config import Config
from hivemimic.utils.env import env_or_default

DEFAULT_MONGO_URL = "mongodb://localhost:27017"
MONGO_URL_ENV = "MONGO_URL"


class EmptyUriError(ValueError):
    """Raised when an empty MongoDB URI is supplied."""

    def __init__(self) -> None:
        super().__init__("empty MongoDB URI")


@dataclasses.dataclass
class DbConfigData:
    """The stored database settings."""

    db_uri: str


class DbConfig(Config[DbConfigData]):
    """Database settings; ``MONGO_URL`` overrides the stored URI on init."""

    def __init__(self, data_dir: Optional[str] = None) -> None:
        default = DbConfigData(
            db_uri=env_or_default(MONGO_URL_ENV, DEFAULT_MONGO_URL)
        )
        super().__init__(default, data_dir)

    def init(self) -> None:
        super().init()
        url = os.environ.get(MONGO_URL_ENV, "")
        if url:
            self.set_db_uri(url)

    def set_db_uri(self, uri: str) -> None:
        """Store ``uri`` as the database URI; an empty URI is rejected."""
        if not uri:
            raise EmptyUriError()
        self.update(lambda data: dataclasses.replace(data, db_uri=uri))