"""Command line entry point: connect the database and serve the RPC API."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from hivemimic.aggregate import Aggregate
from hivemimic.api.server import DEFAULT_PORT, ApiServer
from hivemimic.db.blocks import Blocks
from hivemimic.db.client import Db
from hivemimic.db.config import DbConfig
from hivemimic.db.mimic import MimicDb
from hivemimic.db.state import StateDb

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hivemimic",
        description="Serve a simulated Hive blockchain over JSON-RPC.",
    )
    parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT, help="port to listen on"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Start the plugins and the API server; return the exit status."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    database = Db(DbConfig())
    mimic_db = MimicDb(database)
    aggregate = Aggregate([database, mimic_db, Blocks(mimic_db), StateDb(mimic_db)])

    try:
        aggregate.init()
    except Exception as exc:  # the API keeps serving without the database
        logger.error("Plugin initialisation failed. error=%s", exc)

    try:
        aggregate.start().result()
        router = ApiServer()
        router.init()
        router.start(args.port)
    except KeyboardInterrupt:
        logger.info("Shutting down.")
    finally:
        aggregate.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())