"""Serve built save games over HTTP.

    python main.py --preload saves/Colony.rws --preload saves/Outpost.rws

Preloaded saves are built before the server accepts requests; a save that
fails to build stops startup with the builder's error.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import uvicorn

from rimsave.api.app import create_app
from rimsave.api.runtime import preloaded_state_factory
from rimsave.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve colony save files as a read-only API")
    parser.add_argument("--host", default="127.0.0.1", help="Host interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="TCP port to listen on")
    parser.add_argument(
        "--preload",
        action="append",
        type=Path,
        default=[],
        metavar="SAVE",
        help="Save file to build at startup (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Root logging level (default from LOG_LEVEL)",
    )
    args = parser.parse_args()

    missing = [str(path) for path in args.preload if not path.is_file()]
    if missing:
        parser.error(f"save file not found: {', '.join(missing)}")

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(state_factory=preloaded_state_factory(args.preload, settings=settings))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
