"""
CLI entry point for the promotion tracking service.

Usage:
    # Serve the API (defaults to SERVER_HOST / SERVER_PORT)
    python -m promotion_tracking.cli serve --port 8080

    # Create the database schema and exit
    python -m promotion_tracking.cli init-db
"""

import argparse
import logging
from typing import Optional, Sequence

from promotion_tracking.core.config import settings
from promotion_tracking.infrastructure.database import build_engine, create_schema
from promotion_tracking.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the full application under uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("promotion_tracking.main:app", host=args.host, port=args.port, reload=False)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create missing tables on the configured database."""
    engine = build_engine(settings)
    try:
        create_schema(engine)
    finally:
        engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Promotion Tracking API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument("--host", default=settings.server_host)
    serve_parser.add_argument("--port", type=int, default=settings.server_port)
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser("init-db", help="Create the database schema")
    init_parser.set_defaults(func=cmd_init_db)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    configure_logging(level=settings.log_level, sql_echo=settings.db_echo)
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
