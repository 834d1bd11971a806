"""
CLI entry point for the employee API.

Usage:
    # Serve the API with uvicorn
    python -m app.cli serve

    # Override bind address and port
    python -m app.cli serve --host 127.0.0.1 --port 9000
"""

import argparse
import logging

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server."""
    import uvicorn

    configure_logging(level=settings.log_level)
    logger.info(
        "Starting %s at http://%s:%d", settings.project_name, args.host, args.port
    )
    logger.info(
        "Upstream: %s%s", settings.upstream_base_url, settings.upstream_employees_path
    )
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Employee API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes (development)"
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main() -> None:
    args = build_parser().parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
