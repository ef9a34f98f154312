"""
CLI entry point for the Forgery service.

Usage:
    # Serve on the configured host and port
    python -m forgery

    # Override bind address and log level
    python -m forgery --host 0.0.0.0 --port 9000 --log-level DEBUG
"""

import argparse
import logging

from forgery.core.config import settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Forgery user service")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    import uvicorn

    from forgery.main import create_app

    args = build_parser().parse_args(argv)
    app = create_app(settings.model_copy(update={"log_level": args.log_level}))

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
