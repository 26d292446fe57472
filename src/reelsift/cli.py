"""CLI entry point for the ReelSift server."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reelsift.config.settings import Settings


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    from reelsift import __version__

    parser = argparse.ArgumentParser(
        prog="reelsift",
        description="Serve actor and movie metadata aggregated from pluggable providers.",
    )
    parser.add_argument("--config", "-c", default=None, help="Path to YAML configuration file")

    server = parser.add_argument_group("server")
    server.add_argument("--host", default=None, help="Bind address (overrides config)")
    server.add_argument("--port", "-p", type=int, default=None, help="Port (overrides config)")
    server.add_argument("--workers", "-w", type=int, default=None, help="Number of worker processes")
    server.add_argument("--reload", action="store_true", help="Restart on code changes (development)")

    engine = parser.add_argument_group("engine")
    engine.add_argument(
        "--store",
        choices=["memory", "redis"],
        default=None,
        help="Record store backend (overrides config)",
    )
    engine.add_argument("--redis-url", default=None, help="Redis URL for the redis store")
    engine.add_argument(
        "--search-timeout",
        type=_positive_float,
        default=None,
        help="Per-provider fan-out search deadline in seconds",
    )

    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument("--version", action="version", version=f"ReelSift {__version__}")
    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    """Build settings from the config file (or environment) plus CLI overrides."""
    from reelsift.config.settings import Settings

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port
    if args.workers:
        settings.server.workers = args.workers
    if args.store:
        settings.store.backend = args.store
    if args.redis_url:
        settings.store.redis_url = args.redis_url
    if args.search_timeout:
        settings.providers.search_timeout = args.search_timeout
    if args.log_level:
        settings.observability.log_level = args.log_level
    return settings


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, configure logging and run the API server."""
    args = _build_parser().parse_args(argv)
    settings = _load_settings(args)

    from reelsift.api.app import CONFIG_FILE_ENV, create_app
    from reelsift.observability.logging import setup_logging

    setup_logging(settings.observability)

    import uvicorn

    log_level = settings.observability.log_level.lower()
    if not (args.reload or settings.server.workers > 1):
        uvicorn.run(create_app(settings), host=settings.server.host, port=settings.server.port, log_level=log_level)
        return

    # Reloader and worker processes rebuild the app themselves; only the
    # config file path survives the process boundary, not CLI overrides.
    if args.config:
        os.environ[CONFIG_FILE_ENV] = str(Path(args.config).resolve())
    uvicorn.run(
        "reelsift.api.app:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        workers=1 if args.reload else settings.server.workers,
        reload=args.reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
