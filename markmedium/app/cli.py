"""Command-line interface for publishing markdown files on Medium."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Callable, Sequence

from ..errors import MarkMediumError
from ..platforms.medium import MediumApiClient, MediumContentPublisher, MediumCredentialStore
from ..services import PublishingService
from ..settings import AppConfig, load_config
from ..utils.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        level=logging.INFO if args.verbose else logging.WARNING,
        structured=not args.log_plain,
    )

    handler: Callable[[argparse.Namespace], int] | None = getattr(args, "handler", None)
    if handler is None:
        parser.print_help(sys.stderr)
        return 1

    try:
        return handler(args)
    except MarkMediumError as exc:
        LOGGER.error(
            "Command failed",
            extra={
                "event": "cli.error",
                "command": args.command,
                "error_type": type(exc).__name__,
                "details": exc.details,
            },
        )
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def run() -> None:
    raise SystemExit(main())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markmedium",
        description="Publish Medium articles from markdown content",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument("--config", help="Path to configuration file", default=None)
    parser.add_argument(
        "--credentials",
        type=Path,
        default=None,
        help="Where the token and author id are stored (default: ~/.markmedium)",
    )
    parser.add_argument(
        "--log-plain",
        action="store_true",
        help="Use plain-text logs instead of JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")

    subparsers = parser.add_subparsers(dest="command")

    init_parser = subparsers.add_parser("init", help="Set up with your integration token")
    init_parser.add_argument("token", help="Medium integration token")
    init_parser.set_defaults(handler=_handle_init)

    publish_parser = subparsers.add_parser(
        "publish", help="Publish markdown content on your Medium blog"
    )
    publish_parser.add_argument("file", type=Path, help="Markdown file with YAML front matter")
    publish_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the request payload instead of publishing",
    )
    publish_parser.set_defaults(handler=_handle_publish)

    return parser


def _handle_init(args: argparse.Namespace) -> int:
    service, client = _build_service(args)
    try:
        path = service.initialize(args.token)
    finally:
        client.close()
    print(f"Saved token and author ID at {path}")
    return 0


def _handle_publish(args: argparse.Namespace) -> int:
    service, client = _build_service(args)
    try:
        outcome = service.publish_file(args.file, dry_run=args.dry_run)
    finally:
        client.close()

    if outcome.dry_run:
        print(json.dumps(outcome.payload, ensure_ascii=False, indent=2))
    else:
        print(f"Done! Your post has been published at {outcome.url}")
    return 0


def _build_service(args: argparse.Namespace) -> tuple[PublishingService, MediumApiClient]:
    config = _load_config(args)
    client = MediumApiClient(base_url=config.api_base_url, timeout=config.timeout)
    store = MediumCredentialStore(config.credentials_path)
    publisher = MediumContentPublisher(store, client)
    return PublishingService(publisher, store, publisher), client


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config)
    if args.credentials is not None:
        config.credentials_path = args.credentials.expanduser()
    return config


def _version() -> str:
    try:
        return importlib_metadata.version("markmedium")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["main", "run"]
