from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from indexarr.application.use_cases import (
    IndexerCheckUseCase,
    IndexerListUseCase,
    IndexerSearchUseCase,
)
from indexarr.domain.entities import Release, SearchQuery
from indexarr.domain.indexers.exceptions import IndexerNotFoundError
from indexarr.infrastructure.composition import build_registry
from indexarr.infrastructure.config import AppConfig, load_config
from indexarr.infrastructure.indexers.registry import IndexerRegistry
from indexarr.infrastructure.logging.setup import configure_logging, shutdown_logging

log = structlog.get_logger(__name__)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="indexarr")

    # Config wiring flags (no business logic)
    parser.add_argument("--config", default=None, help="Path to YAML config file.")
    parser.add_argument("--dotenv", default=None, help="Path to .env file.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List configured indexers.")

    caps = sub.add_parser("caps", help="Show an indexer's capabilities.")
    caps.add_argument("indexer")

    check = sub.add_parser("check", help="Log in and run a test query.")
    check.add_argument("indexer")

    search = sub.add_parser("search", help="Search one indexer.")
    search.add_argument("indexer")
    search.add_argument("-q", "--query", default="", help="Free-text search term.")
    search.add_argument("--imdb", default=None, help="IMDb id (overrides --query).")
    search.add_argument(
        "--cat",
        type=int,
        action="append",
        default=[],
        help="Canonical category id (repeatable).",
    )
    search.add_argument("--season", type=int, default=None)
    search.add_argument("--ep", default=None)

    download = sub.add_parser("download", help="Download a release file.")
    download.add_argument("indexer")
    download.add_argument("link")
    download.add_argument("-o", "--output", required=True, help="Target file.")

    return parser.parse_args(argv)


def _release_to_dict(release: Release) -> dict[str, Any]:
    return {
        "title": release.title,
        "link": release.link,
        "details": release.details,
        "guid": release.guid,
        "categories": release.categories,
        "publish_date": release.publish_date.isoformat(),
        "description": release.description,
        "poster": release.poster,
        "size": release.size,
        "grabs": release.grabs,
        "seeders": release.seeders,
        "peers": release.peers,
        "download_volume_factor": release.download_volume_factor,
        "upload_volume_factor": release.upload_volume_factor,
        "minimum_ratio": release.minimum_ratio,
        "minimum_seed_time": release.minimum_seed_time,
    }


def _emit(data: Any) -> None:
    sys.stdout.write(json.dumps(data, ensure_ascii=False) + "\n")


async def _run(args: argparse.Namespace, registry: IndexerRegistry) -> int:
    listing = IndexerListUseCase(indexers=registry)

    if args.command == "list":
        for info in listing.execute():
            _emit(info)
        return 0

    if args.command == "caps":
        try:
            _emit(listing.capabilities(args.indexer))
        except IndexerNotFoundError as exc:
            log.error("cli_indexer_not_found", indexer=args.indexer, error=str(exc))
            return 2
        return 0

    if args.command == "check":
        result = await IndexerCheckUseCase(indexers=registry).execute(args.indexer)
        _emit(
            {
                "indexer": result.indexer_id,
                "ok": result.ok,
                "error_kind": result.error_kind.value if result.error_kind else None,
                "error": result.error_message,
            }
        )
        return 0 if result.ok else 1

    searcher = IndexerSearchUseCase(indexers=registry)

    if args.command == "search":
        query = SearchQuery(
            term=args.query,
            imdb_id=args.imdb,
            categories=tuple(args.cat),
            season=args.season,
            episode=args.ep,
        )
        outcome = await searcher.execute(args.indexer, query)
        if not outcome.ok:
            log.error(
                "cli_search_failed",
                indexer=args.indexer,
                error_kind=outcome.error_kind.value if outcome.error_kind else None,
                error=outcome.error_message,
            )
            return 1
        for release in outcome.releases:
            _emit(_release_to_dict(release))
        return 0

    if args.command == "download":
        result = await searcher.download(args.indexer, args.link)
        if not result.ok:
            log.error(
                "cli_download_failed",
                indexer=args.indexer,
                error_kind=result.error_kind.value if result.error_kind else None,
                error=result.error_message,
            )
            return 1
        Path(args.output).write_bytes(result.content)
        log.info("cli_download_saved", path=args.output, size=len(result.content))
        return 0

    return 2  # pragma: no cover


async def _main(args: argparse.Namespace, config: AppConfig) -> int:
    registry = build_registry(config)
    try:
        return await _run(args, registry)
    finally:
        await registry.aclose()


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Loads config exactly once, configures logging, then dispatches the
    subcommand.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    cli_overrides: dict[str, Any] = {}
    if args.log_level:
        cli_overrides["log_level"] = args.log_level
    if args.log_format:
        cli_overrides["log_format"] = args.log_format

    config = load_config(
        config_path=Path(args.config) if args.config else None,
        dotenv_path=Path(args.dotenv) if args.dotenv else None,
        cli_overrides=cli_overrides,
    )
    configure_logging(config)

    try:
        return asyncio.run(_main(args, config))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(start())
