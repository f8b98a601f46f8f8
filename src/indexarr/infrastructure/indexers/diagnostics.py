"""Parse-error sink: structured logging plus optional raw payload dumps."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import structlog

from indexarr.domain.indexers.base import ParseError

log = structlog.get_logger(__name__)

_MAX_LOGGED_CHARS = 500


class LoggingParseErrorSink:
    """Reports malformed responses without ever raising.

    With *dump_dir* set, the full raw payload is written to
    ``<dump_dir>/<indexer>-<utc timestamp>[-row<n>].txt`` so it can be
    attached to a bug report.
    """

    def __init__(
        self,
        indexer_id: str,
        *,
        dump_dir: Path | None = None,
        max_logged_chars: int = _MAX_LOGGED_CHARS,
    ) -> None:
        self._indexer_id = indexer_id
        self._dump_dir = dump_dir
        self._max_logged_chars = max_logged_chars
        self.reported = 0

    def report(self, raw: str, error: ParseError) -> None:
        self.reported += 1
        snippet = raw if len(raw) <= self._max_logged_chars else (
            raw[: self._max_logged_chars] + "..."
        )
        log.warning(
            "indexer_parse_error",
            indexer=self._indexer_id,
            error=error.message,
            row_index=error.row_index,
            batch_level=error.is_batch_level,
            raw=snippet,
        )
        if self._dump_dir is not None:
            self._dump(self._dump_dir, raw, error)

    def _dump(self, dump_dir: Path, raw: str, error: ParseError) -> None:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        suffix = "" if error.row_index is None else f"-row{error.row_index}"
        path = dump_dir / f"{self._indexer_id}-{stamp}{suffix}.txt"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"{error.message}\n\n{raw}", encoding="utf-8")
        except OSError as exc:
            log.error(
                "indexer_parse_error_dump_failed",
                indexer=self._indexer_id,
                path=str(path),
                error=str(exc),
            )
