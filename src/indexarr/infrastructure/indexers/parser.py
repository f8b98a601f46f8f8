"""Site search response -> canonical releases.

Every row is mapped on its own: a malformed row becomes a ``ParseError``
and is skipped, the remaining rows are still returned. A body that is not
a JSON array yields a single batch-level error and no releases.
"""

from __future__ import annotations

import json
from typing import Any

from indexarr.domain.entities import (
    Release,
    download_volume_factor,
    upload_volume_factor,
)
from indexarr.domain.indexers.base import IndexerDefinition, ParseError, ParseOutcome
from indexarr.domain.ports import CategoryMapPort
from indexarr.infrastructure.common.converters import (
    to_absolute_url,
    to_bool,
    to_datetime,
    to_int,
)


class RowError(ValueError):
    """A single result row could not be mapped."""


class ResponseParser:
    def __init__(
        self,
        definition: IndexerDefinition,
        category_map: CategoryMapPort,
        *,
        site_link: str | None = None,
    ) -> None:
        self._definition = definition
        self._category_map = category_map
        self._site_link = site_link or definition.site_link()

    def parse(self, raw_body: str) -> ParseOutcome:
        outcome = ParseOutcome()

        try:
            rows = json.loads(raw_body)
        except (ValueError, RecursionError) as exc:
            outcome.errors.append(
                ParseError(message=f"Response is not valid JSON: {exc}", raw=raw_body)
            )
            return outcome

        if not isinstance(rows, list):
            outcome.errors.append(
                ParseError(
                    message=f"Expected a JSON array, got {type(rows).__name__}",
                    raw=raw_body,
                )
            )
            return outcome

        for index, row in enumerate(rows):
            try:
                outcome.releases.append(self.parse_row(row))
            except (ValueError, TypeError) as exc:
                outcome.errors.append(
                    ParseError(message=str(exc), raw=_dump(row), row_index=index)
                )

        return outcome

    def parse_row(self, row: Any) -> Release:
        if not isinstance(row, dict):
            raise RowError(f"Expected a JSON object, got {type(row).__name__}")

        torrent_id = row.get("id")
        if torrent_id is None or isinstance(torrent_id, (bool, dict, list)):
            raise RowError("Missing or invalid 'id'")
        torrent_id = str(torrent_id).strip()
        if not torrent_id:
            raise RowError("Missing or invalid 'id'")

        title = row.get("name")
        if not isinstance(title, str) or not title.strip():
            raise RowError("Missing or invalid 'name'")

        publish_date = to_datetime(row.get("created_at"))
        if publish_date is None:
            raise RowError("Missing or invalid 'created_at'")

        category = row.get("category")
        category_id = category.get("id") if isinstance(category, dict) else None
        if category_id is None or isinstance(category_id, (bool, dict, list)):
            raise RowError("Missing or invalid 'category.id'")

        size = _counter(row, "size")
        grabs = _counter(row, "times_completed")
        seeders = _counter(row, "seeders")
        leechers = _counter(row, "leechers")

        freeleech = _flag(row, "is_freeleech")
        half_download = _flag(row, "is_half_download")
        double_upload = _flag(row, "is_double_upload")

        description = row.get("short_description")
        if description is not None and not isinstance(description, str):
            description = str(description)

        details = f"{self._site_link}browse/{torrent_id}"
        return Release(
            title=title.strip(),
            link=f"{self._site_link}api/torrent/{torrent_id}/download",
            details=details,
            guid=details,
            publish_date=publish_date,
            categories=self._category_map.map_site_category(str(category_id)),
            description=description,
            poster=to_absolute_url(row.get("poster")),
            size=size,
            grabs=grabs,
            seeders=seeders,
            peers=seeders + leechers,
            download_volume_factor=download_volume_factor(
                freeleech=freeleech, half_download=half_download
            ),
            upload_volume_factor=upload_volume_factor(double_upload=double_upload),
            minimum_ratio=self._definition.minimum_ratio,
            minimum_seed_time=self._definition.minimum_seed_time,
        )


def _counter(row: dict[str, Any], key: str) -> int:
    if key not in row:
        return 0
    value = to_int(row[key])
    if value is None:
        raise RowError(f"Invalid '{key}'")
    return value


def _flag(row: dict[str, Any], key: str) -> bool:
    value = to_bool(row.get(key))
    if value is None:
        raise RowError(f"Invalid flag '{key}'")
    return value


def _dump(row: Any) -> str:
    try:
        return json.dumps(row, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(row)
