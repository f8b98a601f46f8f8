"""Catalogue of trackers speaking the token JSON API."""

from __future__ import annotations

from indexarr.domain.entities import categories as cats
from indexarr.domain.indexers.base import CategoryMapping, IndexerDefinition


def _m(code: str, category: cats.TorznabCategory, description: str) -> CategoryMapping:
    return CategoryMapping(site_code=code, category=category.id, description=description)


XTREMEZONE = IndexerDefinition(
    id="xtremezone",
    name="XtremeZone",
    description="XtremeZone (Xtreme Zone) is a ROMANIAN Private site for MOVIES / TV / GENERAL",
    base_url="https://www.xtremezone.ro/",
    language="ro-RO",
    privacy="private",
    categories=(
        _m("1", cats.MOVIES_SD, "Filme SD"),
        _m("2", cats.MOVIES_DVD, "Filme DVD"),
        _m("3", cats.MOVIES_FOREIGN, "Filme DVD-RO"),
        _m("4", cats.MOVIES_HD, "Filme HD"),
        _m("5", cats.MOVIES_FOREIGN, "Filme HD-RO"),
        _m("6", cats.MOVIES_BLURAY, "Filme Blu-Ray"),
        _m("7", cats.MOVIES_UHD, "Filme 4K"),
        _m("8", cats.MOVIES_3D, "Filme 3D"),
        _m("9", cats.TV_SD, "Seriale SD"),
        _m("10", cats.TV_HD, "Seriale HD"),
        _m("11", cats.TV_UHD, "Seriale 4K"),
        _m("12", cats.TV_FOREIGN, "Seriale RO"),
        _m("13", cats.TV_ANIME, "Anime"),
        _m("14", cats.TV_DOCUMENTARY, "Documentare"),
        _m("15", cats.TV_SPORT, "Sport"),
        _m("16", cats.AUDIO_MP3, "Muzica"),
        _m("17", cats.AUDIO_LOSSLESS, "Muzica FLAC"),
        _m("18", cats.AUDIO_VIDEO, "Videoclip"),
        _m("19", cats.PC_GAMES, "Jocuri PC"),
        _m("20", cats.CONSOLE_OTHER, "Jocuri Console"),
        _m("21", cats.PC_0DAY, "Programe"),
        _m("22", cats.PC_MOBILE_OTHER, "Mobile"),
        _m("23", cats.BOOKS_EBOOK, "eBooks"),
        _m("24", cats.AUDIO_AUDIOBOOK, "Audiobooks"),
        _m("25", cats.XXX, "XXX"),
        _m("26", cats.OTHER_MISC, "Diverse"),
    ),
)

MAGICTORRENT = IndexerDefinition(
    id="magictorrent",
    name="Magic Torrent",
    description="Magic Torrent is a ROMANIAN Private Torrent Tracker for MOVIES / TV / GENERAL",
    base_url="https://magictorrent.ro/",
    language="ro-RO",
    privacy="private",
    categories=(
        _m("1", cats.PC_0DAY, "Apps"),
        _m("2", cats.AUDIO_AUDIOBOOK, "Audiobooks"),
        _m("3", cats.BOOKS_EBOOK, "eBooks"),
        _m("4", cats.TV_ANIME, "Anime"),
        _m("5", cats.TV_DOCUMENTARY, "Documentaries"),
        _m("6", cats.PC_GAMES, "Games PC"),
        _m("7", cats.CONSOLE_OTHER, "Games Console"),
        _m("8", cats.MOVIES_SD, "Movies SD"),
        _m("9", cats.MOVIES_DVD, "Movies DVD"),
        _m("10", cats.MOVIES_HD, "Movies HD"),
        _m("11", cats.MOVIES_UHD, "Movies 4K"),
        _m("12", cats.MOVIES_BLURAY, "Movies Blu-Ray"),
        _m("13", cats.MOVIES_FOREIGN, "Movies RO"),
        _m("14", cats.AUDIO, "Music"),
        _m("15", cats.TV_SPORT, "Sport"),
        _m("16", cats.TV_SD, "TV SD"),
        _m("17", cats.TV_HD, "TV HD"),
        _m("18", cats.TV_UHD, "TV 4K"),
        _m("19", cats.TV_FOREIGN, "TV RO"),
        _m("20", cats.XXX, "XXX"),
    ),
)

SITE_DEFINITIONS: dict[str, IndexerDefinition] = {
    d.id: d for d in (XTREMEZONE, MAGICTORRENT)
}
