"""Canonical Newznab/Torznab categories.

Top-level categories are multiples of 1000; a subcategory's parent is the
enclosing thousand (2040 Movies/HD -> 2000 Movies).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TorznabCategory:
    id: int
    name: str

    @property
    def parent_id(self) -> int:
        return self.id // 1000 * 1000

    @property
    def is_parent(self) -> bool:
        return self.id % 1000 == 0


CONSOLE = TorznabCategory(1000, "Console")
CONSOLE_NDS = TorznabCategory(1010, "Console/NDS")
CONSOLE_PSP = TorznabCategory(1020, "Console/PSP")
CONSOLE_WII = TorznabCategory(1030, "Console/Wii")
CONSOLE_XBOX = TorznabCategory(1040, "Console/XBox")
CONSOLE_XBOX360 = TorznabCategory(1050, "Console/XBox 360")
CONSOLE_PS3 = TorznabCategory(1080, "Console/PS3")
CONSOLE_OTHER = TorznabCategory(1090, "Console/Other")
CONSOLE_PS4 = TorznabCategory(1180, "Console/PS4")

MOVIES = TorznabCategory(2000, "Movies")
MOVIES_FOREIGN = TorznabCategory(2010, "Movies/Foreign")
MOVIES_OTHER = TorznabCategory(2020, "Movies/Other")
MOVIES_SD = TorznabCategory(2030, "Movies/SD")
MOVIES_HD = TorznabCategory(2040, "Movies/HD")
MOVIES_UHD = TorznabCategory(2045, "Movies/UHD")
MOVIES_BLURAY = TorznabCategory(2050, "Movies/BluRay")
MOVIES_3D = TorznabCategory(2060, "Movies/3D")
MOVIES_DVD = TorznabCategory(2070, "Movies/DVD")
MOVIES_WEBDL = TorznabCategory(2080, "Movies/WEB-DL")

AUDIO = TorznabCategory(3000, "Audio")
AUDIO_MP3 = TorznabCategory(3010, "Audio/MP3")
AUDIO_VIDEO = TorznabCategory(3020, "Audio/Video")
AUDIO_AUDIOBOOK = TorznabCategory(3030, "Audio/Audiobook")
AUDIO_LOSSLESS = TorznabCategory(3040, "Audio/Lossless")
AUDIO_OTHER = TorznabCategory(3050, "Audio/Other")

PC = TorznabCategory(4000, "PC")
PC_0DAY = TorznabCategory(4010, "PC/0day")
PC_ISO = TorznabCategory(4020, "PC/ISO")
PC_MAC = TorznabCategory(4030, "PC/Mac")
PC_MOBILE_OTHER = TorznabCategory(4040, "PC/Mobile-Other")
PC_GAMES = TorznabCategory(4050, "PC/Games")

TV = TorznabCategory(5000, "TV")
TV_WEBDL = TorznabCategory(5010, "TV/WEB-DL")
TV_FOREIGN = TorznabCategory(5020, "TV/Foreign")
TV_SD = TorznabCategory(5030, "TV/SD")
TV_HD = TorznabCategory(5040, "TV/HD")
TV_UHD = TorznabCategory(5045, "TV/UHD")
TV_OTHER = TorznabCategory(5050, "TV/Other")
TV_SPORT = TorznabCategory(5060, "TV/Sport")
TV_ANIME = TorznabCategory(5070, "TV/Anime")
TV_DOCUMENTARY = TorznabCategory(5080, "TV/Documentary")

XXX = TorznabCategory(6000, "XXX")
XXX_DVD = TorznabCategory(6010, "XXX/DVD")
XXX_X264 = TorznabCategory(6040, "XXX/x264")
XXX_IMAGESET = TorznabCategory(6060, "XXX/ImageSet")

BOOKS = TorznabCategory(7000, "Books")
BOOKS_MAGS = TorznabCategory(7010, "Books/Mags")
BOOKS_EBOOK = TorznabCategory(7020, "Books/EBook")
BOOKS_COMICS = TorznabCategory(7030, "Books/Comics")

OTHER = TorznabCategory(8000, "Other")
OTHER_MISC = TorznabCategory(8010, "Other/Misc")

ALL_CATEGORIES: dict[int, TorznabCategory] = {
    c.id: c
    for c in (
        CONSOLE, CONSOLE_NDS, CONSOLE_PSP, CONSOLE_WII, CONSOLE_XBOX,
        CONSOLE_XBOX360, CONSOLE_PS3, CONSOLE_OTHER, CONSOLE_PS4,
        MOVIES, MOVIES_FOREIGN, MOVIES_OTHER, MOVIES_SD, MOVIES_HD,
        MOVIES_UHD, MOVIES_BLURAY, MOVIES_3D, MOVIES_DVD, MOVIES_WEBDL,
        AUDIO, AUDIO_MP3, AUDIO_VIDEO, AUDIO_AUDIOBOOK, AUDIO_LOSSLESS,
        AUDIO_OTHER,
        PC, PC_0DAY, PC_ISO, PC_MAC, PC_MOBILE_OTHER, PC_GAMES,
        TV, TV_WEBDL, TV_FOREIGN, TV_SD, TV_HD, TV_UHD, TV_OTHER, TV_SPORT,
        TV_ANIME, TV_DOCUMENTARY,
        XXX, XXX_DVD, XXX_X264, XXX_IMAGESET,
        BOOKS, BOOKS_MAGS, BOOKS_EBOOK, BOOKS_COMICS,
        OTHER, OTHER_MISC,
    )
}  # fmt: skip


def category_name(category_id: int) -> str:
    """Human-readable name, or the bare id for unknown categories."""
    cat = ALL_CATEGORIES.get(category_id)
    return cat.name if cat is not None else str(category_id)
