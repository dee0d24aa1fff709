from __future__ import annotations

from enum import StrEnum


class Season(StrEnum):
    S1 = "S1"
    S2 = "S2"
    S3 = "S3"

    @classmethod
    def from_tag(cls, tag: str | int) -> Season | None:
        """Map a season tag (``"S2"``, ``"s2"``, ``"2"`` or ``2``) to a Season.

        Returns None for tags with no rule set; callers treat that as an
        unrecognised play rather than an error.
        """
        if isinstance(tag, bool):
            return None
        if isinstance(tag, int):
            text = str(tag)
        elif isinstance(tag, str):
            text = tag.strip()
            if text[:1] in ("S", "s"):
                text = text[1:]
        else:
            return None
        if not text.isascii() or not text.isdigit() or len(text) > 3:
            return None
        return _BY_NUMBER.get(int(text))

    @property
    def number(self) -> int:
        return int(self.value[1:])


_BY_NUMBER: dict[int, Season] = {season.number: season for season in Season}


class PlaySource(StrEnum):
    GAME = "game"
    GAME_FEED = "game_feed"
    AUGMENT_FEED = "augment_feed"
