from dataclasses import dataclass

from mmolb_parsing.domain.season import PlaySource


@dataclass(frozen=True)
class RawPlay:
    """One play's text plus where it sat in its source document.

    ``season`` is the tag exactly as the feed supplied it; it is validated
    only when a rule set is chosen. ``start`` is a UTF-8 byte offset.
    """

    text: str
    season: str
    source: PlaySource = PlaySource.GAME
    start: int = 0

    @property
    def end(self) -> int:
        return self.start + len(self.text.encode("utf-8", "surrogatepass"))
