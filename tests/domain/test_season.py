import pytest

from mmolb_parsing.domain.raw_play import RawPlay
from mmolb_parsing.domain.season import PlaySource, Season


class TestSeasonFromTag:
    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("S1", Season.S1),
            ("s2", Season.S2),
            (" S3 ", Season.S3),
            ("1", Season.S1),
            (2, Season.S2),
        ],
    )
    def test_known_tags(self, tag: str | int, expected: Season) -> None:
        assert Season.from_tag(tag) is expected

    @pytest.mark.parametrize("tag", ["S9", "banana", "", "S", "S-1", "S1.0", "٣", 0, 99, "9" * 5000])
    def test_unknown_tags(self, tag: str | int) -> None:
        assert Season.from_tag(tag) is None

    def test_bool_is_not_a_season_number(self) -> None:
        assert Season.from_tag(True) is None

    def test_number(self) -> None:
        assert [season.number for season in Season] == [1, 2, 3]


class TestPlaySource:
    def test_values(self) -> None:
        assert [source.value for source in PlaySource] == ["game", "game_feed", "augment_feed"]


class TestRawPlay:
    def test_defaults(self) -> None:
        play = RawPlay(text="PLAY BALL.", season="S1")
        assert play.source is PlaySource.GAME
        assert play.start == 0
        assert play.end == 10

    def test_end_counts_utf8_bytes(self) -> None:
        play = RawPlay(text="🐉 Dragons", season="S1", start=5)
        assert play.end == 5 + 4 + 8
