from mmolb_parsing.domain.entities import EntityReference
from mmolb_parsing.domain.events import GameStart, Hit, Strikeout, UnparsedEvent
from mmolb_parsing.domain.season import PlaySource
from mmolb_parsing.domain.vocabulary import HitType
from mmolb_parsing.serialization.diff import DifferenceKind, diff_snapshots, differing_paths
from mmolb_parsing.serialization.snapshot import SnapshotRecord


def _record(text: str, event: object, season: str = "S1") -> SnapshotRecord:
    return SnapshotRecord(text=text, season=season, source=PlaySource.GAME, event=event)  # type: ignore[arg-type]


STRIKEOUT = Strikeout(EntityReference("John Smith"), swinging=True)


class TestDifferingPaths:
    def test_equal(self) -> None:
        assert differing_paths({"type": "A", "x": [1, 2]}, {"type": "A", "x": [1, 2]}) == []

    def test_changed_tag_reported_once(self) -> None:
        assert differing_paths({"type": "A", "x": 1}, {"type": "B", "x": 2}) == ["type"]

    def test_nested_fields(self) -> None:
        old = {"type": "Hit", "batter": {"name": "Jane", "team": None}, "runners": [{"base": "SECOND"}]}
        new = {"type": "Hit", "batter": {"name": "June", "team": None}, "runners": [{"base": "THIRD"}]}
        assert differing_paths(old, new) == ["batter.name", "runners[0].base"]

    def test_list_length_change(self) -> None:
        assert differing_paths({"type": "W", "runners": []}, {"type": "W", "runners": [1]}) == ["runners"]

    def test_added_and_removed_keys(self) -> None:
        assert differing_paths({"type": "A", "old": 1}, {"type": "A", "new": 1}) == ["old", "new"]

    def test_scalar_root(self) -> None:
        assert differing_paths(1, 2) == ["$"]


class TestDiffSnapshots:
    def test_identical(self) -> None:
        records = [_record("PLAY BALL.", GameStart()), _record("John Smith strikes out swinging.", STRIKEOUT)]
        assert diff_snapshots(records, list(records)) == []

    def test_changed(self) -> None:
        text = "Jane Doe hits a single."
        old = [_record(text, UnparsedEvent(text=text, season="S1"))]
        new = [_record(text, Hit(EntityReference("Jane Doe"), HitType.SINGLE))]
        [difference] = diff_snapshots(old, new)
        assert difference.kind is DifferenceKind.CHANGED
        assert difference.text == text
        assert difference.old == old[0].event
        assert difference.new == new[0].event
        assert difference.paths == ("type",)

    def test_changed_field_paths(self) -> None:
        text = "John Smith strikes out swinging."
        old = [_record(text, STRIKEOUT)]
        new = [_record(text, Strikeout(EntityReference("John Smith"), swinging=False))]
        [difference] = diff_snapshots(old, new)
        assert difference.paths == ("swinging",)

    def test_added_and_removed(self) -> None:
        old = [_record("PLAY BALL.", GameStart()), _record("Gone.", UnparsedEvent(text="Gone.", season="S1"))]
        new = [_record("PLAY BALL.", GameStart()), _record("New.", UnparsedEvent(text="New.", season="S1"))]
        kinds = [(difference.kind, difference.text) for difference in diff_snapshots(old, new)]
        assert kinds == [(DifferenceKind.REMOVED, "Gone."), (DifferenceKind.ADDED, "New.")]

    def test_season_is_part_of_the_key(self) -> None:
        old = [_record("PLAY BALL.", GameStart(), season="S1")]
        new = [_record("PLAY BALL.", GameStart(), season="S2")]
        kinds = [difference.kind for difference in diff_snapshots(old, new)]
        assert kinds == [DifferenceKind.REMOVED, DifferenceKind.ADDED]

    def test_repeated_plays_pair_in_order(self) -> None:
        text = "John Smith strikes out swinging."
        old = [_record(text, STRIKEOUT), _record(text, STRIKEOUT)]
        new = [_record(text, STRIKEOUT)]
        [difference] = diff_snapshots(old, new)
        assert difference.kind is DifferenceKind.REMOVED
        assert difference.old == STRIKEOUT
