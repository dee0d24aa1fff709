import pytest

from mmolb_parsing.domain.errors import DecodeError, IncompleteMatch, NoMatch, ParseFailure, UnknownSeason


class TestParseFailures:
    def test_no_match_is_a_parse_failure(self) -> None:
        failure = NoMatch(message="expected '.' at 4", position=4, expected="'.'")
        assert isinstance(failure, ParseFailure)
        assert failure.message == "expected '.' at 4"

    def test_incomplete_match_keeps_leftover(self) -> None:
        failure = IncompleteMatch(message="left ' extra'", position=11, leftover=" extra")
        assert isinstance(failure, ParseFailure)
        assert failure.leftover == " extra"

    def test_unknown_season_keeps_tag(self) -> None:
        assert UnknownSeason(message="no rule set", tag="S9").tag == "S9"

    def test_frozen(self) -> None:
        failure = NoMatch(message="m", position=0, expected="x")
        with pytest.raises(AttributeError):
            failure.position = 1  # type: ignore[misc]


class TestDecodeError:
    def test_path_defaults_to_root(self) -> None:
        assert DecodeError(message="invalid JSON").path == "$"

    def test_is_not_a_parse_failure(self) -> None:
        assert not isinstance(DecodeError(message="x"), ParseFailure)
