from mmolb_parsing.domain.errors import NoMatch
from mmolb_parsing.domain.result import Err, Ok
from mmolb_parsing.parsing.combinators import (
    alt,
    delimited,
    eof,
    label,
    many0,
    many1,
    map_value,
    opt,
    rest,
    run_parser,
    seq,
    tag,
    value,
    verify,
)


class TestTag:
    def test_match_advances(self) -> None:
        assert tag("Ball")("Ball. 1-0.", 0) == Ok(("Ball", 4))

    def test_decline_reports_position(self) -> None:
        result = tag("Ball")("Foul tip.", 0)
        assert isinstance(result, Err)
        assert result.error.position == 0
        assert result.error.expected == "'Ball'"


class TestSeq:
    def test_collects_values(self) -> None:
        assert seq(tag("a"), tag("b"))("abc", 0) == Ok((("a", "b"), 2))

    def test_fails_at_the_failing_part(self) -> None:
        result = seq(tag("a"), tag("b"))("ac", 0)
        assert isinstance(result, Err)
        assert result.error.position == 1


class TestAlt:
    def test_first_success_wins(self) -> None:
        parser = alt(value(1, tag("ab")), value(2, tag("a")))
        assert parser("abc", 0) == Ok((1, 2))

    def test_order_matters(self) -> None:
        parser = alt(value(2, tag("a")), value(1, tag("ab")))
        assert parser("abc", 0) == Ok((2, 1))

    def test_reports_furthest_failure(self) -> None:
        parser = alt(seq(tag("x"), tag("y")), seq(tag("a"), tag("b"), tag("c")))
        result = parser("abz", 0)
        assert isinstance(result, Err)
        assert result.error.position == 2


class TestRepetition:
    def test_opt_yields_none(self) -> None:
        assert opt(tag("!"))("?", 0) == Ok((None, 0))

    def test_many0_accepts_nothing(self) -> None:
        assert many0(tag("a"))("bbb", 0) == Ok(((), 0))

    def test_many0_stops_on_zero_width(self) -> None:
        assert many0(rest)("", 0) == Ok(((), 0))

    def test_many1_requires_one(self) -> None:
        assert isinstance(many1(tag("a"))("b", 0), Err)
        assert many1(tag("a"))("aab", 0) == Ok((("a", "a"), 2))


class TestShaping:
    def test_map_value(self) -> None:
        assert map_value(tag("7"), int)("7", 0) == Ok((7, 1))

    def test_verify_rejects(self) -> None:
        parser = verify(map_value(tag("7"), int), lambda n: n > 10, "a big number")
        result = parser("7", 0)
        assert result == Err(NoMatch(message="expected a big number at 0", position=0, expected="a big number"))

    def test_delimited(self) -> None:
        assert delimited(tag("("), tag("x"), tag(")"))("(x)", 0) == Ok(("x", 3))

    def test_label_replaces_expectation(self) -> None:
        result = label("a greeting", seq(tag("he"), tag("llo")))("help", 0)
        assert isinstance(result, Err)
        assert result.error.expected == "a greeting"
        assert result.error.position == 0

    def test_eof(self) -> None:
        assert eof("ab", 2) == Ok((None, 2))
        assert isinstance(eof("ab", 1), Err)


class TestRunParser:
    def test_returns_leftover(self) -> None:
        assert run_parser(tag("PLAY BALL."), "PLAY BALL. again") == Ok(("PLAY BALL.", " again"))

    def test_is_pure(self) -> None:
        parser = seq(tag("a"), many0(tag("b")))
        assert run_parser(parser, "abbc") == run_parser(parser, "abbc")
