import pytest

from mmolb_parsing.domain.entities import (
    Count,
    EmojilessItem,
    EmojiTeam,
    EntityReference,
    Pitch,
    RunnerAdvance,
)
from mmolb_parsing.domain.events import (
    Announcement,
    Ball,
    CaughtStealing,
    DoublePlay,
    FieldersChoice,
    FieldingOut,
    Foul,
    GameEnd,
    GameStart,
    Hit,
    HitByPitch,
    InningEnd,
    InningStart,
    Injury,
    ItemStolen,
    NowBatting,
    RunScored,
    SacrificeFly,
    StolenBase,
    Strike,
    Strikeout,
    Substitution,
    UnparsedEvent,
    Walk,
    WeatherEffect,
    WildPitch,
)
from mmolb_parsing.domain.vocabulary import (
    Base,
    FoulKind,
    HitType,
    InningSide,
    ItemPrefix,
    ItemType,
    OutType,
    PitchType,
    StrikeKind,
    WeatherKind,
)
from mmolb_parsing.parsing.resolver import parse_text

JANE = EntityReference("Jane Doe")
BO = EntityReference("Bo Kim")
ANN = EntityReference("Ann Lee")


class TestGameFlow:
    def test_markers(self) -> None:
        assert parse_text("PLAY BALL.", "S1") == GameStart()
        assert parse_text("GAME OVER.", "S1") == GameEnd()

    def test_innings(self) -> None:
        assert parse_text("Start of the top of the 1st.", "S1") == InningStart(InningSide.TOP, 1)
        assert parse_text("End of the bottom of the 12th.", "S1") == InningEnd(InningSide.BOTTOM, 12)

    def test_now_batting(self) -> None:
        assert parse_text("Now batting: Jane Doe", "S1") == NowBatting(JANE)


class TestPitches:
    def test_ball(self) -> None:
        assert parse_text("Ball. 3-2.", "S1") == Ball(Count(3, 2))

    def test_strike(self) -> None:
        assert parse_text("Strike, looking. 0-1.", "S1") == Strike(StrikeKind.LOOKING, Count(0, 1))

    def test_foul(self) -> None:
        assert parse_text("Foul ball. 2-2.", "S1") == Foul(FoulKind.BALL, Count(2, 2))

    def test_impossible_count_is_unparsed(self) -> None:
        assert isinstance(parse_text("Ball. 5-0.", "S1"), UnparsedEvent)


class TestPlateAppearances:
    def test_strikeout_swinging(self) -> None:
        assert parse_text("John Smith strikes out swinging.", "S1") == Strikeout(
            batter=EntityReference("John Smith"), swinging=True
        )

    def test_walk_with_runner(self) -> None:
        assert parse_text("Jane Doe draws a walk. Bo Kim advances to second.", "S1") == Walk(
            batter=JANE, runners=(RunnerAdvance(BO, Base.SECOND),)
        )

    def test_hit_by_pitch(self) -> None:
        assert parse_text("Jane Doe was hit by the pitch and advances to first base.", "S1") == HitByPitch(JANE)

    def test_double_advancing_beats_shorter_hit(self) -> None:
        assert parse_text("Jane Doe hits a double, advancing to second.", "S1") == Hit(
            batter=JANE, hit_type=HitType.DOUBLE, advance_to=Base.SECOND
        )

    def test_single_with_runners(self) -> None:
        assert parse_text("Jane Doe hits a single. Bo Kim scores! Ann Lee advances to third.", "S1") == Hit(
            batter=JANE,
            hit_type=HitType.SINGLE,
            runners=(RunnerAdvance(BO, Base.HOME), RunnerAdvance(ANN, Base.THIRD)),
        )

    def test_home_run_distance_is_optional(self) -> None:
        assert parse_text("Jane Doe hits a 412-foot home run!", "S1") == Hit(
            batter=JANE, hit_type=HitType.HOME_RUN, distance=412
        )
        assert parse_text("Jane Doe hits a home run!", "S1") == Hit(batter=JANE, hit_type=HitType.HOME_RUN)

    def test_in_park_hit_cannot_end_with_bang(self) -> None:
        assert isinstance(parse_text("Jane Doe hits a single!", "S1"), UnparsedEvent)

    @pytest.mark.parametrize(("verb", "out_type"), [(out_type.value, out_type) for out_type in OutType])
    def test_fielding_outs(self, verb: str, out_type: OutType) -> None:
        assert parse_text(f"Jane Doe {verb} out to Bo Kim.", "S1") == FieldingOut(
            batter=JANE, out_type=out_type, fielder=BO
        )

    def test_fielder_with_initials(self) -> None:
        event = parse_text("Jane Doe grounds out to J. R. Smith. Bo Kim advances to second.", "S1")
        assert event == FieldingOut(
            batter=JANE,
            out_type=OutType.GROUNDOUT,
            fielder=EntityReference("J. R. Smith"),
            runners=(RunnerAdvance(BO, Base.SECOND),),
        )

    def test_fielder_ending_in_initial(self) -> None:
        text = "Jane Doe grounds out to Bo K. Ann Lee scores!"
        event = parse_text(text, "S1")
        assert event == FieldingOut(
            batter=JANE,
            out_type=OutType.GROUNDOUT,
            fielder=EntityReference("Bo K"),
            runners=(RunnerAdvance(ANN, Base.HOME),),
        )
        assert event.unparse() == text

    def test_double_play(self) -> None:
        assert parse_text("Jane Doe grounds into a double play.", "S1") == DoublePlay(JANE)

    def test_fielders_choice(self) -> None:
        assert parse_text("Jane Doe reaches on a fielder's choice. Bo Kim out at second.", "S1") == FieldersChoice(
            batter=JANE, runner_out=BO, base=Base.SECOND
        )

    def test_sacrifice_fly(self) -> None:
        assert parse_text("Jane Doe hits a sacrifice fly to Bo Kim. Ann Lee scores!", "S1") == SacrificeFly(
            batter=JANE, fielder=BO, runners=(RunnerAdvance(ANN, Base.HOME),)
        )


class TestBaserunning:
    def test_stolen_base(self) -> None:
        assert parse_text("Bo Kim steals home!", "S1") == StolenBase(BO, Base.HOME)

    def test_cannot_steal_first(self) -> None:
        assert isinstance(parse_text("Bo Kim steals first!", "S1"), UnparsedEvent)

    def test_caught_stealing(self) -> None:
        assert parse_text("Bo Kim is caught stealing third.", "S1") == CaughtStealing(BO, Base.THIRD)

    def test_wild_pitch(self) -> None:
        assert parse_text("Wild pitch!", "S1") == WildPitch()
        assert parse_text("Wild pitch! Bo Kim scores!", "S1") == WildPitch(runners=(RunnerAdvance(BO, Base.HOME),))

    def test_run_scored(self) -> None:
        assert parse_text("Bo Kim scores!", "S1") == RunScored(BO)


class TestRosterAndFlavour:
    def test_substitution(self) -> None:
        assert parse_text("🐉 Dragons substitution: Ann Lee replaces Bo Kim.", "S1") == Substitution(
            team=EmojiTeam("🐉", "Dragons"), incoming=ANN, outgoing=BO
        )

    def test_injury(self) -> None:
        assert parse_text("Bo Kim is injured and leaves the game.", "S1") == Injury(BO)

    def test_announcement_keeps_message(self) -> None:
        assert parse_text("ANNOUNCEMENT: Free hot dogs!", "S1") == Announcement("Free hot dogs!")

    def test_falling_star_every_season(self) -> None:
        for season in ("S1", "S2", "S3"):
            assert parse_text("Bo Kim was hit by a Falling Star!", season) == WeatherEffect(
                WeatherKind.FALLING_STARS, BO
            )


class TestSeasonScoping:
    def test_rain_delay_unparsed_in_s1(self) -> None:
        assert parse_text("Rain delay.", "S1") == UnparsedEvent(text="Rain delay.", season="S1", end=11)

    def test_rain_delay_in_s2(self) -> None:
        assert parse_text("Rain delay.", "S2") == WeatherEffect(WeatherKind.RAIN)

    def test_fog_from_s2(self) -> None:
        assert isinstance(parse_text("Bo Kim is lost in the fog.", "S1"), UnparsedEvent)
        assert parse_text("Bo Kim is lost in the fog.", "S3") == WeatherEffect(WeatherKind.FOG, BO)

    def test_pitched_plays_from_s3(self) -> None:
        text = "95.1 MPH Slider. John Smith strikes out looking."
        assert isinstance(parse_text(text, "S2"), UnparsedEvent)
        assert parse_text(text, "S3") == Strikeout(
            batter=EntityReference("John Smith"), swinging=False, pitch=Pitch(95.1, PitchType.SLIDER)
        )

    def test_pitched_home_run(self) -> None:
        assert parse_text("101.2 MPH Fastball. Jane Doe hits a 380-foot home run!", "S3") == Hit(
            batter=JANE, hit_type=HitType.HOME_RUN, distance=380, pitch=Pitch(101.2, PitchType.FASTBALL)
        )

    def test_pitched_fielding_out_with_runner(self) -> None:
        assert parse_text("90.5 MPH Sweeper. Jane Doe lines out to Bo Kim. Ann Lee scores!", "S3") == FieldingOut(
            batter=JANE,
            out_type=OutType.LINEOUT,
            fielder=BO,
            pitch=Pitch(90.5, PitchType.SWEEPER),
            runners=(RunnerAdvance(ANN, Base.HOME),),
        )

    def test_item_stolen_from_s3(self) -> None:
        text = "Bo Kim steals Jane Doe's Lucky Cap!"
        assert isinstance(parse_text(text, "S2"), UnparsedEvent)
        assert parse_text(text, "S3") == ItemStolen(
            thief=BO, victim=JANE, item=EmojilessItem(ItemType.CAP, prefix=ItemPrefix.LUCKY)
        )

    def test_lightning_from_s3(self) -> None:
        assert parse_text("Bo Kim is struck by lightning!", "S3") == WeatherEffect(WeatherKind.LIGHTNING, BO)
