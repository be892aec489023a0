"""Tests for applying event results to player ratings."""

import pytest

from oppr.models import Player, PlayerResult
from oppr.ranking import (
    EloRating,
    EloRatingSystem,
    GlickoRating,
    GlickoRatingSystem,
    OpenSkillRatingSystem,
    current_rating,
    get_player_rating_systems,
    get_primary_rating,
    has_rating,
    update_tournament_ratings,
)


def make_results(count, event_count=0):
    return [
        PlayerResult(player=Player(id=f"p{i}", event_count=event_count), position=i + 1)
        for i in range(count)
    ]


class TestUpdateTournamentRatings:
    """Tests for the rating service."""

    def test_glicko_winner_gains(self):
        """Test the winner gains and the last place loses rating."""
        updated = update_tournament_ratings(make_results(4), GlickoRatingSystem())

        assert updated[0].rating > 1300
        assert updated[-1].rating < 1300
        assert all(p.rating_deviation < 200 for p in updated)
        assert isinstance(updated[0].ratings["glicko"], GlickoRating)

    def test_event_count_and_rated_flag(self):
        """Test event count increments and the fifth event makes a player rated."""
        updated = update_tournament_ratings(make_results(3, event_count=4), GlickoRatingSystem())

        assert all(p.event_count == 5 for p in updated)
        assert all(p.is_rated for p in updated)

    def test_input_order_preserved(self):
        """Test players come back in the order given."""
        results = list(reversed(make_results(4)))
        updated = update_tournament_ratings(results, GlickoRatingSystem())
        assert [p.id for p in updated] == ["p3", "p2", "p1", "p0"]
        assert updated[-1].rating > updated[0].rating

    def test_opted_out_unchanged(self):
        """Test opted-out players are returned untouched."""
        results = make_results(4)
        results[1] = results[1].model_copy(update={"opted_out": True})
        updated = update_tournament_ratings(results, GlickoRatingSystem())

        assert updated[1] is results[1].player
        assert updated[0].event_count == 1

    def test_inputs_not_mutated(self):
        """Test the input players keep their ratings."""
        results = make_results(3)
        update_tournament_ratings(results, GlickoRatingSystem())
        assert all(r.player.rating == 1300 and r.player.ratings == {} for r in results)

    def test_existing_rating_used(self):
        """Test a stored rating is the starting point."""
        strong = Player(id="s", ratings={"elo": EloRating(value=1800)})
        results = [
            PlayerResult(player=strong, position=1),
            PlayerResult(player=Player(id="w"), position=2),
        ]
        updated = update_tournament_ratings(results, EloRatingSystem())

        strong_after = updated[0].ratings["elo"].value
        assert 1800 < strong_after < 1816
        assert updated[1].ratings["elo"].value == pytest.approx(1500 - (strong_after - 1800))

    def test_elo_keeps_deviation(self):
        """Test systems without a deviation leave rating_deviation alone."""
        updated = update_tournament_ratings(make_results(2), EloRatingSystem())
        assert all(p.rating_deviation == 200 for p in updated)

    def test_glicko_starts_from_player_rating(self):
        """Test Glicko seeds from Player.rating and rating_deviation."""
        results = [
            PlayerResult(player=Player(id=pid, rating=1800, rating_deviation=80), position=pos)
            for pos, pid in ((1, "a"), (2, "b"))
        ]
        updated = update_tournament_ratings(results, GlickoRatingSystem())

        assert 1800 < updated[0].rating < 1801
        assert 1799 < updated[1].rating < 1800
        assert all(p.rating_deviation < 80 for p in updated)
        assert updated[0].ratings["glicko"].value == updated[0].rating

    def test_glicko_mapping_rating(self):
        """Test JSON-shaped rating data is converted before rating."""
        veteran = Player.model_validate(
            {"id": "v", "ratings": {"glicko": {"value": 1650, "ratingDeviation": 75}}}
        )
        results = [
            PlayerResult(player=veteran, position=1),
            PlayerResult(player=Player(id="n"), position=2),
        ]
        updated = update_tournament_ratings(results, GlickoRatingSystem())

        stored = updated[0].ratings["glicko"]
        assert isinstance(stored, GlickoRating)
        assert 1650 < stored.value < 1651
        assert stored.deviation < 75
        assert updated[0].rating == stored.value

    def test_other_systems_leave_primary_rating(self):
        """Test non-Glicko systems only touch their own rating entry."""
        updated = update_tournament_ratings(make_results(2), EloRatingSystem())

        assert all(p.rating == 1300 for p in updated)
        assert updated[0].ratings["elo"].value == pytest.approx(1516)
        assert updated[1].ratings["elo"].value == pytest.approx(1484)

    def test_openskill(self):
        """Test any registered strategy can drive the update."""
        updated = update_tournament_ratings(make_results(3), OpenSkillRatingSystem())
        assert updated[0].ratings["openskill"].mu > updated[2].ratings["openskill"].mu

    def test_opponent_range(self):
        """Test the opponent range limits simulated games."""
        results = make_results(5)
        narrow = update_tournament_ratings(results, EloRatingSystem(), opponents_range=1)
        wide = update_tournament_ratings(results, EloRatingSystem())
        assert narrow[0].ratings["elo"].value == pytest.approx(1516)
        assert wide[0].ratings["elo"].value == pytest.approx(1564)


class TestCurrentRating:
    """Tests for the starting rating of an event."""

    def test_mapping_converted(self):
        """Test a mapping becomes the system's rating type."""
        player = Player(id="p", ratings={"elo": {"value": 1700}})
        assert current_rating(player, EloRatingSystem()) == EloRating(value=1700)

    def test_snake_case_deviation(self):
        """Test rating_deviation is read as the Glicko deviation."""
        player = Player(id="p", ratings={"glicko": {"value": 1500, "rating_deviation": 90}})
        rating = current_rating(player, GlickoRatingSystem())
        assert rating == GlickoRating(value=1500, deviation=90)

    def test_fresh_for_other_systems(self):
        """Test systems other than Glicko ignore Player.rating."""
        player = Player(id="p", rating=1900)
        assert current_rating(player, EloRatingSystem()).value == 1500


class TestPlayerRatingHelpers:
    """Tests for reading stored ratings."""

    def test_primary_rating_from_object(self):
        """Test rating objects expose their value."""
        ratings = {"glicko": GlickoRating(value=1410.5)}
        assert get_primary_rating(ratings, "glicko") == 1410.5

    def test_primary_rating_from_mapping(self):
        """Test mappings with a value key are accepted."""
        assert get_primary_rating({"glicko": {"value": 1500}}, "glicko") == 1500

    def test_missing_rating(self):
        """Test missing systems give None."""
        assert get_primary_rating({}, "glicko") is None
        assert get_primary_rating(None, "glicko") is None
        assert not has_rating({"glicko": None}, "glicko")

    def test_rating_systems(self):
        """Test ids with rating data are listed."""
        ratings = {"glicko": GlickoRating(value=1300), "elo": None, "openskill": {"value": 3}}
        assert get_player_rating_systems(ratings) == ["glicko", "openskill"]
