"""Tests for CSV player import."""

import pytest

from oppr.core.errors import ValidationError
from oppr.importers import parse_player_csv
from oppr.ranking.glicko import GlickoRating

HEADER = '"Name","ID","Rank","Rating","Base points","Rating points","Rank points","Points"'

VALID_CSV = f"""{HEADER}
"Alice Johnson",1001,1000,1500.5,0.5,0.1,0.05,0.65
"Bob Smith",1002,2000,1400.0,0.5,0,0,0.5
"Charlie Davis",1003,3000,1300.25,0.5,0.05,0,0.55"""


class TestWithRankingData:
    """Tests for imports that read ranking and rating columns."""

    def test_parses_players(self):
        """Test players, names and rating data are read."""
        parsed = parse_player_csv(VALID_CSV)

        assert [p.name for p in parsed] == ["Alice Johnson", "Bob Smith", "Charlie Davis"]
        alice = parsed[0].player
        assert alice.id == "1001"
        assert alice.rating == 1500.5
        assert alice.ranking == 1000
        assert alice.is_rated
        assert alice.event_count == 5
        assert alice.rating_deviation == 100
        assert alice.ratings["glicko"] == GlickoRating(value=1500.5, deviation=100)

    def test_trailing_blank_lines(self):
        """Test blank lines are ignored."""
        assert len(parse_player_csv(VALID_CSV + "\n\n\n")) == 3

    def test_whitespace_trimmed(self):
        """Test fields are stripped."""
        text = '"Name","ID","Rank","Rating"\n"  Alice  ",  1001  ,  10  ,  1500  '
        parsed = parse_player_csv(text)
        assert parsed[0].name == "Alice"
        assert parsed[0].player.id == "1001"

    def test_quoted_fields(self):
        """Test quoted names may hold commas and doubled quotes."""
        text = f'{HEADER}\n"Smith, ""Pinball"" Bob",1,5,1600'
        assert parse_player_csv(text)[0].name == 'Smith, "Pinball" Bob'

    @pytest.mark.parametrize(
        ("row", "message"),
        [
            ('"",1001,1000,1500', "Name is required"),
            ('"Alice",,1000,1500', "Player ID is required"),
            ('"Alice",1001,,1500', "Ranking is required"),
            ('"Alice",1001,1000,', "Rating is required"),
            ('"Alice",1001,abc,1500', "Invalid ranking value: abc"),
            ('"Alice",1001,1000,xyz', "Invalid rating value: xyz"),
            ('"Alice",1001,-1,1500', "Invalid ranking value"),
            ('"Alice",1001,1000,-5', "Invalid rating value"),
            ('"Alice",1001,inf,1500', "Invalid ranking value: inf"),
            ('"Alice",1001,1000,inf', "Invalid rating value: inf"),
            ('"Alice",1001,1000', "Expected at least 4 columns, got 3"),
        ],
    )
    def test_row_errors(self, row, message):
        """Test bad rows raise with the file line number."""
        with pytest.raises(ValidationError, match=f"^Line 2: {message}") as exc_info:
            parse_player_csv(f"{HEADER}\n{row}")
        assert exc_info.value.line == 2

    def test_duplicate_ids(self):
        """Test duplicate ids report the second occurrence."""
        text = f'{HEADER}\n"A",1001,1,1500\n"B",1001,2,1400'
        with pytest.raises(ValidationError, match="Line 3: Duplicate player ID: 1001"):
            parse_player_csv(text)

    def test_line_numbers_count_blank_lines(self):
        """Test line numbers refer to the file, blank lines included."""
        text = f'{HEADER}\n"A",1001,1,1500\n\n"B",,2,1400'
        with pytest.raises(ValidationError, match="^Line 4:"):
            parse_player_csv(text)


class TestWithDefaults:
    """Tests for imports that ignore ranking data."""

    def test_defaults(self):
        """Test default rating and ranking are used and players are unrated."""
        parsed = parse_player_csv(VALID_CSV, use_ranking_data=False)
        player = parsed[0].player

        assert player.rating == 1200
        assert player.ranking == 999999
        assert not player.is_rated
        assert player.event_count == 0

    def test_custom_defaults(self):
        """Test custom defaults are applied."""
        parsed = parse_player_csv(
            VALID_CSV, use_ranking_data=False, default_rating=1350, default_ranking=5000
        )
        assert parsed[0].player.rating == 1350
        assert parsed[0].player.ranking == 5000

    def test_bad_ranking_ignored(self):
        """Test ranking columns are not parsed."""
        parsed = parse_player_csv(f'{HEADER}\n"A",1,abc,', use_ranking_data=False)
        assert parsed[0].player.id == "1"


class TestEmptyInput:
    """Tests for files without data."""

    @pytest.mark.parametrize("text", ["", "   \n  \n  "])
    def test_empty(self, text):
        """Test empty input is rejected."""
        with pytest.raises(ValidationError, match="CSV data is empty"):
            parse_player_csv(text)

    @pytest.mark.parametrize("text", [HEADER, HEADER + "\n\n  \n"])
    def test_header_only(self, text):
        """Test a header without rows is rejected."""
        with pytest.raises(ValidationError, match="CSV contains no data rows"):
            parse_player_csv(text)
