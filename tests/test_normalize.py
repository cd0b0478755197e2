"""Tests for esoccer/normalize.py."""

import logging

import pytest

from esoccer.normalize import (
    build_match_record,
    normalize_match,
    normalize_matches,
    parse_goals,
)
from esoccer.types import UNKNOWN_LEAGUE, UNKNOWN_PLAYER


class TestParseGoals:
    """Tests for parse_goals function."""

    @pytest.mark.parametrize("value,expected", [
        (3, 3),
        ("2", 2),
        ("4.0", 4),
        (1.9, 1),
        (None, 0),
        ("", 0),
        ("abc", 0),
        (-1, 0),
        (float("nan"), 0),
        (float("inf"), 0),
        ({"home": 1}, 0),
        (True, 0),
        (10 ** 400, 0),
    ])
    def test_coerces_values(self, value, expected):
        """Malformed values become 0, valid ones non-negative ints."""
        assert parse_goals(value) == expected


class TestNormalizeMatch:
    """Tests for normalize_match function."""

    def test_legacy_flat_schema(self):
        """Snake-case flat payload maps directly."""
        raw = {
            "home_player": "Boris",
            "away_player": "Kray",
            "league_name": "Esoccer Battle - 8 mins play",
            "score_home": 3,
            "score_away": 2,
            "halftime_score_home": 1,
            "halftime_score_away": 1,
            "data_realizacao": "2026-10-01T10:00:00Z",
        }
        result = normalize_match(raw)

        assert result["home_player"] == "Boris"
        assert result["away_player"] == "Kray"
        assert result["league_name"] == "Esoccer Battle - 8 mins play"
        assert result["played_at"] == "2026-10-01T10:00:00Z"
        assert result["score_home"] == 3
        assert result["score_away"] == 2
        assert result["total_goals"] == 5
        assert result["total_goals_ht"] == 2
        assert result["btts"] is True
        assert result["btts_ht"] is True

    def test_camel_case_variants(self):
        """camelCase and capitalized aliases are recognized."""
        raw = {
            "homePlayer": "Boris",
            "AwayPlayer": "Kray",
            "LeagueName": "GT",
            "scoreHome": "4",
            "scoreAway": "0",
            "scoreHTHome": 2,
            "ht_away": 0,
            "date": "2026-10-01",
        }
        result = normalize_match(raw)

        assert result["home_player"] == "Boris"
        assert result["away_player"] == "Kray"
        assert result["league_name"] == "GT"
        assert result["score_home"] == 4
        assert result["score_away"] == 0
        assert result["halftime_score_home"] == 2
        assert result["btts"] is False
        assert result["played_at"] == "2026-10-01"

    def test_nested_event_schema(self):
        """Nested event payload (home.name, score.home, scoreHT.home)."""
        raw = {
            "sport": "esoccer",
            "home": {"id": 11, "name": "Boris"},
            "away": {"id": 12, "name": "Kray"},
            "competition": {"id": 5, "name": "Esoccer GT Leagues - 12 mins play"},
            "score": {"home": 1, "away": 3},
            "scoreHT": {"home": 0, "away": 2},
            "startTime": "2026-10-02T12:00:00Z",
        }
        result = normalize_match(raw)

        assert result["home_player"] == "Boris"
        assert result["away_player"] == "Kray"
        assert result["league_name"] == "Esoccer GT Leagues - 12 mins play"
        assert result["score_home"] == 1
        assert result["score_away"] == 3
        assert result["halftime_score_home"] == 0
        assert result["halftime_score_away"] == 2
        assert result["played_at"] == "2026-10-02T12:00:00Z"

    def test_search_api_schema(self):
        """player_home_name / total_goals_home / ht_goals_home payload."""
        raw = {
            "player_home_name": "Boris",
            "player_away_name": "Kray",
            "league_name": "Battle",
            "total_goals_home": 2,
            "total_goals_away": 2,
            "ht_goals_home": 1,
            "ht_goals_away": 0,
            "time": "2026-10-03 08:00",
        }
        result = normalize_match(raw)

        assert result["home_player"] == "Boris"
        assert result["score_away"] == 2
        assert result["halftime_score_home"] == 1
        assert result["played_at"] == "2026-10-03 08:00"

    def test_first_alias_wins(self):
        """Canonical key takes priority over later aliases."""
        raw = {"score_home": 1, "scoreHome": 5, "score": {"home": 9}}
        assert normalize_match(raw)["score_home"] == 1

    def test_none_value_falls_through(self):
        """A None-valued alias is skipped for the next one."""
        raw = {"score_home": None, "scoreHome": 4}
        assert normalize_match(raw)["score_home"] == 4

    def test_blank_name_falls_through(self):
        """Blank names are treated as absent."""
        raw = {"home_player": "  ", "homePlayer": "Boris"}
        assert normalize_match(raw)["home_player"] == "Boris"

    def test_defaults_for_missing_fields(self):
        """Missing names get sentinels, missing scores get 0."""
        result = normalize_match({})

        assert result["home_player"] == UNKNOWN_PLAYER
        assert result["away_player"] == UNKNOWN_PLAYER
        assert result["league_name"] == UNKNOWN_LEAGUE
        assert result["score_home"] == 0
        assert result["halftime_score_away"] == 0
        assert result["played_at"] == ""
        assert result["total_goals"] == 0

    def test_league_object_uses_nested_name(self):
        """A league given as an object resolves through league.name."""
        raw = {"league": {"id": "1", "name": "Battle"}}
        assert normalize_match(raw)["league_name"] == "Battle"

    def test_ht_above_ft_is_kept(self):
        """Inconsistent half-time scores are not corrected."""
        raw = {"score_home": 1, "score_away": 0, "halftime_score_home": 3, "halftime_score_away": 0}
        result = normalize_match(raw)

        assert result["halftime_score_home"] == 3
        assert result["score_home"] == 1
        assert result["total_goals_ht"] == 3

    def test_oversized_score_defaults_to_zero(self):
        """Integers beyond float range are malformed, not fatal."""
        result = normalize_match({"home_player": "A", "away_player": "B", "score_home": 10 ** 400, "score_away": 1})

        assert result["score_home"] == 0
        assert result["score_away"] == 1
        assert result["total_goals"] == 1

    def test_numeric_timestamp(self):
        """Epoch timestamps are kept as strings."""
        assert normalize_match({"time": 1760000000})["played_at"] == "1760000000"

    @pytest.mark.parametrize("raw", [None, "match", 42, ["a", "b"]])
    def test_non_mapping_is_discarded(self, raw):
        """Non-mapping payloads return None instead of raising."""
        assert normalize_match(raw) is None

    def test_canonical_record_is_unchanged(self):
        """Normalizing an already canonical record is a no-op."""
        record = build_match_record("Boris", "Kray", "Battle", 2, 1, 1, 0, "2026-10-01")
        assert normalize_match(record) == record

    def test_does_not_mutate_input(self):
        """Raw payload is left untouched."""
        raw = {"homePlayer": "Boris", "score": {"home": "2", "away": 1}}
        snapshot = {"homePlayer": "Boris", "score": {"home": "2", "away": 1}}
        normalize_match(raw)
        assert raw == snapshot


class TestNormalizeMatches:
    """Tests for normalize_matches function."""

    def test_drops_discarded_and_keeps_order(self):
        """Invalid payloads are dropped, order preserved."""
        raws = [
            {"home_player": "A", "away_player": "B"},
            None,
            {"home_player": "C", "away_player": "D"},
        ]
        result = normalize_matches(raws)

        assert [r["home_player"] for r in result] == ["A", "C"]

    def test_oversized_score_does_not_abort_batch(self):
        result = normalize_matches([{"score_home": 10 ** 400}, {"home_player": "A", "score_home": 2}])

        assert len(result) == 2
        assert result[0]["score_home"] == 0
        assert result[1]["score_home"] == 2

    def test_logs_discard_count(self, caplog):
        """Discarded payloads are reported at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="esoccer.normalize"):
            normalize_matches([None, "x", {"home_player": "A"}])
        assert "Discarded 2" in caplog.text

    def test_empty_input(self):
        """Empty or None collections return an empty list."""
        assert normalize_matches([]) == []
        assert normalize_matches(None) == []
