"""Tests for esoccer/potential.py."""

import pytest

from esoccer.potential import analyze_match_potential, is_super_clash


def _make_stats(**overrides) -> dict:
    """Player stats with every classifier field at an unremarkable level."""
    base = {
        "player": "Boris",
        "ht_over05_pct": 80,
        "ht_over15_pct": 60,
        "ht_over25_pct": 20,
        "ht_btts_pct": 40,
        "ft_over15_pct": 80,
        "ft_over25_pct": 60,
        "ft_btts_pct": 60,
        "avg_goals_ft": 2.5,
    }
    base.update(overrides)
    return base


def _clash(**overrides) -> dict:
    stats = {
        "ht_over05_pct": 100,
        "ht_over15_pct": 100,
        "ft_btts_pct": 100,
        "ft_over15_pct": 100,
        "ft_over25_pct": 100,
        "avg_goals_ft": 3.0,
    }
    stats.update(overrides)
    return _make_stats(**stats)


def _top_ht(**overrides) -> dict:
    stats = {
        "ht_over05_pct": 100,
        "ht_over15_pct": 100,
        "ht_over25_pct": 100,
        "ht_btts_pct": 100,
    }
    stats.update(overrides)
    return _make_stats(**stats)


def _top_ft(**overrides) -> dict:
    stats = {"ft_over15_pct": 100, "ft_over25_pct": 100, "ft_btts_pct": 100}
    stats.update(overrides)
    return _make_stats(**stats)


class TestAnalyzeMatchPotential:
    """Tests for analyze_match_potential function."""

    def test_top_clash(self):
        assert analyze_match_potential(_clash(), _clash()) == "top_clash"

    def test_top_clash_uses_pair_averages(self):
        """HT over 1.5 and FT over 2.5 only need a 95 pair average."""
        p1 = _clash(ht_over15_pct=90, ft_over25_pct=90)
        p2 = _clash()
        assert analyze_match_potential(p1, p2) == "top_clash"

    def test_top_clash_average_below_95(self):
        p1 = _clash(ht_over15_pct=80)
        assert analyze_match_potential(p1, _clash()) != "top_clash"

    def test_top_clash_needs_avg_goals(self):
        p1 = _clash(avg_goals_ft=2.6)
        assert analyze_match_potential(p1, _clash()) != "top_clash"

    def test_top_clash_needs_exact_100(self):
        """99% is not 100%: no tolerance on exact requirements."""
        p1 = _clash(ft_btts_pct=99)
        assert analyze_match_potential(p1, _clash()) == "none"

    def test_top_ht(self):
        """Perfect HT markets without the FT criteria is top_ht."""
        assert analyze_match_potential(_top_ht(), _top_ht()) == "top_ht"

    def test_top_ht_requires_both_players(self):
        assert analyze_match_potential(_top_ht(), _top_ht(ht_btts_pct=80)) == "none"

    def test_top_ft(self):
        assert analyze_match_potential(_top_ft(), _top_ft()) == "top_ft"

    def test_top_ft_requires_every_market(self):
        assert analyze_match_potential(_top_ft(), _top_ft(ft_over25_pct=80)) == "none"

    def test_none(self):
        assert analyze_match_potential(_make_stats(), _make_stats()) == "none"

    def test_missing_player(self):
        assert analyze_match_potential(None, _clash()) == "none"
        assert analyze_match_potential(_clash(), None) == "none"

    @pytest.mark.parametrize("p1,p2", [
        (_clash(ht_over15_pct=90), _clash()),
        (_top_ht(), _top_ht(ht_over25_pct=80)),
        (_top_ft(), _make_stats()),
        (_clash(avg_goals_ft=2.6), _top_ft()),
    ])
    def test_symmetric(self, p1, p2):
        """Swapping the players never changes the tier."""
        assert analyze_match_potential(p1, p2) == analyze_match_potential(p2, p1)


class TestIsSuperClash:
    """Tests for is_super_clash function."""

    def test_true_for_top_clash(self):
        assert is_super_clash(_clash(), _clash()) is True

    def test_false_otherwise(self):
        assert is_super_clash(_top_ht(), _top_ht()) is False
