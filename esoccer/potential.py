"""Match potential classification from two players' form."""

from typing import Optional

from .types import (
    CLASH_AVG_FT_OVER25_PCT,
    CLASH_AVG_GOALS_FT,
    CLASH_AVG_HT_OVER15_PCT,
    MatchPotential,
    PlayerMetrics,
)


def _both(p1: PlayerMetrics, p2: PlayerMetrics, key: str, value: int = 100) -> bool:
    return p1[key] == value and p2[key] == value


def _pair_avg(p1: PlayerMetrics, p2: PlayerMetrics, key: str) -> float:
    return (p1[key] + p2[key]) / 2


def analyze_match_potential(
    p1: Optional[PlayerMetrics],
    p2: Optional[PlayerMetrics],
) -> MatchPotential:
    """
    Classify a pairing as top_clash, top_ht, top_ft or none.

    Tiers are checked strongest first and use exact 100% requirements, so a
    classification is rare by construction. Swapping the players never
    changes the tier.
    """
    if not p1 or not p2:
        return "none"

    if (
        _both(p1, p2, "ht_over05_pct")
        and _pair_avg(p1, p2, "ht_over15_pct") >= CLASH_AVG_HT_OVER15_PCT
        and _both(p1, p2, "ft_btts_pct")
        and _both(p1, p2, "ft_over15_pct")
        and _pair_avg(p1, p2, "ft_over25_pct") >= CLASH_AVG_FT_OVER25_PCT
        and p1["avg_goals_ft"] >= CLASH_AVG_GOALS_FT
        and p2["avg_goals_ft"] >= CLASH_AVG_GOALS_FT
    ):
        return "top_clash"

    if all(_both(p1, p2, key) for key in ("ht_over05_pct", "ht_over15_pct", "ht_over25_pct", "ht_btts_pct")):
        return "top_ht"

    if all(_both(p1, p2, key) for key in ("ft_over15_pct", "ft_over25_pct", "ft_btts_pct")):
        return "top_ft"

    return "none"


def is_super_clash(p1: Optional[PlayerMetrics], p2: Optional[PlayerMetrics]) -> bool:
    """Live-game highlight: both players in top clash form."""
    return analyze_match_potential(p1, p2) == "top_clash"
