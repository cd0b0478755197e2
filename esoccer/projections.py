"""Blended market projections from H2H, player form and league baselines."""

from typing import List, Optional, Tuple

from .types import (
    FAVORABLE_LEAGUE_PCT,
    FORM_ONLY_WEIGHT,
    FORM_WEIGHT,
    H2H_WEIGHT,
    HIGH_CONFIDENCE_PROBABILITY,
    LEAGUE_ONLY_WEIGHT,
    LEAGUE_WEIGHT,
    PROJECTION_MIN_PROBABILITY,
    RISK_LEAGUE_PCT,
    RISK_PLAYER_PCT,
    STRONG_H2H_PCT,
    STRONG_PLAYER_PCT,
    H2HStats,
    LeagueStats,
    PlayerMetrics,
    Projection,
)
from .utils import round_half_up

# (market, h2h block, h2h key, player key, league key)
MARKETS: Tuple[Tuple[str, str, str, str, str], ...] = (
    ("Over 0.5 HT", "ht", "over05_pct", "ht_over05_pct", "ht_over05_pct"),
    ("BTTS HT", "ht", "btts_pct", "ht_btts_pct", "ht_btts_pct"),
    ("Over 2.5 FT", "ft", "over25_pct", "ft_over25_pct", "ft_over25_pct"),
    ("BTTS FT", "ft", "btts_pct", "ft_btts_pct", "btts_pct"),
)


def blend_probability(
    h2h_pct: Optional[float],
    p1_pct: float,
    p2_pct: float,
    league_pct: float,
) -> int:
    """
    Weighted market probability, rounded to an integer.

    With H2H data: 40% H2H, 40% player average, 20% league.
    Without (h2h_pct None): 70% player average, 30% league.
    """
    avg_players = (p1_pct + p2_pct) / 2
    if h2h_pct is not None:
        probability = h2h_pct * H2H_WEIGHT + avg_players * FORM_WEIGHT + league_pct * LEAGUE_WEIGHT
    else:
        probability = avg_players * FORM_ONLY_WEIGHT + league_pct * LEAGUE_ONLY_WEIGHT
    return round_half_up(probability)


def project_market(
    market: str,
    h2h_pct: Optional[float],
    p1: PlayerMetrics,
    p2: PlayerMetrics,
    p1_pct: float,
    p2_pct: float,
    league_pct: float,
) -> Optional[Projection]:
    """Projection for one market, None below the emission threshold."""
    probability = blend_probability(h2h_pct, p1_pct, p2_pct, league_pct)
    if probability < PROJECTION_MIN_PROBABILITY:
        return None

    # Players in form on a market the league rarely hits
    risk_factor = p1_pct > RISK_PLAYER_PCT and p2_pct > RISK_PLAYER_PCT and league_pct < RISK_LEAGUE_PCT

    reasoning: List[str] = []
    if h2h_pct is not None and h2h_pct >= STRONG_H2H_PCT:
        reasoning.append(f"Strong H2H history ({h2h_pct:.0f}%)")
    if p1_pct >= STRONG_PLAYER_PCT:
        reasoning.append(f"{p1['player']} hits this line in {p1_pct:.0f}% of recent games")
    if p2_pct >= STRONG_PLAYER_PCT:
        reasoning.append(f"{p2['player']} hits this line in {p2_pct:.0f}% of recent games")
    if risk_factor:
        reasoning.append(f"Caution: league average ({league_pct:.0f}%) is low for this market")
    elif league_pct >= FAVORABLE_LEAGUE_PCT:
        reasoning.append(f"Favorable league context ({league_pct:.0f}%)")

    return {
        "market": market,
        "probability": probability,
        "confidence": "High" if probability >= HIGH_CONFIDENCE_PROBABILITY else "Medium",
        "reasoning": reasoning,
        "risk_factor": risk_factor,
    }


def generate_projections(
    h2h: Optional[H2HStats],
    p1: Optional[PlayerMetrics],
    p2: Optional[PlayerMetrics],
    league: Optional[LeagueStats],
) -> List[Projection]:
    """
    Rank markets by blended probability.

    H2H is only blended in when it has at least one meeting. Returns an
    empty list when either player or the league has no data.
    """
    if not p1 or not p2 or not league:
        return []

    has_h2h = bool(h2h) and h2h["total"] > 0
    projections: List[Projection] = []

    for market, block, h2h_key, player_key, league_key in MARKETS:
        h2h_pct = h2h[block][h2h_key] if has_h2h else None
        projection = project_market(
            market,
            h2h_pct,
            p1,
            p2,
            p1[player_key],
            p2[player_key],
            league[league_key],
        )
        if projection:
            projections.append(projection)

    return sorted(projections, key=lambda p: p["probability"], reverse=True)
