"""League-wide baselines."""

from typing import Dict, List, Optional

from .types import DEFAULT_WINDOW, LeagueStats, MatchRecord
from .utils import to_avg, to_pct

LEAGUE_DISPLAY_NAMES: Dict[str, str] = {
    "Esoccer Battle - 8 mins play": "Battle 8m",
    "Esoccer Battle Volta - 6 mins play": "Battle Volta 6m",
    "Esoccer GT Leagues - 12 mins play": "GT Leagues 12m",
    "Esoccer GT Leagues â€“ 12 mins play": "GT Leagues 12m",  # mis-decoded en dash upstream
    "Esoccer H2H GG League - 8 mins play": "H2H GG 8m",
    "Esoccer Adriatic League - 10 mins play": "Adriatic 10m",
}


def league_display_name(league: str) -> str:
    """Short label for a known league, the league name itself otherwise."""
    return LEAGUE_DISPLAY_NAMES.get(league, league)


def list_leagues(matches: List[MatchRecord]) -> List[str]:
    """Distinct league names in order of first appearance."""
    seen: Dict[str, None] = {}
    for m in matches:
        seen.setdefault(m["league_name"], None)
    return list(seen)


def compute_league_stats(
    matches: List[MatchRecord],
    league: str,
    window: int = DEFAULT_WINDOW,
) -> Optional[LeagueStats]:
    """Baseline over the `window` most recent matches of a league, None if empty."""
    league_matches = [m for m in matches if m["league_name"] == league][:max(window, 0)]
    games = len(league_matches)
    if games == 0:
        return None

    total_goals_ht = 0
    total_goals_ft = 0
    ht_over05 = 0
    ht_over15 = 0
    ht_btts = 0
    ft_over25 = 0
    btts = 0

    for m in league_matches:
        total_goals_ht += m["total_goals_ht"]
        total_goals_ft += m["total_goals"]
        if m["total_goals_ht"] > 0.5:
            ht_over05 += 1
        if m["total_goals_ht"] > 1.5:
            ht_over15 += 1
        if m["btts_ht"]:
            ht_btts += 1
        if m["total_goals"] > 2.5:
            ft_over25 += 1
        if m["btts"]:
            btts += 1

    return {
        "name": league,
        "games": games,
        "avg_goals_ht": to_avg(total_goals_ht, games),
        "avg_goals_ft": to_avg(total_goals_ft, games),
        "ht_over05_pct": to_pct(ht_over05, games),
        "ht_over15_pct": to_pct(ht_over15, games),
        "ht_btts_pct": to_pct(ht_btts, games),
        "ft_over25_pct": to_pct(ft_over25, games),
        "btts_pct": to_pct(btts, games),
    }


def compute_league_overview(
    matches: List[MatchRecord],
    window: int = DEFAULT_WINDOW,
) -> List[LeagueStats]:
    """Stats for every league, hottest (highest Over 2.5 FT rate) first."""
    overview = []
    for league in list_leagues(matches):
        stats = compute_league_stats(matches, league, window)
        if stats:
            overview.append(stats)
    return sorted(overview, key=lambda s: s["ft_over25_pct"], reverse=True)
