"""Composed analyses: one matchup, or one league dashboard."""

import logging
from typing import List, Optional

from .config import DEFAULT_SETTINGS, Settings
from .h2h import compute_h2h_stats
from .league import compute_league_stats, league_display_name
from .players import compute_player_metrics, rank_players
from .potential import analyze_match_potential
from .projections import generate_projections
from .trends import analyze_trends, scan_trends
from .types import UNKNOWN_LEAGUE, LeagueReport, MatchRecord, MatchupAnalysis, PlayerTrend

logger = logging.getLogger(__name__)


def build_matchup_analysis(
    matches: List[MatchRecord],
    player1: str,
    player2: str,
    league: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> MatchupAnalysis:
    """
    Build the complete analysis for player1 vs player2.

    The league defaults to the league of player1's most recent match (then
    player2's). Player form is computed across all leagues, the baseline
    over the chosen league only.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    window = settings["window_size"]
    p1_metrics = compute_player_metrics(matches, player1, window)
    p2_metrics = compute_player_metrics(matches, player2, window)

    if league is None:
        latest = p1_metrics or p2_metrics
        league = latest["league"] if latest else UNKNOWN_LEAGUE

    league_stats = compute_league_stats(matches, league, settings["league_window"])
    h2h = compute_h2h_stats(matches, player1, player2, settings["h2h_window"])

    trends: List[PlayerTrend] = []
    for player in (player1, player2):
        trend = analyze_trends(matches, player, league, settings["include_profile_patterns"])
        if trend:
            trends.append(trend)

    analysis: MatchupAnalysis = {
        "player1": player1,
        "player2": player2,
        "league": league,
        "player1_metrics": p1_metrics,
        "player2_metrics": p2_metrics,
        "league_stats": league_stats,
        "h2h": h2h,
        "potential": analyze_match_potential(p1_metrics, p2_metrics),
        "projections": generate_projections(h2h, p1_metrics, p2_metrics, league_stats),
        "trends": trends,
    }
    logger.debug(
        "Matchup %s vs %s (%s): potential=%s, %d projections, %d H2H games",
        player1, player2, league, analysis["potential"], len(analysis["projections"]), h2h["total"],
    )
    return analysis


def build_league_report(
    matches: List[MatchRecord],
    league: str,
    settings: Optional[Settings] = None,
) -> LeagueReport:
    """Baseline, ranked player table and trend scan for one league."""
    if settings is None:
        settings = DEFAULT_SETTINGS
    return {
        "league": league,
        "display_name": league_display_name(league),
        "stats": compute_league_stats(matches, league, settings["league_window"]),
        "rankings": rank_players(
            matches,
            league=league,
            window=settings["window_size"],
            min_games=settings["min_ranking_games"],
        ),
        "trends": scan_trends(
            matches,
            league=league,
            include_profile_patterns=settings["include_profile_patterns"],
        ),
    }
