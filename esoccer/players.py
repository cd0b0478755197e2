"""Per-player rolling form metrics and verdicts."""

from typing import Dict, List, Optional

from .types import (
    DEFAULT_WINDOW,
    SNIPER_AVG_GOALS_FT,
    SNIPER_BTTS_PCT,
    SNIPER_FT_OVER25_PCT,
    TROLL_FT_OVER25_PCT,
    TROLL_HT_OVER05_PCT,
    WALL_AVG_GOALS_FT,
    WALL_FT_OVER25_PCT,
    MatchRecord,
    PlayerMetrics,
    Verdict,
)
from .utils import to_avg, to_pct


def plays_in(match: MatchRecord, player: str) -> bool:
    """True when the player is on either side of the match."""
    return match["home_player"] == player or match["away_player"] == player


def player_goals(match: MatchRecord, player: str) -> Dict[str, int]:
    """Scores of a match seen from the player's side."""
    is_home = match["home_player"] == player
    return {
        "ht_self": match["halftime_score_home"] if is_home else match["halftime_score_away"],
        "ht_opp": match["halftime_score_away"] if is_home else match["halftime_score_home"],
        "ft_self": match["score_home"] if is_home else match["score_away"],
        "ft_opp": match["score_away"] if is_home else match["score_home"],
    }


def determine_verdict(metrics: PlayerMetrics) -> Verdict:
    """
    Categorize a player's scoring profile.

    Rules are checked in order and the first match wins:
    sniper, wall, troll, then neutral.
    """
    ft_over25 = metrics["ft_over25_pct"]
    avg_ft = metrics["avg_goals_ft"]

    if (
        ft_over25 >= SNIPER_FT_OVER25_PCT
        and metrics["ft_btts_pct"] >= SNIPER_BTTS_PCT
        and avg_ft >= SNIPER_AVG_GOALS_FT
    ):
        return "sniper"
    if avg_ft <= WALL_AVG_GOALS_FT or ft_over25 <= WALL_FT_OVER25_PCT:
        return "wall"
    if metrics["ht_over05_pct"] <= TROLL_HT_OVER05_PCT and ft_over25 >= TROLL_FT_OVER25_PCT:
        return "troll"
    return "neutral"


def compute_player_metrics(
    matches: List[MatchRecord],
    player: str,
    window: int = DEFAULT_WINDOW,
    league: Optional[str] = None,
) -> Optional[PlayerMetrics]:
    """
    Compute rolling-window metrics for one player.

    Args:
        matches: Canonical records, most recent first
        player: Exact player name
        window: Number of most recent player matches to use
        league: Restrict to one league (default: all leagues)

    Returns:
        Metrics over the first `window` matches of the player, or None
        when the player has no matches.
    """
    player_matches = [
        m for m in matches
        if plays_in(m, player) and (league is None or m["league_name"] == league)
    ]
    recent = player_matches[:max(window, 0)]
    games = len(recent)
    if games == 0:
        return None

    ht_over05 = 0
    ht_over15 = 0
    ht_over25 = 0
    ht_btts = 0
    ft_over05 = 0
    ft_over15 = 0
    ft_over25 = 0
    ft_over35 = 0
    ft_btts = 0
    wins = 0
    total_goals_ht = 0
    total_goals_ft = 0
    total_scored = 0
    total_scored_ht = 0
    total_conceded = 0

    for m in recent:
        goals = player_goals(m, player)
        ht_total = m["total_goals_ht"]
        ft_total = m["total_goals"]

        total_goals_ht += ht_total
        total_goals_ft += ft_total
        total_scored += goals["ft_self"]
        total_scored_ht += goals["ht_self"]
        total_conceded += goals["ft_opp"]

        if ht_total > 0.5:
            ht_over05 += 1
        if ht_total > 1.5:
            ht_over15 += 1
        if ht_total > 2.5:
            ht_over25 += 1
        if m["btts_ht"]:
            ht_btts += 1
        if ft_total > 0.5:
            ft_over05 += 1
        if ft_total > 1.5:
            ft_over15 += 1
        if ft_total > 2.5:
            ft_over25 += 1
        if ft_total > 3.5:
            ft_over35 += 1
        if m["btts"]:
            ft_btts += 1
        if goals["ft_self"] > goals["ft_opp"]:
            wins += 1

    metrics: PlayerMetrics = {
        "player": player,
        "league": recent[0]["league_name"],
        "games": games,
        "ht_over05": ht_over05,
        "ht_over15": ht_over15,
        "ht_over25": ht_over25,
        "ht_btts": ht_btts,
        "ft_over05": ft_over05,
        "ft_over15": ft_over15,
        "ft_over25": ft_over25,
        "ft_over35": ft_over35,
        "ft_btts": ft_btts,
        "wins": wins,
        "avg_goals_ht": to_avg(total_goals_ht, games),
        "avg_goals_ft": to_avg(total_goals_ft, games),
        "avg_scored": to_avg(total_scored, games),
        "avg_scored_ht": to_avg(total_scored_ht, games),
        "avg_conceded": to_avg(total_conceded, games),
        "ht_over05_pct": to_pct(ht_over05, games),
        "ht_over15_pct": to_pct(ht_over15, games),
        "ht_over25_pct": to_pct(ht_over25, games),
        "ht_btts_pct": to_pct(ht_btts, games),
        "ft_over05_pct": to_pct(ft_over05, games),
        "ft_over15_pct": to_pct(ft_over15, games),
        "ft_over25_pct": to_pct(ft_over25, games),
        "ft_over35_pct": to_pct(ft_over35, games),
        "ft_btts_pct": to_pct(ft_btts, games),
        "win_pct": to_pct(wins, games),
        "verdict": "neutral",
    }
    metrics["verdict"] = determine_verdict(metrics)
    return metrics


# Same aggregation, historical name used by the H2H screens
compute_history_player_stats = compute_player_metrics


def list_players(matches: List[MatchRecord], league: Optional[str] = None) -> List[str]:
    """Distinct player names in order of first appearance."""
    seen: Dict[str, None] = {}
    for m in matches:
        if league is not None and m["league_name"] != league:
            continue
        seen.setdefault(m["home_player"], None)
        seen.setdefault(m["away_player"], None)
    return list(seen)


def default_min_games(window: int) -> int:
    """Minimum sample for a ranking row: 5 games for long windows, else 3."""
    return 5 if window > 5 else 3


def rank_players(
    matches: List[MatchRecord],
    league: Optional[str] = None,
    window: int = DEFAULT_WINDOW,
    min_games: Optional[int] = None,
    verdict: Optional[Verdict] = None,
    search: Optional[str] = None,
    sort_key: str = "ft_over25_pct",
) -> List[PlayerMetrics]:
    """
    Metrics table for every player of a league.

    Players below `min_games` are left out. The "troll" verdict filter also
    keeps "wall" players, both being under profiles.
    """
    if min_games is None:
        min_games = default_min_games(window)
    needle = search.lower() if search else ""

    rows: List[PlayerMetrics] = []
    for player in list_players(matches, league):
        if needle and needle not in player.lower():
            continue
        metrics = compute_player_metrics(matches, player, window, league)
        if not metrics or metrics["games"] < min_games:
            continue
        if verdict == "troll" and metrics["verdict"] not in ("troll", "wall"):
            continue
        if verdict is not None and verdict != "troll" and metrics["verdict"] != verdict:
            continue
        rows.append(metrics)

    return sorted(rows, key=lambda r: r.get(sort_key, 0), reverse=True)
