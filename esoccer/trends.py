"""Recent-form pattern detection over a player's last 5 matches."""

import math
from typing import Any, Dict, List, Optional, Tuple

from .players import list_players, player_goals, plays_in
from .types import TREND_WINDOW, FormProfile, MatchRecord, PlayerTrend, Trend, TrendType
from .utils import to_pct

# Patterns read fixed positions of the 5-match window (0 = most recent).
STREAK_LENGTH = 4


def _trend(
    type_: TrendType,
    confidence: int,
    description: str,
    stats: List[Tuple[str, Any]],
) -> Trend:
    return {
        "type": type_,
        "confidence": confidence,
        "description": description,
        "stats": [{"label": label, "value": value} for label, value in stats],
    }


def _std_dev(values: List[int]) -> float:
    """Population standard deviation."""
    if not values:
        return 0.0
    avg = sum(values) / len(values)
    return math.sqrt(sum((v - avg) ** 2 for v in values) / len(values))


def compute_form_profile(player: str, last5: List[MatchRecord]) -> FormProfile:
    """Deep stats of the player over the given (5-match) window."""
    games = [player_goals(m, player) for m in last5]
    n = len(games)

    wins_ht = sum(1 for g in games if g["ht_self"] > g["ht_opp"])
    draws_ht = sum(1 for g in games if g["ht_self"] == g["ht_opp"])
    wins_ft = sum(1 for g in games if g["ft_self"] > g["ft_opp"])
    draws_ft = sum(1 for g in games if g["ft_self"] == g["ft_opp"])

    zero_ht = [g for g in games if g["ht_self"] == 0]
    ft_after_zero_ht = sum(g["ft_self"] for g in zero_ht)

    total_scored = sum(g["ft_self"] for g in games)
    total_conceded = sum(g["ft_opp"] for g in games)

    return {
        "avg_scored_ft": round(total_scored / n, 1) if n else 0.0,
        "avg_conceded_ft": round(total_conceded / n, 1) if n else 0.0,
        "wins_ht": wins_ht,
        "draws_ht": draws_ht,
        "losses_ht": n - wins_ht - draws_ht,
        "wins_ft": wins_ft,
        "draws_ft": draws_ft,
        "losses_ft": n - wins_ft - draws_ft,
        "ht_scoring_rate": to_pct(n - len(zero_ht), n),
        "recovery_rate": round(ft_after_zero_ht / len(zero_ht), 1) if zero_ht else 0.0,
        "clean_sheets": sum(1 for g in games if g["ft_opp"] == 0),
        "volatility": round(_std_dev([m["total_goals"] for m in last5]), 2),
        "dominance": round((total_scored - total_conceded) / n, 1) if n else 0.0,
    }


def _core_patterns(games: List[Dict[str, int]], last5: List[MatchRecord]) -> List[Trend]:
    trends: List[Trend] = []

    # 1. Active streak: HT goal in the 4 latest, broken in the oldest
    recent4 = games[:STREAK_LENGTH]
    oldest = games[STREAK_LENGTH]
    if all(g["ht_self"] > 0 for g in recent4) and oldest["ht_self"] == 0 and oldest["ft_self"] > 0:
        avg_ht = sum(g["ht_self"] for g in recent4) / STREAK_LENGTH
        trends.append(_trend(
            "STREAK_BREAKER_ACTIVE", 95,
            "Active 4-game HT scoring streak after a break",
            [("Avg HT (streak)", f"{avg_ht:.2f}"), ("Break game", f"0 HT / {oldest['ft_self']} FT")],
        ))

    # 2. Just broken: HT goal in games 1-4, none in the latest
    latest = games[0]
    previous4 = games[1:1 + STREAK_LENGTH]
    if all(g["ht_self"] > 0 for g in previous4) and latest["ht_self"] == 0 and latest["ft_self"] > 0:
        avg_ht = sum(g["ht_self"] for g in previous4) / STREAK_LENGTH
        trends.append(_trend(
            "STREAK_JUST_BROKEN", 90,
            "HT scoring pattern broken in the latest game",
            [("Avg HT (previous)", f"{avg_ht:.2f}"), ("Break (latest)", f"0 HT / {latest['ft_self']} FT")],
        ))

    # 3. Led at HT, did not win at FT
    ht_win_ft_fail = sum(1 for g in games if g["ht_self"] > g["ht_opp"] and g["ft_self"] <= g["ft_opp"])
    if ht_win_ft_fail >= 2:
        trends.append(_trend(
            "HT_WIN_FT_FAIL", 85 if ht_win_ft_fail >= 3 else 60,
            "Wins the first half but stumbles at full time",
            [("Occurrences", f"{ht_win_ft_fail}/5")],
        ))

    # 4. Over 2.5 run
    over25 = sum(1 for m in last5 if m["total_goals"] > 2.5)
    if over25 >= 4:
        avg_total = sum(m["total_goals"] for m in last5) / len(last5)
        trends.append(_trend(
            "OVER_25_TRAIN", 90 if over25 == 5 else 75,
            "Goal machine (consistent Over 2.5)",
            [("Over games", f"{over25}/5"), ("Avg total", f"{avg_total:.1f}")],
        ))

    # 5. BTTS run
    btts = sum(1 for m in last5 if m["btts"])
    if btts >= 4:
        trends.append(_trend(
            "BTTS_TRAIN", 90 if btts == 5 else 75,
            "Both teams score almost every game",
            [("BTTS", f"{btts}/5")],
        ))

    return trends


def _profile_patterns(games: List[Dict[str, int]], profile: FormProfile) -> List[Trend]:
    trends: List[Trend] = []

    goals_1st = sum(g["ht_self"] for g in games)
    goals_2nd = sum(g["ft_self"] - g["ht_self"] for g in games)
    goals = goals_1st + goals_2nd

    if goals > 5 and goals_2nd / goals >= 0.7:
        trends.append(_trend(
            "LATE_BLOOMER", 85, "Scores 70%+ of goals in the second half",
            [("2nd half goals", goals_2nd), ("Share", f"{to_pct(goals_2nd, goals)}%")],
        ))
    elif profile["ht_scoring_rate"] <= 40 and profile["recovery_rate"] >= 1.5:
        trends.append(_trend(
            "SLOW_STARTER", 80, "Rarely scores before HT but recovers well",
            [("HT rate", f"{profile['ht_scoring_rate']}%"), ("Recovery", profile["recovery_rate"])],
        ))

    if goals > 5 and goals_1st / goals >= 0.7:
        trends.append(_trend(
            "EARLY_BIRD", 85, "Scores 70%+ of goals in the first half",
            [("1st half goals", goals_1st), ("Share", f"{to_pct(goals_1st, goals)}%")],
        ))
    elif profile["wins_ht"] >= 4:
        trends.append(_trend(
            "HT_DOMINATOR", 88, "Dominates the first half",
            [("HT wins", f"{profile['wins_ht']}/5")],
        ))

    if profile["avg_conceded_ft"] >= 2.5:
        trends.append(_trend(
            "GLASS_DEFENSE", 85, "Fragile defense (concedes a lot)",
            [("Avg conceded", profile["avg_conceded_ft"])],
        ))

    blowouts = sum(1 for g in games if g["ft_self"] - g["ft_opp"] >= 3)
    if blowouts >= 2:
        trends.append(_trend(
            "MERCILESS", 90, "Wins by 3+ goals",
            [("Blowouts", f"{blowouts}/5"), ("Dominance", profile["dominance"])],
        ))

    comebacks = sum(1 for g in games if g["ht_self"] <= g["ht_opp"] and g["ft_self"] > g["ft_opp"])
    if comebacks >= 2:
        trends.append(_trend(
            "COMEBACK_KING", 92, "Wins after not leading at HT",
            [("Comebacks", f"{comebacks}/5")],
        ))

    return trends


def analyze_trends(
    matches: List[MatchRecord],
    player: str,
    league: Optional[str] = None,
    include_profile_patterns: bool = False,
) -> Optional[PlayerTrend]:
    """
    Detect recent-form patterns of a player.

    Only the 5 most recent matches of the player are read, at fixed
    positions. Returns None with fewer than 5 matches or when no pattern
    triggers. Trends are sorted by confidence, highest first.
    """
    player_matches = [m for m in matches if plays_in(m, player)]
    if len(player_matches) < TREND_WINDOW:
        return None

    last5 = player_matches[:TREND_WINDOW]
    games = [player_goals(m, player) for m in last5]
    profile = compute_form_profile(player, last5)

    trends = _core_patterns(games, last5)
    if include_profile_patterns:
        trends.extend(_profile_patterns(games, profile))
    if not trends:
        return None

    trends.sort(key=lambda t: t["confidence"], reverse=True)

    return {
        "player": player,
        "league": league if league is not None else last5[0]["league_name"],
        "last5": last5,
        "stats": profile,
        "trends": trends,
    }


def scan_trends(
    matches: List[MatchRecord],
    players: Optional[List[str]] = None,
    league: Optional[str] = None,
    include_profile_patterns: bool = False,
) -> List[PlayerTrend]:
    """Trends for many players, strongest leading trend first."""
    if players is None:
        players = list_players(matches, league)
    pool = matches if league is None else [m for m in matches if m["league_name"] == league]

    results = []
    for player in players:
        result = analyze_trends(pool, player, league, include_profile_patterns)
        if result:
            results.append(result)

    return sorted(results, key=lambda r: r["trends"][0]["confidence"], reverse=True)
