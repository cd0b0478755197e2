"""Head-to-head matchup computations."""

from typing import List, Optional

from .types import H2HStats, MatchRecord
from .utils import to_avg, to_pct


def is_h2h_match(match: MatchRecord, player1: str, player2: str) -> bool:
    """True when the two players faced each other, on either side."""
    return (
        (match["home_player"] == player1 and match["away_player"] == player2)
        or (match["home_player"] == player2 and match["away_player"] == player1)
    )


def compute_h2h_stats(
    matches: List[MatchRecord],
    player1: str,
    player2: str,
    window: Optional[int] = None,
) -> H2HStats:
    """
    Compute win attribution and goal markets between two players.

    Args:
        matches: Canonical records, most recent first
        player1: First player (the "player1_*" fields)
        player2: Second player
        window: Only use the N most recent meetings (default: all)

    Returns:
        H2H stats. With no meetings every count and percentage is 0.
    """
    h2h_matches = [m for m in matches if is_h2h_match(m, player1, player2)]
    if window is not None:
        h2h_matches = h2h_matches[:max(window, 0)]
    total = len(h2h_matches)

    p1_wins = 0
    p2_wins = 0
    draws = 0
    ht_over05 = 0
    ht_over15 = 0
    ht_btts = 0
    ft_over15 = 0
    ft_over25 = 0
    ft_over35 = 0
    ft_btts = 0
    total_goals_ht = 0
    total_goals_ft = 0

    for m in h2h_matches:
        # Winner, whichever side player1 took
        is_p1_home = m["home_player"] == player1
        p1_score = m["score_home"] if is_p1_home else m["score_away"]
        p2_score = m["score_away"] if is_p1_home else m["score_home"]

        if p1_score > p2_score:
            p1_wins += 1
        elif p2_score > p1_score:
            p2_wins += 1
        else:
            draws += 1

        total_ht = m["total_goals_ht"]
        total_ft = m["total_goals"]
        total_goals_ht += total_ht
        total_goals_ft += total_ft

        if total_ht > 0.5:
            ht_over05 += 1
        if total_ht > 1.5:
            ht_over15 += 1
        if m["btts_ht"]:
            ht_btts += 1

        if total_ft > 1.5:
            ft_over15 += 1
        if total_ft > 2.5:
            ft_over25 += 1
        if total_ft > 3.5:
            ft_over35 += 1
        if m["btts"]:
            ft_btts += 1

    return {
        "player1": player1,
        "player2": player2,
        "total": total,
        "player1_wins": p1_wins,
        "player2_wins": p2_wins,
        "draws": draws,
        "player1_win_percentage": to_pct(p1_wins, total),
        "player2_win_percentage": to_pct(p2_wins, total),
        "draw_percentage": to_pct(draws, total),
        "avg_goals_ht": to_avg(total_goals_ht, total),
        "avg_goals_ft": to_avg(total_goals_ft, total),
        "ht": {
            "over05_pct": to_pct(ht_over05, total),
            "over15_pct": to_pct(ht_over15, total),
            "btts_pct": to_pct(ht_btts, total),
        },
        "ft": {
            "over15_pct": to_pct(ft_over15, total),
            "over25_pct": to_pct(ft_over25, total),
            "over35_pct": to_pct(ft_over35, total),
            "btts_pct": to_pct(ft_btts, total),
        },
    }
