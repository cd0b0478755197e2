"""Type definitions and tuning constants for e-soccer analytics."""

from typing import List, Literal, Optional, Union
from typing_extensions import TypedDict


# === Constants ===

UNKNOWN_PLAYER = "Desconhecido"
UNKNOWN_LEAGUE = "Liga Desconhecida"

DEFAULT_WINDOW = 10
TREND_WINDOW = 5

# Verdict thresholds
SNIPER_FT_OVER25_PCT = 80
SNIPER_BTTS_PCT = 75
SNIPER_AVG_GOALS_FT = 3.0
WALL_AVG_GOALS_FT = 2.2
WALL_FT_OVER25_PCT = 40
TROLL_HT_OVER05_PCT = 60
TROLL_FT_OVER25_PCT = 70

# Match potential thresholds
CLASH_AVG_HT_OVER15_PCT = 95
CLASH_AVG_FT_OVER25_PCT = 95
CLASH_AVG_GOALS_FT = 2.7

# Projection blending
H2H_WEIGHT = 0.4
FORM_WEIGHT = 0.4
LEAGUE_WEIGHT = 0.2
FORM_ONLY_WEIGHT = 0.7
LEAGUE_ONLY_WEIGHT = 0.3
PROJECTION_MIN_PROBABILITY = 65
HIGH_CONFIDENCE_PROBABILITY = 80
RISK_PLAYER_PCT = 70
RISK_LEAGUE_PCT = 55
STRONG_H2H_PCT = 80
STRONG_PLAYER_PCT = 75
FAVORABLE_LEAGUE_PCT = 70


# === Records ===


class MatchRecord(TypedDict):
    """Canonical finished match."""
    home_player: str
    away_player: str
    league_name: str
    played_at: str
    score_home: int
    score_away: int
    halftime_score_home: int
    halftime_score_away: int
    # Derived at normalization
    total_goals: int
    total_goals_ht: int
    btts: bool
    btts_ht: bool


Verdict = Literal["sniper", "troll", "wall", "neutral"]


class PlayerMetrics(TypedDict):
    """Rolling-window form of one player."""
    player: str
    league: str
    games: int
    ht_over05: int
    ht_over15: int
    ht_over25: int
    ht_btts: int
    ft_over05: int
    ft_over15: int
    ft_over25: int
    ft_over35: int
    ft_btts: int
    wins: int
    avg_goals_ht: float  # Total goals in match
    avg_goals_ft: float  # Total goals in match
    avg_scored: float
    avg_scored_ht: float
    avg_conceded: float
    ht_over05_pct: int
    ht_over15_pct: int
    ht_over25_pct: int
    ht_btts_pct: int
    ft_over05_pct: int
    ft_over15_pct: int
    ft_over25_pct: int
    ft_over35_pct: int
    ft_btts_pct: int
    win_pct: int
    verdict: Verdict


HistoryPlayerStats = PlayerMetrics


class LeagueStats(TypedDict):
    """Rolling-window baseline of one league."""
    name: str
    games: int
    avg_goals_ht: float
    avg_goals_ft: float
    ht_over05_pct: int
    ht_over15_pct: int
    ht_btts_pct: int
    ft_over25_pct: int
    btts_pct: int


class H2HHalfTime(TypedDict):
    over05_pct: int
    over15_pct: int
    btts_pct: int


class H2HFullTime(TypedDict):
    over15_pct: int
    over25_pct: int
    over35_pct: int
    btts_pct: int


class H2HStats(TypedDict):
    """Head-to-head record between two players."""
    player1: str
    player2: str
    total: int
    player1_wins: int
    player2_wins: int
    draws: int
    player1_win_percentage: int
    player2_win_percentage: int
    draw_percentage: int
    avg_goals_ht: float
    avg_goals_ft: float
    ht: H2HHalfTime
    ft: H2HFullTime


MatchPotential = Literal["top_clash", "top_ht", "top_ft", "none"]

Confidence = Literal["High", "Medium", "Low"]


class Projection(TypedDict):
    """Blended probability for one market."""
    market: str
    probability: int  # 0-100
    confidence: Confidence
    reasoning: List[str]
    risk_factor: bool


TrendType = Literal[
    "STREAK_BREAKER_ACTIVE",
    "STREAK_JUST_BROKEN",
    "HT_WIN_FT_FAIL",
    "OVER_25_TRAIN",
    "BTTS_TRAIN",
    # Profile patterns
    "LATE_BLOOMER",
    "SLOW_STARTER",
    "EARLY_BIRD",
    "HT_DOMINATOR",
    "GLASS_DEFENSE",
    "MERCILESS",
    "COMEBACK_KING",
]


class TrendStat(TypedDict):
    label: str
    value: Union[str, int, float]


class Trend(TypedDict):
    type: TrendType
    confidence: int
    description: str
    stats: List[TrendStat]


class FormProfile(TypedDict):
    """Deep stats over the last 5 matches of a player."""
    avg_scored_ft: float
    avg_conceded_ft: float
    wins_ht: int
    draws_ht: int
    losses_ht: int
    wins_ft: int
    draws_ft: int
    losses_ft: int
    ht_scoring_rate: int
    recovery_rate: float  # FT goals per game without a HT goal
    clean_sheets: int
    volatility: float  # Std dev of total goals
    dominance: float  # Avg goal difference


class PlayerTrend(TypedDict):
    player: str
    league: str
    last5: List[MatchRecord]
    stats: FormProfile
    trends: List[Trend]


class MatchupAnalysis(TypedDict):
    """Complete matchup analysis output."""
    player1: str
    player2: str
    league: str
    player1_metrics: Optional[PlayerMetrics]
    player2_metrics: Optional[PlayerMetrics]
    league_stats: Optional[LeagueStats]
    h2h: H2HStats
    potential: MatchPotential
    projections: List[Projection]
    trends: List[PlayerTrend]


class LeagueReport(TypedDict):
    """League dashboard: baseline, player table and trend scan."""
    league: str
    display_name: str
    stats: Optional[LeagueStats]
    rankings: List[PlayerMetrics]
    trends: List[PlayerTrend]
