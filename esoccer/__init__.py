"""E-soccer match analytics: form metrics, H2H, projections and trends."""

from .types import (
    MatchRecord,
    Verdict,
    PlayerMetrics,
    HistoryPlayerStats,
    LeagueStats,
    H2HStats,
    MatchPotential,
    Projection,
    TrendType,
    Trend,
    FormProfile,
    PlayerTrend,
    MatchupAnalysis,
    LeagueReport,
    UNKNOWN_PLAYER,
    UNKNOWN_LEAGUE,
)
from .normalize import (
    build_match_record,
    normalize_match,
    normalize_matches,
)
from .players import (
    compute_player_metrics,
    compute_history_player_stats,
    determine_verdict,
    list_players,
    rank_players,
)
from .league import (
    compute_league_stats,
    compute_league_overview,
    league_display_name,
    list_leagues,
)
from .h2h import compute_h2h_stats
from .potential import (
    analyze_match_potential,
    is_super_clash,
)
from .projections import generate_projections
from .trends import (
    analyze_trends,
    compute_form_profile,
    scan_trends,
)
from .analysis import (
    build_matchup_analysis,
    build_league_report,
)
from .config import (
    Settings,
    DEFAULT_SETTINGS,
    load_settings,
)

__all__ = [
    # Types
    "MatchRecord",
    "Verdict",
    "PlayerMetrics",
    "HistoryPlayerStats",
    "LeagueStats",
    "H2HStats",
    "MatchPotential",
    "Projection",
    "TrendType",
    "Trend",
    "FormProfile",
    "PlayerTrend",
    "MatchupAnalysis",
    "LeagueReport",
    "UNKNOWN_PLAYER",
    "UNKNOWN_LEAGUE",
    # Normalizer
    "build_match_record",
    "normalize_match",
    "normalize_matches",
    # Players
    "compute_player_metrics",
    "compute_history_player_stats",
    "determine_verdict",
    "list_players",
    "rank_players",
    # League
    "compute_league_stats",
    "compute_league_overview",
    "league_display_name",
    "list_leagues",
    # H2H
    "compute_h2h_stats",
    # Potential
    "analyze_match_potential",
    "is_super_clash",
    # Projections
    "generate_projections",
    # Trends
    "analyze_trends",
    "compute_form_profile",
    "scan_trends",
    # Analysis
    "build_matchup_analysis",
    "build_league_report",
    # Config
    "Settings",
    "DEFAULT_SETTINGS",
    "load_settings",
]
