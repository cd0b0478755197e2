"""Normalization of raw upstream match payloads into MatchRecord."""

import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from .types import UNKNOWN_LEAGUE, UNKNOWN_PLAYER, MatchRecord

logger = logging.getLogger(__name__)

# Alias paths per canonical attribute, in priority order. A path is a tuple
# of keys walked through nested mappings. The canonical key always comes
# first so that normalizing a MatchRecord returns an equal record.
FieldPath = Tuple[str, ...]

HOME_PLAYER_FIELDS: Tuple[FieldPath, ...] = (
    ("home_player",),
    ("homePlayer",),
    ("HomePlayer",),
    ("home", "name"),
    ("player_home_name",),
)
AWAY_PLAYER_FIELDS: Tuple[FieldPath, ...] = (
    ("away_player",),
    ("awayPlayer",),
    ("AwayPlayer",),
    ("away", "name"),
    ("player_away_name",),
)
LEAGUE_FIELDS: Tuple[FieldPath, ...] = (
    ("league_name",),
    ("league",),
    ("LeagueName",),
    ("competition_name",),
    ("competition", "name"),
    ("league", "name"),
)
PLAYED_AT_FIELDS: Tuple[FieldPath, ...] = (
    ("played_at",),
    ("data_realizacao",),
    ("date",),
    ("start_at",),
    ("startTime",),
    ("time",),
)
SCORE_HOME_FIELDS: Tuple[FieldPath, ...] = (
    ("score_home",),
    ("scoreHome",),
    ("HomePlayerScore",),
    ("score", "home"),
    ("total_goals_home",),
)
SCORE_AWAY_FIELDS: Tuple[FieldPath, ...] = (
    ("score_away",),
    ("scoreAway",),
    ("AwayPlayerScore",),
    ("score", "away"),
    ("total_goals_away",),
)
HT_HOME_FIELDS: Tuple[FieldPath, ...] = (
    ("halftime_score_home",),
    ("scoreHTHome",),
    ("ht_home",),
    ("HomePlayerScoreHT",),
    ("scoreHT", "home"),
    ("ht_goals_home",),
)
HT_AWAY_FIELDS: Tuple[FieldPath, ...] = (
    ("halftime_score_away",),
    ("scoreHTAway",),
    ("ht_away",),
    ("AwayPlayerScoreHT",),
    ("scoreHT", "away"),
    ("ht_goals_away",),
)

_MISSING = object()


def _lookup(raw: Mapping[str, Any], path: FieldPath) -> Any:
    """Walk a key path through nested mappings, _MISSING when absent."""
    value: Any = raw
    for key in path:
        if not isinstance(value, Mapping) or key not in value:
            return _MISSING
        value = value[key]
    return value


def resolve_name(raw: Mapping[str, Any], paths: Tuple[FieldPath, ...], default: str) -> str:
    """First alias holding a non-blank string, else default."""
    for path in paths:
        value = _lookup(raw, path)
        if isinstance(value, str) and value.strip():
            return value
    return default


def parse_goals(value: Any) -> int:
    """Coerce a goal count to a non-negative int; anything malformed is 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0
    return int(number)


def resolve_timestamp(raw: Mapping[str, Any], paths: Tuple[FieldPath, ...]) -> str:
    """First alias holding a non-blank string or an epoch number, else ''."""
    for path in paths:
        value = _lookup(raw, path)
        if isinstance(value, str) and value.strip():
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
    return ""


def resolve_goals(raw: Mapping[str, Any], paths: Tuple[FieldPath, ...]) -> int:
    """First alias that is present (not None) wins, then coerced."""
    for path in paths:
        value = _lookup(raw, path)
        if value is not _MISSING and value is not None:
            return parse_goals(value)
    return 0


def build_match_record(
    home_player: str,
    away_player: str,
    league_name: str,
    score_home: int,
    score_away: int,
    halftime_score_home: int = 0,
    halftime_score_away: int = 0,
    played_at: str = "",
) -> MatchRecord:
    """Build a MatchRecord and its derived totals and BTTS flags."""
    return {
        "home_player": home_player,
        "away_player": away_player,
        "league_name": league_name,
        "played_at": played_at,
        "score_home": score_home,
        "score_away": score_away,
        "halftime_score_home": halftime_score_home,
        "halftime_score_away": halftime_score_away,
        "total_goals": score_home + score_away,
        "total_goals_ht": halftime_score_home + halftime_score_away,
        "btts": score_home > 0 and score_away > 0,
        "btts_ht": halftime_score_home > 0 and halftime_score_away > 0,
    }


def normalize_match(raw: Any) -> Optional[MatchRecord]:
    """
    Map one raw payload of unknown shape onto a MatchRecord.

    Returns None for payloads that are not mappings. Never raises.
    Half-time scores above full-time scores are kept as received.
    """
    if not isinstance(raw, Mapping):
        return None

    return build_match_record(
        home_player=resolve_name(raw, HOME_PLAYER_FIELDS, UNKNOWN_PLAYER),
        away_player=resolve_name(raw, AWAY_PLAYER_FIELDS, UNKNOWN_PLAYER),
        league_name=resolve_name(raw, LEAGUE_FIELDS, UNKNOWN_LEAGUE),
        score_home=resolve_goals(raw, SCORE_HOME_FIELDS),
        score_away=resolve_goals(raw, SCORE_AWAY_FIELDS),
        halftime_score_home=resolve_goals(raw, HT_HOME_FIELDS),
        halftime_score_away=resolve_goals(raw, HT_AWAY_FIELDS),
        played_at=resolve_timestamp(raw, PLAYED_AT_FIELDS),
    )


def normalize_matches(raws: Iterable[Any]) -> List[MatchRecord]:
    """Normalize a collection, dropping discarded payloads and keeping order."""
    records: List[MatchRecord] = []
    discarded = 0

    for raw in raws or []:
        record = normalize_match(raw)
        if record is None:
            discarded += 1
            continue
        records.append(record)

    if discarded:
        logger.debug("Discarded %d unrecognized match payloads", discarded)

    return records
