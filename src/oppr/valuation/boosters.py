"""Event booster tiers and their multipliers.

Certified and Certified+ are derived from objective event criteria.
Championship Series and Major are designated directly by the sanctioning
body and are never produced by :func:`determine_event_booster`.
"""

from __future__ import annotations

from oppr.core.config import OPPRConfig, resolve_config
from oppr.core.errors import ValidationError
from oppr.models import EventBooster

CERTIFIED_MIN_FINALISTS = 24
CERTIFIED_MAX_DURATION_DAYS = 4
CERTIFIED_PLUS_MIN_RATED_PLAYERS = 128


def _as_booster(tier: EventBooster | str) -> EventBooster:
    try:
        return EventBooster(tier)
    except ValueError as exc:
        valid = ", ".join(b.value for b in EventBooster)
        raise ValidationError(
            f"Unknown event booster '{tier}'. Expected one of: {valid}", field="event_booster"
        ) from exc


def get_event_booster_multiplier(
    tier: EventBooster | str, config: OPPRConfig | None = None
) -> float:
    """Multiplier for a booster tier.

    Args:
        tier: Booster tier or its string value (e.g. ``"major"``).
        config: Coefficient set; defaults apply when None.

    Returns:
        Multiplier, e.g. 2.0 for a Major.

    Raises:
        ValidationError: If the tier is unknown.
    """
    boosters = resolve_config(config).event_boosters
    multipliers = {
        EventBooster.NONE: boosters.none,
        EventBooster.CERTIFIED: boosters.certified,
        EventBooster.CERTIFIED_PLUS: boosters.certified_plus,
        EventBooster.CHAMPIONSHIP_SERIES: boosters.championship_series,
        EventBooster.MAJOR: boosters.major,
    }
    return multipliers[_as_booster(tier)]


def qualifies_for_certified(
    rated_player_count: int,
    has_valid_qualifying: bool,
    has_valid_finals: bool,
    finalist_count: int,
    duration_days: float,
) -> bool:
    """Whether an event meets the Certified (125%) requirements.

    Rated player count is not checked at this tier; the argument keeps the
    signature aligned with :func:`qualifies_for_certified_plus`.
    """
    del rated_player_count
    if finalist_count < CERTIFIED_MIN_FINALISTS:
        return False
    if not has_valid_qualifying or not has_valid_finals:
        return False
    return duration_days <= CERTIFIED_MAX_DURATION_DAYS


def qualifies_for_certified_plus(
    rated_player_count: int,
    has_valid_qualifying: bool,
    has_valid_finals: bool,
    finalist_count: int,
    duration_days: float,
) -> bool:
    """Whether an event meets the Certified+ (150%) requirements.

    All Certified requirements plus at least 128 rated players.
    """
    if rated_player_count < CERTIFIED_PLUS_MIN_RATED_PLAYERS:
        return False
    return qualifies_for_certified(
        rated_player_count,
        has_valid_qualifying,
        has_valid_finals,
        finalist_count,
        duration_days,
    )


def determine_event_booster(
    rated_player_count: int,
    has_valid_qualifying: bool,
    has_valid_finals: bool,
    finalist_count: int,
    duration_days: float,
) -> EventBooster:
    """Highest derivable booster tier for an event.

    Certified+ is checked before Certified, then falls back to none.
    """
    args = (
        rated_player_count,
        has_valid_qualifying,
        has_valid_finals,
        finalist_count,
        duration_days,
    )
    if qualifies_for_certified_plus(*args):
        return EventBooster.CERTIFIED_PLUS
    if qualifies_for_certified(*args):
        return EventBooster.CERTIFIED
    return EventBooster.NONE


def apply_event_booster(
    value: float, tier: EventBooster | str, config: OPPRConfig | None = None
) -> float:
    """Scale a pre-booster value by the tier's multiplier."""
    return value * get_event_booster_multiplier(tier, config)
