"""Tournament Grading Percentage (TGP).

TGP measures how much of an event "counts": 4% per meaningful game, with
multipliers for group play and long qualifying windows. Values are
fractions (1.48 == 148%). Events without a separate qualifying stage cap
at 100%; events with qualifying and finals cap at 200%.
"""

from __future__ import annotations

import structlog

from oppr.core.config import OPPRConfig, resolve_config
from oppr.core.constants import TGPConstants
from oppr.models import FinalsConfig, QualifyingConfig, TGPConfig

logger = structlog.get_logger()


def _group_multiplier(stage: QualifyingConfig | FinalsConfig, constants: TGPConstants) -> float:
    if stage.multi_matchplay:
        return 1.0
    if stage.four_player_groups:
        return constants.multipliers.four_player_groups
    if stage.three_player_groups:
        return constants.multipliers.three_player_groups
    return 1.0


def _unlimited_time_bonus(hours: float, constants: TGPConstants) -> float:
    bonus = constants.unlimited_qualifying
    return min(hours * bonus.percent_per_hour, bonus.max_bonus)


def calculate_qualifying_tgp(tgp_config: TGPConfig, config: OPPRConfig | None = None) -> float:
    """TGP contributed by the qualifying stage.

    Args:
        tgp_config: Event format.
        config: Coefficient set; defaults apply when None.

    Returns:
        Qualifying TGP as a fraction.
    """
    constants = resolve_config(config).tgp
    qualifying = tgp_config.qualifying

    if qualifying.type == "none":
        return 0.0

    game_value = constants.base_game_value
    min_hours = constants.unlimited_qualifying.min_hours_for_multiplier
    if qualifying.type == "unlimited" and qualifying.hours and qualifying.hours >= min_hours:
        game_value = constants.base_game_value * constants.multipliers.unlimited_best_game
    elif qualifying.type == "hybrid":
        game_value = constants.base_game_value * constants.multipliers.hybrid_best_game

    game_value *= _group_multiplier(qualifying, constants)

    tgp = qualifying.meaningful_games * game_value * tgp_config.ball_count_adjustment

    if qualifying.type == "unlimited" and qualifying.hours:
        tgp += _unlimited_time_bonus(qualifying.hours, constants)

    return tgp


def calculate_finals_tgp(tgp_config: TGPConfig, config: OPPRConfig | None = None) -> float:
    """TGP contributed by the finals stage."""
    constants = resolve_config(config).tgp
    finals = tgp_config.finals
    game_value = constants.base_game_value * _group_multiplier(finals, constants)
    return finals.meaningful_games * game_value * tgp_config.ball_count_adjustment


def has_separate_qualifying(tgp_config: TGPConfig) -> bool:
    """True when the event has a qualifying stage with meaningful games."""
    qualifying = tgp_config.qualifying
    return qualifying.type != "none" and qualifying.meaningful_games > 0


def calculate_tgp(tgp_config: TGPConfig, config: OPPRConfig | None = None) -> float:
    """Total TGP for an event.

    Example:
        Limited qualifying with 7 games plus 15 finals games in 4-player
        groups gives 7 * 4% + 15 * 4% * 2 = 148%, returned as 1.48.
    """
    cfg = resolve_config(config)
    total = calculate_qualifying_tgp(tgp_config, cfg) + calculate_finals_tgp(tgp_config, cfg)

    if has_separate_qualifying(tgp_config):
        cap = cfg.tgp.max_with_finals
    else:
        cap = cfg.tgp.max_without_finals

    if total > cap:
        logger.debug("tgp_capped", total=total, cap=cap)
        return cap
    return total


def calculate_unlimited_card_tgp(
    meaningful_games: float,
    hours: float,
    finals_games: float,
    config: OPPRConfig | None = None,
) -> float:
    """TGP for unlimited card qualifying followed by match play finals.

    Card qualifying earns 4X game value (16% per game) when the window is at
    least 20 hours long, plus the usual hourly bonus.
    """
    cfg = resolve_config(config)
    constants = cfg.tgp

    if hours >= constants.unlimited_qualifying.min_hours_for_multiplier:
        qualifying_tgp = (
            meaningful_games * constants.base_game_value * constants.multipliers.unlimited_card
        )
    else:
        qualifying_tgp = meaningful_games * constants.base_game_value
    qualifying_tgp += _unlimited_time_bonus(hours, constants)

    finals_only = TGPConfig(
        finals=FinalsConfig(format_type="match-play", meaningful_games=finals_games),
    )
    finals_tgp = calculate_finals_tgp(finals_only, cfg)
    return min(qualifying_tgp + finals_tgp, constants.max_with_finals)


def calculate_flip_frenzy_tgp(
    average_matches: float, is_one_ball: bool = False, config: OPPRConfig | None = None
) -> float:
    """TGP for Flip Frenzy, from the average matches played per player.

    Every 2 matches (3 for one-ball) count as one meaningful game.
    """
    constants = resolve_config(config).tgp
    if is_one_ball:
        divisor = constants.flip_frenzy.one_ball_divisor
    else:
        divisor = constants.flip_frenzy.three_ball_divisor
    meaningful_games = average_matches / divisor
    return min(meaningful_games * constants.base_game_value, constants.max_without_finals)


def validate_finals_eligibility(
    total_participants: int, finalist_count: int, config: OPPRConfig | None = None
) -> bool:
    """Whether a finals cut is eligible for more than 100% TGP.

    Between 10% and 50% of participants must advance. An event without
    participants is never eligible.
    """
    if total_participants <= 0:
        return False
    requirements = resolve_config(config).tgp.finals_requirements
    finalist_percentage = finalist_count / total_participants
    return (
        requirements.min_finalists_percent
        <= finalist_percentage
        <= requirements.max_finalists_percent
    )
