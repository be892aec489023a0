"""Tournament valuation: base value, TVA, TGP, event boosters."""

from oppr.valuation.base_value import (
    calculate_base_value,
    calculate_base_value_for_count,
    count_rated_players,
    is_player_rated,
)
from oppr.valuation.boosters import (
    apply_event_booster,
    determine_event_booster,
    get_event_booster_multiplier,
    qualifies_for_certified,
    qualifies_for_certified_plus,
)
from oppr.valuation.tgp import (
    calculate_finals_tgp,
    calculate_flip_frenzy_tgp,
    calculate_qualifying_tgp,
    calculate_tgp,
    calculate_unlimited_card_tgp,
    has_separate_qualifying,
    validate_finals_eligibility,
)
from oppr.valuation.tournament_value import (
    calculate_first_place_value,
    calculate_tournament,
    calculate_tournament_value,
)
from oppr.valuation.tva import (
    TVABreakdown,
    calculate_player_ranking_contribution,
    calculate_player_rating_contribution,
    calculate_ranking_tva,
    calculate_rating_tva,
    calculate_total_tva,
    get_top_ranked_players,
    get_top_rated_players,
    rating_contributes_to_tva,
)

__all__ = [
    "TVABreakdown",
    "apply_event_booster",
    "calculate_base_value",
    "calculate_base_value_for_count",
    "calculate_finals_tgp",
    "calculate_first_place_value",
    "calculate_flip_frenzy_tgp",
    "calculate_player_ranking_contribution",
    "calculate_player_rating_contribution",
    "calculate_qualifying_tgp",
    "calculate_ranking_tva",
    "calculate_rating_tva",
    "calculate_tgp",
    "calculate_total_tva",
    "calculate_tournament",
    "calculate_tournament_value",
    "calculate_unlimited_card_tgp",
    "count_rated_players",
    "determine_event_booster",
    "get_event_booster_multiplier",
    "get_top_ranked_players",
    "get_top_rated_players",
    "has_separate_qualifying",
    "is_player_rated",
    "qualifies_for_certified",
    "qualifies_for_certified_plus",
    "rating_contributes_to_tva",
    "validate_finals_eligibility",
]
