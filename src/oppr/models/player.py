"""Player value type consumed by the valuation and rating code."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from oppr.core.config import OPPRConfig, resolve_config


class Player(BaseModel):
    """A competitor as seen by the engine.

    Attributes:
        id: Unique player identifier.
        name: Display name, when known.
        rating: Primary (Glicko) rating value.
        rating_deviation: Uncertainty of the rating.
        ranking: World ranking position, 1 is best; None when unranked.
        is_rated: Whether the player counts toward rated-player totals.
        event_count: Number of events the player has played.
        ratings: Per-system rating data keyed by rating system id.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    id: str
    name: str | None = None
    rating: float = 1300.0
    rating_deviation: float = 200.0
    ranking: int | None = None
    is_rated: bool = False
    event_count: int = Field(default=0, ge=0)
    ratings: dict[str, Any] = Field(default_factory=dict)

    def with_event_count(self, event_count: int, config: OPPRConfig | None = None) -> Player:
        """Copy with a new event count and the matching rated flag."""
        threshold = resolve_config(config).base_value.rated_player_threshold
        return self.model_copy(
            update={"event_count": event_count, "is_rated": event_count >= threshold}
        )
