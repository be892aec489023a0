"""Configuration schema and loading for the OPPR engine."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from oppr.core.constants import (
    BaseValueConstants,
    EventBoosterConstants,
    PointDistributionConstants,
    RankingConstants,
    RatingConstants,
    TGPConstants,
    TimeDecayConstants,
    TVAConstants,
    ValidationConstants,
)


class OPPRConfig(BaseModel):
    """Complete set of coefficient groups used by the calculators.

    Instances are immutable. Calculators accept a config argument and fall
    back to :data:`DEFAULT_CONFIG`, so alternative rule sets can run side by
    side without touching shared state.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_value: BaseValueConstants = Field(default_factory=BaseValueConstants)
    tva: TVAConstants = Field(default_factory=TVAConstants)
    tgp: TGPConstants = Field(default_factory=TGPConstants)
    event_boosters: EventBoosterConstants = Field(default_factory=EventBoosterConstants)
    point_distribution: PointDistributionConstants = Field(
        default_factory=PointDistributionConstants
    )
    time_decay: TimeDecayConstants = Field(default_factory=TimeDecayConstants)
    ranking: RankingConstants = Field(default_factory=RankingConstants)
    rating: RatingConstants = Field(default_factory=RatingConstants)
    validation: ValidationConstants = Field(default_factory=ValidationConstants)

    def with_overrides(self, overrides: Mapping[str, Any]) -> OPPRConfig:
        """Return a new config with a partial nested mapping merged in.

        Args:
            overrides: Nested mapping, e.g. ``{"time_decay": {"year_1_to_2": 0.8}}``.

        Returns:
            Validated OPPRConfig; unspecified values keep their current setting.
        """
        merged = _deep_merge(self.model_dump(), overrides)
        return OPPRConfig.model_validate(merged)


DEFAULT_CONFIG = OPPRConfig()


def resolve_config(config: OPPRConfig | None) -> OPPRConfig:
    """Return ``config`` or the defaults when None."""
    return config if config is not None else DEFAULT_CONFIG


def load_config(path: str | Path) -> OPPRConfig:
    """Load and validate coefficient overrides from a YAML file.

    Args:
        path: Path to YAML file holding a partial configuration.

    Returns:
        Validated OPPRConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config is invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open() as f:
        data = yaml.safe_load(f)

    return DEFAULT_CONFIG.with_overrides(data or {})


def _deep_merge(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(target)
    for key, value in source.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            result[key] = _deep_merge(current, value)
        else:
            result[key] = value
    return result
