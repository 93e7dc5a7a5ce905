"""Testing generators – hypothesis strategies for flag records."""
from tierflags.testing.generators.strategies import (
    feature_flag_strategy,
    flag_name_strategy,
    tier_strategy,
)

__all__ = [
    "feature_flag_strategy",
    "flag_name_strategy",
    "tier_strategy",
]
