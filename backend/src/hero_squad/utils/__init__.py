"""Utility modules for hero_squad."""

from hero_squad.utils.stat_tables import (
    DRAGON_FIGHT,
    ANCIENT_TRAP,
    MYSTIC_PUZZLE,
    EVENT_TYPES,
    STAT_NAMES,
    get_stat_weights,
    get_total_weight,
    get_difficulty_multiplier,
    get_encounter_difficulty,
    get_default_enemy,
)

__all__ = [
    "DRAGON_FIGHT",
    "ANCIENT_TRAP",
    "MYSTIC_PUZZLE",
    "EVENT_TYPES",
    "STAT_NAMES",
    "get_stat_weights",
    "get_total_weight",
    "get_difficulty_multiplier",
    "get_encounter_difficulty",
    "get_default_enemy",
]
