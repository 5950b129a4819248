"""Per-encounter lookup tables: stat weights, difficulty and stock enemies.

Unrecognized event types never raise; they fall back to the neutral
default row of each table.
"""

DRAGON_FIGHT = "Dragon Fight"
ANCIENT_TRAP = "Ancient Trap"
MYSTIC_PUZZLE = "Mystic Puzzle"

EVENT_TYPES = (DRAGON_FIGHT, ANCIENT_TRAP, MYSTIC_PUZZLE)

STAT_NAMES = ("strength", "agility", "health", "mana", "dexterity", "wisdom")

DEFAULT_STAT_WEIGHTS = {stat: 1.0 for stat in STAT_NAMES}

STAT_WEIGHTS = {
    DRAGON_FIGHT: {
        "strength": 1.3,
        "agility": 1.1,
        "health": 1.2,
        "mana": 1.1,
        "dexterity": 1.0,
        "wisdom": 0.9,
    },
    ANCIENT_TRAP: {
        "strength": 0.8,
        "agility": 1.3,
        "health": 1.0,
        "mana": 0.9,
        "dexterity": 1.4,
        "wisdom": 1.2,
    },
    MYSTIC_PUZZLE: {
        "strength": 0.7,
        "agility": 0.9,
        "health": 0.8,
        "mana": 1.3,
        "dexterity": 1.0,
        "wisdom": 1.5,
    },
}

DIFFICULTY_MULTIPLIERS = {
    DRAGON_FIGHT: 0.85,
    ANCIENT_TRAP: 0.9,
    MYSTIC_PUZZLE: 1.0,
}
DEFAULT_DIFFICULTY_MULTIPLIER = 0.95

DIFFICULTY_LABELS = {
    DRAGON_FIGHT: "Hard",
    ANCIENT_TRAP: "Medium",
    MYSTIC_PUZZLE: "Easy",
}
DEFAULT_DIFFICULTY_LABEL = "Unknown"

# Enemy used when the caller supplies an encounter without one
DEFAULT_ENEMIES = {
    DRAGON_FIGHT: ("Ancient Red Dragon", 250),
    ANCIENT_TRAP: ("Mechanical Guardian", 150),
    MYSTIC_PUZZLE: ("Crystal Sentinel", 100),
}
FALLBACK_ENEMY = ("Unknown Enemy", 100)


def get_stat_weights(event_type: str) -> dict[str, float]:
    """Get the attribute weighting for an encounter type.

    Returns a copy so callers can't mutate the shared table.
    """
    return dict(STAT_WEIGHTS.get(event_type, DEFAULT_STAT_WEIGHTS))


def get_total_weight(event_type: str) -> float:
    return sum(get_stat_weights(event_type).values())


def get_difficulty_multiplier(event_type: str) -> float:
    """Scalar in (0, 1] that scales individual success rates."""
    return DIFFICULTY_MULTIPLIERS.get(event_type, DEFAULT_DIFFICULTY_MULTIPLIER)


def get_encounter_difficulty(event_type: str) -> str:
    """Display label for an encounter type."""
    return DIFFICULTY_LABELS.get(event_type, DEFAULT_DIFFICULTY_LABEL)


def get_default_enemy(event_type: str) -> tuple[str, int]:
    """(name, health) of the stock enemy for an encounter type."""
    return DEFAULT_ENEMIES.get(event_type, FALLBACK_ENEMY)
