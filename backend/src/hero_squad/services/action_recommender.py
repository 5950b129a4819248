"""Suggests a single action for a character in an encounter."""
from hero_squad.models.party import Character
from hero_squad.utils.stat_tables import ANCIENT_TRAP, DRAGON_FIGHT, MYSTIC_PUZZLE

DEFAULT_ACTION = "Take Action"


class ActionRecommender:
    """Fixed-priority decision tree over character stats.

    For each encounter the first rule whose stat clears its threshold wins;
    the last entry (threshold None) is the fallback.
    """

    STAT_THRESHOLD = 15

    RULES: dict[str, list[tuple[str | None, int | None, str]]] = {
        DRAGON_FIGHT: [
            ("strength", STAT_THRESHOLD, "Power Attack"),
            ("mana", STAT_THRESHOLD, "Cast Fireball"),
            ("agility", STAT_THRESHOLD, "Dodge and Weave"),
            (None, None, "Defensive Stance"),
        ],
        ANCIENT_TRAP: [
            ("dexterity", STAT_THRESHOLD, "Disarm Trap"),
            ("wisdom", STAT_THRESHOLD, "Analyze Mechanism"),
            ("agility", STAT_THRESHOLD, "Evade Pressure Plate"),
            (None, None, "Provide Lookout"),
        ],
        MYSTIC_PUZZLE: [
            ("wisdom", STAT_THRESHOLD, "Decipher Runes"),
            ("mana", STAT_THRESHOLD, "Channel Insight"),
            ("dexterity", 10, "Manipulate Artifact"),
            (None, None, "Observe Patterns"),
        ],
    }

    def recommend(self, character: Character, event_type: str) -> str:
        """Pick the action label for this character."""
        for stat, threshold, action in self.RULES.get(event_type, []):
            if stat is None or character.stat(stat) > threshold:
                return action
        return DEFAULT_ACTION
