"""Starting stat templates for the four character classes."""

from hero_squad.models.party import Character

BARBARIAN = "Barbarian"
MAGE = "Mage"
ROGUE = "Rogue"
BANDIT = "Bandit"

CHARACTER_CLASSES = (BARBARIAN, MAGE, ROGUE, BANDIT)

# Party builder limit on the sum of all six stats
MAX_TOTAL_POINTS = 80

CLASS_TEMPLATES: dict[str, dict[str, int]] = {
    BARBARIAN: {
        "strength": 25,
        "agility": 10,
        "mana": 5,
        "dexterity": 10,
        "wisdom": 5,
        "health": 25,
    },
    MAGE: {
        "strength": 5,
        "agility": 10,
        "mana": 25,
        "dexterity": 10,
        "wisdom": 25,
        "health": 5,
    },
    ROGUE: {
        "strength": 10,
        "agility": 25,
        "mana": 5,
        "dexterity": 25,
        "wisdom": 10,
        "health": 5,
    },
    BANDIT: {
        "strength": 15,
        "agility": 20,
        "mana": 5,
        "dexterity": 20,
        "wisdom": 5,
        "health": 15,
    },
}


def create_character(name: str, character_class: str) -> Character:
    """Create a character with the template stats for its class.

    Raises:
        ValueError: If the class has no template.
    """
    template = CLASS_TEMPLATES.get(character_class)
    if template is None:
        raise ValueError(f"Unknown character class: {character_class}")
    return Character(name=name, character_class=character_class, **template)


def is_valid_point_allocation(character: Character) -> bool:
    """Whether the character fits within the party builder's point budget."""
    return character.total_points <= MAX_TOTAL_POINTS
