"""Party, character and encounter models."""

from dataclasses import dataclass, field
from typing import Optional

from hero_squad.utils.stat_tables import STAT_NAMES, get_default_enemy


@dataclass(frozen=True)
class Character:
    """Read-only snapshot of a party member as seen by the analysis."""

    name: str
    character_class: str  # Barbarian, Mage, Rogue, Bandit
    strength: float
    agility: float
    health: float
    mana: float = 0.0
    dexterity: float = 0.0
    wisdom: float = 0.0

    def stat(self, stat_name: str) -> float:
        """Look up one of the six attributes by name."""
        if stat_name not in STAT_NAMES:
            raise KeyError(f"Unknown stat: {stat_name}")
        return getattr(self, stat_name)

    @property
    def total_points(self) -> float:
        return sum(self.stat(name) for name in STAT_NAMES)

    @classmethod
    def from_dict(cls, data: dict) -> "Character":
        """Build from the wire format; optional stats missing or null count as 0."""
        return cls(
            name=data.get("name", ""),
            character_class=data.get("type") or data.get("character_class", ""),
            strength=data.get("strength") or 0,
            agility=data.get("agility") or 0,
            health=data.get("health") or 0,
            mana=data.get("mana") or 0,
            dexterity=data.get("dexterity") or 0,
            wisdom=data.get("wisdom") or 0,
        )


@dataclass(frozen=True)
class Enemy:
    """The opposing creature in combat-style encounters."""

    name: str
    health: int


@dataclass(frozen=True)
class Encounter:
    """Challenge the party faces."""

    event_type: str
    enemy: Optional[Enemy] = field(default=None)

    @property
    def resolved_enemy(self) -> Enemy:
        """The explicit enemy, or the stock enemy for this event type."""
        if self.enemy is not None:
            return self.enemy
        name, health = get_default_enemy(self.event_type)
        return Enemy(name=name, health=health)

    @classmethod
    def from_dict(cls, data: dict) -> "Encounter":
        enemy_data = data.get("enemy")
        enemy = None
        if enemy_data:
            enemy = Enemy(name=enemy_data.get("name", ""), health=enemy_data["health"])
        return cls(event_type=data.get("event_type", ""), enemy=enemy)
