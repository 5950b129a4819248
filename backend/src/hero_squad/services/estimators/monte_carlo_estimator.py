"""Monte Carlo outcome estimator.

Plays the encounter out many times and reports the win rate:
- Mystic Puzzle: one roll against the party's average wisdom/mana.
- Ancient Trap: one roll against the party's average dexterity/agility.
- Dragon Fight (and unknown types): round-based combat against the enemy.

All randomness comes from a `random.Random` built per `estimate` call, so a
fixed seed reproduces results and concurrent calls never share state.
"""
import logging
import math
import random
from typing import Optional, Sequence

from hero_squad.models.party import Character, Encounter
from hero_squad.services.estimators.base import OutcomeEstimator, clamp_percent
from hero_squad.utils.stat_tables import ANCIENT_TRAP, MYSTIC_PUZZLE, get_stat_weights

logger = logging.getLogger(__name__)

# Stats that drive an attack; health only feeds the hit point pool
ATTACK_STATS = ("strength", "agility", "dexterity", "mana", "wisdom")


class MonteCarloEstimator(OutcomeEstimator):
    """Estimates success by repeated stochastic simulation."""

    name = "monte_carlo"

    DEFAULT_TRIALS = 1000
    MAX_ROUNDS = 50
    MAX_ROLL_CHANCE = 0.95

    # Single-roll divisors: average stat that would guarantee success
    PUZZLE_DIVISOR = 25
    TRAP_DIVISOR = 28

    # Combat tuning
    BASE_HIT_CHANCE = 0.2
    HIT_DIVISOR = 25
    BASE_DAMAGE = 5
    ENEMY_DAMAGE_DIVISOR = 20

    def __init__(self, trials: int = DEFAULT_TRIALS, seed: Optional[int] = None):
        if trials <= 0:
            raise ValueError("trials must be positive")
        self.trials = trials
        self.seed = seed

    def _estimate(self, party: Sequence[Character], encounter: Encounter) -> int:
        rng = random.Random(self.seed)
        wins = sum(
            1 for _ in range(self.trials)
            if self.simulate_encounter(party, encounter, rng)
        )
        logger.debug(f"Monte Carlo {encounter.event_type!r}: {wins}/{self.trials} wins")
        return round(clamp_percent(wins / self.trials * 100))

    def simulate_encounter(
        self,
        party: Sequence[Character],
        encounter: Encounter,
        rng: random.Random,
    ) -> bool:
        """Run a single trial and report whether the party won."""
        if encounter.event_type == MYSTIC_PUZZLE:
            return self._roll_against_average(party, ("wisdom", "mana"), self.PUZZLE_DIVISOR, rng)
        if encounter.event_type == ANCIENT_TRAP:
            return self._roll_against_average(party, ("dexterity", "agility"), self.TRAP_DIVISOR, rng)
        return self._simulate_combat(party, encounter, rng)

    def _roll_against_average(
        self,
        party: Sequence[Character],
        stats: tuple[str, ...],
        divisor: float,
        rng: random.Random,
    ) -> bool:
        total = sum(character.stat(stat) for character in party for stat in stats)
        average = total / (len(party) * len(stats))
        return rng.random() < min(self.MAX_ROLL_CHANCE, average / divisor)

    def attack_effectiveness(self, character: Character, weights: dict[str, float]) -> float:
        """Weighted average of the attack stats."""
        weighted = sum(character.stat(stat) * weights[stat] for stat in ATTACK_STATS)
        return weighted / sum(weights[stat] for stat in ATTACK_STATS)

    def _simulate_combat(
        self,
        party: Sequence[Character],
        encounter: Encounter,
        rng: random.Random,
    ) -> bool:
        enemy = encounter.resolved_enemy
        weights = get_stat_weights(encounter.event_type)
        effectiveness = [self.attack_effectiveness(c, weights) for c in party]

        # Trial-local hit point pools
        enemy_health = enemy.health
        party_health = [character.health for character in party]

        for _ in range(self.MAX_ROUNDS):
            for index, power in enumerate(effectiveness):
                if party_health[index] <= 0:
                    continue
                hit_chance = min(self.MAX_ROLL_CHANCE, self.BASE_HIT_CHANCE + power / self.HIT_DIVISOR)
                if rng.random() < hit_chance:
                    enemy_health -= math.floor(self.BASE_DAMAGE + rng.random() * power / 2)
                    if enemy_health <= 0:
                        return True

            alive = [i for i, hp in enumerate(party_health) if hp > 0]
            if not alive:
                return False

            target = rng.choice(alive)
            party_health[target] -= math.floor(
                self.BASE_DAMAGE + rng.random() * enemy.health / self.ENEMY_DAMAGE_DIVISOR
            )
            if all(hp <= 0 for hp in party_health):
                return False

        return enemy_health <= 0
