"""Freeform strategic guidance for a party facing an encounter."""
from typing import Sequence

from hero_squad.models.party import Character
from hero_squad.utils.stat_tables import ANCIENT_TRAP, DRAGON_FIGHT, MYSTIC_PUZZLE


def find_best(party: Sequence[Character], stat: str) -> Character:
    """Character with the highest stat; ties go to the earliest in the party."""
    return max(party, key=lambda character: character.stat(stat))


class RecommendationNarrator:
    """Builds an ordered list of guidance sentences.

    The first sentence always sets the tone from the party's success
    chance; encounter-specific sentences naming the best-suited
    characters follow.
    """

    CAUTIOUS_BELOW = 40
    AGGRESSIVE_ABOVE = 75

    CAUTIOUS_TONE = (
        "This is a highly challenging encounter. Survival should be the top priority; "
        "focus on defensive abilities and healing."
    )
    AGGRESSIVE_TONE = (
        "Your party has a clear advantage. A coordinated, aggressive strategy should "
        "secure a swift victory."
    )
    BALANCED_TONE = (
        "The odds are balanced. A smart, tactical approach combining offense and "
        "defense is crucial for success."
    )
    EMPTY_PARTY_ADVICE = "Recruit at least one hero before attempting this encounter."

    def tone(self, success_chance: int) -> str:
        if success_chance < self.CAUTIOUS_BELOW:
            return self.CAUTIOUS_TONE
        if success_chance > self.AGGRESSIVE_ABOVE:
            return self.AGGRESSIVE_TONE
        return self.BALANCED_TONE

    def narrate(self, party: Sequence[Character], event_type: str, success_chance: int) -> list[str]:
        """Generate strategic recommendations, tone sentence first."""
        recommendations = [self.tone(success_chance)]

        if not party:
            recommendations.append(self.EMPTY_PARTY_ADVICE)
            return recommendations

        if event_type == DRAGON_FIGHT:
            tank = find_best(party, "health")
            recommendations.append(
                f"Let {tank.name} draw the dragon's attention as the tank while others attack from the flanks."
            )
            damage_dealer = find_best(party, "strength")
            recommendations.append(
                f"{damage_dealer.name} should act as the damage dealer and focus on maximum physical damage."
            )
        elif event_type == ANCIENT_TRAP:
            lead = find_best(party, "dexterity")
            recommendations.append(
                f"{lead.name} should take the lead to scout for and disarm any traps."
            )
            support = find_best(party, "wisdom")
            if support is not lead:
                recommendations.append(
                    f"{support.name} can support by spotting the trap mechanisms from a distance."
                )
        elif event_type == MYSTIC_PUZZLE:
            solver = find_best(party, "wisdom")
            recommendations.append(
                f"The party should rely on {solver.name}'s wisdom as the puzzle solver."
            )
            clue_finder = find_best(party, "mana")
            if clue_finder is not solver:
                recommendations.append(
                    f"{clue_finder.name} could act as clue-finder, using their mana to reveal hidden auras."
                )

        return recommendations
