"""Tests for per-character success rates."""
import pytest

from hero_squad.models.party import Character
from hero_squad.services.individual_rate_calculator import IndividualRateCalculator
from hero_squad.utils.class_templates import create_character


@pytest.fixture
def calculator():
    return IndividualRateCalculator()


def test_barbarian_vs_dragon(calculator):
    # 20 + 93.5 / (6.6 * 15) * 75 * 0.85
    assert calculator.calculate(create_character("Grok", "Barbarian"), "Dragon Fight") == 80


def test_mage_vs_dragon(calculator):
    assert calculator.calculate(create_character("Ilya", "Mage"), "Dragon Fight") == 74


def test_rogue_vs_trap(calculator):
    assert calculator.calculate(create_character("Vex", "Rogue"), "Ancient Trap") == 86


def test_ceiling(calculator):
    assert calculator.calculate(create_character("Ilya", "Mage"), "Mystic Puzzle") == 95


def test_zero_stats_get_base_rate(calculator):
    nobody = Character("Nobody", "Bandit", strength=0, agility=0, health=0)
    assert calculator.calculate(nobody, "Dragon Fight") == 20


def test_floor(calculator):
    cursed = Character("Cursed", "Bandit", strength=-20, agility=-20, health=-20)
    assert calculator.calculate(cursed, "Ancient Trap") == 15


def test_calculate_party_keeps_order(calculator):
    party = [create_character("Ilya", "Mage"), create_character("Grok", "Barbarian")]
    assert calculator.calculate_party(party, "Dragon Fight") == [74, 80]
