#!/usr/bin/env python3
"""Compare estimator strategies across class-template parties.

Builds every party of the given size from the four class templates and
prints each strategy's success chance per encounter, plus the spread
between strategies. Useful when retuning a strategy's constants.

Usage:
  python backend/scripts/strategy_sweep.py --size 3 --seed 7
  python backend/scripts/strategy_sweep.py --size 2 --json sweep.json
"""

import argparse
import json
import sys
from dataclasses import dataclass, field
from itertools import combinations_with_replacement
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hero_squad.models.party import Encounter
from hero_squad.services.estimators import get_estimator
from hero_squad.utils.class_templates import CHARACTER_CLASSES, create_character
from hero_squad.utils.stat_tables import EVENT_TYPES

STRATEGIES = ("weighted", "monte_carlo", "bayes")


@dataclass
class SweepRow:
    classes: tuple[str, ...]
    event_type: str
    chances: dict[str, int] = field(default_factory=dict)

    @property
    def spread(self) -> int:
        return max(self.chances.values()) - min(self.chances.values())


def run_sweep(size: int, seed: int, trials: int, normalization: float) -> list[SweepRow]:
    estimators = [
        get_estimator(name, trials=trials, seed=seed, normalization=normalization)
        for name in STRATEGIES
    ]
    rows = []
    for classes in combinations_with_replacement(CHARACTER_CLASSES, size):
        party = [create_character(f"{cls} {i + 1}", cls) for i, cls in enumerate(classes)]
        for event_type in EVENT_TYPES:
            encounter = Encounter(event_type=event_type)
            row = SweepRow(classes=classes, event_type=event_type)
            for estimator in estimators:
                row.chances[estimator.name] = estimator.estimate(party, encounter)
            rows.append(row)
    return rows


def print_rows(rows: list[SweepRow]) -> None:
    header = f"{'party':<40} {'encounter':<14}" + "".join(f"{name:>13}" for name in STRATEGIES) + f"{'spread':>8}"
    print(header)
    print("-" * len(header))
    for row in rows:
        party = ", ".join(row.classes)
        chances = "".join(f"{row.chances[name]:>12}%" for name in STRATEGIES)
        print(f"{party:<40} {row.event_type:<14}{chances}{row.spread:>8}")


def main():
    parser = argparse.ArgumentParser(description="Compare estimator strategies over template parties")
    parser.add_argument("--size", type=int, default=3, help="Party size")
    parser.add_argument("--seed", type=int, default=42, help="Monte Carlo seed")
    parser.add_argument("--trials", type=int, default=1000, help="Monte Carlo trials")
    parser.add_argument("--normalization", type=float, default=20.0, help="Weighted-sum K constant")
    parser.add_argument("--json", type=Path, default=None, help="Also write rows to this JSON file")
    args = parser.parse_args()

    if args.size < 1:
        parser.error("--size must be at least 1")

    rows = run_sweep(args.size, args.seed, args.trials, args.normalization)
    print_rows(rows)

    widest = max(rows, key=lambda r: r.spread)
    print(f"\nLargest disagreement: {', '.join(widest.classes)} vs {widest.event_type} ({widest.spread} pts)")

    if args.json:
        payload = [
            {"classes": list(r.classes), "event_type": r.event_type, "chances": r.chances}
            for r in rows
        ]
        args.json.write_text(json.dumps(payload, indent=2))
        print(f"Wrote {len(payload)} rows to {args.json}")


if __name__ == "__main__":
    main()
