#!/usr/bin/env python3
"""Hammer every scenario generator and report failures and timings.

Example:
    python scripts/generator_stress.py --rounds 200 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from engine.models import QuizCategory
from scenarios import GENERATORS, GenerationExhaustedError, generate_question

LOGGER = logging.getLogger("generator_stress")


@dataclass
class GeneratorStats:
    generated: int = 0
    exhausted: int = 0
    elapsed: float = 0.0

    @property
    def mean_ms(self) -> float:
        if not self.generated:
            return 0.0
        return self.elapsed / self.generated * 1000


def run_stress(rounds: int, categories: List[QuizCategory], rng: random.Random) -> Dict[QuizCategory, GeneratorStats]:
    stats: Dict[QuizCategory, GeneratorStats] = {}
    for category in categories:
        entry = stats.setdefault(category, GeneratorStats())
        LOGGER.info("Generating %d %s questions", rounds, category.value)
        for _ in range(rounds):
            started = time.perf_counter()
            try:
                generate_question(category, rng)
            except GenerationExhaustedError as exc:
                entry.exhausted += 1
                LOGGER.warning("%s", exc)
                continue
            entry.elapsed += time.perf_counter() - started
            entry.generated += 1
    return stats


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate many questions per category to shake out failures.")
    parser.add_argument("--rounds", type=int, default=100, help="Questions to generate per category.")
    parser.add_argument(
        "--category",
        action="append",
        choices=[category.value for category in GENERATORS],
        help="Restrict to one category (repeatable). Defaults to all.",
    )
    parser.add_argument("--seed", type=int, help="Seed for a reproducible run.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, etc.).")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    categories = [QuizCategory(value) for value in args.category] if args.category else list(GENERATORS)
    stats = run_stress(args.rounds, categories, random.Random(args.seed))

    LOGGER.info("Stress run complete. Summary:")
    for category, entry in stats.items():
        LOGGER.info(
            "  %-16s -> %4d ok, %3d exhausted, %7.2f ms mean",
            category.value,
            entry.generated,
            entry.exhausted,
            entry.mean_ms,
        )
    return 1 if any(entry.exhausted for entry in stats.values()) else 0


if __name__ == "__main__":
    raise SystemExit(main())
