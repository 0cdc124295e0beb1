from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from engine.cards import format_cards
from engine.models import HandRankingScenario, Question, QuizCategory
from scenarios import GenerationExhaustedError

from .session import QuizConfig, QuizResults, QuizSession

LOGGER = logging.getLogger("quiz")

# TerminalQuiz renders questions as text and reads answers from stdin.


class TerminalQuiz:
    def __init__(self, session: QuizSession) -> None:
        self.session = session

    def run(self, category: QuizCategory) -> QuizResults:
        question: Optional[Question] = self.session.start_quiz(category)
        total = len(self.session.questions)
        while question is not None:
            print(f"\n>>> QUESTION {self.session.current_index + 1}/{total}")
            self._print_question(question)
            option_id = self._prompt_option(question)
            correct = self.session.select_answer(option_id)
            print("Correct!" if correct else f"Wrong. Answer: {question.correct_option.label}")
            print(question.explanation)
            question = self.session.next_question()
        results = self.session.results()
        self._print_results(results)
        return results

    def _print_question(self, question: Question) -> None:
        scenario = question.scenario
        street = getattr(scenario, "street", None)
        if street is not None:
            print(f"Street: {street.value}")
        print(f"Board: {format_cards(scenario.community_cards)}")
        hole_cards = getattr(scenario, "hole_cards", None)
        if hole_cards:
            print(f"Your hand: {format_cards(hole_cards)}")
        if isinstance(scenario, HandRankingScenario):
            for idx, hand in enumerate(scenario.player_hands, start=1):
                print(f"Player {idx}: {format_cards(hand)}")
        for attr, title in (("position", "Position"), ("pot_size", "Pot"), ("bet_size", "Bet"), ("hero_stack", "Stack")):
            value = getattr(scenario, attr, None)
            if value is not None:
                print(f"{title}: {getattr(value, 'value', value)}")
        print(question.question_text)
        for idx, option in enumerate(question.options, start=1):
            print(f"  {idx}) {option.label}")

    def _prompt_option(self, question: Question) -> str:
        choices: List[str] = [option.id for option in question.options]
        while True:
            raw = input(f"Answer [1-{len(choices)}]: ").strip()
            if raw.isdigit() and 1 <= int(raw) <= len(choices):
                return choices[int(raw) - 1]
            print("Illegal selection. Try again.")

    def _print_results(self, results: QuizResults) -> None:
        print(f"\n>>> RESULTS {results.correct_count}/{results.total} ({results.percentage}%)")
        for idx, detail in enumerate(results.details, start=1):
            mark = "✓" if detail.is_correct else "×"
            chosen = detail.selected_option.label if detail.selected_option else "--"
            print(f"{idx:2d}. {mark} {chosen} (answer: {detail.correct_option.label})")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Texas Hold'em training quiz")
    parser.add_argument(
        "--category",
        choices=[category.value for category in QuizCategory],
        default=QuizCategory.RANDOM_MIX.value,
    )
    parser.add_argument("--count", type=int, default=10, help="Questions per quiz for a single category")
    parser.add_argument("--mix-per-category", type=int, default=2, help="Questions per category in randomMix")
    parser.add_argument("--seed", type=int, help="Seed the random source for a reproducible quiz")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, etc.).")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    config = QuizConfig(question_count=args.count, mix_per_category=args.mix_per_category)
    rng = random.Random(args.seed) if args.seed is not None else None
    quiz = TerminalQuiz(QuizSession(config, rng=rng))
    try:
        quiz.run(QuizCategory(args.category))
    except GenerationExhaustedError as exc:
        LOGGER.error("%s", exc)
        print("Failed to generate questions, try again.")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nQuiz abandoned.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
