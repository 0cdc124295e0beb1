"""Question generators: constrained random deals turned into four-option quiz questions."""

from __future__ import annotations

import random
from typing import Callable, Dict, Optional

from engine.models import Question, QuizCategory

from .base import GenerationExhaustedError, retry
from .bet_or_check import generate_bet_or_check_question
from .fold_call_raise import generate_fold_call_raise_question
from .hand_ranking import generate_hand_ranking_question
from .nuts_reading import generate_nuts_reading_question
from .outs_improvement import generate_outs_improvement_question
from .preflop_action import generate_preflop_action_question

Generator = Callable[[Optional[random.Random]], Question]

GENERATORS: Dict[QuizCategory, Generator] = {
    QuizCategory.HAND_RANKING: generate_hand_ranking_question,
    QuizCategory.NUTS_READING: generate_nuts_reading_question,
    QuizCategory.OUTS_IMPROVEMENT: generate_outs_improvement_question,
    QuizCategory.BET_OR_CHECK: generate_bet_or_check_question,
    QuizCategory.FOLD_CALL_RAISE: generate_fold_call_raise_question,
    QuizCategory.PREFLOP_ACTION: generate_preflop_action_question,
}

MIX_CATEGORIES = tuple(GENERATORS)


def generate_question(category: QuizCategory, rng: Optional[random.Random] = None) -> Question:
    if category not in GENERATORS:
        raise ValueError(f"No generator for category {category.value}")
    return GENERATORS[category](rng)


__all__ = [
    "GENERATORS",
    "MIX_CATEGORIES",
    "GenerationExhaustedError",
    "generate_question",
    "retry",
    "generate_bet_or_check_question",
    "generate_fold_call_raise_question",
    "generate_hand_ranking_question",
    "generate_nuts_reading_question",
    "generate_outs_improvement_question",
    "generate_preflop_action_question",
]
