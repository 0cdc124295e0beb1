from __future__ import annotations

import logging
import random
import uuid
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from engine.cards import Card, format_cards
from engine.models import Option, Question, QuizCategory

LOGGER = logging.getLogger("scenarios")


class GenerationExhaustedError(RuntimeError):
    """No acceptable scenario was found within the attempt cap."""

    code = "GENERATION_EXHAUSTED"

    def __init__(self, category: QuizCategory, attempts: int) -> None:
        super().__init__(f"Failed to generate {category.value} question after {attempts} attempts")
        self.category = category
        self.attempts = attempts


def retry(max_attempts: int, attempt: Callable[[], Optional[Question]], category: QuizCategory) -> Question:
    """Rejection sampling: call ``attempt`` until it returns a question or the cap is hit."""
    for count in range(1, max_attempts + 1):
        question = attempt()
        if question is not None:
            if count > 1:
                LOGGER.debug("%s scenario accepted after %d attempts", category.value, count)
            return question
    LOGGER.warning("%s generation exhausted %d attempts", category.value, max_attempts)
    raise GenerationExhaustedError(category, max_attempts)


def new_question_id(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def card_option(cards: Sequence[Card], is_correct: bool, prefix: str = "") -> Option:
    label = format_cards(cards)
    if prefix:
        label = f"{prefix}: {label}"
    return Option(id="", label=label, is_correct=is_correct, cards=tuple(cards))


def assign_option_ids(options: Sequence[Option]) -> List[Option]:
    # Positional ids, given after shuffling, keep card answers from leaking through ids.
    return [replace(option, id=f"opt_{idx}") for idx, option in enumerate(options)]
