from __future__ import annotations

import random
from typing import Optional

from engine.cards import create_deck, draw, format_cards, resolve_rng, shuffle
from engine.models import NutsReadingScenario, Question, QuizCategory, Street
from engine.nuts import find_top_n_hands

from .base import assign_option_ids, card_option, new_question_id, retry

MAX_ATTEMPTS = 50
CHOICES = 4

_RANK_LABELS = {1: "best", 2: "second-best", 3: "third-best"}


def _pick_street(rng: random.Random) -> Street:
    roll = rng.random() * 100
    if roll < 33:
        return Street.FLOP
    if roll < 66:
        return Street.TURN
    return Street.RIVER


def generate_nuts_reading_question(
    rng: Optional[random.Random] = None,
    target_rank: int = 1,
    street: Optional[Street] = None,
) -> Question:
    """Ask for the hole cards making the ``target_rank``-th strongest hand on a board.

    The four options are always the four strongest distinct hand strengths the
    board allows.
    """
    if target_rank not in _RANK_LABELS:
        raise ValueError(f"target_rank must be 1, 2 or 3, got {target_rank}")
    rng = resolve_rng(rng)
    street = street or _pick_street(rng)
    if street is Street.PREFLOP:
        raise ValueError("Nuts reading needs a flop, turn or river board")
    rank_label = _RANK_LABELS[target_rank]

    def attempt() -> Optional[Question]:
        community, _ = draw(create_deck(rng), street.board_size)

        # Paired boards make quads the answer too often.
        if len({card.rank for card in community}) != len(community):
            return None

        top_hands = find_top_n_hands(community, CHOICES)
        if len(top_hands) < CHOICES:
            return None

        correct = top_hands[target_rank - 1]
        options = [card_option(result.hole_cards, result is correct) for result in top_hands]

        return Question(
            id=new_question_id(rng),
            category=QuizCategory.NUTS_READING,
            question_text=f"Which two cards make the {rank_label} possible hand {street.phrase}?",
            scenario=NutsReadingScenario(community_cards=tuple(community), street=street, target_rank=target_rank),
            options=tuple(assign_option_ids(shuffle(options, rng))),
            explanation=(
                f"The {rank_label} possible hand {street.phrase} is {format_cards(correct.hole_cards)}, "
                f"making {correct.hand.name}."
            ),
        )

    return retry(MAX_ATTEMPTS, attempt, QuizCategory.NUTS_READING)
