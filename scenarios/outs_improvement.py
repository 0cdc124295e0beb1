from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from engine.cards import RANKS, SUITS, VALUE_RANKS, Card, card_key, has_duplicates, ordered_deck, resolve_rng, shuffle
from engine.models import OutsScenario, Question, QuizCategory, Street
from engine.outs import find_outs

from .base import assign_option_ids, card_option, new_question_id, retry

MAX_ATTEMPTS = 50
DISTRACTORS = 3


class DrawType(str, Enum):
    FLUSH_DRAW = "Flush Draw"
    OPEN_ENDED = "Open-Ended Straight Draw"
    GUTSHOT = "Gutshot Straight Draw"


@dataclass(frozen=True)
class DrawSetup:
    hole_cards: Tuple[Card, ...]
    community_cards: Tuple[Card, ...]
    draw_type: DrawType


def _random_rank(rng: random.Random, low: int, high: int) -> str:
    return VALUE_RANKS[rng.randint(low, max(low, high))]


def _flush_draw(rng: random.Random, street: Street) -> DrawSetup:
    suit = rng.choice(SUITS)
    off_suits = [other for other in SUITS if other != suit]
    ranks = shuffle(RANKS, rng)[:6]
    hole = [Card(ranks[0], suit), Card(ranks[1], suit)]
    board = [Card(ranks[2], suit), Card(ranks[3], suit), Card(ranks[4], off_suits[0])]
    if street is Street.TURN:
        board.append(Card(ranks[5], rng.choice(off_suits)))
    return DrawSetup(tuple(hole), tuple(board), DrawType.FLUSH_DRAW)


def _straight_draw(rng: random.Random, street: Street, gutshot: bool) -> DrawSetup:
    start = rng.randint(4, 10)
    suits = shuffle(SUITS, rng)
    # Open-ended: four in a row. Gutshot: the middle rank of five is missing.
    board_values = (start + 3, start + 4) if gutshot else (start + 2, start + 3)
    hole = [Card(VALUE_RANKS[start], suits[0]), Card(VALUE_RANKS[start + 1], suits[1])]
    board = [
        Card(VALUE_RANKS[board_values[0]], suits[2]),
        Card(VALUE_RANKS[board_values[1]], suits[3]),
        Card(_random_rank(rng, 2, start - 3), suits[0]),
    ]
    if street is Street.TURN:
        board.append(Card(_random_rank(rng, 2, start - 4), suits[1]))
    return DrawSetup(tuple(hole), tuple(board), DrawType.GUTSHOT if gutshot else DrawType.OPEN_ENDED)


def construct_draw(rng: random.Random, street: Street) -> DrawSetup:
    """Build a hole/board combination that holds a flush draw, open-ender or gutshot."""
    draw_type = rng.choice(list(DrawType))
    if draw_type is DrawType.FLUSH_DRAW:
        return _flush_draw(rng, street)
    return _straight_draw(rng, street, gutshot=draw_type is DrawType.GUTSHOT)


def generate_outs_improvement_question(
    rng: Optional[random.Random] = None,
    street: Optional[Street] = None,
) -> Question:
    """Ask which undealt card improves a drawing hand the most."""
    rng = resolve_rng(rng)
    if street is None:
        street = Street.FLOP if rng.random() < 0.7 else Street.TURN
    if street not in (Street.FLOP, Street.TURN):
        raise ValueError("Outs questions are asked on the flop or turn")

    def attempt() -> Optional[Question]:
        setup = construct_draw(rng, street)
        used = setup.hole_cards + setup.community_cards
        if has_duplicates(used):
            return None

        outs = find_outs(setup.hole_cards, setup.community_cards)
        if not outs:
            return None
        best = outs[0]

        def unrelated(card: Card) -> bool:
            return card.rank != best.card.rank and card.suit != best.card.suit

        smaller_outs = [out.card for out in outs if out.improvement < best.improvement and unrelated(out.card)]
        out_keys = {card_key(out.card) for out in outs}
        used_keys = {card_key(card) for card in used}
        blanks = [
            card
            for card in ordered_deck()
            if card_key(card) not in used_keys and card_key(card) not in out_keys and unrelated(card)
        ]

        distractors: List[Card] = rng.sample(smaller_outs, min(1, len(smaller_outs)))
        if len(blanks) < DISTRACTORS - len(distractors):
            return None
        distractors += rng.sample(blanks, DISTRACTORS - len(distractors))

        options = [card_option([best.card], True)] + [card_option([card], False) for card in distractors]
        plural = "card" if len(outs) == 1 else "cards"
        return Question(
            id=new_question_id(rng),
            category=QuizCategory.OUTS_IMPROVEMENT,
            question_text="Which card would improve your hand the most?",
            scenario=OutsScenario(
                community_cards=setup.community_cards,
                hole_cards=setup.hole_cards,
                street=street,
            ),
            options=tuple(assign_option_ids(shuffle(options, rng))),
            explanation=(
                f"{len(outs)} {plural} would improve your hand. The {best.card.label} gives you "
                f"{best.hand_name}. Draw type: {setup.draw_type.value}."
            ),
        )

    return retry(MAX_ATTEMPTS, attempt, QuizCategory.OUTS_IMPROVEMENT)
