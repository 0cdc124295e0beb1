from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from engine.cards import create_deck, draw, resolve_rng, shuffle
from engine.evaluator import HandCategory, evaluate_hand
from engine.models import FoldCallRaiseScenario, Option, Question, QuizCategory
from engine.odds import calculate_pot_odds

from .base import new_question_id, retry

MAX_ATTEMPTS = 50

# Most a made pair / high card should pay, as a share of the final pot.
PAIR_CALL_LIMIT = 25.0
HIGH_CARD_CALL_LIMIT = 15.0


class Action(str, Enum):
    FOLD = "fold"
    CALL = "call"
    RAISE = "raise"


_REASONS = {
    Action.FOLD: "Your hand is too weak to continue",
    Action.CALL: "The pot odds justify continuing",
    Action.RAISE: "You have a strong hand and want to build the pot",
}


def correct_action(category: HandCategory, pot_odds_percentage: float) -> Action:
    if category >= HandCategory.TWO_PAIR:
        return Action.RAISE
    if category == HandCategory.PAIR:
        return Action.CALL if pot_odds_percentage <= PAIR_CALL_LIMIT else Action.FOLD
    return Action.CALL if pot_odds_percentage <= HIGH_CARD_CALL_LIMIT else Action.FOLD


def generate_fold_call_raise_question(rng: Optional[random.Random] = None) -> Question:
    """Facing a river bet: fold, call or raise given hand strength and pot odds."""
    rng = resolve_rng(rng)

    def attempt() -> Optional[Question]:
        community, remaining = draw(create_deck(rng), 5)
        hole_cards, _ = draw(remaining, 2)
        hand = evaluate_hand(hole_cards, community)

        pot_size = (rng.randint(0, 29) + 5) * 10
        bet_size = int(pot_size * (0.3 + rng.random() * 0.7))
        if bet_size <= 0:
            return None
        odds = calculate_pot_odds(pot_size, bet_size)
        action = correct_action(hand.category, odds.percentage)

        options = [Option(id=kind.value, label=kind.value.title(), is_correct=kind is action) for kind in Action]
        # The trap relabels the complementary aggressive/passive line.
        if action is Action.CALL:
            options.append(Option(id="raise_bluff", label="Raise — as a bluff", is_correct=False))
        else:
            options.append(Option(id="call_slowplay", label="Call — to slow play", is_correct=False))

        return Question(
            id=new_question_id(rng),
            category=QuizCategory.FOLD_CALL_RAISE,
            question_text=f"The pot is ${pot_size} and your opponent bets ${bet_size}. What should you do?",
            scenario=FoldCallRaiseScenario(
                community_cards=tuple(community),
                hole_cards=tuple(hole_cards),
                pot_size=pot_size,
                bet_size=bet_size,
            ),
            options=tuple(shuffle(options, rng)),
            explanation=(
                f"You have {hand.name}. Pot odds are {odds.ratio} ({odds.percentage}%). {_REASONS[action]}."
            ),
        )

    return retry(MAX_ATTEMPTS, attempt, QuizCategory.FOLD_CALL_RAISE)
