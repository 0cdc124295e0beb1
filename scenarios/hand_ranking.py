from __future__ import annotations

import random
from typing import Optional

from engine.cards import create_deck, draw, resolve_rng
from engine.evaluator import evaluate_hand
from engine.models import HandRankingScenario, Question, QuizCategory

from .base import assign_option_ids, card_option, new_question_id, retry

MAX_ATTEMPTS = 50
PLAYERS = 4


def generate_hand_ranking_question(rng: Optional[random.Random] = None) -> Question:
    """Deal a river board and four hands; ask which player holds the best hand."""
    rng = resolve_rng(rng)

    def attempt() -> Optional[Question]:
        community, remaining = draw(create_deck(rng), 5)
        hands = []
        for _ in range(PLAYERS):
            hole, remaining = draw(remaining, 2)
            hands.append(tuple(hole))

        evaluated = [evaluate_hand(hole, community) for hole in hands]
        # Want a clear winner and more than one kind of hand on show.
        if len({hand.category for hand in evaluated}) < 2:
            return None
        if len({hand.score for hand in evaluated}) < PLAYERS:
            return None

        winner = max(range(PLAYERS), key=lambda idx: evaluated[idx].score)
        labels = [f"Player {idx + 1}" for idx in range(PLAYERS)]
        options = [card_option(hole, idx == winner, prefix=labels[idx]) for idx, hole in enumerate(hands)]

        summary = ". ".join(f"{labels[idx]} has {hand.name}" for idx, hand in enumerate(evaluated))
        return Question(
            id=new_question_id(rng),
            category=QuizCategory.HAND_RANKING,
            question_text="Which player has the strongest hand?",
            scenario=HandRankingScenario(community_cards=tuple(community), player_hands=tuple(hands)),
            options=tuple(assign_option_ids(options)),
            explanation=f"{summary}. {labels[winner]} wins with {evaluated[winner].name}.",
        )

    return retry(MAX_ATTEMPTS, attempt, QuizCategory.HAND_RANKING)
