from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .cards import Card, card_key, has_duplicates, ordered_deck
from .evaluator import HandCategory, evaluate_hand


@dataclass(frozen=True)
class Out:
    card: Card
    improvement: int
    hand_name: str
    category: HandCategory


def find_outs(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> List[Out]:
    """Undealt cards that lift the hand into a higher category, biggest score gain first.

    A card that only improves kickers is not an out.
    """
    if len(hole_cards) != 2:
        raise ValueError(f"Expected 2 hole cards, got {len(hole_cards)}")
    if len(community_cards) not in (3, 4):
        raise ValueError(f"Outs need a flop or turn board, got {len(community_cards)} cards")
    used = list(hole_cards) + list(community_cards)
    if has_duplicates(used):
        raise ValueError("Duplicate cards between hole and board")

    current = evaluate_hand(hole_cards, community_cards)
    used_keys = {card_key(card) for card in used}

    outs: List[Out] = []
    for card in ordered_deck():
        if card_key(card) in used_keys:
            continue
        hand = evaluate_hand(hole_cards, [*community_cards, card])
        if hand.category > current.category:
            outs.append(Out(card, hand.score - current.score, hand.name, hand.category))

    outs.sort(key=lambda out: out.improvement, reverse=True)
    return outs
