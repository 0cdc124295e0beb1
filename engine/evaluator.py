from __future__ import annotations

import itertools
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple, TypeVar

from .cards import Card, VALUE_RANKS, has_duplicates

T = TypeVar("T")

# Slot exponents for the primary group, secondary group and remaining kickers.
_CATEGORY_WEIGHT = 10**10
_SLOT_WEIGHTS = (10**8, 10**6, 10**4, 10**2, 1)

_RANK_NAMES = {
    "A": "Ace", "K": "King", "Q": "Queen", "J": "Jack", "10": "Ten", "9": "Nine",
    "8": "Eight", "7": "Seven", "6": "Six", "5": "Five", "4": "Four", "3": "Three", "2": "Two",
}
_PLURAL_NAMES = {
    "A": "Aces", "K": "Kings", "Q": "Queens", "J": "Jacks", "10": "Tens", "9": "Nines",
    "8": "Eights", "7": "Sevens", "6": "Sixes", "5": "Fives", "4": "Fours", "3": "Threes", "2": "Twos",
}


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def display(self) -> str:
        return self.name.replace("_", " ").title().replace(" Of ", " of ").replace(" A ", " a ")


@dataclass(frozen=True)
class EvaluatedHand:
    category: HandCategory
    score: int
    cards: Tuple[Card, ...]
    name: str


def combinations(items: Sequence[T], k: int) -> List[List[T]]:
    """All ``k``-sized subsets of ``items`` in lexicographic index order."""
    if k < 0:
        raise ValueError("Subset size must be non-negative")
    return [list(combo) for combo in itertools.combinations(items, k)]


def _score(category: HandCategory, groups: Sequence[int]) -> int:
    score = category * _CATEGORY_WEIGHT
    for weight, value in zip(_SLOT_WEIGHTS, groups):
        score += value * weight
    return score


def _rank_name(value: int) -> str:
    return _RANK_NAMES[VALUE_RANKS[value]]


def _plural(value: int) -> str:
    return _PLURAL_NAMES[VALUE_RANKS[value]]


def _straight_high(values: Sequence[int]) -> Optional[int]:
    """High card of a straight over five descending values; the wheel is 5-high."""
    if len(set(values)) != 5:
        return None
    if values[0] - values[4] == 4:
        return values[0]
    if list(values) == [14, 5, 4, 3, 2]:
        return 5
    return None


def evaluate_five(cards: Sequence[Card]) -> EvaluatedHand:
    """Score exactly five cards.

    The score is ``category * 10^10`` plus the rank groups (by count, then
    value) in descending power-of-100 slots, so comparing two scores compares
    the hands under standard Hold'em rules.
    """
    if len(cards) != 5:
        raise ValueError(f"evaluate_five requires exactly 5 cards, got {len(cards)}")
    if has_duplicates(cards):
        raise ValueError("Duplicate cards in hand")

    ordered = tuple(sorted(cards, key=lambda card: card.value, reverse=True))
    values = [card.value for card in ordered]
    is_flush = len({card.suit for card in ordered}) == 1
    straight_high = _straight_high(values)

    if is_flush and straight_high:
        if straight_high == 14:
            return EvaluatedHand(HandCategory.ROYAL_FLUSH, _score(HandCategory.ROYAL_FLUSH, [14]), ordered, "Royal Flush")
        return EvaluatedHand(
            HandCategory.STRAIGHT_FLUSH,
            _score(HandCategory.STRAIGHT_FLUSH, [straight_high]),
            ordered,
            f"Straight Flush, {_rank_name(straight_high)} high",
        )

    counts = Counter(values)
    groups = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    pattern = [count for _, count in groups]
    grouped = [value for value, _ in groups]

    if pattern[0] == 4:
        category, name = HandCategory.FOUR_OF_A_KIND, f"Four of a Kind, {_plural(grouped[0])}"
    elif pattern[:2] == [3, 2]:
        category = HandCategory.FULL_HOUSE
        name = f"Full House, {_plural(grouped[0])} full of {_plural(grouped[1])}"
    elif is_flush:
        return EvaluatedHand(
            HandCategory.FLUSH, _score(HandCategory.FLUSH, values), ordered, f"Flush, {_rank_name(values[0])} high"
        )
    elif straight_high:
        return EvaluatedHand(
            HandCategory.STRAIGHT,
            _score(HandCategory.STRAIGHT, [straight_high]),
            ordered,
            f"Straight, {_rank_name(straight_high)} high",
        )
    elif pattern[0] == 3:
        category, name = HandCategory.THREE_OF_A_KIND, f"Three of a Kind, {_plural(grouped[0])}"
    elif pattern[:2] == [2, 2]:
        category = HandCategory.TWO_PAIR
        name = f"Two Pair, {_plural(grouped[0])} and {_plural(grouped[1])}"
    elif pattern[0] == 2:
        category, name = HandCategory.PAIR, f"Pair of {_plural(grouped[0])}"
    else:
        category, name = HandCategory.HIGH_CARD, f"{_rank_name(values[0])} High"

    return EvaluatedHand(category, _score(category, grouped), ordered, name)


def evaluate_hand(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> EvaluatedHand:
    """Return the best five-card hand from hole + community cards (21 subsets for 7 cards)."""
    cards = list(hole_cards) + list(community_cards)
    if len(cards) < 5:
        raise ValueError(f"evaluate_hand needs at least 5 cards, got {len(cards)}")

    best: Optional[EvaluatedHand] = None
    for combo in combinations(cards, 5):
        hand = evaluate_five(combo)
        if best is None or hand.score > best.score:
            best = hand
    assert best is not None
    return best
