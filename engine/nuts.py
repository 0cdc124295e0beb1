from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .cards import Card, has_duplicates, ordered_deck, remove_cards
from .evaluator import EvaluatedHand, combinations, evaluate_hand


@dataclass(frozen=True)
class HandResult:
    hole_cards: Tuple[Card, ...]
    hand: EvaluatedHand


def _check_board(community_cards: Sequence[Card]) -> None:
    if not 3 <= len(community_cards) <= 5:
        raise ValueError(f"Board must hold 3 to 5 cards, got {len(community_cards)}")
    if has_duplicates(community_cards):
        raise ValueError("Duplicate cards on board")


def _all_holdings(community_cards: Sequence[Card]) -> List[HandResult]:
    # 47 undealt cards on a river board -> C(47, 2) = 1081 holdings.
    undealt = remove_cards(ordered_deck(), community_cards)
    return [
        HandResult(tuple(hole), evaluate_hand(hole, community_cards))
        for hole in combinations(undealt, 2)
    ]


def find_nuts(community_cards: Sequence[Card]) -> HandResult:
    """Best hole-card pair for the board; the first one found wins ties."""
    _check_board(community_cards)
    best = None
    for result in _all_holdings(community_cards):
        if best is None or result.hand.score > best.hand.score:
            best = result
    assert best is not None
    return best


def find_top_n_hands(community_cards: Sequence[Card], n: int) -> List[HandResult]:
    """The ``n`` strongest distinct hand strengths available on the board, best first."""
    _check_board(community_cards)
    if n <= 0:
        return []

    ranked = sorted(_all_holdings(community_cards), key=lambda result: result.hand.score, reverse=True)
    seen = set()
    unique: List[HandResult] = []
    for result in ranked:
        if result.hand.score in seen:
            continue
        seen.add(result.hand.score)
        unique.append(result)
        if len(unique) >= n:
            break
    return unique
