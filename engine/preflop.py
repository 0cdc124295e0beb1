from __future__ import annotations

from enum import IntEnum
from typing import Dict, FrozenSet, List, Sequence

from .cards import RANKS, Card

_RANK_CHARS = {rank: ("T" if rank == "10" else rank) for rank in RANKS}
_CHAR_ORDER = "AKQJT98765432"


class PreflopTier(IntEnum):
    TRASH = 1
    STEAL = 2
    LP_OPEN = 3
    MP_OPEN = 4
    UTG_OPEN = 5
    STRONG = 6
    PREMIUM = 7


# Static partition of the 169 starting-hand classes; anything not listed is trash.
TIER_HANDS: Dict[PreflopTier, FrozenSet[str]] = {
    PreflopTier.PREMIUM: frozenset({"AA", "KK", "QQ", "AKs"}),
    PreflopTier.STRONG: frozenset({"JJ", "TT", "AQs", "AJs", "AKo", "KQs"}),
    PreflopTier.UTG_OPEN: frozenset({
        "99", "88",
        "ATs", "KJs", "KTs", "QJs", "QTs", "JTs",
        "AQo", "AJo",
    }),
    PreflopTier.MP_OPEN: frozenset({
        "77", "66",
        "A9s", "A8s", "A7s", "A6s", "A5s",
        "K9s", "Q9s", "J9s", "T9s", "98s", "87s",
        "ATo", "KQo", "KJo",
    }),
    PreflopTier.LP_OPEN: frozenset({
        "55", "44",
        "A4s", "A3s", "A2s",
        "K8s", "K7s", "K6s", "Q8s", "J8s", "T8s",
        "76s", "65s", "54s",
        "KTo", "QJo", "JTo",
    }),
    PreflopTier.STEAL: frozenset({
        "33", "22",
        "K5s", "K4s", "K3s", "K2s",
        "Q7s", "Q6s", "Q5s", "Q4s", "Q3s", "Q2s",
        "J7s", "T7s", "97s", "86s", "75s", "64s", "53s", "43s",
        "QTo", "T9o",
        "A9o", "A8o", "A7o", "A6o", "A5o", "A4o", "A3o", "A2o",
    }),
}

_TIER_NAMES = {
    PreflopTier.PREMIUM: "premium",
    PreflopTier.STRONG: "strong",
    PreflopTier.UTG_OPEN: "solid",
    PreflopTier.MP_OPEN: "playable",
    PreflopTier.LP_OPEN: "speculative",
    PreflopTier.STEAL: "marginal",
    PreflopTier.TRASH: "weak",
}


def hand_notation(hole_cards: Sequence[Card]) -> str:
    """Canonical shorthand such as ``AKs``, ``QJo`` or ``TT``, independent of card order."""
    if len(hole_cards) != 2:
        raise ValueError(f"Expected 2 hole cards, got {len(hole_cards)}")
    first, second = hole_cards
    if first == second:
        raise ValueError("Hole cards must be distinct")
    high, low = (first, second) if first.value >= second.value else (second, first)
    if high.rank == low.rank:
        return _RANK_CHARS[high.rank] * 2
    suffix = "s" if high.suit == low.suit else "o"
    return f"{_RANK_CHARS[high.rank]}{_RANK_CHARS[low.rank]}{suffix}"


def classify_notation(notation: str) -> PreflopTier:
    for tier in sorted(TIER_HANDS, reverse=True):
        if notation in TIER_HANDS[tier]:
            return tier
    return PreflopTier.TRASH


def classify_preflop_hand(hole_cards: Sequence[Card]) -> PreflopTier:
    return classify_notation(hand_notation(hole_cards))


def hand_classes() -> List[str]:
    """All 169 canonical starting-hand classes: 13 pairs, 78 suited, 78 offsuit."""
    classes = []
    for idx, high in enumerate(_CHAR_ORDER):
        classes.append(high * 2)
        for low in _CHAR_ORDER[idx + 1:]:
            classes.append(f"{high}{low}s")
            classes.append(f"{high}{low}o")
    return classes


def tier_name(tier: PreflopTier) -> str:
    return _TIER_NAMES[tier]
