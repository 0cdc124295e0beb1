from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
SUITS = ("hearts", "diamonds", "clubs", "spades")

RANK_VALUES = {rank: idx for idx, rank in enumerate(RANKS, start=2)}
VALUE_RANKS = {value: rank for rank, value in RANK_VALUES.items()}

SUIT_SYMBOLS = {"hearts": "♥", "diamonds": "♦", "clubs": "♣", "spades": "♠"}
_SUIT_LETTERS = {"h": "hearts", "d": "diamonds", "c": "clubs", "s": "spades"}

T = TypeVar("T")

# Process-wide source used whenever a caller does not inject its own.
_RNG = random.Random()


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANK_VALUES:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUIT_SYMBOLS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def value(self) -> int:
        return RANK_VALUES[self.rank]

    @property
    def key(self) -> str:
        return f"{self.rank}_{self.suit}"

    @property
    def label(self) -> str:
        return f"{self.rank}{SUIT_SYMBOLS[self.suit]}"


def card_key(card: Card) -> str:
    return card.key


def resolve_rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else _RNG


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a uniformly shuffled copy; the input is left untouched."""
    shuffled = list(items)
    resolve_rng(rng).shuffle(shuffled)
    return shuffled


def ordered_deck() -> List[Card]:
    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


def create_deck(rng: Optional[random.Random] = None) -> List[Card]:
    return shuffle(ordered_deck(), rng)


def draw(deck: Sequence[Card], count: int) -> Tuple[List[Card], List[Card]]:
    """Split ``deck`` into the first ``count`` cards and the rest."""
    if count < 0 or count > len(deck):
        raise ValueError("Not enough cards left in deck")
    return list(deck[:count]), list(deck[count:])


def remove_cards(deck: Iterable[Card], to_remove: Iterable[Card]) -> List[Card]:
    removed = {card_key(card) for card in to_remove}
    return [card for card in deck if card_key(card) not in removed]


def has_duplicates(cards: Sequence[Card]) -> bool:
    return len({card_key(card) for card in cards}) != len(cards)


def parse_label(label: str) -> Card:
    text = label.strip()
    if len(text) not in (2, 3):
        raise ValueError(f"Invalid card label: {label}")
    rank, suit_letter = text[:-1].upper(), text[-1].lower()
    if rank == "T":
        rank = "10"
    if suit_letter not in _SUIT_LETTERS:
        raise ValueError(f"Invalid card label: {label}")
    return Card(rank, _SUIT_LETTERS[suit_letter])


def parse_cards(labels: Iterable[str]) -> List[Card]:
    return [parse_label(label) for label in labels]


def format_cards(cards: Sequence[Card]) -> str:
    if not cards:
        return "--"
    return " ".join(card.label for card in cards)
