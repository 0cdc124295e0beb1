"""Hold'em rules primitives shared by the scenario generators and the quiz session."""

from .cards import Card, RANKS, SUITS, card_key, create_deck, draw, parse_cards, remove_cards
from .evaluator import EvaluatedHand, HandCategory, evaluate_five, evaluate_hand
from .models import Option, Question, QuizCategory, Street
from .nuts import find_nuts, find_top_n_hands
from .odds import calculate_pot_odds
from .outs import find_outs
from .preflop import PreflopTier, classify_preflop_hand, hand_notation

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "card_key",
    "create_deck",
    "draw",
    "parse_cards",
    "remove_cards",
    "EvaluatedHand",
    "HandCategory",
    "evaluate_five",
    "evaluate_hand",
    "Option",
    "Question",
    "QuizCategory",
    "Street",
    "find_nuts",
    "find_top_n_hands",
    "calculate_pot_odds",
    "find_outs",
    "PreflopTier",
    "classify_preflop_hand",
    "hand_notation",
]
