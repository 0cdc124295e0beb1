from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

from .cards import Card, has_duplicates


class QuizCategory(str, Enum):
    HAND_RANKING = "handRanking"
    NUTS_READING = "nutsReading"
    OUTS_IMPROVEMENT = "outsImprovement"
    BET_OR_CHECK = "betOrCheck"
    FOLD_CALL_RAISE = "foldCallRaise"
    PREFLOP_ACTION = "preflopAction"
    RANDOM_MIX = "randomMix"


class Street(str, Enum):
    PREFLOP = "Preflop"
    FLOP = "Flop"
    TURN = "Turn"
    RIVER = "River"

    @property
    def board_size(self) -> int:
        return {"Preflop": 0, "Flop": 3, "Turn": 4, "River": 5}[self.value]

    @property
    def phrase(self) -> str:
        if self is Street.PREFLOP:
            return "preflop"
        return f"on the {self.value.lower()}"


class Position(str, Enum):
    UTG = "UTG"
    MP = "MP"
    CO = "CO"
    BTN = "BTN"
    SB = "SB"
    BB = "BB"

    @property
    def full_name(self) -> str:
        return {
            "UTG": "early position (UTG)",
            "MP": "middle position (MP)",
            "CO": "the cutoff (CO)",
            "BTN": "the dealer seat (BTN)",
            "SB": "the small blind (SB)",
            "BB": "the big blind (BB)",
        }[self.value]


class RelativePosition(str, Enum):
    IN_POSITION = "IP"
    OUT_OF_POSITION = "OOP"

    @property
    def full_name(self) -> str:
        return "in position" if self is RelativePosition.IN_POSITION else "out of position"


@dataclass(frozen=True)
class Option:
    id: str
    label: str
    is_correct: bool
    cards: Tuple[Card, ...] = ()


# Scenario variants -----------------------------------------------------
# One record per question category, carrying only that category's fields.


@dataclass(frozen=True)
class HandRankingScenario:
    category: ClassVar[QuizCategory] = QuizCategory.HAND_RANKING

    community_cards: Tuple[Card, ...]
    player_hands: Tuple[Tuple[Card, ...], ...]

    def all_cards(self) -> Tuple[Card, ...]:
        return self.community_cards + tuple(card for hand in self.player_hands for card in hand)


@dataclass(frozen=True)
class NutsReadingScenario:
    category: ClassVar[QuizCategory] = QuizCategory.NUTS_READING

    community_cards: Tuple[Card, ...]
    street: Street
    target_rank: int = 1

    def all_cards(self) -> Tuple[Card, ...]:
        return self.community_cards


@dataclass(frozen=True)
class OutsScenario:
    category: ClassVar[QuizCategory] = QuizCategory.OUTS_IMPROVEMENT

    community_cards: Tuple[Card, ...]
    hole_cards: Tuple[Card, ...]
    street: Street

    def all_cards(self) -> Tuple[Card, ...]:
        return self.community_cards + self.hole_cards


@dataclass(frozen=True)
class BetOrCheckScenario:
    category: ClassVar[QuizCategory] = QuizCategory.BET_OR_CHECK

    community_cards: Tuple[Card, ...]
    hole_cards: Tuple[Card, ...]
    street: Street
    position: RelativePosition
    pot_size: int

    def all_cards(self) -> Tuple[Card, ...]:
        return self.community_cards + self.hole_cards


@dataclass(frozen=True)
class FoldCallRaiseScenario:
    category: ClassVar[QuizCategory] = QuizCategory.FOLD_CALL_RAISE

    community_cards: Tuple[Card, ...]
    hole_cards: Tuple[Card, ...]
    pot_size: int
    bet_size: int
    street: Street = Street.RIVER

    def all_cards(self) -> Tuple[Card, ...]:
        return self.community_cards + self.hole_cards


@dataclass(frozen=True)
class PreflopActionScenario:
    category: ClassVar[QuizCategory] = QuizCategory.PREFLOP_ACTION

    hole_cards: Tuple[Card, ...]
    position: Position
    hero_stack: int
    street: Street = Street.PREFLOP

    @property
    def community_cards(self) -> Tuple[Card, ...]:
        return ()

    def all_cards(self) -> Tuple[Card, ...]:
        return self.hole_cards


Scenario = Union[
    HandRankingScenario,
    NutsReadingScenario,
    OutsScenario,
    BetOrCheckScenario,
    FoldCallRaiseScenario,
    PreflopActionScenario,
]

OPTIONS_PER_QUESTION = 4


@dataclass(frozen=True)
class Question:
    id: str
    category: QuizCategory
    question_text: str
    scenario: Scenario
    options: Tuple[Option, ...]
    explanation: str

    def __post_init__(self) -> None:
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(f"Question needs {OPTIONS_PER_QUESTION} options, got {len(self.options)}")
        if sum(1 for option in self.options if option.is_correct) != 1:
            raise ValueError("Question needs exactly one correct option")
        if len({option.id for option in self.options}) != len(self.options):
            raise ValueError("Option ids must be unique")
        if self.scenario.category != self.category:
            raise ValueError(f"Scenario is for {self.scenario.category.value}, not {self.category.value}")
        if has_duplicates(self.scenario.all_cards()):
            raise ValueError("Scenario deals the same card twice")

    @property
    def correct_option(self) -> Option:
        return next(option for option in self.options if option.is_correct)

    def option(self, option_id: str) -> Optional[Option]:
        return next((option for option in self.options if option.id == option_id), None)
