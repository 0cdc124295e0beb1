from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from engine.cards import Card, create_deck, draw, resolve_rng, shuffle
from engine.evaluator import HandCategory, evaluate_hand
from engine.models import BetOrCheckScenario, Option, Question, QuizCategory, RelativePosition, Street
from engine.outs import find_outs
from engine.preflop import PreflopTier, classify_preflop_hand, hand_notation

from .base import new_question_id, retry

MAX_ATTEMPTS = 100
# Few river deals match a row once semi-bluffs are off the table.
RIVER_MAX_ATTEMPTS = 300


class Archetype(str, Enum):
    BET_VALUE = "betValue"
    BET_SEMI_BLUFF = "betSemiBluff"
    CHECK_POT_CONTROL = "checkPotControl"
    CHECK_TRAP = "checkTrap"


class BoardTexture(str, Enum):
    DRY = "dry"
    WET = "wet"


@dataclass(frozen=True)
class ArchetypeCopy:
    label: str
    preflop_label: str
    description: str


ARCHETYPES = {
    Archetype.BET_VALUE: ArchetypeCopy(
        "Bet — for value",
        "Raise — for value",
        "You have a strong hand and want to extract value from weaker hands.",
    ),
    Archetype.BET_SEMI_BLUFF: ArchetypeCopy(
        "Bet — as a semi-bluff",
        "Raise — to steal",
        "You have a draw with equity and can win by making opponents fold or by completing your draw.",
    ),
    Archetype.CHECK_POT_CONTROL: ArchetypeCopy(
        "Check — to pot control",
        "Check — see a flop",
        "You have a medium-strength hand and want to keep the pot small.",
    ),
    Archetype.CHECK_TRAP: ArchetypeCopy(
        "Check — to trap",
        "Check — to trap",
        "You have a monster hand and want to let opponents catch up or bluff.",
    ),
}


def _pick_street(rng: random.Random) -> Street:
    roll = rng.random() * 100
    if roll < 30:
        return Street.PREFLOP
    if roll < 60:
        return Street.FLOP
    if roll < 80:
        return Street.TURN
    return Street.RIVER


def classify_board_texture(community_cards: Sequence[Card]) -> BoardTexture:
    """Wet boards carry flush potential or at least two near-connected rank gaps."""
    if not community_cards:
        return BoardTexture.DRY

    suit_threshold = 2 if len(community_cards) <= 3 else 3
    if max(Counter(card.suit for card in community_cards).values()) >= suit_threshold:
        return BoardTexture.WET

    values = sorted(card.value for card in community_cards)
    connected = sum(1 for low, high in zip(values, values[1:]) if high - low <= 2)
    return BoardTexture.WET if connected >= 2 else BoardTexture.DRY


def _has_real_draw(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> bool:
    return any(out.category >= HandCategory.STRAIGHT for out in find_outs(hole_cards, community_cards))


def preflop_archetype(tier: PreflopTier, position: RelativePosition) -> Optional[Archetype]:
    in_position = position is RelativePosition.IN_POSITION
    if tier is PreflopTier.PREMIUM or (tier is PreflopTier.STRONG and in_position):
        return Archetype.BET_VALUE
    if tier is PreflopTier.STEAL and in_position:
        return Archetype.BET_SEMI_BLUFF
    if tier in (PreflopTier.MP_OPEN, PreflopTier.LP_OPEN) and not in_position:
        return Archetype.CHECK_POT_CONTROL
    return None


def postflop_archetype(
    hole_cards: Sequence[Card],
    community_cards: Sequence[Card],
    street: Street,
    position: RelativePosition,
) -> Optional[Archetype]:
    """First matching row of the postflop table, or None when no row applies."""
    category = evaluate_hand(hole_cards, community_cards).category
    texture = classify_board_texture(community_cards)
    in_position = position is RelativePosition.IN_POSITION

    if category >= HandCategory.TWO_PAIR and texture is BoardTexture.DRY and in_position:
        return Archetype.BET_VALUE
    if (
        category <= HandCategory.PAIR
        and texture is BoardTexture.WET
        and street is not Street.RIVER
        and _has_real_draw(hole_cards, community_cards)
    ):
        return Archetype.BET_SEMI_BLUFF
    if HandCategory.PAIR <= category <= HandCategory.TWO_PAIR and texture is BoardTexture.DRY and not in_position:
        return Archetype.CHECK_POT_CONTROL
    # Trips is already a monster on the flop; later streets want a full house.
    if street is Street.FLOP and category >= HandCategory.THREE_OF_A_KIND:
        return Archetype.CHECK_TRAP
    if category >= HandCategory.FULL_HOUSE:
        return Archetype.CHECK_TRAP
    if category >= HandCategory.THREE_OF_A_KIND and texture is BoardTexture.DRY and not in_position:
        return Archetype.CHECK_TRAP
    return None


def generate_bet_or_check_question(
    rng: Optional[random.Random] = None,
    street: Optional[Street] = None,
) -> Question:
    """Ask whether to bet or check, and why, from any street."""
    rng = resolve_rng(rng)
    street = street or _pick_street(rng)

    def attempt() -> Optional[Question]:
        community, remaining = draw(create_deck(rng), street.board_size)
        hole_cards, _ = draw(remaining, 2)
        position = rng.choice(list(RelativePosition))

        if street is Street.PREFLOP:
            archetype = preflop_archetype(classify_preflop_hand(hole_cards), position)
        else:
            archetype = postflop_archetype(hole_cards, community, street, position)
        if archetype is None:
            return None

        def label(kind: Archetype) -> str:
            copy = ARCHETYPES[kind]
            return copy.preflop_label if street is Street.PREFLOP else copy.label

        options = [Option(id=f"opt_{kind.value}", label=label(kind), is_correct=kind is archetype) for kind in Archetype]

        if street is Street.PREFLOP:
            holding = hand_notation(hole_cards)
        else:
            holding = f"{evaluate_hand(hole_cards, community).name} on a {classify_board_texture(community).value} board"
        pot_size = (rng.randint(0, 19) + 5) * 10

        return Question(
            id=new_question_id(rng),
            category=QuizCategory.BET_OR_CHECK,
            question_text=f"You are {position.full_name} {street.phrase}. What should you do?",
            scenario=BetOrCheckScenario(
                community_cards=tuple(community),
                hole_cards=tuple(hole_cards),
                street=street,
                position=position,
                pot_size=pot_size,
            ),
            options=tuple(shuffle(options, rng)),
            explanation=f"You have {holding} {position.full_name}. {ARCHETYPES[archetype].description}",
        )

    attempts = RIVER_MAX_ATTEMPTS if street is Street.RIVER else MAX_ATTEMPTS
    return retry(attempts, attempt, QuizCategory.BET_OR_CHECK)
