from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from engine.cards import create_deck, draw, resolve_rng, shuffle
from engine.models import Option, Position, PreflopActionScenario, Question, QuizCategory
from engine.preflop import PreflopTier, classify_preflop_hand, hand_notation, tier_name

from .base import new_question_id, retry

MAX_ATTEMPTS = 100
SHORT_STACK = 40

HERO_POSITIONS = tuple(Position)

_POSITION_GROUPS = {
    Position.UTG: "early position",
    Position.MP: "middle position",
    Position.CO: "the cutoff",
    Position.BTN: "the button",
    Position.SB: "the small blind",
    Position.BB: "the big blind",
}


class PreflopAction(str, Enum):
    BET_SMALL = "betSmall"
    BET_BIG = "betBig"
    CALL = "call"
    FOLD = "fold"

    @property
    def label(self) -> str:
        return {"betSmall": "Bet Small", "betBig": "Bet Big", "call": "Call", "fold": "Fold"}[self.value]


def get_preflop_action(tier: PreflopTier, position: Position, stack: int) -> PreflopAction:
    """Decision table: seven tiers by position, with a short-stack override.

    ============  ========  ========  ==========  ========  ========
    Tier          UTG       MP        CO / BTN    SB        BB
    ============  ========  ========  ==========  ========  ========
    Premium       big       big       big         big       big
    Strong        big       big       small       big       big
    UTG open      small     small     small       small     small
    MP open       fold      small     small       small     small
    LP open       fold      fold      small       small     small
    Steal         fold      fold      BTN small   call      small
    Trash         fold      fold      fold        fold      fold
    ============  ========  ========  ==========  ========  ========

    At 40 or fewer chips every raise becomes a big bet, and the small-blind
    steal call becomes a fold.
    """
    short = stack <= SHORT_STACK
    raise_action = PreflopAction.BET_BIG if short else PreflopAction.BET_SMALL

    if tier is PreflopTier.PREMIUM:
        return PreflopAction.BET_BIG
    if tier is PreflopTier.STRONG:
        if not short and position in (Position.CO, Position.BTN):
            return PreflopAction.BET_SMALL
        return PreflopAction.BET_BIG
    if tier is PreflopTier.UTG_OPEN:
        return raise_action
    if tier is PreflopTier.MP_OPEN:
        return PreflopAction.FOLD if position is Position.UTG else raise_action
    if tier is PreflopTier.LP_OPEN:
        return PreflopAction.FOLD if position in (Position.UTG, Position.MP) else raise_action
    if tier is PreflopTier.STEAL:
        if position is Position.SB:
            return PreflopAction.FOLD if short else PreflopAction.CALL
        if position in (Position.BTN, Position.BB):
            return raise_action
        return PreflopAction.FOLD
    return PreflopAction.FOLD


def build_explanation(
    notation: str, tier: PreflopTier, position: Position, stack: int, action: PreflopAction
) -> str:
    group = _POSITION_GROUPS[position]
    if action is PreflopAction.BET_BIG:
        if stack <= SHORT_STACK:
            detail = f"With only ${stack} in chips, going all-in is the best move."
        else:
            detail = "A bigger bet builds the pot when you have strong cards like these."
    elif action is PreflopAction.BET_SMALL:
        detail = f"A small raise from {group} is a solid play with this hand."
    elif action is PreflopAction.CALL:
        detail = "Calling from the small blind is worthwhile since your cards have potential to improve."
    else:
        risky = (tier is PreflopTier.MP_OPEN and position is Position.UTG) or (
            tier is PreflopTier.LP_OPEN and position in (Position.UTG, Position.MP)
        )
        if risky:
            detail = f"This hand is risky from {group}; it plays better from later positions."
        else:
            detail = f"This hand is too weak to play from {group}."
    return f"{notation} is a {tier_name(tier)} hand. {detail}"


def _random_stack(rng: random.Random) -> int:
    return rng.randint(6, 60) * 5


def generate_preflop_action_question(rng: Optional[random.Random] = None, filtered: bool = True) -> Question:
    """Unopened pot: choose between a small raise, a big raise, a limp-call or a fold.

    With ``filtered`` set, offsuit holdings containing a seven or lower are
    skipped since they are near-automatic folds.
    """
    rng = resolve_rng(rng)

    def attempt() -> Optional[Question]:
        hole_cards, _ = draw(create_deck(rng), 2)
        if filtered and hole_cards[0].suit != hole_cards[1].suit:
            if min(card.value for card in hole_cards) <= 7:
                return None

        tier = classify_preflop_hand(hole_cards)
        notation = hand_notation(hole_cards)
        position = rng.choice(HERO_POSITIONS)
        stack = _random_stack(rng)
        action = get_preflop_action(tier, position, stack)

        options = [Option(id=kind.value, label=kind.label, is_correct=kind is action) for kind in PreflopAction]
        return Question(
            id=new_question_id(rng),
            category=QuizCategory.PREFLOP_ACTION,
            question_text=f"You are in {position.full_name} with ${stack} in chips. What do you do?",
            scenario=PreflopActionScenario(hole_cards=tuple(hole_cards), position=position, hero_stack=stack),
            options=tuple(shuffle(options, rng)),
            explanation=build_explanation(notation, tier, position, stack, action),
        )

    return retry(MAX_ATTEMPTS, attempt, QuizCategory.PREFLOP_ACTION)
