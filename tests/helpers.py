from __future__ import annotations

from typing import List

from engine.cards import Card, card_key, parse_cards
from engine.models import Question


def cards(text: str) -> List[Card]:
    """Parse a space separated hand such as ``"As Kd 10h"``."""
    return parse_cards(text.split())


def assert_valid_question(question: Question) -> None:
    assert question.id
    assert question.question_text
    assert question.explanation
    assert len(question.options) == 4
    assert sum(1 for option in question.options if option.is_correct) == 1
    assert len({option.id for option in question.options}) == 4
    assert len({option.label for option in question.options}) == 4


def assert_no_duplicate_cards(question: Question) -> None:
    keys = [card_key(card) for card in question.scenario.all_cards()]
    assert len(keys) == len(set(keys))
