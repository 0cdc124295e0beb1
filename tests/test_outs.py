import pytest

from engine.cards import card_key
from engine.evaluator import HandCategory, evaluate_hand
from engine.outs import find_outs

from .helpers import cards


def test_flush_draw_outs():
    hole, board = cards("Ah 5h"), cards("Kh 9h 2c")
    outs = find_outs(hole, board)

    flush_outs = [out for out in outs if out.category == HandCategory.FLUSH]
    assert len(flush_outs) == 9
    assert outs[0].card == cards("Qh")[0]
    assert outs[0].hand_name == "Flush, Ace high"


def test_outs_are_sorted_unused_and_upgrade_the_category():
    hole, board = cards("9c 8d"), cards("6h 5s Kc")
    current = evaluate_hand(hole, board)
    outs = find_outs(hole, board)

    used = {card_key(card) for card in hole + board}
    assert outs
    assert all(card_key(out.card) not in used for out in outs)
    assert all(out.category > current.category for out in outs)
    improvements = [out.improvement for out in outs]
    assert improvements == sorted(improvements, reverse=True)
    assert len([out for out in outs if out.category == HandCategory.STRAIGHT]) == 4


def test_kicker_improvements_are_not_outs():
    # Pocket aces on a paired board: a new king only changes the kicker.
    outs = find_outs(cards("Ah Ad"), cards("7c 7d 2s"))
    assert all(out.card.rank != "K" for out in outs)


def test_no_outs_when_category_cannot_improve():
    assert find_outs(cards("Ah Ad"), cards("As Ac 7d")) == []


def test_find_outs_validates_inputs():
    with pytest.raises(ValueError, match="flop or turn"):
        find_outs(cards("Ah Kd"), cards("2c 3c 4c 5c 9d"))
    with pytest.raises(ValueError, match="2 hole cards"):
        find_outs(cards("Ah"), cards("2c 3c 4c"))
    with pytest.raises(ValueError, match="Duplicate"):
        find_outs(cards("Ah Kd"), cards("Ah 3c 4c"))
