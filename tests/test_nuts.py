import pytest

from engine.cards import card_key, create_deck
from engine.evaluator import HandCategory
from engine.nuts import find_nuts, find_top_n_hands

from .helpers import cards


def test_find_nuts_finds_the_royal_flush():
    board = cards("Ah Kh Qh 2c 7d")
    nuts = find_nuts(board)
    assert nuts.hand.category == HandCategory.ROYAL_FLUSH
    assert {card_key(card) for card in nuts.hole_cards} == {card_key(card) for card in cards("Jh Th")}


def test_find_nuts_on_a_flop_board():
    nuts = find_nuts(cards("2c 7d 9h"))
    assert nuts.hand.name == "Three of a Kind, Nines"


def test_top_n_hands_are_strictly_descending_and_distinct():
    board = cards("Ah Kh Qh 2c 7d")
    top = find_top_n_hands(board, 3)
    assert [result.hand.category for result in top] == [
        HandCategory.ROYAL_FLUSH,
        HandCategory.FLUSH,
        HandCategory.FLUSH,
    ]
    scores = [result.hand.score for result in top]
    assert scores == sorted(set(scores), reverse=True)


def test_top_n_hands_agree_with_find_nuts_on_random_boards():
    for _ in range(3):
        board = create_deck()[:5]
        top = find_top_n_hands(board, 6)
        assert 0 < len(top) <= 6
        assert top[0].hand.score == find_nuts(board).hand.score
        scores = [result.hand.score for result in top]
        assert all(high > low for high, low in zip(scores, scores[1:]))
        board_keys = {card_key(card) for card in board}
        for result in top:
            assert not board_keys & {card_key(card) for card in result.hole_cards}


def test_top_n_hands_with_non_positive_n():
    assert find_top_n_hands(cards("Ah Kh Qh 2c 7d"), 0) == []


def test_board_size_is_validated():
    with pytest.raises(ValueError, match="Board must hold"):
        find_nuts(cards("Ah Kh"))
    with pytest.raises(ValueError, match="Board must hold"):
        find_top_n_hands(cards("Ah Kh Qh Jh Th 9h"), 2)
    with pytest.raises(ValueError, match="Duplicate"):
        find_nuts(cards("Ah Ah Qh"))
