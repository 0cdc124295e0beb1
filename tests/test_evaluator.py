import pytest

from engine.cards import create_deck
from engine.evaluator import HandCategory, combinations, evaluate_five, evaluate_hand

from .helpers import cards


def test_evaluate_five_identifies_all_hand_categories():
    cases = [
        (HandCategory.ROYAL_FLUSH, "Ah Kh Qh Jh Th"),
        (HandCategory.STRAIGHT_FLUSH, "9s 8s 7s 6s 5s"),
        (HandCategory.FOUR_OF_A_KIND, "As Ah Ad Ac Kd"),
        (HandCategory.FULL_HOUSE, "Qc Qd Qs 9h 9s"),
        (HandCategory.FLUSH, "Ah Jh 9h 6h 2h"),
        (HandCategory.STRAIGHT, "9h 8d 7c 6s 5h"),
        (HandCategory.THREE_OF_A_KIND, "8h 8d 8s Qd Js"),
        (HandCategory.TWO_PAIR, "7h 7d 4s 4c As"),
        (HandCategory.PAIR, "6h 6s Qh 8d 4c"),
        (HandCategory.HIGH_CARD, "As Kd Jh 9c 4d"),
    ]

    scores = []
    for expected, text in cases:
        hand = evaluate_five(cards(text))
        assert hand.category == expected, f"cards={text}"
        scores.append(hand.score)

    assert scores == sorted(scores, reverse=True)
    assert len(set(scores)) == len(scores)


def test_hand_names_read_naturally():
    assert evaluate_five(cards("Ah Kh Qh Jh 10h")).name == "Royal Flush"
    assert evaluate_five(cards("Kc Kd Ks 2h 2s")).name == "Full House, Kings full of Twos"
    assert evaluate_five(cards("Ah Ad Kc Ks 3d")).name == "Two Pair, Aces and Kings"
    assert evaluate_five(cards("Th Ts 9c 4d 2s")).name == "Pair of Tens"
    assert evaluate_five(cards("Ac Jd 9h 6s 3c")).name == "Ace High"
    assert HandCategory.THREE_OF_A_KIND.display == "Three of a Kind"


def test_wheel_scores_below_six_high_straight():
    wheel = evaluate_five(cards("Ah 2d 3c 4s 5h"))
    six_high = evaluate_five(cards("2h 3d 4c 5s 6h"))
    assert wheel.category == HandCategory.STRAIGHT
    assert wheel.name == "Straight, Five high"
    assert wheel.score < six_high.score


def test_steel_wheel_scores_below_six_high_straight_flush():
    steel_wheel = evaluate_five(cards("Ad 2d 3d 4d 5d"))
    six_high = evaluate_five(cards("2c 3c 4c 5c 6c"))
    assert steel_wheel.category == HandCategory.STRAIGHT_FLUSH
    assert steel_wheel.score < six_high.score


def test_ace_does_not_wrap_around():
    hand = evaluate_five(cards("Qh Kd Ac 2s 3h"))
    assert hand.category == HandCategory.HIGH_CARD


def test_kickers_break_ties_within_a_category():
    assert evaluate_five(cards("Ah Ad Kc Qs 9h")).score > evaluate_five(cards("As Ac Kd Qh 8h")).score
    assert evaluate_five(cards("Kh Kd 5c 5s 9h")).score > evaluate_five(cards("Ks Kc 4d 4h Ah")).score
    assert evaluate_five(cards("Ah Jh 9h 6h 3h")).score > evaluate_five(cards("As Js 9s 6s 2s")).score
    assert evaluate_five(cards("7h 7d 7s Ac 2d")).score > evaluate_five(cards("7c 7h 7d Kc Qd")).score


def test_equal_strength_hands_share_a_score():
    first = evaluate_five(cards("Ah Kd Qc Js 9h"))
    second = evaluate_five(cards("Ad Kh Qs Jc 9d"))
    assert first.score == second.score


def test_evaluate_five_rejects_wrong_card_counts():
    with pytest.raises(ValueError, match="exactly 5 cards"):
        evaluate_five(cards("Ah Kh Qh Jh"))
    with pytest.raises(ValueError, match="exactly 5 cards"):
        evaluate_five(cards("Ah Kh Qh Jh Th 9h"))


def test_evaluate_five_rejects_duplicate_cards():
    with pytest.raises(ValueError, match="Duplicate"):
        evaluate_five(cards("Ah Ah Qh Jh Th"))


def test_evaluate_hand_picks_best_five_of_seven():
    hand = evaluate_hand(cards("Ah 2d"), cards("3c 4s 5h 9d Kd"))
    assert hand.category == HandCategory.STRAIGHT
    assert hand.name == "Straight, Five high"

    hand = evaluate_hand(cards("Qh Jh"), cards("Ah Kh Th 2c 2d"))
    assert hand.category == HandCategory.ROYAL_FLUSH
    assert len(hand.cards) == 5


def test_evaluate_hand_requires_five_cards():
    with pytest.raises(ValueError, match="at least 5 cards"):
        evaluate_hand(cards("Ah Kd"), cards("2c 3c"))


def test_evaluate_hand_matches_brute_force_over_random_deals():
    for _ in range(40):
        deck = create_deck()
        hole, board = deck[:2], deck[2:7]
        best = evaluate_hand(hole, board)
        brute = max(evaluate_five(combo).score for combo in combinations(hole + board, 5))
        assert best.score == brute


def test_combinations_edge_cases():
    assert combinations([1, 2, 3], 0) == [[]]
    assert combinations([1, 2], 3) == []
    assert len(combinations(list(range(7)), 5)) == 21
    subsets = combinations(list(range(6)), 3)
    assert len({tuple(subset) for subset in subsets}) == len(subsets) == 20
    # Pure: repeated calls give identical results.
    assert combinations("abcd", 2) == combinations("abcd", 2)
    with pytest.raises(ValueError):
        combinations([1, 2], -1)
