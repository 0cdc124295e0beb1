import pytest

from engine.odds import PotOdds, calculate_pot_odds


def test_half_pot_bet():
    assert calculate_pot_odds(100, 50) == PotOdds(ratio="3.0:1", percentage=33.3)


def test_empty_pot():
    odds = calculate_pot_odds(0, 50)
    assert odds.ratio == "1.0:1"
    assert odds.percentage == 100


def test_rounding_is_half_up():
    # 49 / 400 = 12.25%
    odds = calculate_pot_odds(351, 49)
    assert odds.percentage == 12.3
    assert odds.ratio == "8.2:1"


def test_invalid_sizes_rejected():
    with pytest.raises(ValueError, match="Bet size must be positive"):
        calculate_pot_odds(100, 0)
    with pytest.raises(ValueError, match="negative"):
        calculate_pot_odds(-10, 5)
