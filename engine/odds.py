from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

_ONE_PLACE = Decimal("0.1")


@dataclass(frozen=True)
class PotOdds:
    ratio: str
    percentage: float


def calculate_pot_odds(pot_size: int, bet_size: int) -> PotOdds:
    """Pot odds for calling ``bet_size`` into ``pot_size``.

    ``percentage`` is the share of the final pot the call represents, i.e. the
    equity needed to break even.
    """
    if bet_size <= 0:
        raise ValueError("Bet size must be positive")
    if pot_size < 0:
        raise ValueError("Pot size cannot be negative")

    total = Decimal(pot_size) + Decimal(bet_size)
    percentage = (Decimal(bet_size) / total * 100).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)
    ratio = (total / Decimal(bet_size)).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)
    return PotOdds(ratio=f"{ratio}:1", percentage=float(percentage))
