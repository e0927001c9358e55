"""
Hi-Lo card counting and count-based bet sizing.

The counter works on a ``CardCountingState`` owned by the caller; every
function here is plain arithmetic over that struct.
"""
from __future__ import annotations
import dataclasses
import enum
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Tuple

from .constants import COUNT_VALUES, DECK_SIZE
from .state import CardCountingState

log = logging.getLogger(__name__)


class CountAction(str, enum.Enum):
    ADD = "add"
    REMOVE = "remove"


class BetTier(enum.Enum):
    NEGATIVE = "negative"
    LOW = "low"
    SLIGHTLY_POSITIVE = "slightly positive"
    POSITIVE = "positive"
    GOOD = "good"
    VERY_GOOD = "very good"
    EXCELLENT = "excellent"


@dataclasses.dataclass(frozen=True)
class BetSuggestion:
    multiplier: int
    tier: BetTier
    label: str


# (inclusive upper bound, multiplier, tier, label); the last band is open-ended.
BET_SPREAD: Tuple[Tuple[float, int, BetTier, str], ...] = (
    (0, 1, BetTier.NEGATIVE, "Negative count - bet minimum"),
    (1, 1, BetTier.LOW, "Low count - bet minimum"),
    (2, 2, BetTier.SLIGHTLY_POSITIVE, "Slightly positive - bet 2x"),
    (3, 4, BetTier.POSITIVE, "Positive count - bet 4x"),
    (4, 6, BetTier.GOOD, "Good count - bet 6x"),
    (5, 8, BetTier.VERY_GOOD, "Very good count - bet 8x"),
    (float("inf"), 10, BetTier.EXCELLENT, "Excellent count - bet 10x"),
)


def round_count(value: float) -> float:
    """Round to one decimal, ties away from zero (1.25 -> 1.3, -1.25 -> -1.3)."""
    # + 0.0 folds -0.0 into 0.0
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)) + 0.0


class CardCounter:
    @staticmethod
    def count_value(card: str) -> int:
        return COUNT_VALUES.get(card, 0)

    @staticmethod
    def update(state: CardCountingState, card: str, action: CountAction | str) -> None:
        try:
            action = CountAction(action)
        except ValueError:
            log.warning("Ignoring unknown count action %r", action)
            return
        value = CardCounter.count_value(card)
        if action is CountAction.ADD:
            state.running_count += value
            state.cards_dealt += 1
        elif state.cards_dealt > 0:
            state.running_count -= value
            state.cards_dealt -= 1

    @staticmethod
    def cards_remaining(state: CardCountingState) -> int:
        return state.total_cards - state.cards_dealt

    @staticmethod
    def decks_remaining(state: CardCountingState) -> float:
        return CardCounter.cards_remaining(state) / DECK_SIZE

    @staticmethod
    def true_count(state: CardCountingState) -> float:
        decks = CardCounter.decks_remaining(state)
        if decks <= 0:
            return 0.0
        return round_count(state.running_count / decks)

    @staticmethod
    def suggested_bet(true_count: float) -> BetSuggestion:
        for upper, multiplier, tier, label in BET_SPREAD:
            if true_count <= upper:
                return BetSuggestion(multiplier, tier, label)
        # Only reachable for NaN.
        return BetSuggestion(1, BetTier.NEGATIVE, BET_SPREAD[0][3])

    @staticmethod
    def reset(state: CardCountingState) -> None:
        state.running_count = 0
        state.cards_dealt = 0
