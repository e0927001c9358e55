"""
Basic strategy with Hi-Lo index plays.

``StrategyEngine.recommend`` maps the player's cards, the dealer's up-card and
the counting state to a ``Recommendation``. The table is an eight-deck chart:
pairs first, then soft totals, then hard totals with count deviations and late
surrender. When the dealer shows an Ace and the player holds two cards, an
insurance decision is attached to whatever primary action is chosen.

All true-count comparisons use the one-decimal true count that is displayed.
"""
from __future__ import annotations
import dataclasses
import enum
from typing import Dict, List, Optional, Tuple

from .constants import INSURANCE_TRUE_COUNT, TEN_RANKS
from .counting import CardCounter
from .hand_utils import HandUtils
from .state import CardCountingState


class Action(str, enum.Enum):
    WAIT = "wait"
    INSURANCE = "insurance"
    NO_INSURANCE = "no-insurance"
    BLACKJACK = "blackjack"
    BUST = "bust"
    SPLIT = "split"
    DOUBLE = "double"
    STAND = "stand"
    HIT = "hit"
    SURRENDER = "surrender"


class HandType(enum.Enum):
    PAIR = "pair"
    SOFT = "soft"
    HARD = "hard"


class Reason(enum.Enum):
    AWAITING_CARDS = "awaiting cards"
    BLACKJACK = "blackjack"
    BUST = "bust"
    BASIC_STRATEGY = "basic strategy"
    INDEX_PLAY = "index play"
    BELOW_INDEX = "below index"
    CANNOT_DOUBLE = "cannot double"


ACTION_MESSAGES: Dict[Action, str] = {
    Action.WAIT: "Add cards to get recommendations",
    Action.INSURANCE: "BUY INSURANCE",
    Action.NO_INSURANCE: "NO INSURANCE",
    Action.BLACKJACK: "BLACKJACK!",
    Action.BUST: "BUST!",
    Action.SPLIT: "SPLIT",
    Action.DOUBLE: "DOUBLE",
    Action.STAND: "STAND",
    Action.HIT: "HIT",
    Action.SURRENDER: "SURRENDER",
}

# Hard 12 vs 4-6 is a stand either way; the index is still reported when reached.
HARD_12_STAND_INDEXES: Dict[int, int] = {4: 3, 5: 1, 6: -1}


def dealer_label(value: int) -> str:
    return "A" if value == 11 else str(value)


@dataclasses.dataclass(frozen=True)
class Rationale:
    """Why an action was chosen, kept apart from its display text."""
    reason: Reason
    hand_type: Optional[HandType] = None
    total: Optional[int] = None
    dealer: Optional[int] = None
    true_count: Optional[float] = None
    index: Optional[float] = None
    comparison: Optional[str] = None
    pair_rank: Optional[str] = None

    def describe(self, action: Action) -> str:
        if self.reason is Reason.AWAITING_CARDS:
            return "Waiting for player and dealer cards"
        if self.reason is Reason.BLACKJACK:
            return "Natural 21"
        if self.reason is Reason.BUST:
            return f"Hand total {self.total} is over 21"

        if self.hand_type is HandType.PAIR:
            head = f"Pair of {self.pair_rank}s vs {dealer_label(self.dealer)}"
        else:
            head = f"{self.hand_type.value.capitalize()} {self.total} vs {dealer_label(self.dealer)}"
        verb = action.value.capitalize()

        if self.reason is Reason.CANNOT_DOUBLE:
            return f"{head}: {verb} (can't double)"
        if self.reason in (Reason.INDEX_PLAY, Reason.BELOW_INDEX):
            index = f"{self.index:g}"
            return f"{head}: {verb} (TC {self.true_count:.1f} {self.comparison} {index})"
        return f"{head}: {verb}"


@dataclasses.dataclass(frozen=True)
class InsuranceAdvice:
    action: Action
    true_count: float

    @property
    def buy(self) -> bool:
        return self.action is Action.INSURANCE

    @property
    def message(self) -> str:
        return ACTION_MESSAGES[self.action]

    @property
    def details(self) -> str:
        if self.buy:
            return f"True Count {self.true_count:.1f} >= {INSURANCE_TRUE_COUNT}: Insurance is profitable"
        return f"True Count {self.true_count:.1f} < {INSURANCE_TRUE_COUNT}: Insurance is not profitable"


@dataclasses.dataclass(frozen=True)
class Recommendation:
    action: Action
    rationale: Rationale
    insurance: Optional[InsuranceAdvice] = None

    @property
    def message(self) -> str:
        return ACTION_MESSAGES[self.action]

    @property
    def details(self) -> str:
        return self.rationale.describe(self.action)


Decision = Tuple[Action, Rationale]


class _Cell:
    """One chart cell: a hand type and total against a dealer up-card at a given count."""

    def __init__(self, hand_type: HandType, total: int, dealer: int, true_count: float,
                 pair_rank: Optional[str] = None):
        self.hand_type = hand_type
        self.pair_rank = pair_rank
        self.total = total
        self.dealer = dealer
        self.true_count = true_count

    def _why(self, reason: Reason, index: Optional[float] = None, comparison: Optional[str] = None) -> Rationale:
        tc = self.true_count if index is not None else None
        return Rationale(reason, self.hand_type, self.total, self.dealer, tc, index, comparison, self.pair_rank)

    def basic(self, action: Action) -> Decision:
        return action, self._why(Reason.BASIC_STRATEGY)

    def deviation(self, action: Action, index: float, comparison: str = ">=") -> Decision:
        return action, self._why(Reason.INDEX_PLAY, index, comparison)

    def below_index(self, action: Action, index: float) -> Decision:
        return action, self._why(Reason.BELOW_INDEX, index, "<")

    def no_double(self) -> Decision:
        return Action.HIT, self._why(Reason.CANNOT_DOUBLE)


class StrategyEngine:
    def recommend(
        self,
        player_cards: List[str],
        dealer_up_card: Optional[str],
        counting: CardCountingState,
    ) -> Recommendation:
        if not player_cards or not dealer_up_card:
            return Recommendation(Action.WAIT, Rationale(Reason.AWAITING_CARDS))

        true_count = CardCounter.true_count(counting)
        total = HandUtils.calculate_value(player_cards)
        dealer = HandUtils.card_value(dealer_up_card)

        insurance = None
        if dealer_up_card == "A" and len(player_cards) == 2:
            insurance = InsuranceAdvice(
                Action.INSURANCE if true_count >= INSURANCE_TRUE_COUNT else Action.NO_INSURANCE,
                true_count,
            )

        if HandUtils.is_blackjack(player_cards):
            action, why = Action.BLACKJACK, Rationale(Reason.BLACKJACK, total=total)
        elif total > 21:
            action, why = Action.BUST, Rationale(Reason.BUST, total=total)
        elif HandUtils.can_split(player_cards):
            action, why = self._pair_decision(player_cards[0], total, dealer, true_count)
        elif HandUtils.is_soft(player_cards):
            action, why = self._soft_total_decision(total, dealer, HandUtils.can_double(player_cards), true_count)
        else:
            action, why = self._hard_total_decision(total, dealer, HandUtils.can_double(player_cards), true_count)
        return Recommendation(action, why, insurance)

    def _pair_decision(self, rank: str, total: int, up: int, tc: float) -> Decision:
        cell = _Cell(HandType.PAIR, total, up, tc, pair_rank=rank)
        if rank in ("A", "8"):
            return cell.basic(Action.SPLIT)
        if rank in TEN_RANKS:
            return cell.basic(Action.STAND)
        if rank == "9":
            if 2 <= up <= 6 or up in (8, 9):
                return cell.basic(Action.SPLIT)
            return cell.basic(Action.STAND)
        if rank == "7":
            return cell.basic(Action.SPLIT if 2 <= up <= 7 else Action.HIT)
        if rank == "6":
            return cell.basic(Action.SPLIT if 2 <= up <= 6 else Action.HIT)
        if rank == "5":
            # never split fives; play them as hard 10
            return cell.basic(Action.DOUBLE if 2 <= up <= 9 else Action.HIT)
        if rank == "4":
            return cell.basic(Action.SPLIT if up in (5, 6) else Action.HIT)
        if rank in ("2", "3"):
            return cell.basic(Action.SPLIT if 4 <= up <= 7 else Action.HIT)
        return cell.basic(Action.HIT)

    def _soft_total_decision(self, total: int, up: int, can_double: bool, tc: float) -> Decision:
        cell = _Cell(HandType.SOFT, total, up, tc)
        if total >= 20:
            return cell.basic(Action.STAND)
        if total == 19:
            if up == 6 and can_double:
                return cell.basic(Action.DOUBLE)
            return cell.basic(Action.STAND)
        if total == 18:
            if 2 <= up <= 6 and can_double:
                return cell.basic(Action.DOUBLE)
            if 9 <= up <= 11:
                return cell.basic(Action.HIT)
            return cell.basic(Action.STAND)
        if total == 17:
            if 3 <= up <= 6 and can_double:
                return cell.basic(Action.DOUBLE)
            return cell.basic(Action.HIT)
        if 13 <= total <= 16:
            if 4 <= up <= 6 and can_double:
                return cell.basic(Action.DOUBLE)
            return cell.basic(Action.HIT)
        return cell.basic(Action.HIT)

    def _hard_total_decision(self, total: int, up: int, can_double: bool, tc: float) -> Decision:
        cell = _Cell(HandType.HARD, total, up, tc)
        if total >= 17:
            if total == 17 and up == 11:
                return cell.basic(Action.SURRENDER)
            return cell.basic(Action.STAND)

        if total == 16:
            if 2 <= up <= 6:
                return cell.basic(Action.STAND)
            if up == 9:
                if tc < 0:
                    return cell.deviation(Action.SURRENDER, 0, "<")
                if tc >= 5:
                    return cell.deviation(Action.STAND, 5)
                return cell.below_index(Action.HIT, 5)
            if up == 10:
                if tc < 0:
                    return cell.deviation(Action.SURRENDER, 0, "<")
                if tc >= 1:
                    return cell.deviation(Action.STAND, 1)
                return cell.below_index(Action.HIT, 1)
            if up == 11:
                return cell.basic(Action.SURRENDER)
            return cell.basic(Action.HIT)

        if total == 15:
            if 2 <= up <= 6:
                return cell.basic(Action.STAND)
            if up == 10:
                if tc < 0:
                    return cell.deviation(Action.SURRENDER, 0, "<")
                if tc >= 4:
                    return cell.deviation(Action.STAND, 4)
                return cell.below_index(Action.HIT, 4)
            if up == 9:
                if tc >= 2:
                    return cell.deviation(Action.STAND, 2)
                return cell.below_index(Action.HIT, 2)
            if up == 11:
                if tc >= 1:
                    return cell.deviation(Action.STAND, 1)
                return cell.below_index(Action.HIT, 1)
            return cell.basic(Action.HIT)

        if total == 14:
            if 2 <= up <= 6:
                return cell.basic(Action.STAND)
            if up == 10:
                if tc < -1:
                    return cell.deviation(Action.SURRENDER, -1, "<")
                if tc >= 3:
                    return cell.deviation(Action.STAND, 3)
                return cell.below_index(Action.HIT, 3)
            return cell.basic(Action.HIT)

        if total == 13:
            if up == 2:
                if tc >= -1:
                    return cell.deviation(Action.STAND, -1)
                return cell.below_index(Action.HIT, -1)
            if 3 <= up <= 6:
                return cell.basic(Action.STAND)
            return cell.basic(Action.HIT)

        if total == 12:
            if up in (2, 3):
                if tc >= 2:
                    return cell.deviation(Action.STAND, 2)
                return cell.below_index(Action.HIT, 2)
            if up in HARD_12_STAND_INDEXES:
                index = HARD_12_STAND_INDEXES[up]
                if tc >= index:
                    return cell.deviation(Action.STAND, index)
                return cell.basic(Action.STAND)
            return cell.basic(Action.HIT)

        if total == 11:
            if not can_double:
                return cell.no_double()
            if up == 11:
                if tc >= 1:
                    return cell.deviation(Action.DOUBLE, 1)
                return cell.below_index(Action.HIT, 1)
            return cell.basic(Action.DOUBLE)

        if total == 10:
            if up in (10, 11) and can_double:
                if tc >= 4:
                    return cell.deviation(Action.DOUBLE, 4)
                return cell.below_index(Action.HIT, 4)
            if 2 <= up <= 9:
                return cell.basic(Action.DOUBLE) if can_double else cell.no_double()
            return cell.basic(Action.HIT)

        if total == 9:
            if up == 2 and can_double:
                if tc >= 1:
                    return cell.deviation(Action.DOUBLE, 1)
                return cell.below_index(Action.HIT, 1)
            if 3 <= up <= 6:
                return cell.basic(Action.DOUBLE) if can_double else cell.no_double()
            return cell.basic(Action.HIT)

        return cell.basic(Action.HIT)
