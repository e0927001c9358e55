from __future__ import annotations

from .constants import MIN_BET
from .counting import CardCounter
from .state import GameState


def effective_bet(state: GameState, use_suggested: bool) -> int:
    """Bet at risk this round: the count-suggested units when toggled on, else the manual bet."""
    if use_suggested:
        true_count = CardCounter.true_count(state.card_counting)
        return CardCounter.suggested_bet(true_count).multiplier
    return state.current_bet


def adjust_bet(state: GameState, amount: int) -> None:
    state.current_bet = max(MIN_BET, state.current_bet + amount)


def set_bet(state: GameState, amount: int) -> None:
    if amount >= MIN_BET:
        state.current_bet = amount


def set_bankroll(state: GameState, amount: float) -> None:
    state.bankroll = max(0.0, amount)
