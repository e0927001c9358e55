from __future__ import annotations
import logging
from typing import Union

from .constants import STATS_HISTORY_LIMIT
from .hand_utils import HandUtils
from .state import GameState, Outcome

log = logging.getLogger(__name__)

BLACKJACK_PAYOUT = 1.5
SURRENDER_REFUND = 0.5


class RoundLedger:
    """Applies round outcomes to bankroll and session stats.

    The effective bet is supplied by the caller; the ledger never sizes bets.
    Single-hand recorders do nothing while the round is split, and split
    results are idempotent per sub-hand.
    """

    @staticmethod
    def record_win(state: GameState, effective_bet: float) -> None:
        if state.is_split:
            return
        if HandUtils.is_blackjack(state.player_cards):
            profit = effective_bet * BLACKJACK_PAYOUT
        elif state.is_doubled:
            profit = effective_bet * 2
        else:
            profit = effective_bet
        state.stats.wins += 1
        RoundLedger._settle(state, profit)

    @staticmethod
    def record_loss(state: GameState, effective_bet: float) -> None:
        if state.is_split:
            return
        loss = effective_bet * 2 if state.is_doubled else effective_bet
        state.stats.losses += 1
        RoundLedger._settle(state, -loss)

    @staticmethod
    def record_push(state: GameState) -> None:
        if state.is_split:
            return
        state.stats.pushes += 1
        RoundLedger._settle(state, 0.0)

    @staticmethod
    def record_surrender(state: GameState, effective_bet: float) -> None:
        if state.is_split:
            return
        state.stats.losses += 1
        RoundLedger._settle(state, -effective_bet * SURRENDER_REFUND)

    @staticmethod
    def record_split_result(state: GameState, hand_index: int, result: Union[Outcome, str],
                            effective_bet: float) -> None:
        try:
            outcome = Outcome(result)
        except ValueError:
            log.warning("Ignoring unknown split result %r", result)
            return
        if not 0 <= hand_index < len(state.split_hands):
            return
        hand = state.split_hands[hand_index]
        if hand.settled:
            return

        stake = effective_bet * (2 if hand.doubled else 1)
        s = state.stats
        if outcome is Outcome.WIN:
            s.wins += 1
            delta = stake
        elif outcome is Outcome.PUSH:
            s.pushes += 1
            delta = 0.0
        else:
            s.losses += 1
            delta = -stake * SURRENDER_REFUND if outcome is Outcome.SURRENDER else -stake
            # a surrendered sub-hand is stored as a loss
            outcome = Outcome.LOSS

        hand.result = outcome
        RoundLedger._apply_profit(state, delta)

        if all(h.settled for h in state.split_hands):
            s.games_played += 1
            RoundLedger._append_history(state)
            state.clear_round()
            log.debug("Split round settled, total profit now %.2f", s.total_profit)

    @staticmethod
    def _settle(state: GameState, delta: float) -> None:
        state.stats.games_played += 1
        RoundLedger._apply_profit(state, delta)
        RoundLedger._append_history(state)
        state.clear_round()

    @staticmethod
    def _apply_profit(state: GameState, delta: float) -> None:
        state.stats.total_profit += delta
        state.bankroll = max(0.0, state.bankroll + delta)

    @staticmethod
    def _append_history(state: GameState) -> None:
        s = state.stats
        s.history.append({
            "game": s.games_played,
            "profit": s.total_profit,
            "win_rate": s.win_rate,
        })
        if len(s.history) > STATS_HISTORY_LIMIT:
            del s.history[:-STATS_HISTORY_LIMIT]
