"""Card management for the current round: adding, removing, splitting and doubling."""
from __future__ import annotations
from typing import List, Optional

from .constants import MIN_BET
from .counting import CardCounter, CountAction
from .hand_utils import HandUtils
from .state import GameState, HandKind, HandTarget, SplitHand


def next_split_target(state: GameState) -> Optional[int]:
    """Sub-hand that receives the next player card: fewest cards among unsettled hands, lowest index on ties."""
    best = None
    for i, hand in enumerate(state.split_hands):
        if hand.settled:
            continue
        if best is None or len(hand.cards) < len(state.split_hands[best].cards):
            best = i
    return best


def _valid_split_index(state: GameState, index: int) -> bool:
    return 0 <= index < len(state.split_hands)


def add_card(state: GameState, target: HandTarget, card: str) -> None:
    if target.kind is HandKind.DEALER:
        state.dealer_cards.append(card)
    elif target.kind is HandKind.PLAYER:
        if state.is_split:
            idx = next_split_target(state)
            if idx is None:
                return
            state.split_hands[idx].cards.append(card)
        else:
            state.player_cards.append(card)
    elif _valid_split_index(state, target.index):
        state.split_hands[target.index].cards.append(card)
    else:
        return
    CardCounter.update(state.card_counting, card, CountAction.ADD)


def remove_card(state: GameState, target: HandTarget, index: int) -> Optional[str]:
    """Remove the card at ``index`` from the target hand and revert its count. Returns the card."""
    cards: Optional[List[str]] = None
    if target.kind is HandKind.DEALER:
        cards = state.dealer_cards
    elif target.kind is HandKind.PLAYER:
        if state.is_split:
            # index runs across the split hands laid end to end
            for hand in state.split_hands:
                if index < len(hand.cards):
                    cards = hand.cards
                    break
                index -= len(hand.cards)
        else:
            cards = state.player_cards
    elif _valid_split_index(state, target.index):
        cards = state.split_hands[target.index].cards

    if cards is None or not 0 <= index < len(cards):
        return None
    card = cards.pop(index)
    CardCounter.update(state.card_counting, card, CountAction.REMOVE)
    return card


def _uncount(state: GameState, cards: List[str]) -> None:
    for card in cards:
        CardCounter.update(state.card_counting, card, CountAction.REMOVE)


def clear_hand(state: GameState, target: HandTarget) -> None:
    if target.kind is HandKind.DEALER:
        _uncount(state, state.dealer_cards)
        state.dealer_cards = []
    elif target.kind is HandKind.PLAYER:
        _uncount(state, state.player_cards)
        for hand in state.split_hands:
            _uncount(state, hand.cards)
        state.player_cards = []
        state.split_hands = []
        state.is_doubled = False
    elif _valid_split_index(state, target.index):
        hand = state.split_hands[target.index]
        _uncount(state, hand.cards)
        state.split_hands[target.index] = SplitHand()


def split_hand(state: GameState) -> bool:
    """Split a two-card pair into two one-card hands. Split hands cannot be split again."""
    if state.is_split or not HandUtils.can_split(state.player_cards):
        return False
    first, second = state.player_cards
    state.split_hands = [SplitHand([first]), SplitHand([second])]
    state.player_cards = []
    return True


def double_down(state: GameState) -> bool:
    if state.is_split or not HandUtils.can_double(state.player_cards):
        return False
    state.is_doubled = True
    return True


def double_down_split(state: GameState, hand_index: int) -> bool:
    if not _valid_split_index(state, hand_index):
        return False
    hand = state.split_hands[hand_index]
    if hand.settled or not HandUtils.can_double(hand.cards):
        return False
    hand.doubled = True
    return True


def new_hand(state: GameState) -> None:
    """Start the next round. Cards already seen stay in the count."""
    state.clear_round()


def reset_stats(state: GameState) -> None:
    state.stats.reset()


def clear_all(state: GameState) -> None:
    """Reset count, bet, cards and stats. Bankroll and deck settings are kept."""
    CardCounter.reset(state.card_counting)
    state.clear_round()
    state.current_bet = MIN_BET
    state.stats.reset()
