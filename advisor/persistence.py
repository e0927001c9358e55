"""
Session state persistence.

The whole ``GameState`` is stored as one JSON document and overwritten on every
save. Loading merges whatever is readable over a fresh state, so documents
written by older versions (or partially corrupted ones) still load.
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import STATE_FILE
from .state import CardCountingState, GameState, Outcome, SessionStats, SplitHand

log = logging.getLogger(__name__)


def to_document(state: GameState) -> Dict[str, Any]:
    cc = state.card_counting
    s = state.stats
    return {
        "dealerCards": list(state.dealer_cards),
        "playerCards": list(state.player_cards),
        "currentBet": state.current_bet,
        "bankroll": state.bankroll,
        "isSplit": state.is_split,
        "isDoubled": state.is_doubled,
        "splitHands": [list(h.cards) for h in state.split_hands],
        "splitHandResults": [h.result.value if h.result else None for h in state.split_hands],
        "splitHandDoubled": [h.doubled for h in state.split_hands],
        "cardCounting": {
            "runningCount": cc.running_count,
            "cardsDealt": cc.cards_dealt,
            "initialDecks": cc.initial_decks,
            "totalCards": cc.total_cards,
        },
        "stats": {
            "gamesPlayed": s.games_played,
            "wins": s.wins,
            "losses": s.losses,
            "pushes": s.pushes,
            "totalProfit": s.total_profit,
        },
        "statsHistory": list(s.history),
    }


def _get(doc: Dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = doc.get(key, default)
    if kind is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        if key in doc:
            log.warning("Ignoring saved %s=%r, expected %s", key, value, kind.__name__)
        return default
    return value


def _cards(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(c) for c in value]


def _outcome(value: Any) -> Optional[Outcome]:
    try:
        return Outcome(value) if value is not None else None
    except ValueError:
        log.warning("Ignoring unknown split result %r", value)
        return None


def from_document(doc: Dict[str, Any]) -> GameState:
    fresh = GameState()
    state = GameState(
        dealer_cards=_cards(doc.get("dealerCards")),
        player_cards=_cards(doc.get("playerCards")),
        current_bet=max(1, _get(doc, "currentBet", int, fresh.current_bet)),
        bankroll=max(0.0, _get(doc, "bankroll", float, fresh.bankroll)),
        is_doubled=_get(doc, "isDoubled", bool, False),
    )

    if doc.get("isSplit", True):
        hands = doc.get("splitHands") or []
        results = _get(doc, "splitHandResults", list, [])
        doubled = _get(doc, "splitHandDoubled", list, [])
        for i, cards in enumerate(hands if isinstance(hands, list) else []):
            state.split_hands.append(SplitHand(
                cards=_cards(cards),
                result=_outcome(results[i]) if i < len(results) else None,
                doubled=bool(doubled[i]) if i < len(doubled) else False,
            ))
        # a split round with one hand, or with every hand settled, can no longer be played
        if len(state.split_hands) < 2 or all(h.settled for h in state.split_hands):
            if state.split_hands:
                log.warning("Dropping unplayable split round with %d hands", len(state.split_hands))
            state.split_hands = []

    cc = _get(doc, "cardCounting", dict, {})
    default_cc = fresh.card_counting
    initial_decks = _get(cc, "initialDecks", int, default_cc.initial_decks)
    state.card_counting = CardCountingState(
        running_count=_get(cc, "runningCount", int, 0),
        cards_dealt=max(0, _get(cc, "cardsDealt", int, 0)),
        initial_decks=initial_decks,
        total_cards=_get(cc, "totalCards", int, None),
    )

    s = _get(doc, "stats", dict, {})
    state.stats = SessionStats(
        games_played=_get(s, "gamesPlayed", int, 0),
        wins=_get(s, "wins", int, 0),
        losses=_get(s, "losses", int, 0),
        pushes=_get(s, "pushes", int, 0),
        total_profit=_get(s, "totalProfit", float, 0.0),
        history=[p for p in _get(doc, "statsHistory", list, []) if isinstance(p, dict)],
    )
    return state


def save_state(state: GameState, path: Path = STATE_FILE) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_document(state), f, indent=2)


def load_state(path: Path = STATE_FILE) -> GameState:
    """Load the saved session. Never raises; falls back to a fresh state."""
    if not Path(path).exists():
        return GameState()
    try:
        with open(path, "r", encoding="utf-8") as f:
            doc = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Failed to load state from %s: %s", path, e)
        return GameState()
    if not isinstance(doc, dict):
        log.warning("Saved state in %s is not an object, starting fresh", path)
        return GameState()
    return from_document(doc)
