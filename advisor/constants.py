from typing import Tuple, Dict
import os
import re
from pathlib import Path

# --- CONSTANTS & CONFIGURATION ---

RANKS: Tuple[str, ...] = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
CARD_VALUES: Dict[str, int] = {
    "A": 11, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6,
    "7": 7, "8": 8, "9": 9, "10": 10, "J": 10, "Q": 10, "K": 10,
}
TEN_RANKS: Tuple[str, ...] = ("10", "J", "Q", "K")

# Hi-Lo tags
COUNT_VALUES: Dict[str, int] = {
    "2": 1, "3": 1, "4": 1, "5": 1, "6": 1,
    "7": 0, "8": 0, "9": 0,
    "10": -1, "J": -1, "Q": -1, "K": -1, "A": -1,
}
CARD_ICONS: Dict[str, str] = {
    "A": "🂡", "2": "🂢", "3": "🂣", "4": "🂤", "5": "🂥", "6": "🂦", "7": "🂧",
    "8": "🂨", "9": "🂩", "10": "🂪", "J": "🂫", "Q": "🂭", "K": "🂮",
}
CARD_CODE_PATTERN = re.compile(r"^\s*(10|[2-9]|[TJQKA])\s*[HDCS]?\s*$", re.IGNORECASE)

# The shoe is sized with 54 cards per deck, both for total cards and decks remaining.
DECK_SIZE = 54
DEFAULT_DECKS = 8
DEFAULT_BANKROLL = 1000.0
MIN_BET = 1
INSURANCE_TRUE_COUNT = 3
STATS_HISTORY_LIMIT = 500

DATA_DIR = Path(os.environ.get("BLACKJACK_ADVISOR_HOME", Path(__file__).parent.parent))
STATE_FILE = DATA_DIR / "advisor_state.json"
HISTORY_FILE = DATA_DIR / "advisor_history.json"
