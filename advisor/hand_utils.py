from __future__ import annotations
import re
from typing import List, Optional, Tuple
from .constants import CARD_VALUES, CARD_CODE_PATTERN


class HandUtils:
    @staticmethod
    def card_value(rank: str) -> int:
        # Unknown ranks are worth nothing rather than an error.
        return CARD_VALUES.get(rank, 0)

    @staticmethod
    def calculate_value(cards: List[str]) -> int:
        total = sum(HandUtils.card_value(c) for c in cards)
        aces = cards.count("A")
        while total > 21 and aces:
            total -= 10
            aces -= 1
        return total

    @staticmethod
    def is_soft(cards: List[str]) -> bool:
        """True when at least one Ace is still counted as 11 in the best total."""
        aces = cards.count("A")
        if not aces:
            return False
        hard_total = sum(HandUtils.card_value(c) for c in cards) - aces * 10
        return hard_total + 10 <= 21

    @staticmethod
    def can_double(cards: List[str]) -> bool:
        return len(cards) == 2

    @staticmethod
    def can_split(cards: List[str]) -> bool:
        return len(cards) == 2 and cards[0] == cards[1]

    @staticmethod
    def is_blackjack(cards: List[str]) -> bool:
        return len(cards) == 2 and HandUtils.calculate_value(cards) == 21

    @staticmethod
    def parse_card_code(code: str) -> Optional[str]:
        """Normalise operator input such as ``"t"``, ``"10h"`` or ``" Kd "`` to a rank symbol."""
        match = CARD_CODE_PATTERN.match(code or "")
        if not match:
            return None
        rank = match.group(1).upper()
        return "10" if rank == "T" else rank

    @staticmethod
    def parse_cards(text: str) -> Tuple[List[str], List[str]]:
        """Split typed or pasted text like ``"Kd, 6h t"`` into ranks. Returns (ranks, rejected tokens)."""
        ranks, rejected = [], []
        for token in re.split(r"[\s,;]+", text or ""):
            if not token:
                continue
            rank = HandUtils.parse_card_code(token)
            if rank is None:
                rejected.append(token)
            else:
                ranks.append(rank)
        return ranks, rejected

    @staticmethod
    def describe(cards: List[str]) -> str:
        if not cards:
            return "0"
        total = HandUtils.calculate_value(cards)
        if total > 21:
            return f"{total} (bust)"
        return f"soft {total}" if HandUtils.is_soft(cards) else str(total)
