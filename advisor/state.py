from __future__ import annotations
import dataclasses
import enum
from typing import List, Optional, Dict

from .constants import DECK_SIZE, DEFAULT_DECKS, DEFAULT_BANKROLL, MIN_BET


class Outcome(str, enum.Enum):
    WIN = "win"
    LOSS = "loss"
    PUSH = "push"
    SURRENDER = "surrender"


class HandKind(enum.Enum):
    DEALER = "dealer"
    PLAYER = "player"
    SPLIT = "split"


@dataclasses.dataclass(frozen=True)
class HandTarget:
    """Which hand a card operation applies to: the dealer, the player, or split hand N."""
    kind: HandKind
    index: int = 0

    @classmethod
    def dealer(cls) -> HandTarget:
        return cls(HandKind.DEALER)

    @classmethod
    def player(cls) -> HandTarget:
        return cls(HandKind.PLAYER)

    @classmethod
    def split(cls, index: int) -> HandTarget:
        return cls(HandKind.SPLIT, index)


@dataclasses.dataclass
class CardCountingState:
    running_count: int = 0
    cards_dealt: int = 0
    initial_decks: int = DEFAULT_DECKS
    total_cards: Optional[int] = None

    def __post_init__(self) -> None:
        if self.total_cards is None:
            self.total_cards = self.initial_decks * DECK_SIZE


@dataclasses.dataclass
class SessionStats:
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    pushes: int = 0
    total_profit: float = 0.0
    history: List[Dict[str, float]] = dataclasses.field(default_factory=list)

    @property
    def win_rate(self) -> float:
        """Wins as a percentage of games played."""
        return (self.wins / self.games_played * 100) if self.games_played > 0 else 0.0

    def reset(self) -> None:
        self.games_played = 0
        self.wins = 0
        self.losses = 0
        self.pushes = 0
        self.total_profit = 0.0
        self.history.clear()


@dataclasses.dataclass
class SplitHand:
    cards: List[str] = dataclasses.field(default_factory=list)
    result: Optional[Outcome] = None
    doubled: bool = False

    @property
    def settled(self) -> bool:
        return self.result is not None


@dataclasses.dataclass
class GameState:
    """Encapsulates the entire mutable state of the advisor session."""
    dealer_cards: List[str] = dataclasses.field(default_factory=list)
    player_cards: List[str] = dataclasses.field(default_factory=list)
    split_hands: List[SplitHand] = dataclasses.field(default_factory=list)
    current_bet: int = MIN_BET
    bankroll: float = DEFAULT_BANKROLL
    is_doubled: bool = False
    card_counting: CardCountingState = dataclasses.field(default_factory=CardCountingState)
    stats: SessionStats = dataclasses.field(default_factory=SessionStats)

    @property
    def is_split(self) -> bool:
        return bool(self.split_hands)

    @property
    def dealer_up_card(self) -> Optional[str]:
        return self.dealer_cards[0] if self.dealer_cards else None

    def clear_round(self) -> None:
        """Drop the cards and per-round flags; bankroll, bet, count and stats stay."""
        self.dealer_cards = []
        self.player_cards = []
        self.split_hands = []
        self.is_doubled = False
