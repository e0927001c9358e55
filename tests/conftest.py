import pytest

from advisor.constants import DECK_SIZE
from advisor.state import CardCountingState, GameState


def counting_at(true_count: float, decks: int = 8) -> CardCountingState:
    """Counting state whose true count comes out at exactly ``true_count``.

    With 108 cards dealt from an eight-deck shoe, six decks remain.
    """
    dealt = 2 * DECK_SIZE
    remaining_decks = (decks * DECK_SIZE - dealt) / DECK_SIZE
    return CardCountingState(running_count=round(true_count * remaining_decks),
                             cards_dealt=dealt, initial_decks=decks)


@pytest.fixture
def state():
    return GameState()


@pytest.fixture
def neutral_count():
    return CardCountingState()


@pytest.fixture
def count_at():
    return counting_at
