from advisor import game_logic
from advisor.state import HandTarget, Outcome, SplitHand

DEALER = HandTarget.dealer()
PLAYER = HandTarget.player()


def deal(state, target, *cards):
    for card in cards:
        game_logic.add_card(state, target, card)


def test_add_card_counts(state):
    deal(state, DEALER, "6")
    deal(state, PLAYER, "10", "A")
    assert state.dealer_cards == ["6"]
    assert state.player_cards == ["10", "A"]
    assert state.card_counting.running_count == -1
    assert state.card_counting.cards_dealt == 3


def test_remove_card_returns_card_and_reverts_count(state):
    deal(state, PLAYER, "2", "K")
    assert game_logic.remove_card(state, PLAYER, 0) == "2"
    assert state.player_cards == ["K"]
    assert state.card_counting.running_count == -1
    assert state.card_counting.cards_dealt == 1


def test_remove_card_out_of_range(state):
    deal(state, DEALER, "5")
    assert game_logic.remove_card(state, DEALER, 3) is None
    assert game_logic.remove_card(state, HandTarget.split(0), 0) is None
    assert state.card_counting.cards_dealt == 1


def test_split_and_fill_hands_evenly(state):
    deal(state, PLAYER, "8", "8")
    assert game_logic.split_hand(state)
    assert state.player_cards == []
    assert [h.cards for h in state.split_hands] == [["8"], ["8"]]

    deal(state, PLAYER, "3", "K", "2")
    assert [h.cards for h in state.split_hands] == [["8", "3", "2"], ["8", "K"]]
    assert state.card_counting.cards_dealt == 5


def test_split_requires_a_pair(state):
    deal(state, PLAYER, "J", "Q")
    assert not game_logic.split_hand(state)
    assert not state.is_split


def test_no_resplit(state):
    deal(state, PLAYER, "8", "8")
    game_logic.split_hand(state)
    deal(state, HandTarget.split(0), "8")
    assert not game_logic.split_hand(state)
    assert len(state.split_hands) == 2


def test_next_split_target_skips_settled_hands(state):
    state.split_hands = [SplitHand(["8", "3"], result=Outcome.WIN), SplitHand(["8", "9"])]
    assert game_logic.next_split_target(state) == 1
    state.split_hands[1].result = Outcome.LOSS
    assert game_logic.next_split_target(state) is None


def test_player_card_dropped_when_every_split_hand_is_settled(state):
    state.split_hands = [SplitHand(["8"], result=Outcome.WIN), SplitHand(["8"], result=Outcome.PUSH)]
    deal(state, PLAYER, "5")
    assert state.card_counting.cards_dealt == 0


def test_add_to_explicit_split_hand(state):
    state.split_hands = [SplitHand(["A"]), SplitHand(["A"])]
    deal(state, HandTarget.split(1), "K")
    deal(state, HandTarget.split(7), "K")
    assert state.split_hands[1].cards == ["A", "K"]
    assert state.card_counting.cards_dealt == 1


def test_remove_player_card_spans_split_hands(state):
    state.split_hands = [SplitHand(["8", "3"]), SplitHand(["8", "K"])]
    state.card_counting.cards_dealt = 4
    assert game_logic.remove_card(state, PLAYER, 3) == "K"
    assert state.split_hands[1].cards == ["8"]
    assert game_logic.remove_card(state, PLAYER, 1) == "3"
    assert state.split_hands[0].cards == ["8"]


def test_clear_hand_reverts_count(state):
    deal(state, DEALER, "A")
    deal(state, PLAYER, "5", "6")
    game_logic.clear_hand(state, PLAYER)
    assert state.player_cards == []
    assert state.card_counting.running_count == -1
    assert state.card_counting.cards_dealt == 1
    game_logic.clear_hand(state, DEALER)
    assert state.card_counting.running_count == 0
    assert state.card_counting.cards_dealt == 0


def test_clear_player_hand_drops_split(state):
    deal(state, PLAYER, "4", "4")
    game_logic.split_hand(state)
    deal(state, PLAYER, "2")
    game_logic.clear_hand(state, PLAYER)
    assert not state.is_split
    assert state.card_counting.cards_dealt == 0


def test_clear_single_split_hand(state):
    deal(state, PLAYER, "4", "4")
    game_logic.split_hand(state)
    game_logic.clear_hand(state, HandTarget.split(0))
    assert state.split_hands[0].cards == []
    assert state.split_hands[1].cards == ["4"]
    assert state.card_counting.cards_dealt == 1


def test_double_down(state):
    deal(state, PLAYER, "6", "5")
    assert game_logic.double_down(state)
    assert state.is_doubled
    deal(state, PLAYER, "9")
    state.is_doubled = False
    assert not game_logic.double_down(state)


def test_double_down_split(state):
    state.split_hands = [SplitHand(["9", "2"]), SplitHand(["9"])]
    assert game_logic.double_down_split(state, 0)
    assert state.split_hands[0].doubled
    assert not game_logic.double_down_split(state, 1)
    assert not game_logic.double_down_split(state, 4)


def test_new_hand_keeps_count(state):
    deal(state, DEALER, "K")
    deal(state, PLAYER, "K", "K")
    state.is_doubled = True
    game_logic.new_hand(state)
    assert state.player_cards == [] and state.dealer_cards == []
    assert not state.is_doubled
    assert state.card_counting.running_count == -3
    assert state.card_counting.cards_dealt == 3


def test_clear_all_keeps_bankroll(state):
    deal(state, PLAYER, "2", "3")
    state.current_bet = 25
    state.bankroll = 640
    state.stats.wins = 3
    state.stats.games_played = 4
    game_logic.clear_all(state)
    assert state.card_counting.running_count == 0
    assert state.card_counting.cards_dealt == 0
    assert state.current_bet == 1
    assert state.stats.games_played == 0
    assert state.player_cards == []
    assert state.bankroll == 640


def test_reset_stats(state):
    state.stats.games_played = 2
    state.stats.history.append({"game": 1, "profit": 1, "win_rate": 100.0})
    game_logic.reset_stats(state)
    assert state.stats.games_played == 0
    assert state.stats.history == []
