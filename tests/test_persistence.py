import json

import pytest

from advisor import game_logic
from advisor.persistence import from_document, load_state, save_state, to_document
from advisor.state import GameState, HandTarget, Outcome, SplitHand


def test_save_and_load(tmp_path, state):
    path = tmp_path / "state.json"
    state.dealer_cards = ["6"]
    state.split_hands = [SplitHand(["8", "3"], result=Outcome.WIN), SplitHand(["8"], doubled=True)]
    state.current_bet = 4
    state.bankroll = 812.5
    state.card_counting.running_count = 3
    state.card_counting.cards_dealt = 40
    state.stats.wins = 2
    state.stats.games_played = 3
    state.stats.history.append({"game": 3, "profit": 12.0, "win_rate": 66.7})

    save_state(state, path)
    loaded = load_state(path)
    assert loaded == state


def test_document_uses_camel_case_keys(state):
    doc = to_document(state)
    assert doc["currentBet"] == 1
    assert doc["isSplit"] is False
    assert doc["cardCounting"] == {"runningCount": 0, "cardsDealt": 0, "initialDecks": 8, "totalCards": 432}
    assert doc["stats"]["gamesPlayed"] == 0
    assert doc["statsHistory"] == []


def test_missing_file_gives_fresh_state(tmp_path):
    assert load_state(tmp_path / "nope.json") == GameState()


def test_corrupt_file_gives_fresh_state(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_state(path) == GameState()
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_state(path) == GameState()


def test_partial_document_merges_over_defaults():
    state = from_document({"bankroll": 250, "cardCounting": {"runningCount": -4}})
    assert state.bankroll == 250.0
    assert state.current_bet == 1
    assert state.card_counting.running_count == -4
    assert state.card_counting.cards_dealt == 0
    assert state.card_counting.total_cards == 432
    assert state.stats.games_played == 0


def test_wrong_types_fall_back_to_defaults():
    state = from_document({
        "currentBet": "ten",
        "bankroll": -50,
        "isDoubled": "yes",
        "stats": {"wins": True, "totalProfit": "lots"},
        "statsHistory": [{"game": 1}, "junk"],
    })
    assert state.current_bet == 1
    assert state.bankroll == 0
    assert state.is_doubled is False
    assert state.stats.wins == 0
    assert state.stats.total_profit == 0.0
    assert state.stats.history == [{"game": 1}]


def test_split_hands_ignored_when_not_split():
    state = from_document({"isSplit": False, "splitHands": [["8"], ["8"]]})
    assert state.split_hands == []


def test_unknown_split_result_is_dropped():
    state = from_document({
        "isSplit": True,
        "splitHands": [["9", "9"], ["9"]],
        "splitHandResults": ["maybe", "push"],
        "splitHandDoubled": [True],
    })
    assert [h.result for h in state.split_hands] == [None, Outcome.PUSH]
    assert [h.doubled for h in state.split_hands] == [True, False]


def test_saved_file_is_plain_json(tmp_path, state):
    path = tmp_path / "state.json"
    save_state(state, path)
    doc = json.loads(path.read_text(encoding="utf-8"))
    assert doc["bankroll"] == 1000.0


@pytest.mark.parametrize("hands,results", [
    ([["8", "3"]], [None]),
    ([["8", "3"], ["8", "K"]], ["win", "loss"]),
    ([], []),
])
def test_unplayable_split_round_loads_unsplit(hands, results):
    state = from_document({"isSplit": True, "splitHands": hands, "splitHandResults": results})
    assert not state.is_split
    assert state.split_hands == []


def test_player_cards_reach_hand_after_loading_settled_split(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({
        "isSplit": True,
        "splitHands": [["9", "9"], ["9", "2"]],
        "splitHandResults": ["win", "push"],
    }), encoding="utf-8")
    state = load_state(path)
    game_logic.add_card(state, HandTarget.player(), "5")
    assert state.player_cards == ["5"]
