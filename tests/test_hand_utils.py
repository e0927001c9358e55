import itertools

import pytest

from advisor.hand_utils import HandUtils


@pytest.mark.parametrize("cards,expected", [
    ([], 0),
    (["A"], 11),
    (["A", "A"], 12),
    (["A", "K"], 21),
    (["10", "6"], 16),
    (["J", "Q", "K"], 30),
    (["A", "10", "5"], 16),
    (["A", "A", "9"], 21),
    (["A", "A", "A", "A"], 14),
    (["A", "9", "A", "K"], 21),
    (["9", "8", "7"], 24),
])
def test_calculate_value(cards, expected):
    assert HandUtils.calculate_value(cards) == expected


def test_value_ignores_card_order():
    hand = ["A", "7", "A", "5"]
    values = {HandUtils.calculate_value(list(p)) for p in itertools.permutations(hand)}
    assert values == {14}


def test_unknown_rank_counts_zero():
    assert HandUtils.calculate_value(["X", "7"]) == 7
    assert HandUtils.card_value("X") == 0


@pytest.mark.parametrize("cards,soft", [
    ([], False),
    (["A"], True),
    (["A", "A"], True),
    (["A", "6"], True),
    (["A", "10", "5"], False),
    (["A", "A", "9"], True),
    (["A", "5", "5"], True),
    (["A", "5", "6"], False),
    (["10", "7"], False),
])
def test_is_soft(cards, soft):
    assert HandUtils.is_soft(cards) is soft


def test_can_split_needs_same_symbol():
    assert HandUtils.can_split(["8", "8"])
    assert not HandUtils.can_split(["J", "Q"])
    assert not HandUtils.can_split(["8", "8", "8"])


def test_can_double_only_with_two_cards():
    assert HandUtils.can_double(["5", "6"])
    assert not HandUtils.can_double(["5"])
    assert not HandUtils.can_double(["2", "3", "6"])


def test_blackjack_needs_two_cards():
    assert HandUtils.is_blackjack(["A", "K"])
    assert not HandUtils.is_blackjack(["7", "7", "7"])


@pytest.mark.parametrize("code,rank", [
    ("A", "A"), ("t", "10"), ("10h", "10"), (" Kd ", "K"), ("7S", "7"), ("q", "Q"),
    ("1", None), ("", None), ("11", None), ("Z", None),
])
def test_parse_card_code(code, rank):
    assert HandUtils.parse_card_code(code) == rank


def test_describe():
    assert HandUtils.describe(["A", "6"]) == "soft 17"
    assert HandUtils.describe(["10", "6"]) == "16"
    assert HandUtils.describe(["10", "6", "K"]) == "26 (bust)"


@pytest.mark.parametrize("text,ranks,rejected", [
    ("Kd 6h t", ["K", "6", "10"], []),
    ("10h, a;  9", ["10", "A", "9"], []),
    ("", [], []),
    ("5 Zx 11", ["5"], ["Zx", "11"]),
])
def test_parse_cards(text, ranks, rejected):
    assert HandUtils.parse_cards(text) == (ranks, rejected)
