import pytest

from advisor.state import CardCountingState
from advisor.strategy import Action, Reason, StrategyEngine

engine = StrategyEngine()


def advise(cards, dealer, counting=None):
    return engine.recommend(cards, dealer, counting or CardCountingState())


def test_waits_without_cards():
    assert advise([], "5").action is Action.WAIT
    assert advise(["10", "6"], None).action is Action.WAIT
    assert advise(["10", "6"], "").action is Action.WAIT


def test_blackjack():
    rec = advise(["A", "K"], "9")
    assert rec.action is Action.BLACKJACK
    assert rec.insurance is None


def test_blackjack_vs_ace_carries_insurance(count_at):
    rec = advise(["A", "K"], "A", count_at(3))
    assert rec.action is Action.BLACKJACK
    assert rec.insurance.action is Action.INSURANCE
    assert rec.insurance.buy


def test_insurance_declined_below_three(count_at):
    rec = advise(["10", "8"], "A", count_at(2.5))
    assert rec.action is Action.STAND
    assert rec.insurance.action is Action.NO_INSURANCE
    assert "2.5 < 3" in rec.insurance.details


def test_no_insurance_offer_after_two_cards():
    assert advise(["5", "3", "4"], "A").insurance is None


def test_bust():
    assert advise(["10", "6", "K"], "7").action is Action.BUST


@pytest.mark.parametrize("pair,dealer,action", [
    ("A", "10", Action.SPLIT),
    ("8", "A", Action.SPLIT),
    ("K", "6", Action.STAND),
    ("10", "5", Action.STAND),
    ("9", "6", Action.SPLIT),
    ("9", "7", Action.STAND),
    ("9", "8", Action.SPLIT),
    ("9", "10", Action.STAND),
    ("9", "A", Action.STAND),
    ("7", "7", Action.SPLIT),
    ("7", "8", Action.HIT),
    ("6", "6", Action.SPLIT),
    ("6", "7", Action.HIT),
    ("5", "9", Action.DOUBLE),
    ("5", "10", Action.HIT),
    ("4", "5", Action.SPLIT),
    ("4", "4", Action.HIT),
    ("3", "4", Action.SPLIT),
    ("2", "7", Action.SPLIT),
    ("2", "3", Action.HIT),
    ("2", "8", Action.HIT),
])
def test_pairs(pair, dealer, action):
    assert advise([pair, pair], dealer).action is action


def test_mixed_tens_are_not_a_pair():
    rec = advise(["J", "Q"], "6")
    assert rec.action is Action.STAND
    assert rec.details == "Hard 20 vs 6: Stand"


@pytest.mark.parametrize("cards,dealer,action", [
    (["A", "9"], "6", Action.STAND),
    (["A", "8"], "6", Action.DOUBLE),
    (["A", "8"], "5", Action.STAND),
    (["A", "4", "4"], "6", Action.STAND),
    (["A", "7"], "4", Action.DOUBLE),
    (["A", "7"], "7", Action.STAND),
    (["A", "7"], "9", Action.HIT),
    (["A", "7"], "A", Action.HIT),
    (["A", "3", "4"], "4", Action.STAND),
    (["A", "6"], "3", Action.DOUBLE),
    (["A", "6"], "2", Action.HIT),
    (["A", "2", "4"], "5", Action.HIT),
    (["A", "4"], "4", Action.DOUBLE),
    (["A", "2"], "3", Action.HIT),
    (["A", "5", "5"], "10", Action.STAND),
    (["A", "A", "9"], "10", Action.STAND),
])
def test_soft_totals(cards, dealer, action):
    assert advise(cards, dealer).action is action


@pytest.mark.parametrize("tc,action", [
    (-0.5, Action.SURRENDER),
    (0, Action.HIT),
    (0.5, Action.HIT),
    (1, Action.STAND),
])
def test_hard_16_vs_10(count_at, tc, action):
    assert advise(["10", "6"], "10", count_at(tc)).action is action


def test_hard_16_vs_10_rationale(count_at):
    rec = advise(["10", "6"], "10", count_at(1.5))
    assert rec.rationale.reason is Reason.INDEX_PLAY
    assert rec.rationale.true_count == 1.5
    assert rec.rationale.index == 1
    assert rec.details == "Hard 16 vs 10: Stand (TC 1.5 >= 1)"


@pytest.mark.parametrize("tc,action", [(-1, Action.SURRENDER), (2, Action.HIT), (5, Action.STAND)])
def test_hard_16_vs_9(count_at, tc, action):
    assert advise(["9", "7"], "9", count_at(tc)).action is action


@pytest.mark.parametrize("cards,dealer,action", [
    (["10", "6"], "A", Action.SURRENDER),
    (["10", "6"], "8", Action.HIT),
    (["10", "6"], "2", Action.STAND),
    (["10", "7"], "A", Action.SURRENDER),
    (["10", "7"], "10", Action.STAND),
    (["10", "8"], "A", Action.STAND),
    (["5", "4", "3"], "7", Action.HIT),
])
def test_hard_basic(cards, dealer, action):
    assert advise(cards, dealer).action is action


@pytest.mark.parametrize("tc,dealer,action", [
    (-0.5, "10", Action.SURRENDER),
    (3.5, "10", Action.HIT),
    (4, "10", Action.STAND),
    (1.5, "9", Action.HIT),
    (2, "9", Action.STAND),
    (0.5, "A", Action.HIT),
    (1, "A", Action.STAND),
    (5, "8", Action.HIT),
    (-3, "8", Action.HIT),
    (-3, "6", Action.STAND),
])
def test_hard_15(count_at, tc, dealer, action):
    assert advise(["10", "5"], dealer, count_at(tc)).action is action


@pytest.mark.parametrize("tc,dealer,action", [
    (-1.5, "10", Action.SURRENDER),
    (-1, "10", Action.HIT),
    (3, "10", Action.STAND),
    (5, "9", Action.HIT),
    (0, "4", Action.STAND),
])
def test_hard_14(count_at, tc, dealer, action):
    assert advise(["10", "4"], dealer, count_at(tc)).action is action


@pytest.mark.parametrize("tc,dealer,action", [
    (-1, "2", Action.STAND),
    (-1.5, "2", Action.HIT),
    (-5, "3", Action.STAND),
    (5, "7", Action.HIT),
])
def test_hard_13(count_at, tc, dealer, action):
    assert advise(["10", "3"], dealer, count_at(tc)).action is action


@pytest.mark.parametrize("tc,dealer,action", [
    (2, "2", Action.STAND),
    (1.5, "3", Action.HIT),
    (-5, "4", Action.STAND),
    (-5, "5", Action.STAND),
    (-5, "6", Action.STAND),
    (5, "7", Action.HIT),
    (5, "A", Action.HIT),
])
def test_hard_12(count_at, tc, dealer, action):
    assert advise(["10", "2"], dealer, count_at(tc)).action is action


def test_hard_12_vs_4_names_the_index_only_when_reached(count_at):
    assert advise(["10", "2"], "4", count_at(3)).rationale.reason is Reason.INDEX_PLAY
    assert advise(["10", "2"], "4", count_at(2)).rationale.reason is Reason.BASIC_STRATEGY


@pytest.mark.parametrize("cards,dealer,tc,action", [
    (["6", "5"], "10", 0, Action.DOUBLE),
    (["6", "5"], "A", 0.5, Action.HIT),
    (["6", "5"], "A", 1, Action.DOUBLE),
    (["2", "4", "5"], "6", 0, Action.HIT),
    (["6", "4"], "9", 0, Action.DOUBLE),
    (["6", "4"], "10", 3.5, Action.HIT),
    (["6", "4"], "10", 4, Action.DOUBLE),
    (["6", "4"], "A", 4, Action.DOUBLE),
    (["2", "3", "5"], "5", 0, Action.HIT),
    (["5", "4"], "2", 0.5, Action.HIT),
    (["5", "4"], "2", 1, Action.DOUBLE),
    (["5", "4"], "4", 0, Action.DOUBLE),
    (["5", "4"], "7", 0, Action.HIT),
    (["2", "3", "4"], "5", 0, Action.HIT),
    (["5", "3"], "6", 5, Action.HIT),
])
def test_doubling_totals(count_at, cards, dealer, tc, action):
    assert advise(cards, dealer, count_at(tc)).action is action


def test_three_card_eleven_explains_no_double():
    rec = advise(["2", "4", "5"], "6")
    assert rec.rationale.reason is Reason.CANNOT_DOUBLE
    assert rec.details == "Hard 11 vs 6: Hit (can't double)"


def test_face_cards_count_as_ten_for_dealer(count_at):
    assert advise(["10", "6"], "K", count_at(1)).action is Action.STAND
    assert advise(["10", "6"], "Q", count_at(0)).action is Action.HIT


def test_unknown_dealer_card_is_valued_zero():
    # falls through every dealer range to the default branch
    assert advise(["10", "6"], "X").action is Action.HIT
    assert advise(["9", "9"], "X").action is Action.STAND


def test_insurance_is_not_the_primary_action(count_at):
    rec = advise(["8", "8"], "A", count_at(4))
    assert rec.action is Action.SPLIT
    assert rec.insurance.action is Action.INSURANCE


def test_rationale_uses_displayed_count():
    # 10 / 6 = 1.666..., shown as 1.7
    cc = CardCountingState(running_count=10, cards_dealt=108)
    rec = advise(["10", "5"], "A", cc)
    assert rec.action is Action.STAND
    assert rec.rationale.true_count == 1.7
    assert rec.details == "Hard 15 vs A: Stand (TC 1.7 >= 1)"


def test_pair_details():
    assert advise(["A", "A"], "6").details == "Pair of As vs 6: Split"
