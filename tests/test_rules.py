from blackjack.common.cards import Card, Hand
from blackjack.common.rules import *


def test_number_and_face_cards():
    assert card_value(Card("7", "♥")) == 7
    assert card_value(Card("10", "♣")) == 10
    for r in ("J", "Q", "K"):
        assert card_value(Card(r, "♦")) == 10


def test_ace_is_dual_valued():
    assert card_values(Card("A", "♠")) == (11, 1)
    assert card_values(Card("9", "♠")) == (9,)


def test_no_aces_is_plain_sum(cards):
    assert hand_value(cards("2", "3", "4")) == 9
    assert hand_value(cards("K", "Q", "5")) == 25


def test_score_never_decreases_when_adding_cards(cards):
    running = []
    last = 0
    for c in cards("2", "5", "3", "4", "6", "K"):
        running.append(c)
        assert hand_value(running) >= last
        last = hand_value(running)


def test_single_ace_counts_eleven(cards):
    assert hand_value(cards("A", "9")) == 20
    assert is_soft(cards("A", "9"))


def test_aces_downgrade_one_at_a_time(cards):
    assert hand_value(cards("A", "A", "9")) == 21
    assert hand_value(cards("A", "A")) == 12
    assert hand_value(cards("A", "A", "A", "A")) == 14
    assert hand_value(cards("A", "K", "Q")) == 21
    assert not is_soft(cards("A", "K", "Q"))


def test_score_is_order_independent(cards):
    assert hand_value(cards("A", "9", "A")) == hand_value(cards("9", "A", "A")) == 21


def test_empty_hand_scores_zero():
    assert hand_value([]) == 0


def test_bust_and_natural(cards):
    assert is_bust(cards("K", "Q", "2"))
    assert not is_bust(cards("K", "Q", "A"))
    assert is_natural(cards("A", "K"))
    assert not is_natural(cards("7", "7", "7"))


def test_dealer_hits_below_17_only(cards):
    assert dealer_should_hit(cards("10", "6"))
    assert not dealer_should_hit(cards("10", "7"))
    assert not dealer_should_hit(cards("A", "6"))  # soft 17 stands
    assert not dealer_should_hit(cards("K", "8"))


def test_settle_precedence(cards):
    assert settle(cards("10", "8"), cards("K", "6", "9")) is Outcome.WIN    # house bust
    assert settle(cards("10", "9"), cards("10", "8")) is Outcome.WIN
    assert settle(cards("10", "7"), cards("10", "9")) is Outcome.LOSS
    assert settle(cards("10", "8"), cards("9", "9")) is Outcome.TIE
    assert settle(cards("10", "8", "5"), cards("K", "6", "9")) is Outcome.LOSS  # player bust first


def test_payout_with_escrowed_bet():
    assert payout(Outcome.WIN, 10) == 20
    assert payout(Outcome.WIN, 10, blackjack=True) == 25
    assert payout(Outcome.WIN, 5, blackjack=True) == 5 + 7  # floor(7.5)
    assert payout(Outcome.TIE, 10) == 10
    assert payout(Outcome.LOSS, 10) == 0


def test_outcome_labels():
    assert [o.label for o in Outcome] == ["Win", "Loss", "Tie"]


def test_hand_object(cards):
    h = Hand("player")
    for c in cards("A", "K"):
        h.add(c)
    assert h.score == 21
    assert h.is_blackjack
    assert len(h) == 2
    h.clear()
    assert h.score == 0 and len(h) == 0
