# blackjack/common/rules.py

import math
from enum import Enum
from typing import TYPE_CHECKING, Sequence, Tuple

from .constants import (
    ACE, ACE_HIGH, ACE_LOW, FACE_RANKS, FACE_VALUE,
    BLACKJACK_VALUE, DEALER_STANDS_ON, BLACKJACK_PAYOUT,
    RESULT_WIN, RESULT_LOSS, RESULT_TIE,
)

if TYPE_CHECKING:
    from .cards import Card


class Outcome(Enum):
    WIN = RESULT_WIN
    LOSS = RESULT_LOSS
    TIE = RESULT_TIE

    @property
    def label(self) -> str:
        return self.value


def card_values(card: "Card") -> Tuple[int, ...]:
    # Ace is dual-valued, everything else has one value
    if card.rank == ACE:
        return (ACE_HIGH, ACE_LOW)
    if card.rank in FACE_RANKS:
        return (FACE_VALUE,)
    return (int(card.rank),)


def card_value(card: "Card") -> int:
    """Base value used for scoring: Ace counts high until downgraded."""
    return card_values(card)[0]


def _score(cards: Sequence["Card"]) -> Tuple[int, int]:
    total = 0
    aces = 0
    for c in cards:
        if c.rank == ACE:
            aces += 1
        total += card_value(c)
    while total > BLACKJACK_VALUE and aces > 0:
        total -= ACE_HIGH - ACE_LOW
        aces -= 1
    return total, aces


def hand_value(cards: Sequence["Card"]) -> int:
    return _score(cards)[0]


def is_soft(cards: Sequence["Card"]) -> bool:
    # at least one Ace still counted as 11
    return _score(cards)[1] > 0


def is_bust(cards: Sequence["Card"]) -> bool:
    return hand_value(cards) > BLACKJACK_VALUE


def is_natural(cards: Sequence["Card"]) -> bool:
    return len(cards) == 2 and hand_value(cards) == BLACKJACK_VALUE


def dealer_should_hit(cards: Sequence["Card"]) -> bool:
    return hand_value(cards) < DEALER_STANDS_ON


def settle(player: Sequence["Card"], house: Sequence["Card"]) -> Outcome:
    """
    Compare finished hands. Precedence: player bust, house bust,
    higher score, push.
    """
    pv = hand_value(player)
    dv = hand_value(house)
    if pv > BLACKJACK_VALUE:
        return Outcome.LOSS
    if dv > BLACKJACK_VALUE or pv > dv:
        return Outcome.WIN
    if pv < dv:
        return Outcome.LOSS
    return Outcome.TIE


def blackjack_bonus(bet: int) -> int:
    return math.floor(bet * BLACKJACK_PAYOUT)


def payout(outcome: Outcome, bet: int, blackjack: bool = False) -> int:
    """
    Amount credited back to a balance the bet was already debited from.
    Win returns stake plus 1:1, a natural returns stake plus 3:2 rounded down,
    a push returns the stake.
    """
    if outcome is Outcome.WIN:
        return bet + (blackjack_bonus(bet) if blackjack else bet)
    if outcome is Outcome.TIE:
        return bet
    return 0
