# blackjack/game/round.py

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List

from blackjack.common.cards import Card, Deck, Hand
from blackjack.common.constants import BLACKJACK_VALUE, STAND
from blackjack.common.logging_utils import get_logger, log_hand
from blackjack.common.records import Player
from blackjack.common.rules import Outcome, dealer_should_hit, hand_value, payout, settle
from blackjack.cli.ui import Console, ask_bet, ask_decision, show_table

if TYPE_CHECKING:
    from .session import SessionContext

log = get_logger("game.round")


class RoundState(Enum):
    BETTING = "betting"
    DEALING = "dealing"
    PLAYER_TURN = "player_turn"
    HOUSE_TURN = "house_turn"
    SETTLEMENT = "settlement"
    DONE = "done"


@dataclass
class RoundResult:
    outcome: Outcome
    bet: int
    payout: int                # credited back at settlement (bet was debited up front)
    player_cards: List[Card]
    house_cards: List[Card]
    blackjack: bool = False
    player_bust: bool = False
    trace: List[RoundState] = field(default_factory=list)

    @property
    def player_score(self) -> int:
        return hand_value(self.player_cards)

    @property
    def house_score(self) -> int:
        return hand_value(self.house_cards)

    @property
    def net(self) -> int:
        return self.payout - self.bet


class RoundController:
    """
    One hand of play against the house.

    The bet is escrowed: it leaves the balance in BETTING and the payout
    (stake included) is credited when the outcome is known.
    """

    def __init__(self, console: Console, player: Player, deck: Deck) -> None:
        self.console = console
        self.player = player
        self.deck = deck
        self.player_hand = Hand("player")
        self.house_hand = Hand("house")
        self.state = RoundState.BETTING
        self.trace: List[RoundState] = []
        self.bet = 0
        self.outcome: Outcome = Outcome.LOSS
        self.credited = 0
        self.blackjack = False
        self.player_bust = False

    def play(self) -> RoundResult:
        handlers: Dict[RoundState, Callable[[], RoundState]] = {
            RoundState.BETTING: self._betting,
            RoundState.DEALING: self._dealing,
            RoundState.PLAYER_TURN: self._player_turn,
            RoundState.HOUSE_TURN: self._house_turn,
            RoundState.SETTLEMENT: self._settlement,
        }
        while self.state is not RoundState.DONE:
            self.trace.append(self.state)
            self.state = handlers[self.state]()
        self.trace.append(RoundState.DONE)

        result = RoundResult(
            outcome=self.outcome,
            bet=self.bet,
            payout=self.credited,
            player_cards=self.player_hand.cards,
            house_cards=self.house_hand.cards,
            blackjack=self.blackjack,
            player_bust=self.player_bust,
            trace=list(self.trace),
        )
        log.info(
            f"Round over: {result.outcome.label} bet={result.bet} payout={result.payout} "
            f"pv={result.player_score} dv={result.house_score} balance={self.player.balance}"
        )
        self.player_hand.clear()
        self.house_hand.clear()
        return result

    # -------------------------
    # States
    # -------------------------
    def _betting(self) -> RoundState:
        self.console.say(f"Your current balance: ${self.player.balance}")
        self.bet = ask_bet(self.console, self.player.balance)
        self.player.debit(self.bet)
        log.debug(f"Bet {self.bet} escrowed, balance={self.player.balance}")
        return RoundState.DEALING

    def _dealing(self) -> RoundState:
        for _ in range(2):
            self._hit(self.player_hand)
            self._hit(self.house_hand)

        log_hand(log, "player", self.player_hand.cards, self.player_hand.score, note="initial deal")
        log_hand(log, "house", self.house_hand.cards[:1], note="initial deal (up card)")
        show_table(self.console, self.player_hand.cards, self.house_hand.cards, reveal_house=False)

        if not self.player_hand.is_blackjack:
            return RoundState.PLAYER_TURN

        show_table(self.console, self.player_hand.cards, self.house_hand.cards, reveal_house=True)
        if self.house_hand.is_blackjack:
            self.console.say("Both you and the house have Blackjack. It's a tie.")
            self._finish(Outcome.TIE)
        else:
            self.console.say("Congratulations! You have Blackjack!")
            self._finish(Outcome.WIN, blackjack=True)
        return RoundState.DONE

    def _player_turn(self) -> RoundState:
        while True:
            decision = ask_decision(self.console)
            if decision == STAND:
                log.debug("Player stands")
                return RoundState.HOUSE_TURN

            # HIT
            card = self._hit(self.player_hand)
            log_hand(log, "player", self.player_hand.cards, self.player_hand.score, note=f"hit {card}")
            show_table(self.console, self.player_hand.cards, self.house_hand.cards, reveal_house=False)

            if self.player_hand.is_bust:
                self.console.say("Busted! You lose.")
                self.player_bust = True
                self._finish(Outcome.LOSS)
                return RoundState.DONE
            if self.player_hand.score == BLACKJACK_VALUE:
                self.console.say(f"You have {BLACKJACK_VALUE}!")
                return RoundState.HOUSE_TURN

    def _house_turn(self) -> RoundState:
        self.console.say(f"\nHouse reveals {self.house_hand.cards[1]}.")
        while dealer_should_hit(self.house_hand.cards):
            card = self._hit(self.house_hand)
            self.console.say(f"House drew {card}.")
            log_hand(log, "house", self.house_hand.cards, self.house_hand.score, note=f"hit {card}")
        log_hand(log, "house", self.house_hand.cards, self.house_hand.score, note="stands", level=logging.INFO)
        show_table(self.console, self.player_hand.cards, self.house_hand.cards, reveal_house=True)
        return RoundState.SETTLEMENT

    def _settlement(self) -> RoundState:
        outcome = settle(self.player_hand.cards, self.house_hand.cards)
        if outcome is Outcome.WIN and self.house_hand.is_bust:
            self.console.say("House busted! You win!")
        elif outcome is Outcome.WIN:
            self.console.say("You win!")
        elif outcome is Outcome.LOSS:
            self.console.say("You lose!")
        else:
            self.console.say("It's a tie.")
        self._finish(outcome)
        return RoundState.DONE

    # -------------------------
    # Helpers
    # -------------------------
    def _hit(self, hand: Hand) -> Card:
        card = self.deck.draw()
        hand.add(card)
        return card

    def _finish(self, outcome: Outcome, blackjack: bool = False) -> None:
        self.outcome = outcome
        self.blackjack = blackjack
        self.credited = payout(outcome, self.bet, blackjack=blackjack)
        self.player.credit(self.credited)


def play_one_round(ctx: "SessionContext", deck: Deck) -> RoundResult:
    """
    Plays exactly one round for the session's current player.
    """
    if ctx.player is None:
        raise RuntimeError("No player is logged in")
    return RoundController(ctx.console, ctx.player, deck).play()
