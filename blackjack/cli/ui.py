# blackjack/cli/ui.py

from typing import Callable, Optional, Sequence

from blackjack.common.cards import Card
from blackjack.common.constants import YES, NO, HIT, STAND, VALID_DECISIONS
from blackjack.common.rules import hand_value, is_soft
from .sprites import hand_sprite


class Console:
    """
    Line-oriented input/output. read/write default to input()/print(),
    tests pass scripted callables instead.
    """

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        color: bool = False,
    ) -> None:
        self._read = read
        self._write = write
        self.color = color

    def say(self, msg: str = "") -> None:
        self._write(msg)

    def ask(self, prompt: str) -> str:
        return self._read(prompt).strip()


def welcome_script() -> str:
    return "--- Welcome to Blackjack! ---"


def ask_yes_no(console: Console, prompt: str) -> bool:
    while True:
        raw = console.ask(f"{prompt} ({YES}/{NO}): ").upper()
        if raw == YES:
            return True
        if raw == NO:
            return False
        console.say(f"Invalid input. Please enter {YES} or {NO}.")


def ask_text(
    console: Console,
    prompt: str,
    validate: Optional[Callable[[str], bool]] = None,
    error: str = "Invalid input. Please try again.",
) -> str:
    while True:
        raw = console.ask(prompt)
        if raw and (validate is None or validate(raw)):
            return raw
        console.say(error)


def ask_bet(console: Console, balance: int) -> int:
    """
    Returns a bet with 0 < bet <= balance. Anything else is re-prompted.
    """
    while True:
        raw = console.ask("Enter your bet amount: ")
        if not (raw.isascii() and raw.isdigit()):
            console.say(f"Invalid bet amount {raw!r}. Please enter a whole number.")
            continue
        bet = int(raw)
        if 0 < bet <= balance:
            return bet
        console.say(f"Invalid bet amount. Your balance is ${balance}")


def ask_decision(console: Console) -> str:
    """
    Returns HIT or STAND.
    """
    while True:
        raw = console.ask(f"Do you want to hit or stand? ({HIT}/{STAND}): ").upper()
        if raw in VALID_DECISIONS:
            return raw
        console.say(f"Invalid input. Please enter '{HIT}' or '{STAND}'.")


def show_hand(console: Console, title: str, cards: Sequence[Card], hide_hole: bool = False) -> None:
    console.say(f"\n{title}:")
    console.say(str(hand_sprite(cards, hide_hole=hide_hole, color=console.color)))
    if hide_hole:
        console.say(f"{title} Value: {hand_value(list(cards)[:1])} + ?")
    else:
        soft = " (soft)" if is_soft(cards) else ""
        console.say(f"{title} Value: {hand_value(cards)}{soft}")


def show_table(console: Console, player: Sequence[Card], house: Sequence[Card], reveal_house: bool) -> None:
    show_hand(console, "Player's Hand", player)
    show_hand(console, "House's Hand", house, hide_hole=not reveal_house)
