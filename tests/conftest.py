import pytest

from blackjack.common.cards import Card, Deck
from blackjack.common.constants import SUITS
from blackjack.cli.ui import Console


class ScriptedConsole(Console):
    """Feeds canned answers; raises EOFError when the script runs out."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []
        super().__init__(read=self._next, write=self.output.append)

    def _next(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("script exhausted")
        return self.answers.pop(0)

    @property
    def text(self):
        return "\n".join(self.output)


def card(label):
    # "A" -> A♠, "10♥" -> 10♥
    if label[-1] in SUITS:
        return Card(label[:-1], label[-1])
    return Card(label, "♠")


def hand(*labels):
    return [card(l) for l in labels]


def stacked_deck(*labels):
    """Deck that deals the given cards in order (first label is drawn first)."""
    return Deck(cards=list(reversed(hand(*labels))))


@pytest.fixture
def make_console():
    return ScriptedConsole


@pytest.fixture
def cards():
    return hand


@pytest.fixture
def stack():
    return stacked_deck
