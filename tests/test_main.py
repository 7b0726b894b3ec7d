from blackjack.cli import main as cli_main
from blackjack.common.cards import DeckEmptyError


def test_closed_input_ends_cleanly(monkeypatch, capsys):
    def closed(ctx):
        raise EOFError

    monkeypatch.setattr(cli_main, "run_session", closed)
    assert cli_main.main() == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_ctrl_c_ends_cleanly(monkeypatch, capsys):
    def interrupted(ctx):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli_main, "run_session", interrupted)
    assert cli_main.main() == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_empty_deck_is_fatal(monkeypatch, capsys):
    def exhausted(ctx):
        raise DeckEmptyError("Deck is empty. Cannot draw a card.")

    monkeypatch.setattr(cli_main, "run_session", exhausted)
    assert cli_main.main() == 1
    assert "Fatal error: Deck is empty" in capsys.readouterr().err
