# blackjack/cli/sprites.py
from __future__ import annotations
from typing import Sequence

from blackjack.common.cards import Card
from blackjack.common.constants import RED_SUITS
from .terminal import Sprite, Style, RED_BOLD, DIM_BLUE, RESET

def card_face(rank: str, suit: str, w: int = 9, h: int = 5) -> Sprite:
    w = max(w, 7)
    h = max(h, 4)
    inner_w = w - 2

    top = "┌" + "─" * inner_w + "┐"
    bot = "└" + "─" * inner_w + "┘"

    r = rank[:2]
    tl = (r + suit).ljust(inner_w)
    br = (r + suit).rjust(inner_w)

    lines = [top, "│" + tl + "│"]
    middle_rows = h - 4
    mid_symbol = suit.center(inner_w)
    for i in range(middle_rows):
        lines.append("│" + (mid_symbol if i == middle_rows // 2 else " " * inner_w) + "│")
    lines.append("│" + br + "│")
    lines.append(bot)
    return Sprite(lines)

def card_back(w: int = 9, h: int = 5) -> Sprite:
    w = max(w, 7)
    h = max(h, 4)
    inner_w = w - 2

    top = "┌" + "─" * inner_w + "┐"
    bot = "└" + "─" * inner_w + "┘"

    lines = [top]
    for r in range(h - 2):
        pattern = (("░▒" if r % 2 == 0 else "▒░") * (inner_w // 2 + 3))[:inner_w]
        lines.append("│" + pattern + "│")
    lines.append(bot)
    return Sprite(lines)

def suit_style(suit: str) -> Style:
    # Hearts/diamonds red; spades/clubs default
    return RED_BOLD if suit in RED_SUITS else RESET

def hstack(sprites: Sequence[Sprite], gap: int = 1) -> Sprite:
    """
    Place sprites side by side, top-aligned. Shorter sprites are padded
    with blanks of their own width.
    """
    if not sprites:
        return Sprite([])
    height = max(s.h for s in sprites)
    out = []
    for row in range(height):
        parts = [s.lines[row] if row < s.h else " " * s.w for s in sprites]
        out.append((" " * gap).join(parts))
    return Sprite(out)

def hand_sprite(cards: Sequence[Card], hide_hole: bool = False, color: bool = False) -> Sprite:
    """
    Render a hand as a row of cards.
    hide_hole: show the second card face down (house hand before its turn).
    """
    row = []
    for i, c in enumerate(cards):
        if hide_hole and i == 1:
            s = card_back()
            row.append(s.styled(DIM_BLUE) if color else s)
        else:
            s = card_face(c.rank, c.suit)
            row.append(s.styled(suit_style(c.suit)) if color else s)
    return hstack(row)
