from blackjack.cli.sprites import card_back, card_face, hand_sprite, hstack
from blackjack.cli.ui import show_table


def test_card_face_shows_rank_and_suit():
    s = card_face("10", "♥")
    assert s.h == 5 and s.w == 9
    assert "10♥" in s.lines[1]


def test_hstack_places_cards_side_by_side():
    row = hstack([card_face("A", "♠"), card_back()])
    assert row.h == 5
    assert row.w == 9 + 1 + 9


def test_hole_card_is_face_down(cards):
    hidden = hand_sprite(cards("K", "A♥"), hide_hole=True)
    shown = hand_sprite(cards("K", "A♥"))
    assert "░" in str(hidden) and "A♥" not in str(hidden)
    assert "A♥" in str(shown)


def test_color_wraps_red_suits(cards):
    plain = str(hand_sprite(cards("A♥")))
    colored = str(hand_sprite(cards("A♥"), color=True))
    assert "\033[31m" in colored
    assert "\033[" not in plain


def test_show_table_masks_house_total(make_console, cards):
    console = make_console([])
    show_table(console, cards("10", "7"), cards("9", "K"), reveal_house=False)
    assert "Player's Hand Value: 17" in console.output
    assert "House's Hand Value: 9 + ?" in console.output


def test_soft_total_is_marked(make_console, cards):
    console = make_console([])
    show_table(console, cards("A", "6"), cards("9", "K"), reveal_house=True)
    assert "Player's Hand Value: 17 (soft)" in console.output
    assert "House's Hand Value: 19" in console.output
