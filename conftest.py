"""Sample hands shared by the test modules."""

import pytest


def create_heads_up_hand():
    """alice (button, SB) limps, bob checks; bob bets the flop and alice folds."""
    return {
        "info": {
            "room": "pokerstars",
            "gametype": "tournament",
            "sb": 1,
            "bb": 2,
            "ante": 0,
            "metadata": {"lineno": 0, "raw": "PokerStars Hand #1"},
        },
        "table": {"tableno": 3, "maxseats": 9, "button": 1},
        "board": {"card1": "7c", "card2": "2d", "card3": "Ks"},
        "seats": [
            {"seatno": 1, "chips": 100, "player": "alice"},
            {"seatno": 2, "chips": 100, "player": "bob"},
        ],
        "posts": [
            {"player": "alice", "type": "sb", "amount": 1},
            {"player": "bob", "type": "bb", "amount": 2},
        ],
        "hero": "alice",
        "holecards": {"card1": "9h", "card2": "8h"},
        "preflop": [
            {"player": "alice", "type": "call", "amount": 1},
            {"player": "bob", "type": "check"},
        ],
        "flop": [
            {"player": "bob", "type": "bet", "amount": 2},
            {"player": "alice", "type": "fold"},
        ],
        "turn": [],
        "river": [],
        "showdown": [
            {"player": "bob", "type": "collect", "amount": 4},
        ],
    }


def create_three_handed_hand():
    """carol (button) raises, alice folds, bob calls and wins at showdown."""
    return {
        "info": {"sb": 1, "bb": 2, "ante": 0, "currency": "$"},
        "table": {"button": 1},
        "board": {"card1": "Ah", "card2": "7d", "card3": "2c", "card4": "Js", "card5": "3h"},
        "seats": [
            {"seatno": 1, "chips": 200, "player": "carol"},
            {"seatno": 2, "chips": 200, "player": "alice"},
            {"seatno": 3, "chips": 200, "player": "bob"},
        ],
        "posts": [
            {"player": "alice", "type": "sb", "amount": 1},
            {"player": "bob", "type": "bb", "amount": 2},
        ],
        "hero": "bob",
        "preflop": [
            {"player": "carol", "type": "raise", "raiseTo": 6},
            {"player": "alice", "type": "fold"},
            {"player": "bob", "type": "call", "amount": 4},
        ],
        "flop": [
            {"player": "bob", "type": "check"},
            {"player": "carol", "type": "bet", "amount": 6},
            {"player": "bob", "type": "raise", "raiseTo": 18},
            {"player": "carol", "type": "call", "amount": 12},
        ],
        "turn": [
            {"player": "bob", "type": "check"},
            {"player": "carol", "type": "check"},
        ],
        "river": [
            {"player": "bob", "type": "bet", "amount": 20},
            {"player": "carol", "type": "call", "amount": 20},
        ],
        "showdown": [
            {"player": "bob", "type": "show", "card1": "Ad", "card2": "Kd"},
            {"player": "carol", "type": "muck", "card1": "Qs", "card2": "Qc"},
            {"player": "bob", "type": "collect", "amount": 89},
        ],
    }


@pytest.fixture
def heads_up_hand():
    return create_heads_up_hand()


@pytest.fixture
def three_handed_hand():
    return create_three_handed_hand()
