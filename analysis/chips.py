"""
Chip stack bookkeeping between streets.

Blind posts come off the preflop snapshot before any action. At each
street boundary the chips a player invested on the street are taken off
the previous snapshot to get the next one.
"""

from typing import Mapping

from models import Hand, PlayerReport, Post, Street


def apply_posts(posts: list[Post], players: Mapping[str, PlayerReport]) -> None:
    """Subtract blind posts from the preflop stacks and flag the posters."""
    for post in posts:
        player = players[post.player]
        player.chips_preflop -= post.amount
        player.chips_after = player.chips_preflop

        if post.type == "sb":
            player.sb = True
        if post.type == "bb":
            player.bb = True


def preflop_blind(player: PlayerReport, hand: Hand) -> float:
    """The blind a player has in before acting preflop."""
    if player.bb:
        return hand.big_blind
    if player.sb:
        return hand.small_blind
    return 0


def update_chips(
    street: Street,
    investeds: Mapping[str, float],
    players: Mapping[str, PlayerReport],
    hand: Hand
) -> None:
    """
    Compute every player's chip snapshot for the start of the next street.

    Preflop investments include the blind, which was already taken off by
    ``apply_posts``, so the blind is added back for posters.
    """
    next_field = street.next_street.chips_field

    for name, player in players.items():
        chips = getattr(player, street.chips_field) - investeds.get(name, 0)
        if street is Street.PREFLOP:
            if player.bb:
                chips += hand.big_blind
            if player.sb:
                chips += hand.small_blind
        setattr(player, next_field, chips)
        player.chips_after = chips
