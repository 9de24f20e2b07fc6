"""
Showdown settlement.

Revealed cards are attached to the players who showed or mucked, and all
``collect`` events of a player (main pot plus side pots) are condensed
into a single collect action.
"""

from typing import Mapping

from analysis.numbers import safe_ratio
from models import (
    ActionType, HandValidationError, HoleCards, NormalizedAction,
    PlayerReport, ShowdownEvent
)


def settle_showdown(
    events: list[ShowdownEvent],
    players: Mapping[str, PlayerReport],
    pot: float
) -> dict[str, float]:
    """
    Apply the showdown log to the players.

    Args:
        events: Chronological show/muck/collect events
        players: Player records keyed by identifier
        pot: Final pot size after all betting streets

    Returns:
        Mapping of player identifier to total chips collected
    """
    collecteds: dict[str, float] = {}

    for event in events:
        player = players[event.player]
        if event.type in (ActionType.SHOW, ActionType.MUCK):
            player.cards = HoleCards(card1=event.card1, card2=event.card2)
            player.showdown.append(NormalizedAction(type=event.type, cards=player.cards))
        elif event.type == ActionType.COLLECT:
            if event.amount is None:
                raise HandValidationError(f"collect by {event.player} has no amount")
            collecteds[event.player] = collecteds.get(event.player, 0) + event.amount

    for name, amount in collecteds.items():
        player = players[name]
        ratio = safe_ratio(amount, pot)
        player.showdown.append(NormalizedAction(
            type=ActionType.COLLECT.value,
            ratio=ratio,
            winall=ratio == 1,
            amount=amount,
        ))
        player.chips_after += amount

    return collecteds
