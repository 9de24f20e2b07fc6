"""
Street-by-street action analysis.

Walks a street's chronological action log, keeping the running pot and
the current bet size, and produces one normalized action per raw action
along with the chips each player has put in on the street.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Mapping

from analysis.numbers import safe_ratio
from models import (
    ActionType, HandValidationError, NormalizedAction,
    PlayerReport, RawAction, Street
)

logger = logging.getLogger(__name__)


@dataclass
class BettingState:
    """
    Betting state carried across the whole hand.

    ``current_bet`` is never reset between streets; it only feeds the
    ratio of the next raise.
    """
    pot: float
    current_bet: float


def _amount(raw: RawAction, value, key: str) -> float:
    if value is None:
        raise HandValidationError(f"{raw.type} by {raw.player} has no {key}")
    return value


def analyze_action(
    state: BettingState,
    raw: RawAction,
    invested: float
) -> tuple[NormalizedAction, float]:
    """
    Normalize one raw action and apply it to the betting state.

    Args:
        state: Running pot and current bet, updated in place
        raw: The raw action
        invested: Chips the player already put in on this street

    Returns:
        Tuple of (normalized action, chips this action costs the player)
    """
    pot_before = state.pot
    action = NormalizedAction(type=raw.type)

    if raw.type == ActionType.RAISE:
        raise_to = _amount(raw, raw.raise_to, "raiseTo")
        action.ratio = safe_ratio(raise_to, state.current_bet)
        action.amount = raise_to - invested
        state.current_bet = raise_to
        # the pot grows by the full raise size, not by the chips added
        state.pot += raise_to
    elif raw.type == ActionType.BET:
        amount = _amount(raw, raw.amount, "amount")
        action.ratio = safe_ratio(amount, state.pot)
        action.amount = amount
        state.current_bet = amount
        state.pot += amount
    elif raw.type == ActionType.CALL:
        amount = _amount(raw, raw.amount, "amount")
        action.ratio = safe_ratio(amount, state.pot)
        action.amount = amount
        state.pot += amount
    else:
        if raw.type not in (ActionType.FOLD, ActionType.CHECK):
            logger.debug(f"Passing through unknown action type {raw.type!r}")
        return action, 0

    if action.ratio is None:
        logger.debug(f"Undefined ratio for {raw.type} by {raw.player} (pot {pot_before})")

    action.pot = pot_before
    action.allin = raw.allin
    return action, action.amount


def analyze_street(
    street: Street,
    actions: list[RawAction],
    players: Mapping[str, PlayerReport],
    state: BettingState,
    starting_invested: Callable[[PlayerReport], float] = lambda player: 0
) -> dict[str, float]:
    """
    Analyze every action of a street.

    Normalized actions are appended to each player's list for the street.

    Args:
        street: The betting street being analyzed
        actions: Chronological raw actions
        players: Player records keyed by identifier
        state: Betting state shared across streets
        starting_invested: Chips a player counts as already in on this
            street before their first action (blinds on preflop)

    Returns:
        Mapping of player identifier to total chips invested on the street,
        for players who acted
    """
    investeds: dict[str, float] = {}

    for raw in actions:
        player = players[raw.player]
        invested = investeds.get(raw.player)
        if invested is None:
            invested = starting_invested(player)
        action, cost = analyze_action(state, raw, invested)
        player.actions_on_street(street).append(action)
        investeds[raw.player] = invested + cost

    logger.debug(f"{street.value}: {len(actions)} actions, pot {state.pot}")
    return investeds
