"""
Hold'em hand enrichment.

Turns one parsed hand into a report with per-player positions, pot-odds
ratios for every action, chip stacks at each street boundary and the
showdown settlement. Analysis is a pure function of the hand: all
working state lives in the call.
"""

import logging
from typing import Union

from analysis.chips import apply_posts, preflop_blind, update_chips
from analysis.metadata import copy_values
from analysis.numbers import round_half_up
from analysis.positions import check_table_size, resolve_position
from analysis.showdown import settle_showdown
from analysis.streets import BettingState, analyze_street
from models import (
    BETTING_STREETS, Hand, HandValidationError, PlayerReport,
    RawAction, Report, Street
)
from parser import HandParser

logger = logging.getLogger(__name__)


def get_starting_pot(hand: Hand) -> float:
    """Blinds plus one ante per seated player."""
    return hand.small_blind + hand.big_blind + hand.ante * hand.player_count


def _validate_references(hand: Hand) -> None:
    """Every player named in posts, streets and showdown must be seated."""
    seated = set()
    for seat in hand.seats:
        if seat.player in seated:
            raise HandValidationError(f"player {seat.player!r} is seated twice")
        seated.add(seat.player)

    sections = [("posts", hand.posts), ("showdown", hand.showdown)]
    sections += [(street.value, hand.actions_on_street(street)) for street in BETTING_STREETS]
    for section, records in sections:
        for record in records:
            if record.player not in seated:
                raise HandValidationError(
                    f"{section} references unknown player {record.player!r}"
                )


def _create_players(hand: Hand, starting_pot: float) -> dict[str, PlayerReport]:
    players: dict[str, PlayerReport] = {}
    button = hand.table.get("button")

    for seat in hand.seats:
        player = PlayerReport(
            name=seat.player,
            seatno=seat.seatno,
            chips=seat.chips,
            chips_preflop=seat.chips,
            m=round_half_up(seat.chips / starting_pot) if starting_pot else None,
        )
        if button == seat.seatno:
            player.button = True
        if hand.hero == seat.player:
            player.hero = True
            if hand.holecards:
                player.cards = hand.holecards
        players[seat.player] = player

    if not any(p.button for p in players.values()):
        logger.warning(f"Button seat {button!r} matches no seated player")
    return players


def assign_positions(
    preflop: list[RawAction],
    players: dict[str, PlayerReport],
    player_count: int
) -> None:
    """Give each player a position at their first preflop action."""
    next_order = 0
    for raw in preflop:
        player = players[raw.player]
        if player.preflop_order is not None:
            continue
        player.preflop_order = next_order
        player.postflop_order, player.pos = resolve_position(next_order, player_count)
        next_order += 1


def _postflop_sort_key(player: PlayerReport) -> tuple:
    # players who never acted preflop have no order and go last
    if player.postflop_order is None:
        return (1, player.seatno)
    return (0, player.postflop_order)


def sort_players_by_postflop_order(players: dict[str, PlayerReport]) -> list[PlayerReport]:
    return sorted(players.values(), key=_postflop_sort_key)


def player_invested(player: PlayerReport) -> bool:
    """True if the player posted a blind or put chips in voluntarily preflop."""
    if player.sb or player.bb:
        return True
    return any(action.is_investment for action in player.preflop)


def analyze(hand: Union[Hand, dict]) -> Report:
    """
    Analyze a single hold'em hand.

    Args:
        hand: A parsed Hand, or its raw JSON dict

    Returns:
        Report with metadata copies and players in postflop order

    Raises:
        HandValidationError: If the hand references unseated players or
            has fewer than two seats
        UnsupportedTableSizeError: If more than ten players are seated
    """
    if isinstance(hand, dict):
        hand = HandParser().parse_hand(hand)

    player_count = hand.player_count
    check_table_size(player_count)
    _validate_references(hand)

    starting_pot = get_starting_pot(hand)
    report = Report(
        info=copy_values(hand.info),
        table=copy_values(hand.table),
        board=copy_values(hand.board),
    )
    report.info["players"] = player_count

    players = _create_players(hand, starting_pot)
    apply_posts(hand.posts, players)
    assign_positions(hand.preflop, players, player_count)

    state = BettingState(pot=starting_pot, current_bet=hand.big_blind)
    for street in BETTING_STREETS:
        if street is Street.PREFLOP:
            investeds = analyze_street(
                street, hand.preflop, players, state,
                starting_invested=lambda player: preflop_blind(player, hand),
            )
        else:
            investeds = analyze_street(street, hand.actions_on_street(street), players, state)
        update_chips(street, investeds, players, hand)

    settle_showdown(hand.showdown, players, state.pot)

    report.players = sort_players_by_postflop_order(players)
    for player in report.players:
        player.invested = player_invested(player)

    logger.debug(f"Analyzed {player_count}-handed hand, final pot {state.pot}")
    return report
