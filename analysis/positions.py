"""
Position assignment.

A player's preflop order (the order of their first preflop action) is
mapped to the order they act in on later streets, and that postflop order
is mapped to a strategic position label relative to the button.

Labels:
- sb / bb: blinds
- bu: button
- co: cutoff
- lt: late (hijack/lojack)
- mi: middle position
- ea: early position
"""

from typing import Optional

from models import HandValidationError, UnsupportedTableSizeError

MIN_PLAYERS = 2
MAX_PLAYERS = 10

# Seats before the end of the postflop order -> label
LABELS_FROM_BUTTON = {
    1: "bu",
    2: "co",
    3: "lt",
    4: "mi",
    5: "mi",
    6: "ea",
    7: "ea",
    8: "ea",
}


def check_table_size(player_count: int) -> None:
    """Raise if positions cannot be labeled for this many players."""
    if player_count < MIN_PLAYERS:
        raise HandValidationError(
            f"a hand needs at least {MIN_PLAYERS} players, got {player_count}"
        )
    if player_count > MAX_PLAYERS:
        raise UnsupportedTableSizeError(
            f"position labels are defined for up to {MAX_PLAYERS} players, got {player_count}"
        )


def postflop_order_from_preflop_order(n: int, player_count: int) -> int:
    """Map a preflop action index to the postflop action index."""
    # heads-up just reverses the order
    if player_count == 2:
        return 1 if n == 0 else 0

    if n == player_count - 1:
        return 1  # BB
    if n == player_count - 2:
        return 0  # SB
    return n + 2


def strategic_position(n: int, player_count: int) -> Optional[str]:
    """
    Label for a postflop order index.

    ``n`` is the position the player would have acted in on the flop,
    even if they folded preflop.
    """
    if player_count == 2:
        return "bb" if n == 0 else "sb"

    if n == 0:
        return "sb"
    if n == 1:
        return "bb"
    return LABELS_FROM_BUTTON.get(player_count - n)


def resolve_position(preflop_order: int, player_count: int) -> tuple[int, str]:
    """
    Resolve (postflop_order, label) for a player's preflop order.

    Raises:
        HandValidationError: For fewer than two players
        UnsupportedTableSizeError: For more than ten players
    """
    check_table_size(player_count)
    postflop_order = postflop_order_from_preflop_order(preflop_order, player_count)
    return postflop_order, strategic_position(postflop_order, player_count)
