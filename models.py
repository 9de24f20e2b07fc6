"""
Core data models for hold'em hand enrichment.

This module defines the fundamental data structures used throughout
the analyzer: enums for streets and action types, dataclasses for the
already-parsed input hand, and the derived per-player report records
with their JSON-ready ``to_dict`` forms.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class HandValidationError(ValueError):
    """Raised when a hand record is structurally unusable for analysis."""


class UnsupportedTableSizeError(HandValidationError):
    """Raised when no position labels exist for the table size."""


class ActionType(str, Enum):
    """
    Action types as they appear in posts, street logs and the showdown log.

    Betting actions (bet, call, raise) carry chip amounts; fold and check
    pass through unchanged. show, muck and collect only occur at showdown.
    """
    POST = "post"
    BET = "bet"
    CALL = "call"
    RAISE = "raise"
    FOLD = "fold"
    CHECK = "check"
    SHOW = "show"
    MUCK = "muck"
    COLLECT = "collect"


BETTING_ACTIONS = (ActionType.BET, ActionType.CALL, ActionType.RAISE)


class Street(Enum):
    """Betting rounds plus the showdown phase."""
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    SHOWDOWN = "showdown"

    @property
    def chips_field(self) -> str:
        """Name of the chip snapshot taken when this street starts."""
        return "chips_" + self.value

    @property
    def next_street(self) -> Optional["Street"]:
        order = list(Street)
        idx = order.index(self)
        if idx + 1 < len(order):
            return order[idx + 1]
        return None


BETTING_STREETS = (Street.PREFLOP, Street.FLOP, Street.TURN, Street.RIVER)


# ============================================================
# INPUT
# ============================================================

@dataclass(frozen=True)
class Seat:
    """A seated player and the stack they started the hand with."""
    seatno: int
    chips: float
    player: str


@dataclass(frozen=True)
class Post:
    """A forced blind post (type is ``sb`` or ``bb``)."""
    player: str
    type: str
    amount: float


@dataclass(frozen=True)
class RawAction:
    """
    A single chronological betting action as parsed from the hand history.

    Attributes:
        player: Player identifier
        type: bet, call, raise, fold or check
        amount: Chips put in for bet/call
        raise_to: Total bet size the player raised to
        allin: Whether the action put the player all-in
    """
    player: str
    type: str
    amount: Optional[float] = None
    raise_to: Optional[float] = None
    allin: bool = False


@dataclass(frozen=True)
class ShowdownEvent:
    """A show, muck or collect entry from the showdown log."""
    player: str
    type: str
    card1: Optional[str] = None
    card2: Optional[str] = None
    amount: Optional[float] = None


@dataclass(frozen=True)
class HoleCards:
    card1: str
    card2: str

    def to_dict(self) -> dict[str, str]:
        return {"card1": self.card1, "card2": self.card2}


@dataclass(frozen=True)
class Hand:
    """
    One fully parsed hold'em hand.

    ``info``, ``table`` and ``board`` are opaque metadata blocks; only
    ``info['sb']``, ``info['bb']``, ``info['ante']`` and
    ``table['button']`` are read by the analyzer.
    """
    info: dict[str, Any]
    table: dict[str, Any]
    board: dict[str, Any]
    seats: list[Seat]
    posts: list[Post] = field(default_factory=list)
    holecards: Optional[HoleCards] = None
    hero: Optional[str] = None
    preflop: list[RawAction] = field(default_factory=list)
    flop: list[RawAction] = field(default_factory=list)
    turn: list[RawAction] = field(default_factory=list)
    river: list[RawAction] = field(default_factory=list)
    showdown: list[ShowdownEvent] = field(default_factory=list)

    @property
    def player_count(self) -> int:
        return len(self.seats)

    @property
    def small_blind(self) -> float:
        return self.info.get("sb") or 0

    @property
    def big_blind(self) -> float:
        return self.info.get("bb") or 0

    @property
    def ante(self) -> float:
        return self.info.get("ante") or 0

    def actions_on_street(self, street: Street) -> list:
        """Get the raw action log of a street."""
        return getattr(self, street.value)

    def get_seat_by_player(self, player: str) -> Optional[Seat]:
        for seat in self.seats:
            if seat.player == player:
                return seat
        return None


# ============================================================
# OUTPUT
# ============================================================

@dataclass
class NormalizedAction:
    """
    An analyzed action as it appears in the report.

    Attributes:
        type: Action type string
        pot: Pot size immediately before the action
        ratio: Amount relative to pot (bet/call/collect) or current bet (raise)
        amount: Chips committed, or collected
        allin: All-in flag for betting actions
        winall: True when a collect takes the whole pot
        cards: Revealed cards for show/muck
    """
    type: str
    pot: Optional[float] = None
    ratio: Optional[float] = None
    amount: Optional[float] = None
    allin: Optional[bool] = None
    winall: Optional[bool] = None
    cards: Optional[HoleCards] = None

    @property
    def is_investment(self) -> bool:
        """Returns True if the action voluntarily put chips in the pot."""
        return self.type in BETTING_ACTIONS

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type}
        for key in ("pot", "ratio", "amount", "allin", "winall"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.cards is not None:
            out["cards"] = self.cards.to_dict()
        return out


@dataclass
class PlayerReport:
    """
    A player's derived state for one hand, mutated while the hand is analyzed.

    Chip snapshots are ``None`` until the corresponding street boundary
    has been computed. ``preflop_order`` is assigned exactly once, at the
    player's first preflop action.
    """
    name: str
    seatno: int
    chips: float
    chips_preflop: float
    m: Optional[int] = None
    chips_flop: Optional[float] = None
    chips_turn: Optional[float] = None
    chips_river: Optional[float] = None
    chips_showdown: Optional[float] = None
    chips_after: Optional[float] = None
    button: bool = False
    hero: bool = False
    cards: Optional[HoleCards] = None
    sb: bool = False
    bb: bool = False
    preflop_order: Optional[int] = None
    postflop_order: Optional[int] = None
    pos: Optional[str] = None
    invested: bool = False
    preflop: list[NormalizedAction] = field(default_factory=list)
    flop: list[NormalizedAction] = field(default_factory=list)
    turn: list[NormalizedAction] = field(default_factory=list)
    river: list[NormalizedAction] = field(default_factory=list)
    showdown: list[NormalizedAction] = field(default_factory=list)

    def actions_on_street(self, street: Street) -> list[NormalizedAction]:
        return getattr(self, street.value)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "seatno": self.seatno,
            "chips": self.chips,
            "chipsPreflop": self.chips_preflop,
            "chipsFlop": self.chips_flop,
            "chipsTurn": self.chips_turn,
            "chipsRiver": self.chips_river,
            "chipsShowdown": self.chips_showdown,
            "chipsAfter": self.chips_after,
            "m": self.m,
            "button": self.button,
            "hero": self.hero,
            "sb": self.sb,
            "bb": self.bb,
        }
        if self.cards is not None:
            out["cards"] = self.cards.to_dict()
        if self.preflop_order is not None:
            out["preflopOrder"] = self.preflop_order
            out["postflopOrder"] = self.postflop_order
            out["pos"] = self.pos
        out["invested"] = self.invested
        for street in Street:
            out[street.value] = [a.to_dict() for a in self.actions_on_street(street)]
        return out


@dataclass
class Report:
    """The enriched hand: copied metadata plus players in postflop order."""
    info: dict[str, Any]
    table: dict[str, Any]
    board: dict[str, Any]
    players: list[PlayerReport] = field(default_factory=list)

    def get_player(self, name: str) -> Optional[PlayerReport]:
        """Find a player by their identifier."""
        for player in self.players:
            if player.name == name:
                return player
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "info": dict(self.info),
            "table": dict(self.table),
            "board": dict(self.board),
            "players": [p.to_dict() for p in self.players],
        }
