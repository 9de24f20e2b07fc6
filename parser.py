"""
Loader for already-parsed hold'em hand records.

This module turns the JSON emitted by an upstream hand-history parser
into the structured ``Hand`` defined in models.py.

Expected JSON structure (one hand):
{
    "info": {"sb": 1, "bb": 2, "ante": 0, ...},
    "table": {"button": 3, ...},
    "board": {"card1": "Ah", ...},
    "seats": [{"seatno": 1, "chips": 100, "player": "alice"}, ...],
    "posts": [{"player": "alice", "type": "sb", "amount": 1}, ...],
    "hero": "alice",
    "holecards": {"card1": "Kd", "card2": "Kh"},
    "preflop": [{"player": "bob", "type": "raise", "raiseTo": 6}, ...],
    "flop": [...], "turn": [...], "river": [...],
    "showdown": [{"player": "bob", "type": "collect", "amount": 13}, ...]
}

Batches may be given as a list of hands or as {"hands": [...]}.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from models import (
    BETTING_STREETS, Hand, HandValidationError, HoleCards,
    Post, RawAction, Seat, ShowdownEvent
)

logger = logging.getLogger(__name__)


class HandParser:
    """
    Builds ``Hand`` objects from raw JSON data.

    Batch parsing is lenient: a malformed hand is recorded in ``errors``
    and skipped. ``parse_hand`` on its own raises ``HandValidationError``.
    """

    def __init__(self):
        self.errors: list[str] = []

    def load_file(self, file_path: Union[str, Path]) -> list[Hand]:
        """
        Load and parse a hand JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            json.JSONDecodeError: If the file is not valid JSON
        """
        file_path = Path(file_path)

        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return self.parse_data(data)

    def load_json_string(self, json_str: str) -> list[Hand]:
        data = json.loads(json_str)
        return self.parse_data(data)

    def parse_data(self, data: Union[dict, list]) -> list[Hand]:
        """
        Parse one hand, a list of hands, or a ``{"hands": [...]}`` batch.

        Returns:
            List of Hand objects (malformed hands are skipped)
        """
        self.errors = []

        if isinstance(data, dict) and "hands" in data:
            raw_hands = data["hands"]
        elif isinstance(data, dict):
            raw_hands = [data]
        else:
            raw_hands = data

        if not isinstance(raw_hands, list):
            self.errors.append("Expected 'hands' to be a list")
            return []

        hands = []
        for i, raw_hand in enumerate(raw_hands):
            try:
                hands.append(self.parse_hand(raw_hand))
            except HandValidationError as e:
                self.errors.append(f"Error parsing hand {i}: {e}")
                logger.exception(f"Failed to parse hand {i}")

        return hands

    def parse_hand(self, raw_hand: dict) -> Hand:
        """
        Parse a single hand from raw data.

        Raises:
            HandValidationError: If a required section or field is missing
        """
        if not isinstance(raw_hand, dict):
            raise HandValidationError("hand must be a JSON object")

        seats = [self._parse_seat(s) for s in self._section(raw_hand, "seats", required=True)]
        posts = [self._parse_post(p) for p in self._section(raw_hand, "posts")]

        streets = {
            street.value: [self._parse_action(a) for a in self._section(raw_hand, street.value)]
            for street in BETTING_STREETS
        }
        showdown = [self._parse_showdown_event(e) for e in self._section(raw_hand, "showdown")]

        hero = raw_hand.get("hero")
        return Hand(
            info=self._parse_info(raw_hand),
            table=self._block(raw_hand, "table"),
            board=self._block(raw_hand, "board"),
            seats=seats,
            posts=posts,
            holecards=self._parse_holecards(raw_hand.get("holecards")),
            hero=str(hero) if hero is not None else None,
            showdown=showdown,
            **streets,
        )

    def _section(self, raw_hand: dict, key: str, required: bool = False) -> list:
        value = raw_hand.get(key)
        if value is None:
            if required:
                raise HandValidationError(f"missing '{key}' section")
            return []
        if not isinstance(value, list):
            raise HandValidationError(f"'{key}' must be a list")
        return value

    @staticmethod
    def _block(raw_hand: dict, key: str) -> dict:
        value = raw_hand.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise HandValidationError(f"'{key}' must be an object")
        return dict(value)

    @staticmethod
    def _require(record: dict, key: str, kind: str):
        if not isinstance(record, dict) or record.get(key) is None:
            raise HandValidationError(f"{kind} record is missing '{key}': {record!r}")
        return record[key]

    @staticmethod
    def _number(record: dict, key: str, kind: str, required: bool = True):
        """A numeric field; bools and numeric strings are rejected."""
        value = record.get(key) if isinstance(record, dict) else None
        if value is None:
            if required:
                raise HandValidationError(f"{kind} record is missing '{key}': {record!r}")
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise HandValidationError(f"{kind} '{key}' must be a number, got {value!r}")
        return value

    def _parse_info(self, raw_hand: dict) -> dict:
        info = self._block(raw_hand, "info")
        for key in ("sb", "bb", "ante"):
            self._number(info, key, "info", required=False)
        return info

    def _parse_post(self, raw: dict) -> Post:
        return Post(
            player=str(self._require(raw, "player", "post")),
            type=str(self._require(raw, "type", "post")),
            amount=self._number(raw, "amount", "post"),
        )

    def _parse_seat(self, raw: dict) -> Seat:
        return Seat(
            seatno=self._require(raw, "seatno", "seat"),
            chips=self._number(raw, "chips", "seat"),
            player=str(self._require(raw, "player", "seat")),
        )

    def _parse_action(self, raw: dict) -> RawAction:
        player = str(self._require(raw, "player", "action"))
        kind = str(self._require(raw, "type", "action"))
        raise_key = "raiseTo" if "raiseTo" in raw else "raise_to"
        return RawAction(
            player=player,
            type=kind,
            amount=self._number(raw, "amount", "action", required=False),
            raise_to=self._number(raw, raise_key, "action", required=False),
            allin=bool(raw.get("allin", False)),
        )

    def _parse_showdown_event(self, raw: dict) -> ShowdownEvent:
        kind = str(self._require(raw, "type", "showdown"))
        return ShowdownEvent(
            player=str(self._require(raw, "player", "showdown")),
            type=kind,
            card1=raw.get("card1"),
            card2=raw.get("card2"),
            amount=self._number(raw, "amount", "collect", required=kind == "collect"),
        )

    @staticmethod
    def _parse_holecards(raw: Optional[dict]) -> Optional[HoleCards]:
        if not raw:
            return None
        if not isinstance(raw, dict):
            raise HandValidationError(f"'holecards' must be an object, got {raw!r}")
        return HoleCards(card1=raw.get("card1"), card2=raw.get("card2"))


def load_hands(file_path: Union[str, Path]) -> list[Hand]:
    """
    Convenience function to load hands from a file.

    Args:
        file_path: Path to JSON hand file

    Returns:
        List of Hand objects
    """
    parser = HandParser()
    hands = parser.load_file(file_path)

    if parser.errors:
        logger.warning(f"Parsing errors: {parser.errors}")

    return hands
