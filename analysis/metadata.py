"""Copying of the opaque info/table/board metadata blocks."""

from typing import Any, Mapping

EXCLUDED_KEY = "metadata"


def copy_values(block: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow copy of a metadata block without its ``metadata`` entry."""
    return {k: v for k, v in block.items() if k != EXCLUDED_KEY}
