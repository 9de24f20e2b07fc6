"""
Pipeline stages for hold'em hand enrichment.
"""

from analysis.numbers import round1, round_half_up, safe_ratio
from analysis.metadata import copy_values
from analysis.positions import (
    postflop_order_from_preflop_order, strategic_position, resolve_position
)
from analysis.streets import BettingState, analyze_action, analyze_street
from analysis.chips import apply_posts, update_chips
from analysis.showdown import settle_showdown
from analysis.holdem import analyze, get_starting_pot

__all__ = [
    # Numbers
    'round1',
    'round_half_up',
    'safe_ratio',

    # Metadata
    'copy_values',

    # Positions
    'postflop_order_from_preflop_order',
    'strategic_position',
    'resolve_position',

    # Streets
    'BettingState',
    'analyze_action',
    'analyze_street',

    # Chips
    'apply_posts',
    'update_chips',

    # Showdown
    'settle_showdown',

    # Hand
    'analyze',
    'get_starting_pot',
]
