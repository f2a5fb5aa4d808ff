"""Game domain services: board rules and move application.

This package contains pure domain logic that is imported by the room
registry, keeping transport concerns separated from core game mechanics.
"""

from .board import WINNING_LINES, check_winner, is_board_full, is_draw
from .session import MoveOutcome, apply_move
