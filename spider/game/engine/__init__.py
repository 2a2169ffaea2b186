"""Game engine module - pure functional Spider Solitaire rules.

This module provides the core game engine with:
- Move types for explicit player intents
- Event types for the renderer
- ProcessResult pattern for error handling
- Undo, win detection and legal move queries

Usage:
    from spider.game.engine import (
        apply_move,
        undo_last,
        DrawStock,
        MoveCard,
    )

    # Apply a move
    result = apply_move(state, DrawStock())

    if result.success:
        state = result.state
        events = result.events  # Feed these to the renderer
    else:
        # Handle error
        print(f"Error: {result.error_code} - {result.error_message}")
"""

from spider.schemas.game_engine import (
    CardPosition,
    DrawStock,
    GameMove,
    MoveCard,
    RecycleStock,
)

# Events - for the renderer
from .events import (
    AnyGameEvent,
    CardRevealed,
    CardsMoved,
    GameEvent,
    GameWon,
    MoveUndone,
    StockDrawn,
    StockRecycled,
)

# Legal moves
from .legal_moves import (
    find_legal_destination,
    get_legal_moves,
    has_any_legal_moves,
    suggest_move,
)

# Moves - explicit player intents
from .moves import build_move_from_payload

# Main processing
from .process import apply_move, is_won
from .undo import undo_last

# Result types
from .validation import MoveError, ProcessResult, ValidationResult, validate_move

__all__ = [
    # Moves
    "GameMove",
    "DrawStock",
    "RecycleStock",
    "MoveCard",
    "CardPosition",
    "build_move_from_payload",
    # Events
    "GameEvent",
    "AnyGameEvent",
    "StockDrawn",
    "StockRecycled",
    "CardsMoved",
    "CardRevealed",
    "MoveUndone",
    "GameWon",
    # Processing
    "apply_move",
    "undo_last",
    "is_won",
    # Validation
    "MoveError",
    "ProcessResult",
    "ValidationResult",
    "validate_move",
    # Legal moves
    "find_legal_destination",
    "suggest_move",
    "get_legal_moves",
    "has_any_legal_moves",
]
