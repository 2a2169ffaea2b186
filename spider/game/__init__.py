"""Game service module.

Provides:
- Dealing new games (deal.py)
- Game engine processing (engine/)
"""

# Re-export from engine for convenience
from .deal import build_deck, deal, new_game
from .engine import (
    CardPosition,
    DrawStock,
    GameMove,
    MoveCard,
    MoveError,
    ProcessResult,
    RecycleStock,
    apply_move,
    build_move_from_payload,
    find_legal_destination,
    get_legal_moves,
    has_any_legal_moves,
    is_won,
    suggest_move,
    undo_last,
)

__all__ = [
    # Dealing
    "build_deck",
    "deal",
    "new_game",
    # Engine
    "GameMove",
    "DrawStock",
    "RecycleStock",
    "MoveCard",
    "CardPosition",
    "MoveError",
    "ProcessResult",
    "apply_move",
    "undo_last",
    "is_won",
    "find_legal_destination",
    "suggest_move",
    "get_legal_moves",
    "has_any_legal_moves",
    "build_move_from_payload",
]
