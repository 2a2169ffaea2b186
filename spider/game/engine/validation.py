"""Validation layer for moves and ProcessResult pattern.

Separates validation from processing logic:
- validate_move() checks if a move is legal given current state
- ProcessResult replaces exceptions for control flow
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

from spider.schemas.game_engine import (
    STOCK_PILE,
    TABLEAU_PILES,
    CardPosition,
    DrawStock,
    GameCard,
    GameMove,
    GameState,
    MoveCard,
    RecycleStock,
)

from .events import AnyGameEvent
from .rules import can_place, is_movable_run


class MoveError(str, Enum):
    """Rule violations a move can be rejected with."""

    DRAW_EMPTY_STOCK = "DRAW_EMPTY_STOCK"
    RECYCLE_NONE_EMPTY_STOCK = "RECYCLE_NONE_EMPTY_STOCK"
    MOVE_SRC_NOT_EXIST = "MOVE_SRC_NOT_EXIST"
    MOVE_INVALID_STOCK_CARD = "MOVE_INVALID_STOCK_CARD"
    MOVE_DST_NOT_VALID = "MOVE_DST_NOT_VALID"


@dataclass
class ProcessResult:
    """Result of applying or undoing a move.

    Replaces exceptions for control flow, providing explicit success/failure
    with error codes the UI can map to messages.
    """

    state: GameState | None = None
    events: list[AnyGameEvent] = field(default_factory=list)
    success: bool = True
    error_code: MoveError | None = None
    error_message: str | None = None

    @classmethod
    def ok(
        cls,
        state: GameState,
        events: list[AnyGameEvent] | None = None,
    ) -> "ProcessResult":
        """Create a successful result with new state and events."""
        return cls(
            state=state,
            events=events or [],
            success=True,
        )

    @classmethod
    def failure(cls, code: MoveError, message: str) -> "ProcessResult":
        """Create a failure result with error details."""
        return cls(
            state=None,
            events=[],
            success=False,
            error_code=code,
            error_message=message,
        )


@dataclass
class ValidationResult:
    """Result of validating a move before processing."""

    is_valid: bool = True
    error_code: MoveError | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, code: MoveError, message: str) -> "ValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=code,
            error_message=message,
        )


def is_tableau_pile(pile: int) -> bool:
    return 1 <= pile <= TABLEAU_PILES


def moving_cards(state: GameState, src: CardPosition) -> list[GameCard]:
    """Cards that would leave their pile for a move starting at ``src``.

    Assumes ``src`` has already been validated.
    """
    if src.pile == STOCK_PILE:
        return [state.stock[src.card]]
    return state.pile(src.pile)[src.card:]


def validate_move(state: GameState, move: GameMove) -> ValidationResult:
    """Validate a move before processing.

    Checks:
    - DrawStock: at least one undrawn stock card remains
    - RecycleStock: every stock card has been drawn
    - MoveCard: the source is a playable card or run, and the destination
      pile accepts it under the current variant

    Args:
        state: Current game state.
        move: The move to validate.

    Returns:
        ValidationResult indicating success or failure with error details.
    """
    move_type = type(move).__name__
    logger.debug(
        "Validating move: type=%s, stock_pos=%d/%d",
        move_type,
        state.current_stock_pos,
        len(state.stock),
    )

    if isinstance(move, DrawStock):
        if state.current_stock_pos >= len(state.stock):
            return ValidationResult.error(
                MoveError.DRAW_EMPTY_STOCK,
                "No stock cards left to draw",
            )
        return ValidationResult.ok()

    if isinstance(move, RecycleStock):
        if state.current_stock_pos < len(state.stock):
            return ValidationResult.error(
                MoveError.RECYCLE_NONE_EMPTY_STOCK,
                f"{state.stock_remaining} stock card(s) not drawn yet",
            )
        return ValidationResult.ok()

    if isinstance(move, MoveCard):
        source = _validate_source(state, move.src)
        if not source.is_valid:
            return source
        return _validate_destination(state, move.src, move.dst)

    return ValidationResult.error(
        MoveError.MOVE_SRC_NOT_EXIST,
        f"Unknown move type: {move_type}",
    )


def _validate_source(state: GameState, src: CardPosition) -> ValidationResult:
    """Check that ``src`` names a card (or run) the player may pick up."""
    if src.pile == STOCK_PILE:
        if state.current_stock_pos == 0 or src.card != state.current_stock_pos - 1:
            return ValidationResult.error(
                MoveError.MOVE_INVALID_STOCK_CARD,
                "Only the most recently drawn stock card can be moved",
            )
        if src.card >= len(state.stock):
            return ValidationResult.error(
                MoveError.MOVE_SRC_NOT_EXIST,
                f"No stock card at index {src.card}",
            )
        return ValidationResult.ok()

    if not is_tableau_pile(src.pile):
        return ValidationResult.error(
            MoveError.MOVE_SRC_NOT_EXIST,
            f"No pile {src.pile}",
        )

    pile = state.pile(src.pile)
    if src.card >= len(pile) or not pile[src.card].face_up:
        return ValidationResult.error(
            MoveError.MOVE_SRC_NOT_EXIST,
            f"No face-up card at pile {src.pile}, index {src.card}",
        )

    if not is_movable_run(pile[src.card:], state.variant):
        return ValidationResult.error(
            MoveError.MOVE_SRC_NOT_EXIST,
            f"Cards from pile {src.pile}, index {src.card} do not form a movable run",
        )

    return ValidationResult.ok()


def _validate_destination(
    state: GameState, src: CardPosition, dst: CardPosition
) -> ValidationResult:
    """Check that the run starting at ``src`` may be appended to ``dst``."""
    if not is_tableau_pile(dst.pile) or dst.pile == src.pile:
        return ValidationResult.error(
            MoveError.MOVE_DST_NOT_VALID,
            f"Pile {dst.pile} is not a valid destination",
        )

    dst_pile = state.pile(dst.pile)
    if dst.card != len(dst_pile):
        return ValidationResult.error(
            MoveError.MOVE_DST_NOT_VALID,
            f"Cards can only be added on top of pile {dst.pile} (index {len(dst_pile)})",
        )

    card = moving_cards(state, src)[0]
    if not can_place(dst_pile, card, state.variant):
        return ValidationResult.error(
            MoveError.MOVE_DST_NOT_VALID,
            f"{card.card} cannot be placed on pile {dst.pile}",
        )

    return ValidationResult.ok()
