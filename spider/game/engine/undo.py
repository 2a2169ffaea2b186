"""Undo processing - reverts the most recent move in history."""

import logging

from spider.schemas.game_engine import (
    STOCK_PILE,
    DrawStock,
    GameState,
    MoveCard,
    RecycleStock,
)

from .events import MoveUndone
from .process import assign_event_sequences
from .validation import MoveError, ProcessResult, ValidationResult

logger = logging.getLogger(__name__)


def undo_last(state: GameState) -> ProcessResult:
    """Revert the most recent move and drop it from history.

    An empty history is a successful no-op with no events. If the inverse
    cannot be applied the result is a failure and the state (history
    included) is left untouched; callers are free to ignore it.

    Args:
        state: Current game state.

    Returns:
        ProcessResult with the reverted state and a MoveUndone event.
    """
    if not state.history:
        logger.debug("Undo requested with empty history")
        return ProcessResult.ok(state)

    move = state.history[-1]
    move_type = type(move).__name__
    logger.info("Undoing move: type=%s, history=%d", move_type, state.history_length)

    validation = _validate_inverse(state, move)
    if not validation.is_valid:
        logger.warning(
            "Undo failed: code=%s, message=%s, move=%s",
            validation.error_code.value if validation.error_code else None,
            validation.error_message,
            move_type,
        )
        return ProcessResult.failure(
            validation.error_code,
            validation.error_message or "Cannot undo move",
        )

    new_state = state.model_copy(deep=True)
    undone = new_state.history.pop()

    if isinstance(undone, DrawStock):
        new_state.current_stock_pos -= 1

    elif isinstance(undone, RecycleStock):
        new_state.current_stock_pos = len(new_state.stock)

    elif undone.src.pile == STOCK_PILE:
        card = new_state.pile(undone.dst.pile).pop()
        card.face_up = False
        new_state.stock.insert(new_state.current_stock_pos, card)
        new_state.current_stock_pos += 1

    else:
        src_pile = new_state.pile(undone.src.pile)
        dst_pile = new_state.pile(undone.dst.pile)
        if undone.before_visible is not None and undone.src.card > 0:
            src_pile[undone.src.card - 1].face_up = not undone.before_visible
        src_pile.extend(dst_pile[undone.dst.card:])
        del dst_pile[undone.dst.card:]

    logger.debug("Undo complete: %d move(s) left in history", new_state.history_length)
    events = [MoveUndone(move=undone, remaining_history=new_state.history_length)]
    return assign_event_sequences(ProcessResult.ok(new_state, events))


def _validate_inverse(state: GameState, move: DrawStock | RecycleStock | MoveCard) -> ValidationResult:
    """Check that the recorded move can still be reverted on ``state``."""
    if isinstance(move, DrawStock):
        if state.current_stock_pos == 0:
            return ValidationResult.error(
                MoveError.DRAW_EMPTY_STOCK,
                "No drawn stock card to put back",
            )
        return ValidationResult.ok()

    if isinstance(move, RecycleStock):
        if state.current_stock_pos != 0:
            return ValidationResult.error(
                MoveError.RECYCLE_NONE_EMPTY_STOCK,
                "Stock has been drawn from since it was recycled",
            )
        return ValidationResult.ok()

    dst_pile = state.pile(move.dst.pile)
    if move.src.pile == STOCK_PILE:
        if len(dst_pile) != move.dst.card + 1:
            return ValidationResult.error(
                MoveError.MOVE_SRC_NOT_EXIST,
                f"Stock card is no longer on top of pile {move.dst.pile}",
            )
        return ValidationResult.ok()

    if len(dst_pile) <= move.dst.card or len(state.pile(move.src.pile)) != move.src.card:
        return ValidationResult.error(
            MoveError.MOVE_SRC_NOT_EXIST,
            f"Run moved to pile {move.dst.pile} is no longer in place",
        )
    return ValidationResult.ok()
