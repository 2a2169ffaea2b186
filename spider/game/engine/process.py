"""Main entry point for move processing.

This module provides the primary interface for playing moves:
- apply_move(): Validates and executes any game move
- Dispatches to specialized handlers based on move type
- Returns ProcessResult with new state and events
"""

import logging
import time

logger = logging.getLogger(__name__)

from spider.schemas.game_engine import (
    FULL_RUN_LENGTH,
    STOCK_PILE,
    CardPosition,
    DrawStock,
    GameMove,
    GameState,
    MoveCard,
    RecycleStock,
)

from .events import (
    AnyGameEvent,
    CardRevealed,
    CardsMoved,
    GameWon,
    StockDrawn,
    StockRecycled,
)
from .validation import ProcessResult, validate_move


def apply_move(state: GameState, move: GameMove) -> ProcessResult:
    """Apply a move and return the result.

    This is the main entry point for all moves. It:
    1. Validates the move is legal given current state
    2. Executes it on a copy of the state
    3. Records the move (with its captured before_visible) in history
    4. Assigns sequence numbers to events

    The input state is never mutated, so a rejected move leaves it exactly
    as it was.

    Args:
        state: Current game state.
        move: The move to apply.

    Returns:
        ProcessResult containing:
        - success: Whether the move was applied
        - state: The new game state (if successful)
        - events: List of events that occurred (with seq numbers)
        - error_code/error_message: Error details (if failed)

    Example:
        >>> result = apply_move(state, DrawStock())
        >>> if result.success:
        ...     state = result.state
        ... else:
        ...     show_error(result.error_code, result.error_message)
    """
    move_type = type(move).__name__
    logger.info(
        "Processing move: type=%s, variant=%s, history=%d",
        move_type,
        state.variant.value,
        state.history_length,
    )
    logger.debug("Move details: %s", move)

    validation = validate_move(state, move)
    if not validation.is_valid:
        logger.warning(
            "Move validation failed: code=%s, message=%s, move=%s",
            validation.error_code.value if validation.error_code else None,
            validation.error_message,
            move_type,
        )
        return ProcessResult.failure(
            validation.error_code,
            validation.error_message or "Invalid move",
        )

    new_state = state.model_copy(deep=True)
    # History must not share position objects with the caller's move
    move = move.model_copy(deep=True)

    if isinstance(move, DrawStock):
        recorded, events = _process_draw_stock(new_state, move)
    elif isinstance(move, RecycleStock):
        recorded, events = _process_recycle_stock(new_state, move)
    else:
        recorded, events = _process_move_card(new_state, move)

    new_state.history.append(recorded)
    if new_state.started_at is None:
        new_state.started_at = int(time.time() * 1000)

    if not is_won(state) and is_won(new_state):
        logger.info("Game won after %d moves", new_state.history_length)
        events.append(GameWon(moves_played=new_state.history_length))

    result = assign_event_sequences(ProcessResult.ok(new_state, events))
    logger.info(
        "Move processed successfully: type=%s, events_generated=%d",
        move_type,
        len(result.events),
    )
    logger.debug("Generated events: %s", [type(e).__name__ for e in result.events])
    return result


def assign_event_sequences(result: ProcessResult) -> ProcessResult:
    """Assign monotonically increasing sequence numbers to events.

    Updates each event's seq field and advances the state's event_seq counter.
    """
    if result.state is None or not result.events:
        return result

    current_seq = result.state.event_seq
    for event in result.events:
        event.seq = current_seq
        current_seq += 1

    result.state.event_seq = current_seq
    return result


def _process_draw_stock(
    state: GameState, move: DrawStock
) -> tuple[GameMove, list[AnyGameEvent]]:
    state.current_stock_pos += 1
    drawn = state.stock[state.current_stock_pos - 1]
    logger.debug("Drew stock card %s (%d/%d)", drawn.card, state.current_stock_pos, len(state.stock))
    return move, [StockDrawn(card=drawn.card, stock_pos=state.current_stock_pos)]


def _process_recycle_stock(
    state: GameState, move: RecycleStock
) -> tuple[GameMove, list[AnyGameEvent]]:
    state.current_stock_pos = 0
    logger.debug("Recycled stock of %d cards", len(state.stock))
    return move, [StockRecycled(stock_size=len(state.stock))]


def _process_move_card(
    state: GameState, move: MoveCard
) -> tuple[GameMove, list[AnyGameEvent]]:
    """Relocate a stock card or tableau run onto the destination pile."""
    src, dst = move.src, move.dst
    dst_pile = state.pile(dst.pile)
    events: list[AnyGameEvent] = []

    if src.pile == STOCK_PILE:
        card = state.stock.pop(src.card)
        card.face_up = True
        state.current_stock_pos -= 1
        dst_pile.append(card)
        before_visible = None
        moved = [card]
    else:
        src_pile = state.pile(src.pile)
        before_visible = capture_before_visible(state, src)
        moved = src_pile[src.card:]
        del src_pile[src.card:]
        dst_pile.extend(moved)

        # Auto-reveal the card the run was sitting on
        if before_visible:
            exposed = src_pile[-1]
            exposed.face_up = True
            events.append(
                CardRevealed(
                    position=CardPosition(pile=src.pile, card=len(src_pile) - 1),
                    card=exposed.card,
                )
            )

    logger.debug(
        "Moved %d card(s) from pile %d to pile %d (now %d cards)",
        len(moved),
        src.pile,
        dst.pile,
        len(dst_pile),
    )
    events.insert(
        0, CardsMoved(src=src.model_copy(), dst=dst.model_copy(), cards=[c.card for c in moved])
    )
    return move.model_copy(update={"before_visible": before_visible}), events


def capture_before_visible(state: GameState, src: CardPosition) -> bool | None:
    """Record whether the card under ``src`` is face-down before it is exposed.

    Returns None for stock moves and for runs lifted from the bottom of a
    pile, since no card gets exposed.
    """
    if src.pile == STOCK_PILE or src.card == 0:
        return None
    return not state.pile(src.pile)[src.card - 1].face_up


def is_won(state: GameState) -> bool:
    """Check whether the game has been won.

    The stock must be empty and each tableau pile either empty or holding
    a complete face-up run of 13 cards.

    Args:
        state: Current game state.

    Returns:
        True if the game is won.
    """
    if state.stock:
        return False
    return all(
        not pile or (len(pile) == FULL_RUN_LENGTH and all(card.face_up for card in pile))
        for pile in state.tableau
    )
