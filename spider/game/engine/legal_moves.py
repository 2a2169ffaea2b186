"""Legal move calculation for stock cards and tableau runs."""

from collections.abc import Iterator

from spider.schemas.game_engine import (
    STOCK_PILE,
    TABLEAU_PILES,
    CardPosition,
    DrawStock,
    GameMove,
    GameState,
    MoveCard,
    RecycleStock,
)

from .process import capture_before_visible
from .validation import validate_move


def find_legal_destination(state: GameState, src: CardPosition) -> CardPosition | None:
    """Find the first tableau pile that accepts the card (or run) at ``src``.

    Piles are scanned in ascending order, skipping the source pile; the
    first legal destination wins.

    Args:
        state: Current game state.
        src: Position of the card the player picked up.

    Returns:
        The destination position (top of the accepting pile), or None.
    """
    for pile in range(1, TABLEAU_PILES + 1):
        if pile == src.pile:
            continue
        dst = CardPosition(pile=pile, card=len(state.pile(pile)))
        if validate_move(state, MoveCard(src=src, dst=dst)).is_valid:
            return dst
    return None


def suggest_move(state: GameState, src: CardPosition) -> MoveCard | None:
    """Like find_legal_destination(), but returns a ready-to-apply move.

    The move carries the before_visible value apply_move() would record.
    """
    dst = find_legal_destination(state, src)
    if dst is None:
        return None
    return MoveCard(src=src, dst=dst, before_visible=capture_before_visible(state, src))


def get_legal_moves(state: GameState) -> list[GameMove]:
    """Determine every legal move in the current state.

    A move is listed if:
    - DrawStock: undrawn stock cards remain
    - RecycleStock: a non-empty stock has been fully drawn
    - MoveCard: the drawn stock card, or any movable tableau run, fits
      on another tableau pile

    Args:
        state: Current game state.

    Returns:
        Legal moves in a stable order: stock moves first, then card moves
        by source pile and index, then destination pile.
    """
    return list(_iter_legal_moves(state))


def has_any_legal_moves(state: GameState) -> bool:
    """Quick check if any move is available.

    More efficient than get_legal_moves() when you only need to know if moves exist.
    """
    return next(_iter_legal_moves(state), None) is not None


def _iter_legal_moves(state: GameState) -> Iterator[GameMove]:
    if state.current_stock_pos < len(state.stock):
        yield DrawStock()
    elif state.stock:
        yield RecycleStock()

    sources: list[CardPosition] = []
    if state.current_stock_pos > 0:
        sources.append(CardPosition(pile=STOCK_PILE, card=state.current_stock_pos - 1))
    for pile in range(1, TABLEAU_PILES + 1):
        for index, card in enumerate(state.pile(pile)):
            if card.face_up:
                sources.append(CardPosition(pile=pile, card=index))

    for src in sources:
        for pile in range(1, TABLEAU_PILES + 1):
            if pile == src.pile:
                continue
            move = MoveCard(src=src, dst=CardPosition(pile=pile, card=len(state.pile(pile))))
            if validate_move(state, move).is_valid:
                yield move.model_copy(
                    update={"before_visible": capture_before_visible(state, src)}
                )
