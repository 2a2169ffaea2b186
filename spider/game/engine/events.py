"""Game event types - emitted during state transitions for the renderer.

Events describe what happened during a move or undo, enabling:
- Incremental redraws (only repaint the piles that changed)
- Card animations (know exactly which cards travelled where)
- Move log / replay display
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from spider.schemas.game_engine import Card, CardPosition, GameMove


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: str
    seq: int = 0  # Sequence number assigned during processing


class StockDrawn(GameEvent):
    """A stock card was turned face-up."""

    event_type: Literal["stock_drawn"] = "stock_drawn"
    card: Card
    stock_pos: int = Field(..., description="Cursor position after the draw")


class StockRecycled(GameEvent):
    """The fully drawn stock was turned back over."""

    event_type: Literal["stock_recycled"] = "stock_recycled"
    stock_size: int


class CardsMoved(GameEvent):
    """A card or run was relocated onto a tableau pile."""

    event_type: Literal["cards_moved"] = "cards_moved"
    src: CardPosition
    dst: CardPosition
    cards: list[Card] = Field(..., description="Moved cards, bottom to top")


class CardRevealed(GameEvent):
    """A face-down tableau card was flipped after the run above it left."""

    event_type: Literal["card_revealed"] = "card_revealed"
    position: CardPosition
    card: Card


class MoveUndone(GameEvent):
    """The most recent move was reverted."""

    event_type: Literal["move_undone"] = "move_undone"
    move: GameMove
    remaining_history: int


class GameWon(GameEvent):
    """Stock is empty and every tableau pile is empty or a complete run."""

    event_type: Literal["game_won"] = "game_won"
    moves_played: int


# Union of all event types for type checking
AnyGameEvent = Annotated[
    StockDrawn
    | StockRecycled
    | CardsMoved
    | CardRevealed
    | MoveUndone
    | GameWon,
    Field(discriminator="event_type"),
]
