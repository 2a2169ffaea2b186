"""Move payload parsing - turns raw UI intents into typed moves."""

from spider.schemas.game_engine import (
    DrawStock,
    GameMove,
    MoveCard,
    RecycleStock,
)


def build_move_from_payload(payload: dict) -> GameMove:
    """Build a typed move from a raw payload dict.

    Args:
        payload: Dict with 'move_type' key and move-specific fields.

    Returns:
        The appropriate GameMove subtype.

    Raises:
        ValueError: If move_type is missing or unknown.
    """
    move_type = payload.get("move_type")

    if move_type == "draw_stock":
        return DrawStock.model_validate(payload)
    elif move_type == "recycle_stock":
        return RecycleStock.model_validate(payload)
    elif move_type == "move_card":
        return MoveCard.model_validate(payload)
    else:
        raise ValueError(f"Unknown move type: {move_type}")
