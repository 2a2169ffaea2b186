"""Tests for move validation and state invariants.

Critical scenarios tested:
- Rejected moves leave state untouched (atomicity)
- Accepted moves never mutate the input state
- Deck conservation across play
- validate_move() agrees with apply_move()
"""

import pytest

from spider.game.engine import (
    DrawStock,
    MoveError,
    RecycleStock,
    apply_move,
    get_legal_moves,
    validate_move,
)
from spider.schemas.game_engine import DECK_SIZE, GameState

from .conftest import move_card


class TestAtomicity:
    """Rejected moves must not change anything."""

    @pytest.mark.parametrize(
        "move",
        [
            RecycleStock(),
            move_card(0, 0, 1, 6),
            move_card(1, 0, 2, 6),
            move_card(1, 5, 1, 6),
            move_card(1, 5, 11, 0),
            move_card(12, 0, 1, 6),
        ],
    )
    def test_rejected_move_leaves_state_unchanged(self, dealt_game: GameState, move):
        snapshot = dealt_game.model_copy(deep=True)

        result = apply_move(dealt_game, move)

        assert not result.success
        assert result.state is None
        assert dealt_game == snapshot

    def test_accepted_move_does_not_mutate_input(self, dealt_game: GameState):
        snapshot = dealt_game.model_copy(deep=True)

        result = apply_move(dealt_game, DrawStock())

        assert result.success
        assert dealt_game == snapshot
        assert result.state is not dealt_game
        assert result.state.current_stock_pos == 1


class TestDeckConservation:
    """The tableau and stock always hold all 104 cards."""

    def test_cards_conserved_during_play(self, dealt_game: GameState):
        state = dealt_game
        for _ in range(60):
            moves = get_legal_moves(state)
            result = apply_move(state, moves[-1])
            assert result.success
            state = result.state
            assert state.total_card_count == DECK_SIZE


class TestValidateMove:
    """validate_move() reports the same errors without processing."""

    def test_valid_draw(self, dealt_game: GameState):
        assert validate_move(dealt_game, DrawStock()).is_valid

    def test_invalid_recycle(self, dealt_game: GameState):
        validation = validate_move(dealt_game, RecycleStock())

        assert not validation.is_valid
        assert validation.error_code == MoveError.RECYCLE_NONE_EMPTY_STOCK
        assert validation.error_message

    def test_error_codes_are_strings(self):
        assert MoveError.DRAW_EMPTY_STOCK == "DRAW_EMPTY_STOCK"
