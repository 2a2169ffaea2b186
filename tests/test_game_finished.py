"""Tests for win detection.

Critical scenarios tested:
- A complete face-up run with an empty stock wins
- Face-down cards, short piles and leftover stock prevent the win
- Completing the last run emits GameWon
"""

from spider.game.engine import GameWon, RecycleStock, apply_move, is_won
from spider.schemas.game_engine import Rank, Suit

from .conftest import create_card, create_run, create_state, move_card


class TestIsWon:
    """Test the win condition."""

    def test_single_complete_run_wins(self):
        state = create_state(piles={1: create_run(Rank.KING, Rank.ACE)})

        assert is_won(state)

    def test_face_down_card_prevents_win(self):
        state = create_state(piles={1: create_run(Rank.KING, Rank.ACE)})
        state.pile(1)[5].face_up = False

        assert not is_won(state)

    def test_eight_complete_runs_win(self):
        suits = [Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES] * 2
        state = create_state(
            piles={pile: create_run(Rank.KING, Rank.ACE, suit) for pile, suit in enumerate(suits, 1)}
        )

        assert is_won(state)

    def test_incomplete_pile_prevents_win(self):
        state = create_state(piles={1: create_run(Rank.KING, Rank.TWO)})

        assert not is_won(state)

    def test_stock_prevents_win(self):
        state = create_state(
            piles={1: create_run(Rank.KING, Rank.ACE)},
            stock=[create_card(Rank.ACE, face_up=False)],
        )

        assert not is_won(state)

    def test_fresh_deal_is_not_won(self, dealt_game):
        assert not is_won(dealt_game)


class TestWinningMove:
    """Test the move that completes the game."""

    def test_last_stock_card_completes_run(self):
        state = create_state(
            piles={1: create_run(Rank.KING, Rank.TWO)},
            stock=[create_card(Rank.ACE, face_up=False)],
            current_stock_pos=1,
        )

        result = apply_move(state, move_card(0, 0, 1, 12))

        assert result.success
        assert is_won(result.state)
        won = [e for e in result.events if isinstance(e, GameWon)]
        assert len(won) == 1
        assert won[0].moves_played == 1

    def test_moves_after_win_do_not_announce_it_again(self):
        state = create_state(piles={1: create_run(Rank.KING, Rank.ACE)})
        assert is_won(state)

        for _ in range(3):
            result = apply_move(state, RecycleStock())
            assert result.success
            assert not any(isinstance(e, GameWon) for e in result.events)
            state = result.state

    def test_ordinary_move_does_not_emit_win(self, reveal_game):
        result = apply_move(reveal_game, move_card(1, 1, 2, 1))

        assert not any(isinstance(e, GameWon) for e in result.events)
