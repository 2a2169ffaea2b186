"""Shared fixtures for game engine tests."""

import pytest

from spider.game import deal
from spider.schemas.game_engine import (
    TABLEAU_PILES,
    Card,
    CardPosition,
    GameCard,
    GameState,
    MoveCard,
    Rank,
    Suit,
    SuitVariant,
)

# Fixed seed for deterministic deals
DEAL_SEED = 1234


def create_card(rank: Rank, suit: Suit = Suit.CLUBS, face_up: bool = True) -> GameCard:
    """Helper to create a card."""
    return GameCard(card=Card(suit=suit, rank=rank), face_up=face_up)


def create_run(top: Rank, bottom: Rank, suit: Suit = Suit.CLUBS) -> list[GameCard]:
    """Create a face-up descending run from ``top`` (bottom of pile) down to ``bottom``."""
    return [create_card(Rank(r), suit) for r in range(top, bottom - 1, -1)]


def create_state(
    piles: dict[int, list[GameCard]] | None = None,
    stock: list[GameCard] | None = None,
    variant: SuitVariant = SuitVariant.FOUR,
    current_stock_pos: int = 0,
) -> GameState:
    """Helper to create a state with the given tableau piles (1-10) filled in."""
    piles = piles or {}
    tableau = [list(piles.get(pile, [])) for pile in range(1, TABLEAU_PILES + 1)]
    return GameState(
        variant=variant,
        tableau=tableau,
        stock=stock or [],
        current_stock_pos=current_stock_pos,
    )


def move_card(src_pile: int, src_card: int, dst_pile: int, dst_card: int) -> MoveCard:
    """Helper to create a MoveCard."""
    return MoveCard(
        src=CardPosition(pile=src_pile, card=src_card),
        dst=CardPosition(pile=dst_pile, card=dst_card),
    )


@pytest.fixture
def dealt_game() -> GameState:
    """Two-suit game dealt from a fixed seed."""
    return deal(SuitVariant.TWO, seed=DEAL_SEED)


@pytest.fixture
def four_suit_game() -> GameState:
    """Four-suit game dealt from a fixed seed."""
    return deal(SuitVariant.FOUR, seed=DEAL_SEED)


@pytest.fixture
def stock_game() -> GameState:
    """Game with three face-down stock cards and a Ten of Clubs on pile 1."""
    return create_state(
        piles={1: [create_card(Rank.TEN)]},
        stock=[
            create_card(Rank.TWO, face_up=False),
            create_card(Rank.FIVE, face_up=False),
            create_card(Rank.NINE, face_up=False),
        ],
    )


@pytest.fixture
def reveal_game() -> GameState:
    """Pile 1 has a face-down card under a face-up Five; pile 2 has a Six."""
    return create_state(
        piles={
            1: [create_card(Rank.THREE, Suit.HEARTS, face_up=False), create_card(Rank.FIVE)],
            2: [create_card(Rank.SIX)],
        },
    )
