import logging
import random

from spider.config import Settings, get_settings
from spider.schemas.game_engine import (
    TABLEAU_PILES,
    Card,
    GameCard,
    GameState,
    Rank,
    Suit,
    SuitVariant,
)

logger = logging.getLogger(__name__)

# Suit of each of the eight 13-card runs that make up the deck
_VARIANT_SUITS: dict[SuitVariant, list[Suit]] = {
    SuitVariant.ONE: [Suit.CLUBS] * 8,
    SuitVariant.TWO: [Suit.CLUBS] * 4 + [Suit.DIAMONDS] * 4,
    SuitVariant.FOUR: [Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES] * 2,
}

# The first four piles get one card more than the rest
_LONG_PILES = 4
_LONG_PILE_SIZE = 6
_SHORT_PILE_SIZE = 5


def build_deck(variant: SuitVariant) -> list[GameCard]:
    """Create the 104 face-down cards for a variant, in suit/rank order."""
    return [
        GameCard(card=Card(suit=suit, rank=rank))
        for suit in _VARIANT_SUITS[variant]
        for rank in Rank
    ]


def _draw_random(cards: list[GameCard], rng: random.Random) -> GameCard:
    """Remove and return a uniformly random card."""
    return cards.pop(rng.randrange(len(cards)))


def _deal_pile(cards: list[GameCard], size: int, rng: random.Random) -> list[GameCard]:
    pile = [_draw_random(cards, rng) for _ in range(size)]
    pile[-1].face_up = True
    return pile


def deal(variant: SuitVariant = SuitVariant.TWO, seed: int | None = None) -> GameState:
    """
    Shuffle a fresh deck and lay out a new game.

    Piles 1-4 get six cards and piles 5-10 get five, each with only the top
    card face-up. The remaining 50 cards form the face-down stock.

    Args:
        variant: How many suits are in play.
        seed: Optional seed for a reproducible deal.

    Returns:
        A GameState ready for the first move.
    """
    variant = SuitVariant(variant)
    rng = random.Random(seed)
    cards = build_deck(variant)

    tableau = [
        _deal_pile(cards, _LONG_PILE_SIZE if i < _LONG_PILES else _SHORT_PILE_SIZE, rng)
        for i in range(TABLEAU_PILES)
    ]
    stock = [_draw_random(cards, rng) for _ in range(len(cards))]

    state = GameState(variant=variant, tableau=tableau, stock=stock)
    logger.info(
        "Dealt %s-suit game: tableau=%d, stock=%d, seed=%s",
        variant.label,
        state.tableau_card_count,
        len(state.stock),
        seed,
    )
    return state


def new_game(settings: Settings | None = None) -> GameState:
    """Deal a game using the configured default variant and seed."""
    settings = settings or get_settings()
    return deal(settings.DEFAULT_VARIANT, seed=settings.DEAL_SEED)
