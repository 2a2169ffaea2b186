"""Card adjacency rules for each suit variant."""

from spider.schemas.game_engine import GameCard, Rank, SuitVariant


def suits_match(under: GameCard, over: GameCard, variant: SuitVariant) -> bool:
    """Check the variant's suit constraint between two stacked cards.

    - ONE: any suit may follow any suit
    - TWO: cards must share a color
    - FOUR: cards must share a suit
    """
    if variant == SuitVariant.ONE:
        return True
    if variant == SuitVariant.TWO:
        return under.color == over.color
    return under.suit == over.suit


def can_stack(under: GameCard, over: GameCard, variant: SuitVariant) -> bool:
    """True if ``over`` may sit directly on ``under``."""
    if under.rank - over.rank != 1:
        return False
    return suits_match(under, over, variant)


def can_place(pile: list[GameCard], card: GameCard, variant: SuitVariant) -> bool:
    """True if ``card`` may be placed on top of ``pile``.

    A King goes onto an empty pile unconditionally; otherwise the top card
    must be exactly one rank higher and satisfy the suit constraint.
    """
    if not pile:
        return card.rank == Rank.KING
    return can_stack(pile[-1], card, variant)


def is_movable_run(cards: list[GameCard], variant: SuitVariant) -> bool:
    """True if ``cards`` (bottom to top) form a face-up descending run."""
    if not cards or not all(card.face_up for card in cards):
        return False
    return all(
        can_stack(under, over, variant)
        for under, over in zip(cards, cards[1:])
    )
