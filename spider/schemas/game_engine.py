from enum import Enum, IntEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

STOCK_PILE = 0
TABLEAU_PILES = 10
DECK_SIZE = 104
FULL_RUN_LENGTH = 13


# Card identity
class Color(str, Enum):
    BLACK = "black"
    RED = "red"


class Suit(str, Enum):
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"

    @property
    def color(self) -> Color:
        if self in (Suit.CLUBS, Suit.SPADES):
            return Color.BLACK
        return Color.RED

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        """Two-character label used by the renderer."""
        return _RANK_LABELS.get(self, f"{self.value:<2}")


_RANK_LABELS = {
    Rank.ACE: "A ",
    Rank.TEN: "10",
    Rank.JACK: "J ",
    Rank.QUEEN: "Q ",
    Rank.KING: "K ",
}


# Game variant: how many distinct suits are in play
class SuitVariant(str, Enum):
    ONE = "one"
    TWO = "two"
    FOUR = "four"

    @property
    def suit_count(self) -> int:
        return {SuitVariant.ONE: 1, SuitVariant.TWO: 2, SuitVariant.FOUR: 4}[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_suit_count(cls, count: int) -> "SuitVariant":
        for variant in cls:
            if variant.suit_count == count:
                return variant
        raise ValueError(f"Unsupported suit count: {count}")


class Card(BaseModel):
    model_config = ConfigDict(frozen=True)

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank.label} {self.suit.symbol}"


class GameCard(BaseModel):
    card: Card
    face_up: bool = False

    @property
    def suit(self) -> Suit:
        return self.card.suit

    @property
    def rank(self) -> Rank:
        return self.card.rank

    @property
    def color(self) -> Color:
        return self.card.suit.color


class CardPosition(BaseModel):
    """Location of a card: pile 0 is the stock, piles 1-10 the tableau.

    ``card`` indexes bottom-to-top within the pile (0 is the bottom card).
    """

    pile: int = Field(..., ge=0)
    card: int = Field(..., ge=0)


# Player moves
class DrawStock(BaseModel):
    """Reveal the next stock card."""

    move_type: Literal["draw_stock"] = "draw_stock"


class RecycleStock(BaseModel):
    """Reset the stock cursor once every stock card has been drawn."""

    move_type: Literal["recycle_stock"] = "recycle_stock"


class MoveCard(BaseModel):
    """Move the card at ``src`` and everything above it onto ``dst``'s pile."""

    move_type: Literal["move_card"] = "move_card"
    src: CardPosition
    dst: CardPosition
    before_visible: bool | None = Field(
        None,
        description=(
            "Recorded by the engine for tableau moves: True if the card exposed "
            "under the run was face-down and got revealed, False if it was "
            "already face-up, None when nothing was exposed or the card came "
            "from the stock"
        ),
    )


GameMove = Annotated[
    DrawStock | RecycleStock | MoveCard,
    Field(discriminator="move_type"),
]


class GameState(BaseModel):
    """Full engine state: tableau, stock, cursor, score and move history.

    Transitions never mutate a GameState in place; apply_move and undo_last
    return a new state, so a rejected move leaves the caller's copy intact.
    """

    variant: SuitVariant
    tableau: list[list[GameCard]]
    stock: list[GameCard] = []
    current_stock_pos: int = 0  # How many stock cards have been drawn
    score: int = 0
    history: list[GameMove] = []
    started_at: int | None = None  # Unix milliseconds of the first move
    event_seq: int = 0  # Next sequence number for events

    @field_validator("tableau")
    @classmethod
    def validate_tableau(cls, v: list[list[GameCard]]) -> list[list[GameCard]]:
        if len(v) != TABLEAU_PILES:
            raise ValueError(f"Tableau must have exactly {TABLEAU_PILES} piles, got {len(v)}")
        return v

    def pile(self, pile: int) -> list[GameCard]:
        """Return tableau pile ``pile`` (1-10)."""
        if not 1 <= pile <= TABLEAU_PILES:
            raise IndexError(f"No tableau pile {pile}")
        return self.tableau[pile - 1]

    def top_card(self, pile: int) -> GameCard | None:
        cards = self.pile(pile)
        return cards[-1] if cards else None

    @property
    def drawn_stock_card(self) -> GameCard | None:
        """The most recently drawn stock card, the only one that can be played."""
        if self.current_stock_pos == 0:
            return None
        return self.stock[self.current_stock_pos - 1]

    @property
    def stock_remaining(self) -> int:
        return len(self.stock) - self.current_stock_pos

    @property
    def history_length(self) -> int:
        return len(self.history)

    @property
    def tableau_card_count(self) -> int:
        return sum(len(pile) for pile in self.tableau)

    @property
    def total_card_count(self) -> int:
        return self.tableau_card_count + len(self.stock)
