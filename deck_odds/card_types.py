"""
card_types.py

Card and deck snapshot types shared by every layer of deck_odds
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


class Suit(Enum):
    HEARTS = 'hearts'
    DIAMONDS = 'diamonds'
    CLUBS = 'clubs'
    SPADES = 'spades'


# Canonical iteration order, also the flush tie-break order
SUITS: Tuple[Suit, ...] = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)

RANKS: Tuple[str, ...] = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')

RANK_VALUES: Dict[str, int] = {
    '2': 2, '3': 3, '4': 4, '5': 5, '6': 6, '7': 7,
    '8': 8, '9': 9, '10': 10, 'J': 11, 'Q': 12,
    'K': 13, 'A': 14
}


class Enhancement(Enum):
    NONE = 'none'
    BONUS = 'bonus'
    MULT = 'mult'
    WILD = 'wild'
    GLASS = 'glass'
    STEEL = 'steel'
    STONE = 'stone'
    GOLD = 'gold'
    LUCKY = 'lucky'


class Edition(Enum):
    NONE = 'none'
    FOIL = 'foil'
    HOLOGRAPHIC = 'holographic'
    POLYCHROME = 'polychrome'
    NEGATIVE = 'negative'


class Seal(Enum):
    NONE = 'none'
    GOLD = 'gold'
    RED = 'red'
    BLUE = 'blue'
    PURPLE = 'purple'


class TargetHand(Enum):
    FLUSH = 'flush'
    STRAIGHT = 'straight'
    PAIR = 'pair'
    THREE_OF_A_KIND = 'three_of_a_kind'
    FULL_HOUSE = 'full_house'


def _enum_value(enum_cls, raw, default):
    """Coerce a raw feed value (enum, string or None) into enum_cls."""
    if raw is None:
        return default
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(str(raw).lower())
    except ValueError:
        raise ValueError(f"Invalid {enum_cls.__name__.lower()}: {raw!r}") from None


def _fallback_id(rank: str, suit: Suit, position: Optional[str]) -> str:
    base = f"{rank}-{suit.value}"
    return f"{base}#{position}" if position is not None else base


def _rank_value(raw) -> str:
    rank = str(raw).upper()
    if rank == 'T':
        rank = '10'
    if rank not in RANK_VALUES:
        raise ValueError(f"Invalid rank: {raw!r}")
    return rank


@dataclass(frozen=True)
class Card:
    id: str
    suit: Suit
    rank: str  # '2'-'10', 'J', 'Q', 'K', 'A'
    enhancement: Enhancement = Enhancement.NONE
    edition: Edition = Edition.NONE
    seal: Seal = Seal.NONE
    chip_value: int = 0
    debuffed: bool = False
    face_down: bool = False
    highlighted: bool = False

    def __str__(self):
        suit_str = {Suit.CLUBS: '♣', Suit.DIAMONDS: '♦', Suit.HEARTS: '♥', Suit.SPADES: '♠'}[self.suit]
        wild_str = '*' if self.is_wild else ''
        return f"{self.rank}{suit_str}{wild_str}"

    @property
    def is_wild(self) -> bool:
        return self.enhancement == Enhancement.WILD

    @property
    def rank_value(self) -> int:
        return RANK_VALUES[self.rank]

    @classmethod
    def from_dict(cls, data: Dict[str, Any], position: Optional[str] = None) -> 'Card':
        """
        Build a card from the game feed's camelCase record.

        A record without an id gets one from its rank, suit and position, so
        identical cards in one snapshot stay distinct.
        """
        if data.get('suit') is None or data.get('rank') is None:
            raise ValueError(f"Card record needs 'suit' and 'rank': {data!r}")
        suit = _enum_value(Suit, data['suit'], None)
        rank = _rank_value(data['rank'])
        return cls(
            id=str(data.get('id') or _fallback_id(rank, suit, position)),
            suit=suit,
            rank=rank,
            enhancement=_enum_value(Enhancement, data.get('enhancement'), Enhancement.NONE),
            edition=_enum_value(Edition, data.get('edition'), Edition.NONE),
            seal=_enum_value(Seal, data.get('seal'), Seal.NONE),
            chip_value=int(data.get('chipValue', 0) or 0),
            debuffed=bool(data.get('debuffed', False)),
            face_down=bool(data.get('faceDown', False)),
            highlighted=bool(data.get('highlighted', False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'suit': self.suit.value,
            'rank': self.rank,
            'enhancement': self.enhancement.value,
            'edition': self.edition.value,
            'seal': self.seal.value,
            'chipValue': self.chip_value,
            'debuffed': self.debuffed,
            'faceDown': self.face_down,
            'highlighted': self.highlighted,
        }


def parse_card(card_str: str, card_id: Optional[str] = None) -> Card:
    """
    Convert a short string like 'Ah', '10d', 'Ts' or 'Qc*' into a Card.

    A trailing '*' marks the card as wild.
    """
    suit_str_to_suit = {'h': Suit.HEARTS, 'd': Suit.DIAMONDS, 'c': Suit.CLUBS, 's': Suit.SPADES}

    text = card_str.strip()
    wild = text.endswith('*')
    if wild:
        text = text[:-1]

    if len(text) < 2:
        raise ValueError(f"Invalid card format: {card_str}")

    suit = suit_str_to_suit.get(text[-1].lower())
    if suit is None:
        raise ValueError(f"Invalid card: {card_str}")
    rank = _rank_value(text[:-1])

    return Card(
        id=card_id or card_str.strip(),
        suit=suit,
        rank=rank,
        enhancement=Enhancement.WILD if wild else Enhancement.NONE,
    )


def parse_cards(card_strings: Iterable[str]) -> List[Card]:
    """Parse a list of card strings; ids are made unique by position."""
    return [parse_card(card, card_id=f"{card.strip()}#{i}") for i, card in enumerate(card_strings)]


def _card_tuple(cards: Iterable[Any], partition: str) -> Tuple[Card, ...]:
    return tuple(
        card if isinstance(card, Card) else Card.from_dict(card, position=f"{partition}{i}")
        for i, card in enumerate(cards)
    )


@dataclass(frozen=True)
class DeckState:
    """
    One materialized snapshot of the deck, partitioned into remaining, hand,
    discarded and played cards. Only remaining and hand affect probabilities.
    """
    remaining: Tuple[Card, ...] = ()
    hand: Tuple[Card, ...] = ()
    discarded: Tuple[Card, ...] = ()
    played: Tuple[Card, ...] = ()
    selected: Tuple[str, ...] = ()
    total_cards: Optional[int] = None
    cards_remaining: Optional[int] = None

    def __post_init__(self):
        # Freeze any lists handed in so a query never sees a later mutation
        for name in ('remaining', 'hand', 'discarded', 'played', 'selected'):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if self.cards_remaining is None:
            object.__setattr__(self, 'cards_remaining', len(self.remaining))
        if self.total_cards is None:
            total = len(self.remaining) + len(self.hand) + len(self.discarded) + len(self.played)
            object.__setattr__(self, 'total_cards', total)

    @classmethod
    def from_cards(cls, remaining: Iterable[Card], hand: Iterable[Card] = (),
                   discarded: Iterable[Card] = (), played: Iterable[Card] = ()) -> 'DeckState':
        return cls(remaining=tuple(remaining), hand=tuple(hand),
                   discarded=tuple(discarded), played=tuple(played))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeckState':
        """Build a snapshot from the game feed's camelCase deck record."""
        remaining = _card_tuple(data.get('remaining') or (), 'remaining')
        return cls(
            remaining=remaining,
            hand=_card_tuple(data.get('hand') or (), 'hand'),
            discarded=_card_tuple(data.get('discarded') or (), 'discarded'),
            played=_card_tuple(data.get('played') or (), 'played'),
            selected=tuple(str(card_id) for card_id in data.get('selected') or ()),
            total_cards=data.get('totalCards'),
            cards_remaining=data.get('cardsRemaining', len(remaining)),
        )

    @property
    def selected_cards(self) -> List[Card]:
        selected = set(self.selected)
        return [card for card in self.hand if card.id in selected]
