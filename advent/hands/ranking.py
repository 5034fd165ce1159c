"""
Camel Cards hand ranking.

Hands are five cards from the alphabet 23456789TJQKA. They are ordered by
category (pair structure) first and then card by card using the active rank
order. In wildcard mode J joins whichever group makes the best category and
sorts below every other card.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from ..errors import MalformedInput
from ..parsing import lines, to_int

ALPHABET = "23456789TJQKA"
HAND_SIZE = 5


class RankOrder(NamedTuple):
    """Symbol ordering table, lowest first, and the wildcard symbol if any."""
    symbols: str
    wildcard: Optional[str] = None

    def strength(self, symbol: str) -> int:
        return self.symbols.index(symbol)


PLAIN = RankOrder(symbols="23456789TJQKA")
WILDCARD = RankOrder(symbols="J23456789TQKA", wildcard="J")


class Category(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


# Descending group sizes -> category
CATEGORY_BY_SHAPE = {
    (5,): Category.FIVE_OF_A_KIND,
    (4, 1): Category.FOUR_OF_A_KIND,
    (3, 2): Category.FULL_HOUSE,
    (3, 1, 1): Category.THREE_OF_A_KIND,
    (2, 2, 1): Category.TWO_PAIR,
    (2, 1, 1, 1): Category.ONE_PAIR,
    (1, 1, 1, 1, 1): Category.HIGH_CARD,
}

CATEGORY_NAMES = {
    Category.HIGH_CARD: "High Card",
    Category.ONE_PAIR: "One Pair",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.FIVE_OF_A_KIND: "Five of a Kind",
}


@dataclass(frozen=True)
class Card:
    symbol: str
    order: RankOrder = PLAIN

    @property
    def strength(self) -> int:
        return self.order.strength(self.symbol)

    @property
    def is_wildcard(self) -> bool:
        return self.symbol == self.order.wildcard


@dataclass(frozen=True)
class Hand:
    cards: Tuple[Card, ...]
    bid: int = 0

    @property
    def category(self) -> Category:
        return categorize(self.cards)

    @property
    def sort_key(self) -> Tuple[int, ...]:
        """(category, card strengths...) - compares like the hand order."""
        return hand_key(self)

    def __str__(self) -> str:
        return "".join(card.symbol for card in self.cards)


def parse_cards(text: str, order: RankOrder = PLAIN) -> Tuple[Card, ...]:
    """
    Parse a hand string like "T55J5".

    Args:
        text: Exactly five symbols from the alphabet
        order: Rank order the cards are ranked under

    Returns:
        Tuple of five cards

    Raises:
        MalformedInput: On wrong length or an unknown symbol
    """
    if len(text) != HAND_SIZE:
        raise MalformedInput(f"Hand must have {HAND_SIZE} cards", text)
    for symbol in text:
        if symbol not in ALPHABET:
            raise MalformedInput(f"Unknown card {symbol!r} in hand", text)
    return tuple(Card(symbol, order) for symbol in text)


def parse_hand(line: str, order: RankOrder = PLAIN) -> Hand:
    """Parse a "<cards> <bid>" line."""
    fields = line.split()
    if len(fields) != 2:
        raise MalformedInput("Expected '<cards> <bid>'", line)
    cards, bid = fields
    return Hand(cards=parse_cards(cards, order), bid=to_int(bid))


def parse_hands(text: str, order: RankOrder = PLAIN) -> List[Hand]:
    """Parse one hand per line."""
    return [parse_hand(line, order) for line in lines(text)]


def _order_of(cards: Sequence[Card]) -> RankOrder:
    """The one rank order shared by a run of cards."""
    orders = {card.order for card in cards}
    if len(orders) > 1:
        raise MalformedInput("Cards mix rank orders", "".join(card.symbol for card in cards))
    return orders.pop() if orders else PLAIN


def categorize(cards: Union[str, Sequence[Card]], order: Optional[RankOrder] = None) -> Category:
    """
    Derive the category of a five-card hand.

    Wildcards are left out of the group counts and then added to the
    largest group. A hand of only wildcards is five of a kind.

    Args:
        cards: Five cards, or a hand string like "T55J5"
        order: Rank order to categorize under. Defaults to the cards' own
            order, or PLAIN for a hand string

    Returns:
        Category of the hand
    """
    if isinstance(cards, str):
        cards = parse_cards(cards, order or PLAIN)
    if len(cards) != HAND_SIZE:
        raise MalformedInput(f"Hand must have {HAND_SIZE} cards", "".join(c.symbol for c in cards))
    if order is None:
        order = _order_of(cards)
    counts = Counter(card.symbol for card in cards if card.symbol != order.wildcard)
    shape = sorted(counts.values(), reverse=True)
    if not shape:
        return Category.FIVE_OF_A_KIND
    shape[0] += HAND_SIZE - sum(shape)
    return CATEGORY_BY_SHAPE[tuple(shape)]


def hand_key(hand: Hand, order: Optional[RankOrder] = None) -> Tuple[int, ...]:
    """(category, card strengths...) under order, or the hand's own order."""
    if order is None:
        order = _order_of(hand.cards)
    return (int(categorize(hand.cards, order)),) + tuple(order.strength(card.symbol) for card in hand.cards)


def compare(left: Hand, right: Hand) -> int:
    """
    Compare two hands.

    Returns:
        1 if left ranks higher, -1 if right ranks higher, 0 if equal

    Raises:
        MalformedInput: If the hands are ranked under different orders
    """
    if _order_of(left.cards) != _order_of(right.cards):
        raise MalformedInput("Cannot compare hands under different rank orders", f"{left} vs {right}")
    left_key, right_key = left.sort_key, right.sort_key
    return (left_key > right_key) - (left_key < right_key)


def _as_hand(item: Union[Hand, Tuple[str, int]], order: Optional[RankOrder]) -> Hand:
    if isinstance(item, Hand):
        return item
    cards, bid = item
    return Hand(cards=parse_cards(cards, order or PLAIN), bid=bid)


def rank_hands(hands: Sequence[Union[Hand, Tuple[str, int]]], order: Optional[RankOrder] = None) -> List[Hand]:
    """
    Sort hands weakest first; equal hands keep their input order.

    Args:
        hands: Parsed hands, or (cards, bid) pairs
        order: Rank order to sort under. Without one, every hand must share
            the same order

    Raises:
        MalformedInput: If hands of different orders are ranked together
    """
    hands = [_as_hand(item, order) for item in hands]
    if order is None:
        orders = {_order_of(hand.cards) for hand in hands}
        if len(orders) > 1:
            raise MalformedInput("Hands mix rank orders", " ".join(str(hand) for hand in hands))
    return sorted(hands, key=lambda hand: hand_key(hand, order))


def total_winnings(hands: Sequence[Union[Hand, Tuple[str, int]]], order: Optional[RankOrder] = None) -> int:
    """Sum of 1-based rank times bid over all hands."""
    return sum(rank * hand.bid for rank, hand in enumerate(rank_hands(hands, order), start=1))


def hand_description(hand: Hand) -> str:
    return CATEGORY_NAMES[hand.category]
