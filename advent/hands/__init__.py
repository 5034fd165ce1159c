"""
Five-card hand ranking with plain and wildcard rank orders.
"""

from .ranking import (
    ALPHABET, HAND_SIZE, PLAIN, WILDCARD, RankOrder, Category, Card, Hand,
    parse_cards, parse_hand, parse_hands, categorize, compare, rank_hands,
    total_winnings, hand_description, hand_key
)

__all__ = [
    'ALPHABET',
    'HAND_SIZE',
    'PLAIN',
    'WILDCARD',
    'RankOrder',
    'Category',
    'Card',
    'Hand',
    'parse_cards',
    'parse_hand',
    'parse_hands',
    'categorize',
    'compare',
    'rank_hands',
    'total_winnings',
    'hand_description',
    'hand_key',
]
