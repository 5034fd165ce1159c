"""
Unit tests for hand categories, ordering and winnings.
"""

import random
from itertools import combinations_with_replacement

import pytest

from advent.errors import MalformedInput
from advent.hands import (
    ALPHABET, PLAIN, WILDCARD, Card, Category, Hand,
    categorize, compare, hand_description, parse_cards, parse_hand,
    hand_key, parse_hands, rank_hands, total_winnings
)

EXAMPLE = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483
"""


def category_of(text: str, order=PLAIN) -> Category:
    return categorize(parse_cards(text, order))


def hand(text: str, order=PLAIN, bid: int = 0) -> Hand:
    return Hand(cards=parse_cards(text, order), bid=bid)


class TestCategories:
    """Test category derivation in plain mode."""

    def test_five_of_a_kind(self):
        assert category_of("AAAAA") == Category.FIVE_OF_A_KIND

    def test_four_of_a_kind(self):
        assert category_of("AA8AA") == Category.FOUR_OF_A_KIND

    def test_full_house(self):
        assert category_of("23332") == Category.FULL_HOUSE

    def test_three_of_a_kind(self):
        assert category_of("TTT98") == Category.THREE_OF_A_KIND

    def test_two_pair(self):
        assert category_of("23432") == Category.TWO_PAIR

    def test_one_pair(self):
        assert category_of("A23A4") == Category.ONE_PAIR

    def test_high_card(self):
        assert category_of("23456") == Category.HIGH_CARD

    def test_jack_is_plain_card(self):
        """Without wildcards J only groups with other Js."""
        assert category_of("T55J5") == Category.THREE_OF_A_KIND
        assert category_of("KTJJT") == Category.TWO_PAIR

    def test_description(self):
        assert hand_description(hand("AA8AA")) == "Four of a Kind"


class TestWildcardCategories:
    """Test category derivation when J is wild."""

    def test_wildcard_joins_largest_group(self):
        assert category_of("T55J5", WILDCARD) == Category.FOUR_OF_A_KIND
        assert category_of("KTJJT", WILDCARD) == Category.FOUR_OF_A_KIND
        assert category_of("QQQJA", WILDCARD) == Category.FOUR_OF_A_KIND

    def test_all_wildcards_is_five_of_a_kind(self):
        assert category_of("JJJJJ", WILDCARD) == Category.FIVE_OF_A_KIND

    def test_four_wildcards(self):
        assert category_of("JJJJ2", WILDCARD) == Category.FIVE_OF_A_KIND

    def test_wildcard_rules(self):
        assert category_of("JJQQQ", WILDCARD) == Category.FIVE_OF_A_KIND
        assert category_of("33QQQ", WILDCARD) == Category.FULL_HOUSE
        assert category_of("3KJJQ", WILDCARD) == Category.THREE_OF_A_KIND
        assert category_of("3KQQK", WILDCARD) == Category.TWO_PAIR
        assert category_of("J4729", WILDCARD) == Category.ONE_PAIR
        assert category_of("3KQT2", WILDCARD) == Category.HIGH_CARD

    def test_two_pair_plus_wildcard_is_full_house(self):
        assert category_of("KKJ22", WILDCARD) == Category.FULL_HOUSE

    def test_wildcard_never_lowers_category(self):
        for cards in combinations_with_replacement(ALPHABET, 5):
            text = "".join(cards)
            assert category_of(text, WILDCARD) >= category_of(text, PLAIN), text


class TestTotality:
    """Every multiset of five symbols maps to exactly one category."""

    @pytest.mark.parametrize("order", [PLAIN, WILDCARD])
    def test_all_multisets(self, order):
        seen = set()
        for cards in combinations_with_replacement(ALPHABET, 5):
            category = category_of("".join(cards), order)
            assert isinstance(category, Category)
            seen.add(category)
        assert seen == set(Category)

    @pytest.mark.parametrize("order", [PLAIN, WILDCARD])
    def test_random_hands(self, order):
        rng = random.Random(2023)
        for _ in range(1000):
            text = "".join(rng.choice(ALPHABET) for _ in range(5))
            shuffled = "".join(rng.sample(text, 5))
            assert category_of(text, order) == category_of(shuffled, order)


class TestOrdering:
    """Test the total order over hands."""

    def test_card_order_plain(self):
        assert Card("K").strength > Card("J").strength
        assert Card("A").strength > Card("2").strength

    def test_card_order_wildcard(self):
        assert Card("J", WILDCARD).strength < Card("2", WILDCARD).strength
        assert Card("Q", WILDCARD).strength > Card("T", WILDCARD).strength

    def test_category_decides_first(self):
        assert compare(hand("22223"), hand("AAKKQ")) == 1
        assert compare(hand("23456"), hand("22345")) == -1

    def test_tie_break_left_to_right(self):
        assert compare(hand("QQQJA"), hand("T55J5")) == 1
        assert compare(hand("KTJJT"), hand("KK677")) == -1
        assert compare(hand("33332"), hand("2AAAA")) == 1
        assert compare(hand("77888"), hand("77788")) == 1

    def test_wildcard_sorts_lowest_in_tie_break(self):
        assert compare(hand("JKKK2", WILDCARD), hand("QQQQ2", WILDCARD)) == -1
        assert compare(hand("JKKK2"), hand("QQQQ2")) == -1
        assert compare(hand("J2345", WILDCARD), hand("22345", WILDCARD)) == -1

    def test_identical_hands_equal(self):
        assert compare(hand("KK677", bid=1), hand("KK677", bid=2)) == 0

    def test_rank_hands_example(self):
        ranked = [str(h) for h in rank_hands(parse_hands(EXAMPLE))]
        assert ranked == ["32T3K", "KTJJT", "KK677", "T55J5", "QQQJA"]

    def test_rank_hands_wildcard_example(self):
        ranked = [str(h) for h in rank_hands(parse_hands(EXAMPLE, WILDCARD))]
        assert ranked == ["32T3K", "KK677", "T55J5", "QQQJA", "KTJJT"]

    def test_stable_for_identical_hands(self):
        assert total_winnings(parse_hands("AAAAA 1\nAAAAA 2")) == 1 * 1 + 2 * 2
        assert total_winnings(parse_hands("AAAAA 2\nAAAAA 1")) == 1 * 2 + 2 * 1


class TestWinnings:

    def test_plain_example(self):
        assert total_winnings(parse_hands(EXAMPLE, PLAIN)) == 6440

    def test_wildcard_example(self):
        assert total_winnings(parse_hands(EXAMPLE, WILDCARD)) == 5905

    def test_no_hands(self):
        assert total_winnings([]) == 0


class TestParsing:
    """Malformed hands are rejected outright."""

    def test_parse_hand(self):
        parsed = parse_hand("T55J5 684", WILDCARD)
        assert str(parsed) == "T55J5"
        assert parsed.bid == 684
        assert parsed.cards[3].is_wildcard

    def test_unknown_symbol(self):
        with pytest.raises(MalformedInput, match="3KQT1"):
            parse_cards("3KQT1")

    def test_lowercase_rejected(self):
        with pytest.raises(MalformedInput):
            parse_cards("aaaaa")

    @pytest.mark.parametrize("text", ["AAAA", "AAAAAA", ""])
    def test_wrong_length(self, text):
        with pytest.raises(MalformedInput):
            parse_cards(text)

    def test_bad_bid(self):
        with pytest.raises(MalformedInput):
            parse_hand("AAAAA ten")

    def test_missing_bid(self):
        with pytest.raises(MalformedInput):
            parse_hand("AAAAA")

    def test_whole_input_rejected_on_one_bad_line(self):
        with pytest.raises(MalformedInput):
            parse_hands("32T3K 765\nT55X5 684\n")


class TestExplicitRankOrder:
    """Entry points take the rank order as an argument."""

    PAIRS = [("32T3K", 765), ("T55J5", 684), ("KK677", 28), ("KTJJT", 220), ("QQQJA", 483)]

    def test_categorize_hand_string(self):
        assert categorize("T55J5", WILDCARD) == Category.FOUR_OF_A_KIND
        assert categorize("T55J5") == Category.THREE_OF_A_KIND

    def test_categorize_overrides_card_order(self):
        cards = parse_cards("KTJJT", PLAIN)
        assert categorize(cards) == Category.TWO_PAIR
        assert categorize(cards, WILDCARD) == Category.FOUR_OF_A_KIND

    def test_winnings_from_pairs(self):
        assert total_winnings(self.PAIRS, PLAIN) == 6440
        assert total_winnings(self.PAIRS, WILDCARD) == 5905
        assert total_winnings(self.PAIRS) == 6440

    def test_winnings_reranks_parsed_hands(self):
        assert total_winnings(parse_hands(EXAMPLE, PLAIN), WILDCARD) == 5905

    def test_hand_key_under_order(self):
        parsed = hand("J2345")
        assert hand_key(parsed)[0] == Category.HIGH_CARD
        assert hand_key(parsed, WILDCARD) == (Category.ONE_PAIR, 0, 1, 2, 3, 4)


class TestMixedRankOrders:
    """Hands ranked under different orders are not comparable."""

    def test_compare_rejects_mixed_orders(self):
        with pytest.raises(MalformedInput, match="different rank orders"):
            compare(parse_hand("JJJJ2 1", WILDCARD), parse_hand("22223 1", PLAIN))

    def test_rank_hands_rejects_mixed_orders(self):
        with pytest.raises(MalformedInput):
            rank_hands([hand("JJJJ2", WILDCARD), hand("22223", PLAIN)])

    def test_explicit_order_ranks_mixed_hands(self):
        ranked = rank_hands([hand("JJJJ2", WILDCARD), hand("22223", PLAIN)], WILDCARD)
        assert [str(h) for h in ranked] == ["22223", "JJJJ2"]

    def test_cards_of_one_hand_must_share_order(self):
        cards = (Card("J", WILDCARD), Card("2"), Card("3"), Card("4"), Card("5"))
        with pytest.raises(MalformedInput, match="mix rank orders"):
            categorize(cards)
