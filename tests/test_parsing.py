import pytest

from advent.errors import MalformedInput
from advent.parsing import blocks, ints, lines, split_label, to_int, ws


class TestParsing:
    """Test the shared text front end."""

    def test_ws(self):
        assert ws("  a b \n") == "a b"

    def test_lines_skip_blank(self):
        assert lines("a\n\n  b  \n\n") == ["a", "b"]

    def test_blocks(self):
        assert blocks("a\nb\n\n\nc\n  \nd\n") == [["a", "b"], ["c"], ["d"]]

    def test_blocks_empty(self):
        assert blocks("\n\n") == []

    def test_ints(self):
        assert ints(" 79 14\t55  13 ") == [79, 14, 55, 13]
        assert ints("-3 4") == [-3, 4]
        assert ints("") == []

    def test_ints_rejects_token(self):
        with pytest.raises(MalformedInput, match="'1x'"):
            ints("5 1x 7")

    @pytest.mark.parametrize("token", ["1_000", "\u0663", "1.5", "0x10", " "])
    def test_to_int_ascii_decimal_only(self, token):
        with pytest.raises(MalformedInput):
            to_int(token)
        with pytest.raises(MalformedInput):
            ints(f"1 {token}x")

    def test_ints_signed(self):
        assert ints("+5 -7 007") == [5, -7, 7]

    def test_malformed_input_is_value_error(self):
        with pytest.raises(ValueError):
            ints("abc")

    def test_split_label(self):
        assert split_label("Game 1: 3 blue") == ("Game 1", "3 blue")

    def test_split_label_missing_separator(self):
        with pytest.raises(MalformedInput):
            split_label("Game 1 3 blue")
