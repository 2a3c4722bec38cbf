"""Unit tests for RadixConverter.

WHY: The converter is the whole engine. Wrong digit order, an empty
encoding for zero or a tokenizer that mis-splits multi-character
numerals would corrupt every id that passes through it.

HOW: Tests cover construction and validation, encoding, decoding,
composition, and the concrete scenarios worked out by hand:
  - base62 123456789 -> "8m0Kx"
  - base7 12345 -> "50664", into base3 -> "121221020"
  - spelled-out digits decode greedily
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from radix_converter import (
    DecodeError,
    InvalidNumberError,
    NumeralError,
    RadixConverter,
    RadixError,
)


class TestConstruction:

    def test_string_alphabet(self, base16):
        assert base16.radix == 16
        assert base16.numerals[10] == "a"
        assert base16.numeral_values["f"] == 15
        assert base16.ordered_numerals is None
        assert not base16.is_multi_character

    def test_sequence_alphabet(self, words):
        assert words.radix == 10
        assert words.numerals[3] == "three"
        assert words.numeral_values["nine"] == 9
        assert words.is_multi_character
        assert words.ordered_numerals[0] in ("three", "seven", "eight")
        assert len(words.ordered_numerals[-1]) == 3

    def test_invariant_sizes_match(self, mixed_length):
        assert mixed_length.radix == len(mixed_length.numerals) == len(mixed_length.numeral_values)

    def test_sequence_elements_are_coerced(self):
        converter = RadixConverter([0, 1, 2])
        assert converter.numerals == ("0", "1", "2")
        assert converter.into_decimal("21") == 7

    def test_duplicate_character_rejected(self):
        with pytest.raises(NumeralError, match="unique"):
            RadixConverter("00")

    def test_duplicate_token_rejected(self):
        with pytest.raises(NumeralError, match="x is duplicated"):
            RadixConverter(["x", "y", "x"])

    def test_duplicate_token_rejected_without_validation(self):
        with pytest.raises(NumeralError):
            RadixConverter(["x", "x"], validate=False)

    def test_empty_token_rejected(self):
        with pytest.raises(NumeralError, match="Empty string"):
            RadixConverter(["a", ""])

    def test_empty_token_rejected_without_validation(self):
        with pytest.raises(NumeralError):
            RadixConverter(["a", ""], validate=False)

    def test_prefix_conflict_rejected(self):
        with pytest.raises(NumeralError, match="a and ab cannot be used together"):
            RadixConverter(["a", "ab"])

    def test_prefix_conflict_allowed_without_validation(self):
        converter = RadixConverter(["a", "ab"], validate=False)
        assert converter.radix == 2
        assert converter.into_decimal("ab") == 1

    def test_unvalidated_alphabet_may_mis_tokenize(self):
        converter = RadixConverter(["a", "ab", "b"], validate=False)
        encoded = converter.from_decimal(20)  # digits 2, 0, 2
        assert encoded == "bab"
        # greedy decoding reads "b", "ab" instead
        assert converter.into_decimal(encoded) == 7

    @pytest.mark.parametrize("numerals", ["", "0", [], ["only"]])
    def test_radix_below_two_rejected(self, numerals):
        with pytest.raises(NumeralError, match="Radix must be at least 2"):
            RadixConverter(numerals)

    def test_non_iterable_rejected(self):
        with pytest.raises(NumeralError, match="sequence of strings"):
            RadixConverter(42)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            RadixConverter("aa")

    def test_repr(self, base2, words):
        assert repr(base2) == "RadixConverter('01')"
        assert repr(words).startswith("RadixConverter(['zero', 'one'")


class TestImmutability:

    def test_radix_is_read_only(self, base16):
        with pytest.raises(AttributeError):
            base16.radix = 2

    def test_numeral_values_is_read_only(self, base16):
        with pytest.raises(TypeError):
            base16.numeral_values["g"] = 16

    def test_numerals_is_a_tuple(self, words):
        assert isinstance(words.numerals, tuple)

    def test_sequence_input_is_copied(self):
        tokens = ["x", "y", "z"]
        converter = RadixConverter(tokens)
        tokens[0] = "w"
        assert converter.numerals[0] == "x"


class TestFromDecimal:

    def test_zero_is_first_numeral(self, base16, words, mixed_length):
        assert base16.from_decimal(0) == "0"
        assert words.from_decimal(0) == "zero"
        assert mixed_length.from_decimal(0) == "a"

    def test_base62_scenario(self, base62):
        assert base62.from_decimal(123456789) == "8m0Kx"

    def test_base7_scenario(self, base7):
        assert base7.from_decimal(12345) == "50664"

    def test_hex(self, base16):
        assert base16.from_decimal(10) == "a"
        assert base16.from_decimal(255) == "ff"
        assert base16.from_decimal(256) == "100"

    def test_multi_character(self, words, mixed_length):
        assert words.from_decimal(2024) == "twozerotwofour"
        assert mixed_length.from_decimal(27) == "babbc"

    def test_large_integer_keeps_precision(self, base16):
        assert base16.from_decimal(2 ** 100) == "1" + "0" * 25

    def test_float_is_floored(self, base10):
        assert base10.from_decimal(12.9) == "12"
        assert base10.from_decimal(0.5) == "0"

    def test_numeric_strings(self, base10):
        assert base10.from_decimal("42") == "42"
        assert base10.from_decimal(" 7 ") == "7"
        assert base10.from_decimal("3.7") == "3"
        assert base10.from_decimal("1e3") == "1000"

    def test_bool_is_an_integer(self, base2):
        assert base2.from_decimal(True) == "1"

    @pytest.mark.parametrize("value", [-1, -0.5, "-3"])
    def test_negative_rejected(self, base10, value):
        with pytest.raises(InvalidNumberError, match="Negative"):
            base10.from_decimal(value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "nan", "inf"])
    def test_non_finite_rejected(self, base10, value):
        with pytest.raises(InvalidNumberError, match="Invalid number"):
            base10.from_decimal(value)

    @pytest.mark.parametrize("value", [None, "abc", "", [1]])
    def test_non_numeric_rejected(self, base10, value):
        with pytest.raises(InvalidNumberError):
            base10.from_decimal(value)


class TestIntoDecimal:

    def test_base62_scenario(self, base62):
        assert base62.into_decimal("8m0Kx") == 123456789

    def test_hex(self, base16):
        assert base16.into_decimal("a") == 10
        assert base16.into_decimal("ff") == 255

    def test_empty_string_is_zero(self, base16, words):
        assert base16.into_decimal("") == 0
        assert words.into_decimal("") == 0

    def test_leading_zeros_are_accepted(self, base10):
        assert base10.into_decimal("007") == 7

    def test_word_tokens(self, words):
        assert words.into_decimal("fourtwo") == 42
        assert words.into_decimal("onezerozero") == 100

    def test_single_letter_tokens(self):
        converter = RadixConverter(["f", "o", "u", "r"])
        assert converter.is_multi_character
        assert converter.into_decimal("four") == 0 * 64 + 1 * 16 + 2 * 4 + 3

    def test_variable_length_tokens(self, mixed_length):
        assert mixed_length.into_decimal("babbc") == 27
        assert mixed_length.into_decimal("cba") == 3 * 4 + 1

    def test_unknown_character(self, base16):
        with pytest.raises(DecodeError, match="Invalid numeral: g") as exc_info:
            base16.into_decimal("fg")
        assert exc_info.value.numeral == "g"

    def test_case_matters(self, base16):
        with pytest.raises(DecodeError):
            base16.into_decimal("FF")

    def test_unknown_token_remainder(self, words):
        with pytest.raises(DecodeError, match="Unknown numerals: twelve") as exc_info:
            words.into_decimal("onetwelve")
        assert exc_info.value.numeral == "twelve"

    def test_non_string_rejected(self, base10):
        with pytest.raises(DecodeError, match="Expected a string"):
            base10.into_decimal(123)

    def test_decode_error_is_radix_error(self, base2):
        with pytest.raises(RadixError):
            base2.into_decimal("2")


class TestRoundTrip:

    @pytest.mark.parametrize("n", [0, 1, 2, 9, 10, 61, 62, 63, 3843, 3844, 123456789, 2 ** 64])
    def test_number_round_trip(self, base62, words, mixed_length, n):
        for converter in (base62, words, mixed_length):
            assert converter.into_decimal(converter.from_decimal(n)) == n

    def test_canonical_string_round_trip(self, words, base7):
        for text in ("fourtwo", "onezeroseven"):
            assert words.from_decimal(words.into_decimal(text)) == text
        assert base7.from_decimal(base7.into_decimal("50664")) == "50664"


class TestComposition:

    def test_base2_into_base16(self, base2, base16):
        assert base2.convert_into(base16)("1110") == "e"

    def test_base16_into_base2(self, base2, base16):
        assert base16.convert_into(base2)("e") == "1110"

    def test_base7_into_base3_scenario(self, base7, base3):
        encoded = base7.from_decimal(12345)
        converted = base7.convert_into(base3)(encoded)
        assert converted == "121221020"
        assert base3.into_decimal(converted) == 12345

    def test_words_into_hex(self, words, base16):
        assert words.convert_into(base16)("twofivefive") == "ff"

    def test_same_integer_through_any_path(self, base7, base62, words):
        a = "50664"
        direct = base7.convert_into(words)(a)
        via = base62.convert_into(words)(base7.convert_into(base62)(a))
        assert words.into_decimal(direct) == base7.into_decimal(a)
        assert words.into_decimal(via) == base7.into_decimal(a)

    def test_convert_from_mirrors_convert_into(self, base7, base62):
        forward = base7.convert_into(base62)
        mirrored = base62.convert_from(base7)
        for n in range(0, 5000, 37):
            text = base7.from_decimal(n)
            assert mirrored(text) == forward(text)

    def test_converter_is_reusable(self, base10, base16):
        convert = base10.convert_into(base16)
        assert [convert(v) for v in ("10", "255", "0")] == ["a", "ff", "0"]

    def test_decode_errors_propagate(self, base2, base16):
        with pytest.raises(DecodeError):
            base2.convert_into(base16)("102")


class TestThreadSafety:

    def test_shared_instance_across_threads(self, base62):
        numbers = list(range(0, 200000, 97))
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda n: base62.into_decimal(base62.from_decimal(n)), numbers))
        assert results == numbers
