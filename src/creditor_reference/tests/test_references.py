import pytest
import stdnum.exceptions

from creditor_reference.exceptions import (
    CreditorReferenceError,
    InvalidCharacter,
    InvalidCheckDigits,
    InvalidLength,
    MissingPrefix,
)
from creditor_reference.references import (
    build_numeral_expansion,
    compact,
    letter_to_number,
    parse_body,
    parse_full_reference,
)


class TestParseBody:
    def test_uppercases_letters(self):
        assert parse_body("abcd0754efgh") == "ABCD0754EFGH"

    def test_all_digit_body_is_legal(self):
        assert parse_body("539007547034") == "539007547034"

    def test_leading_zeros_are_preserved(self):
        assert parse_body("000123") == "000123"

    def test_whitespace_is_ignored_by_default(self):
        assert parse_body(" 5390 0754\t7034 ") == "539007547034"

    def test_whitespace_rejected_when_strict(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_body("5390 0754", strip_whitespace=False)
        assert exc_info.value.position == 4
        assert exc_info.value.character == " "

    @pytest.mark.parametrize(
        "text, position, character",
        [
            ("AB#12", 2, "#"),
            ("INV-001", 3, "-"),
            ("älsö", 0, "ä"),
            ("12_34", 2, "_"),
            ("١٢٣", 0, "١"),
        ],
    )
    def test_invalid_character_reports_position(self, text, position, character):
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_body(text)
        assert exc_info.value.position == position
        assert exc_info.value.character == character

    def test_position_counts_stripped_whitespace(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_body("AB CD @")
        assert exc_info.value.position == 6

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_body(self, text):
        with pytest.raises(InvalidLength) as exc_info:
            parse_body(text)
        assert exc_info.value.length == 0

    def test_maximum_length_accepted(self):
        assert parse_body("A" * 21) == "A" * 21

    def test_too_long(self):
        with pytest.raises(InvalidLength) as exc_info:
            parse_body("1" * 22)
        assert exc_info.value.length == 22


class TestParseFullReference:
    def test_splits_check_digits_and_body(self):
        assert parse_full_reference("RF18539007547034") == ("18", "539007547034")

    def test_print_format(self):
        assert parse_full_reference(" RF18 5390 0754 7034 ") == ("18", "539007547034")

    def test_prefix_is_case_insensitive(self):
        assert parse_full_reference("rf63abcd0754efgh") == ("63", "ABCD0754EFGH")
        assert parse_full_reference("Rf63ABCD0754EFGH") == ("63", "ABCD0754EFGH")

    @pytest.mark.parametrize("text", ["XX12ABC", "18539007547034", "FR18539007547034"])
    def test_missing_prefix(self, text):
        with pytest.raises(MissingPrefix):
            parse_full_reference(text)

    @pytest.mark.parametrize(
        "text, check_digits",
        [("RFA8539007547034", "A8"), ("RF1X539", "1X"), ("RF-1123", "-1")],
    )
    def test_invalid_check_digits(self, text, check_digits):
        with pytest.raises(InvalidCheckDigits) as exc_info:
            parse_full_reference(text)
        assert exc_info.value.check_digits == check_digits

    def test_invalid_character_in_body(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_full_reference("RF18AB#12")
        assert exc_info.value.position == 6
        assert exc_info.value.character == "#"

    @pytest.mark.parametrize(
        "text",
        ["", "RF", "RF18", "RF 18 ", "RF18539007547034928TOOLONG", "RF18" + "1" * 22],
    )
    def test_invalid_length(self, text):
        with pytest.raises(InvalidLength):
            parse_full_reference(text)

    @pytest.mark.parametrize("check_digits", ["00", "01", "99"])
    def test_any_two_digits_are_well_formed(self, check_digits):
        assert parse_full_reference(f"RF{check_digits}123") == (check_digits, "123")

    def test_maximum_length_accepted(self):
        assert parse_full_reference("RF93539007547034928301234") == (
            "93",
            "539007547034928301234",
        )

    def test_strict_whitespace(self):
        with pytest.raises(InvalidCharacter) as exc_info:
            parse_full_reference("RF18 5390", strip_whitespace=False)
        assert exc_info.value.position == 4

    def test_errors_are_stdnum_validation_errors(self):
        with pytest.raises(stdnum.exceptions.InvalidComponent):
            parse_full_reference("XX12ABC")
        with pytest.raises(stdnum.exceptions.InvalidLength):
            parse_full_reference("RF1")
        with pytest.raises(stdnum.exceptions.InvalidFormat):
            parse_full_reference("RF18AB#12")
        with pytest.raises(CreditorReferenceError):
            parse_full_reference("RFXX123")


class TestNumeralExpansion:
    def test_letter_to_number(self):
        assert letter_to_number("ABC") == "101112"
        assert letter_to_number("Z9") == "359"
        assert letter_to_number("0123456789") == "0123456789"

    def test_generation_rearrangement(self):
        # ABC + R(27) F(15) + placeholder 00
        assert build_numeral_expansion("ABC") == "101112271500"

    def test_verification_rearrangement(self):
        assert build_numeral_expansion("AB", "18") == "1011271518"
        assert build_numeral_expansion("539007547034", "18") == "539007547034271518"
        assert build_numeral_expansion("2348231", "71") == "2348231271571"


def test_compact():
    assert compact(" rf18 5390 0754\t7034 ") == "RF18539007547034"
