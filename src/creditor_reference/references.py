import logging
from typing import List, Tuple

from .exceptions import (
    InvalidCharacter,
    InvalidCheckDigits,
    InvalidLength,
    MissingPrefix,
)


logger = logging.getLogger(__name__)

IDENTIFIER: str = "RF"
PLACEHOLDER_CHECK_DIGITS: str = "00"
MAX_BODY_LENGTH: int = 21
MIN_LENGTH: int = len(IDENTIFIER) + 2 + 1
MAX_LENGTH: int = len(IDENTIFIER) + 2 + MAX_BODY_LENGTH


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_letter(char: str) -> bool:
    return "A" <= char <= "Z" or "a" <= char <= "z"


def _significant_characters(
    text: str, strip_whitespace: bool
) -> List[Tuple[int, str]]:
    """Pairs every character that takes part in the reference with its index.

    Whitespace is dropped when `strip_whitespace` is set, so the positions
    keep pointing into the caller's original string.
    """
    return [
        (position, char)
        for position, char in enumerate(text)
        if not (strip_whitespace and char.isspace())
    ]


def _join_alphanumeric(characters: List[Tuple[int, str]]) -> str:
    """Uppercases the characters, rejecting anything outside [0-9A-Za-z]."""
    for position, char in characters:
        if not (_is_digit(char) or _is_letter(char)):
            raise InvalidCharacter(position, char)
    return "".join(char for _, char in characters).upper()


def compact(text: str) -> str:
    """Converts a reference to its electronic format without validating it.

    Args:
        text: A reference in print or electronic format.

    Returns:
        The input uppercased with all whitespace removed.
    """
    return "".join(text.split()).upper()


def parse_body(text: str, strip_whitespace: bool = True) -> str:
    """Parses the free-form part of a creditor reference.

    Args:
        text: The raw body, e.g. an invoice number.
        strip_whitespace: Ignore whitespace instead of rejecting it.

    Returns:
        The body as 1 to 21 uppercase alphanumeric characters.

    Raises:
        InvalidCharacter: If a character is not an ASCII letter or digit.
        InvalidLength: If the body is empty or longer than 21 characters.
    """
    body = _join_alphanumeric(_significant_characters(text, strip_whitespace))
    if not body:
        raise InvalidLength(0, "The creditor reference body is empty.")
    if len(body) > MAX_BODY_LENGTH:
        raise InvalidLength(
            len(body),
            f"The creditor reference body has {len(body)} characters,"
            f" at most {MAX_BODY_LENGTH} are allowed.",
        )
    return body


def parse_full_reference(
    text: str, strip_whitespace: bool = True
) -> Tuple[str, str]:
    """Splits a full creditor reference into check digits and body.

    The checks run in order: total length, RF prefix, check digits, body
    characters. The checksum itself is not verified here.

    Args:
        text: A reference in electronic or print format, e.g.
            "RF18 5390 0754 7034".
        strip_whitespace: Ignore whitespace instead of rejecting it.

    Returns:
        A `(check_digits, body)` tuple.

    Raises:
        InvalidLength: If the reference is shorter than 5 or longer than 25
            characters.
        MissingPrefix: If the reference does not start with "RF".
        InvalidCheckDigits: If the check digits are not two ASCII digits.
        InvalidCharacter: If the body contains a non-alphanumeric character.
    """
    characters = _significant_characters(text, strip_whitespace)
    if not MIN_LENGTH <= len(characters) <= MAX_LENGTH:
        raise InvalidLength(
            len(characters),
            f"The creditor reference has {len(characters)} characters,"
            f" expected between {MIN_LENGTH} and {MAX_LENGTH}.",
        )

    prefix = "".join(char for _, char in characters[:2])
    if prefix.upper() != IDENTIFIER:
        raise MissingPrefix()

    check_digits = "".join(char for _, char in characters[2:4])
    if not all(_is_digit(char) for char in check_digits):
        raise InvalidCheckDigits(check_digits)

    # The length check above already bounds the body to 1..21 characters.
    body = _join_alphanumeric(characters[4:])
    return check_digits, body


def letter_to_number(text: str) -> str:
    """Converts letters in a string to their corresponding numerical values.

    Letters A-Z are converted to 10-35, respectively. Digits remain unchanged.
    The input must already be a parsed body, optionally followed by the
    identifier and check digits.

    Args:
        text: Uppercase letters and digits.

    Returns:
        A string of decimal digits.
    """

    def convert_letter(char: str) -> str:
        if "A" <= char <= "Z":
            return str(ord(char) - ord("A") + 10)
        return char

    return "".join(convert_letter(char) for char in text)


def build_numeral_expansion(
    body: str, check_digits: str = PLACEHOLDER_CHECK_DIGITS
) -> str:
    """Builds the numeral string the mod 97 check runs over.

    The identifier and check digits are moved behind the body, as ISO 11649
    requires, and the result is expanded with `letter_to_number`. Pass the
    placeholder "00" to compute check digits, or the actual ones to verify.
    """
    return letter_to_number(f"{body}{IDENTIFIER}{check_digits}")
