from dataclasses import dataclass

from .checksum import compute_check_digits, verify
from .exceptions import ChecksumMismatch, InvalidCheckDigits
from .references import (
    IDENTIFIER,
    PLACEHOLDER_CHECK_DIGITS,
    parse_body,
    parse_full_reference,
)


PRINT_GROUP_SIZE: int = 4


@dataclass(frozen=True)
class CreditorReference:
    """A checksum-valid ISO 11649 structured creditor reference.

    Build instances with `generate`, `from_template` or `parse`, which
    guarantee that the check digits match the body.

    Attributes:
        check_digits: Two digits. Generated references always use "02" to
            "98"; parsed ones may carry the congruent "00", "01" or "99".
        body: 1 to 21 uppercase alphanumeric characters.
    """

    check_digits: str
    body: str

    @classmethod
    def generate(
        cls, body: str, strip_whitespace: bool = True
    ) -> "CreditorReference":
        """Creates a reference for a raw body such as an invoice number.

        Raises:
            InvalidCharacter, InvalidLength
        """
        parsed_body = parse_body(body, strip_whitespace=strip_whitespace)
        return cls(check_digits=compute_check_digits(parsed_body), body=parsed_body)

    @classmethod
    def from_template(
        cls, template: str, strip_whitespace: bool = True
    ) -> "CreditorReference":
        """Fills in the check digits of a reference written with "RF00".

        >>> str(CreditorReference.from_template("RF00 5390 0754 7034"))
        'RF18539007547034'

        Raises:
            InvalidLength, MissingPrefix, InvalidCharacter for malformed
            input, InvalidCheckDigits if the placeholder is not "00".
        """
        placeholder, body = parse_full_reference(
            template, strip_whitespace=strip_whitespace
        )
        if placeholder != PLACEHOLDER_CHECK_DIGITS:
            raise InvalidCheckDigits(placeholder)
        return cls(check_digits=compute_check_digits(body), body=body)

    @classmethod
    def parse(
        cls, reference: str, strip_whitespace: bool = True
    ) -> "CreditorReference":
        """Parses a full reference in electronic or print format.

        Raises:
            InvalidLength, MissingPrefix, InvalidCheckDigits, InvalidCharacter
            for malformed input, ChecksumMismatch for a wrong checksum.
        """
        check_digits, body = parse_full_reference(
            reference, strip_whitespace=strip_whitespace
        )
        if not verify(check_digits, body):
            raise ChecksumMismatch(f"{IDENTIFIER}{check_digits}{body}")
        return cls(check_digits=check_digits, body=body)

    @property
    def electronic(self) -> str:
        """The reference without separators, e.g. "RF18539007547034"."""
        return f"{IDENTIFIER}{self.check_digits}{self.body}"

    def to_print_string(self) -> str:
        """The paper format with the body in groups of four.

        >>> CreditorReference.parse("RF18539007547034").to_print_string()
        'RF18 5390 0754 7034'
        """
        groups = [
            self.body[start : start + PRINT_GROUP_SIZE]
            for start in range(0, len(self.body), PRINT_GROUP_SIZE)
        ]
        return " ".join([f"{IDENTIFIER}{self.check_digits}", *groups])

    def __str__(self) -> str:
        return self.electronic
