"""Generation and validation of ISO 11649 structured creditor references.

A creditor reference is "RF", two check digits and a body of up to 21
letters and digits, e.g. "RF18539007547034". Vendors print it on invoices
so incoming payments can be matched automatically.

    >>> generate("539007547034")
    'RF18539007547034'
    >>> validate("RF18 5390 0754 7034")
    True
    >>> validate("RF19539007547034")
    False
"""

from .checksum import compute_check_digits, reduce, verify
from .exceptions import (
    ChecksumMismatch,
    CreditorReferenceError,
    InvalidCharacter,
    InvalidCheckDigits,
    InvalidLength,
    MissingPrefix,
)
from .models import CreditorReference
from .references import (
    build_numeral_expansion,
    compact,
    parse_body,
    parse_full_reference,
)


__all__ = [
    "ChecksumMismatch",
    "CreditorReference",
    "CreditorReferenceError",
    "InvalidCharacter",
    "InvalidCheckDigits",
    "InvalidLength",
    "MissingPrefix",
    "build_numeral_expansion",
    "check",
    "compact",
    "compute_check_digits",
    "format_reference",
    "generate",
    "is_valid",
    "parse_body",
    "parse_full_reference",
    "reduce",
    "validate",
    "verify",
]


def generate(body: str, strip_whitespace: bool = True) -> str:
    """Returns the electronic creditor reference for a raw body.

    Raises:
        InvalidCharacter, InvalidLength
    """
    reference = CreditorReference.generate(body, strip_whitespace=strip_whitespace)
    return reference.electronic


def validate(reference: str, strip_whitespace: bool = True) -> bool:
    """Returns whether a well-formed reference has matching check digits.

    Malformed input raises the corresponding `CreditorReferenceError`
    instead of returning False.
    """
    check_digits, body = parse_full_reference(
        reference, strip_whitespace=strip_whitespace
    )
    return verify(check_digits, body)


def check(reference: str, strip_whitespace: bool = True) -> CreditorReference:
    """Parses a reference, raising `ChecksumMismatch` if it does not verify."""
    return CreditorReference.parse(reference, strip_whitespace=strip_whitespace)


def is_valid(reference: str, strip_whitespace: bool = True) -> bool:
    """Returns False for any malformed or non-verifying reference."""
    try:
        return validate(reference, strip_whitespace=strip_whitespace)
    except CreditorReferenceError:
        return False


def format_reference(reference: str, strip_whitespace: bool = True) -> str:
    """Validates a reference and returns it in print format."""
    return check(reference, strip_whitespace=strip_whitespace).to_print_string()
