"""ISO 7064 mod 97-10 arithmetic for creditor references.

The numeral expansion of a 21 character body is up to 48 digits long.
Rather than building that number, the remainder is carried from digit to
digit, using (a * 10 + b) mod n == ((a mod n) * 10 + b) mod n, so no
intermediate value exceeds 97 * 10 + 9.
"""

import logging

from .references import PLACEHOLDER_CHECK_DIGITS, build_numeral_expansion


logger = logging.getLogger(__name__)

MODULUS: int = 97


def reduce(numerals: str) -> int:
    """Computes the value of a decimal digit string modulo 97.

    Args:
        numerals: A numeral expansion, decimal digits only.

    Returns:
        The remainder, between 0 and 96.
    """
    remainder = 0
    for digit in numerals:
        remainder = (remainder * 10 + int(digit)) % MODULUS
    return remainder


def compute_check_digits(body: str) -> str:
    """Computes the two check digits for a parsed reference body.

    Args:
        body: A body as returned by `parse_body`.

    Returns:
        The check digits, zero-padded, between "02" and "98".
    """
    remainder = reduce(build_numeral_expansion(body, PLACEHOLDER_CHECK_DIGITS))
    check_digits = f"{MODULUS + 1 - remainder:02d}"
    logger.debug(f"Check digits for {body}: {check_digits} (remainder {remainder})")
    return check_digits


def verify(check_digits: str, body: str) -> bool:
    """Returns whether `check_digits` match `body`.

    A reference is valid when its rearranged numeral expansion is 1 mod 97.
    """
    remainder = reduce(build_numeral_expansion(body, check_digits))
    if remainder != 1:
        logger.debug(
            f"Checksum mismatch for RF{check_digits}{body}: remainder {remainder}"
        )
    return remainder == 1
