"""Errors raised while parsing and validating creditor references.

Every error is also a `stdnum.exceptions.ValidationError`, so code that
already catches python-stdnum validation errors (e.g. around IBAN checks)
handles these the same way.
"""

import stdnum.exceptions


class CreditorReferenceError(stdnum.exceptions.ValidationError):
    """Base error for malformed or invalid creditor references."""

    message = "The creditor reference is invalid."


class InvalidCharacter(CreditorReferenceError, stdnum.exceptions.InvalidFormat):
    """A character outside [0-9A-Za-z] was found.

    Attributes:
        position: 0-based index of the character in the caller's input.
        character: The offending character.
    """

    def __init__(self, position: int, character: str) -> None:
        self.position = position
        self.character = character
        super().__init__(
            f"Invalid character {character!r} at position {position}."
        )


class InvalidLength(CreditorReferenceError, stdnum.exceptions.InvalidLength):
    """The body or the full reference has a length outside the ISO limits."""

    def __init__(self, length: int, message: str) -> None:
        self.length = length
        super().__init__(message)


class MissingPrefix(CreditorReferenceError, stdnum.exceptions.InvalidComponent):
    """The reference does not start with the RF identifier."""

    message = "The creditor reference does not start with 'RF'."


class InvalidCheckDigits(CreditorReferenceError, stdnum.exceptions.InvalidFormat):
    """The two characters after the prefix are not both ASCII digits."""

    def __init__(self, check_digits: str) -> None:
        self.check_digits = check_digits
        super().__init__(f"Invalid check digits {check_digits!r}.")


class ChecksumMismatch(CreditorReferenceError, stdnum.exceptions.InvalidChecksum):
    """A well-formed reference whose check digits do not match its body."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"The checksum of {reference} does not match.")
