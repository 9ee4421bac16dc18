"""
Request parameter validation for callcache.

Parameters are checked before the cache or the network is touched, so a
malformed call never produces a cache key or a request.
"""

from urllib.parse import quote

from callcache.core.exceptions import ValidationError


def validate_positive_int(field: str, value: int) -> int:
    """Validate that a paging parameter is an integer of at least 1.

    Args:
        field: Parameter name, used in the error message.
        value: Value to check.

    Returns:
        The value unchanged.

    Raises:
        ValidationError: If the value is not a positive integer.
    """
    # bool is an int subclass but never a meaningful page number
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, repr(value), "Must be an integer")
    if value < 1:
        raise ValidationError(field, str(value), "Must be at least 1")
    return value


def validate_identifier(identifier: str) -> str:
    """Validate an item identifier.

    Raises:
        ValidationError: If the identifier is empty or contains control characters.
    """
    if not isinstance(identifier, str) or not identifier:
        raise ValidationError("identifier", repr(identifier), "Identifier cannot be empty")

    if any(ord(c) < 32 or ord(c) == 127 for c in identifier):
        raise ValidationError(
            "identifier", repr(identifier), "Identifier contains invalid control characters"
        )

    return identifier


def encode_path_segment(value: str) -> str:
    """URL-encode a value for use as a single path segment."""
    return quote(value, safe="")
