"""Arbitrary-precision integer facade: parsing, serialization, exponent width."""

from typing import Union
from twolayerdh.common.errors import ExponentTooLargeError, InvalidParameterError


# Exponents are handed to the backend as 64-bit unsigned integers
UINT_BITS = 64
UINT_MAX = (1 << UINT_BITS) - 1


def from_decimal(text: str) -> int:
    """
    Parse a non-negative base-10 string.
    
    Args:
        text: Decimal digits, optionally surrounded by whitespace
    
    Returns:
        Parsed integer
    
    Raises:
        InvalidParameterError: If the text is not a plain run of digits
    """
    digits = text.strip()
    if not digits.isascii() or not digits.isdigit():
        raise InvalidParameterError(f"BAD_PARAM: not a decimal integer - {text!r}")
    return int(digits, 10)


def from_value(value: Union[int, str]) -> int:
    """
    Convert a caller-supplied value into a non-negative integer.
    
    Args:
        value: Non-negative int or decimal string
    
    Returns:
        Integer value
    
    Raises:
        InvalidParameterError: If the value is negative or of the wrong type
    """
    if isinstance(value, str):
        return from_decimal(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(
            f"BAD_PARAM: expected int or decimal string, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidParameterError(f"BAD_PARAM: negative value {value}")
    return int(value)


def to_decimal(n: int) -> str:
    """Serialize an integer to its base-10 string."""
    return str(int(n))


def to_exponent(n: int) -> int:
    """
    Narrow an integer to the backend's unsigned exponent width.
    
    Raises:
        ExponentTooLargeError: If n exceeds UINT_MAX
        InvalidParameterError: If n is negative
    """
    if n < 0:
        raise InvalidParameterError(f"BAD_PARAM: negative exponent {n}")
    if n > UINT_MAX:
        raise ExponentTooLargeError(
            f"EXP_TOO_LARGE: exponent has {n.bit_length()} bits, limit is {UINT_BITS}"
        )
    return n


def powmod(base: int, exponent: int, modulus: int) -> int:
    """Return (base ** exponent) % modulus."""
    return pow(base, exponent, modulus)
