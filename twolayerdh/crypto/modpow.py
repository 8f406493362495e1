"""Modular exponentiation with the unreduced exponent-one rule."""

from twolayerdh.common import bigint
from twolayerdh.common.errors import InvalidParameterError


def modpow(a: int, b: int, P: int) -> int:
    """
    Compute a^b mod P.
    
    An exponent of exactly 1 returns a unchanged, without reducing it
    modulo P. Peers rely on this when the modulus is 2.
    
    Args:
        a: Base
        b: Exponent, at most bigint.UINT_MAX
        P: Modulus
    
    Returns:
        a if b == 1, otherwise (a ** b) % P
    
    Raises:
        ExponentTooLargeError: If b does not fit the backend exponent width
        InvalidParameterError: If P is not positive
    """
    if b == 1:
        return a

    exponent = bigint.to_exponent(b)
    if P < 1:
        raise InvalidParameterError(f"BAD_PARAM: modulus must be positive, got {P}")
    return bigint.powmod(a, exponent, P)
