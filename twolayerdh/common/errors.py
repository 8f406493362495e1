"""Exception types raised by the two-layer Diffie-Hellman engine."""


class TwoLayerDHError(Exception):
    """Base class for every error raised by the exchange engine."""


class UninitializedSessionError(TwoLayerDHError):
    """Round operation called on a session that has no parameters yet."""


class ProtocolOrderError(TwoLayerDHError):
    """Round operation called out of sequence."""


class UnexpectedRound1ResidueError(TwoLayerDHError, ValueError):
    """Round 1 residue was neither 0 nor 1."""


class ExponentTooLargeError(TwoLayerDHError, ValueError):
    """Exponent does not fit in the fixed-width unsigned backend type."""


class InvalidParameterError(TwoLayerDHError, ValueError):
    """Modulus, exponent or peer value outside its permitted range."""
