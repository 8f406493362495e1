"""
Two-layer Diffie-Hellman exchange session.

Round 1 is a textbook exchange with generator G = 2 under the fixed modulus
P1 = 2. Its shared residue picks the generator (2 or 3) for Round 2, which
runs under the caller's modulus P with the second private exponent.
"""

from enum import Enum
from typing import Optional, Union
from twolayerdh.common import bigint
from twolayerdh.common.errors import (
    InvalidParameterError,
    ProtocolOrderError,
    UnexpectedRound1ResidueError,
    UninitializedSessionError,
)
from twolayerdh.crypto.modes import Mode, draw_exponent, mode_value, range_for
from twolayerdh.crypto.modpow import modpow
from twolayerdh.crypto.randomness import RandomSource, default_source


G = 2   # Round 1 generator
P1 = 2  # Round 1 modulus


class RoundState(Enum):
    INITIAL = "initial"
    ROUND1_EMITTED = "round1_emitted"
    ROUND1_ACCEPTED = "round1_accepted"
    ROUND2_EMITTED = "round2_emitted"
    COMPLETE = "complete"


class ExchangeSession:
    """One side of a single two-layer exchange."""

    def __init__(
        self,
        P: Union[int, str] = 0,
        a1: Union[int, str] = 0,
        a2: Union[int, str] = 0,
        mode: Union[Mode, str] = Mode.MANUAL,
        random_source: Optional[RandomSource] = None
    ):
        """
        Initialize exchange session.

        A session built with no parameters must be given them through
        set() before any round operation.

        Args:
            P: Round 2 modulus, at least 2
            a1: Round 1 private exponent, at least 1
            a2: Round 2 private exponent (replaced by a random draw in auto modes)
            mode: Mode enum member or identifier string
            random_source: Source for auto-mode draws (default: process-wide source)

        Raises:
            InvalidParameterError: If supplied parameters are out of range
        """
        self._random_source = random_source
        self._initialized = False
        self._P = 0
        self._a1 = 0
        self._a2 = 0
        self._mode = Mode.MANUAL.value
        self._derived_base: Optional[int] = None
        self._state = RoundState.INITIAL

        values = (bigint.from_value(P), bigint.from_value(a1), bigint.from_value(a2))
        if values == (0, 0, 0) and mode_value(mode) == Mode.MANUAL.value:
            return
        self.set(P, a1, a2, mode)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mode={self._mode!r}, state={self._state.value}, "
            f"derived_base={self._derived_base})"
        )

    @property
    def P(self) -> int:
        return self._P

    @property
    def a1(self) -> int:
        return self._a1

    @property
    def a2(self) -> int:
        """Round 2 exponent; holds the drawn value after an auto-mode emission."""
        return self._a2

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def derived_base(self) -> Optional[int]:
        return self._derived_base

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def set(
        self,
        P: Union[int, str],
        a1: Union[int, str],
        a2: Union[int, str],
        mode: Union[Mode, str] = Mode.MANUAL
    ):
        """
        Load new parameters and return the session to its initial state.

        Raises:
            InvalidParameterError: If P < 2 or a1 < 1; the session is left untouched
        """
        new_P = bigint.from_value(P)
        new_a1 = bigint.from_value(a1)
        new_a2 = bigint.from_value(a2)

        if new_P < 2:
            raise InvalidParameterError(f"BAD_PARAM: modulus P must be at least 2, got {new_P}")
        if new_a1 < 1:
            raise InvalidParameterError(f"BAD_PARAM: a1 must be at least 1, got {new_a1}")

        self._P = new_P
        self._a1 = new_a1
        self._a2 = new_a2
        self._mode = mode_value(mode)
        self._derived_base = None
        self._state = RoundState.INITIAL
        self._initialized = True

    def _require(self, expected: RoundState, operation: str):
        if not self._initialized:
            raise UninitializedSessionError(
                f"UNINITIALIZED: {operation} called before parameters were set"
            )
        if self._state is not expected:
            raise ProtocolOrderError(
                f"OUT_OF_ORDER: {operation} requires state {expected.value}, "
                f"session is in {self._state.value}"
            )

    def part1_public_value(self) -> int:
        """
        Compute the Round 1 value to send to the peer: G^a1 mod P1.

        Returns:
            Round 1 public value
        """
        self._require(RoundState.INITIAL, "part1_public_value")
        public = modpow(G, self._a1, P1)
        self._state = RoundState.ROUND1_EMITTED
        return public

    def part1_accept_peer(self, x: Union[int, str]):
        """
        Consume the peer's Round 1 value and derive the Round 2 generator.

        A residue of 0 selects base 2, a residue of 1 selects base 3.

        Args:
            x: Peer's Round 1 public value

        Raises:
            UnexpectedRound1ResidueError: If x^a1 mod P1 is neither 0 nor 1
        """
        self._require(RoundState.ROUND1_EMITTED, "part1_accept_peer")
        peer_value = bigint.from_value(x)

        u = modpow(peer_value, self._a1, P1)
        if u == 0:
            base = 2
        elif u == 1:
            base = 3
        else:
            raise UnexpectedRound1ResidueError(
                f"BAD_RESIDUE: round 1 residue {u} from peer value {peer_value}"
            )

        self._derived_base = base
        self._state = RoundState.ROUND1_ACCEPTED

    def part2_public_value(self) -> int:
        """
        Compute the Round 2 value to send to the peer: base^a2 mod P.

        In auto modes a2 is first replaced by a random draw from the mode's
        range; the new value is visible through the a2 property.

        Returns:
            Round 2 public value

        Raises:
            InvalidParameterError: If a2 < 1 in manual mode
        """
        self._require(RoundState.ROUND1_ACCEPTED, "part2_public_value")

        upper = range_for(self._mode)
        if upper is None:
            a2 = self._a2
            if a2 < 1:
                raise InvalidParameterError(f"BAD_PARAM: a2 must be at least 1, got {a2}")
        else:
            source = self._random_source or default_source()
            a2 = draw_exponent(upper, source)

        public = modpow(self._derived_base, a2, self._P)
        self._a2 = a2
        self._state = RoundState.ROUND2_EMITTED
        return public

    def part2_shared_secret(self, y: Union[int, str]) -> int:
        """
        Consume the peer's Round 2 value and compute the shared secret y^a2 mod P.

        Args:
            y: Peer's Round 2 public value

        Returns:
            Final shared secret
        """
        self._require(RoundState.ROUND2_EMITTED, "part2_shared_secret")
        peer_value = bigint.from_value(y)

        secret = modpow(peer_value, self._a2, self._P)
        self._state = RoundState.COMPLETE
        return secret
