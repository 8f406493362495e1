"""
Two-Layer Diffie-Hellman Exchange Driver
Runs both sides of an exchange in one process, passing public values as JSON messages.
"""

import argparse
import sys
from typing import Optional, Sequence, Tuple
from twolayerdh.common import bigint
from twolayerdh.common.config import ExchangeSettings, load_settings
from twolayerdh.common.errors import TwoLayerDHError
from twolayerdh.common.protocol import Round1Public, Round2Public
from twolayerdh.crypto.randomness import RandomSource
from twolayerdh.crypto.session import ExchangeSession


def to_wire(n: int, message_type) -> str:
    """Wrap a public value in its message model and serialize it to JSON."""
    return message_type.from_int(n).model_dump_json()


def run_exchange(alice: ExchangeSession, bob: ExchangeSession) -> Tuple[int, int]:
    """
    Drive two sessions through both rounds.

    Args:
        alice: First party's session
        bob: Second party's session

    Returns:
        Tuple of (alice's shared secret, bob's shared secret)
    """
    alice_r1 = to_wire(alice.part1_public_value(), Round1Public)
    bob_r1 = to_wire(bob.part1_public_value(), Round1Public)

    alice.part1_accept_peer(Round1Public.model_validate_json(bob_r1).as_int())
    bob.part1_accept_peer(Round1Public.model_validate_json(alice_r1).as_int())

    alice_r2 = to_wire(alice.part2_public_value(), Round2Public)
    bob_r2 = to_wire(bob.part2_public_value(), Round2Public)

    alice_secret = alice.part2_shared_secret(Round2Public.model_validate_json(bob_r2).as_int())
    bob_secret = bob.part2_shared_secret(Round2Public.model_validate_json(alice_r2).as_int())

    return alice_secret, bob_secret


def build_sessions(
    settings: ExchangeSettings,
    alice_keys: Sequence[str],
    bob_keys: Sequence[str]
) -> Tuple[ExchangeSession, ExchangeSession]:
    """Create both sessions; a configured seed gives each side its own reproducible source."""
    alice_source: Optional[RandomSource] = None
    bob_source: Optional[RandomSource] = None
    if settings.seed is not None:
        alice_source = RandomSource(seed=settings.seed)
        bob_source = RandomSource(seed=settings.seed + 1)

    alice = ExchangeSession(settings.prime, alice_keys[0], alice_keys[1], settings.mode, alice_source)
    bob = ExchangeSession(settings.prime, bob_keys[0], bob_keys[1], settings.mode, bob_source)
    return alice, bob


def parse_arguments(argv: Optional[Sequence[str]] = None):
    """Handle command-line argument parsing."""
    arg_parser = argparse.ArgumentParser(
        description="Run a two-layer Diffie-Hellman exchange between two local parties"
    )
    arg_parser.add_argument(
        "--prime",
        help="Round 2 modulus P (default: TWOLAYERDH_PRIME or 23)"
    )
    arg_parser.add_argument(
        "--mode",
        help="Mode identifier (default: TWOLAYERDH_MODE or manual)"
    )
    arg_parser.add_argument(
        "--alice",
        nargs=2,
        metavar=("A1", "A2"),
        default=["6", "15"],
        help="Alice's private exponents (default: 6 15)"
    )
    arg_parser.add_argument(
        "--bob",
        nargs=2,
        metavar=("A1", "A2"),
        default=["15", "27"],
        help="Bob's private exponents (default: 15 27)"
    )
    return arg_parser.parse_args(argv)


def resolve_settings(args) -> ExchangeSettings:
    """
    Merge command-line values over the environment settings.

    Raises:
        InvalidParameterError: If a prime or seed is not a decimal integer
        pydantic.ValidationError: If the merged settings are out of range
    """
    settings = load_settings()
    overrides = {}
    if args.prime is not None:
        overrides["prime"] = bigint.from_decimal(args.prime)
    if args.mode is not None:
        overrides["mode"] = args.mode
    if overrides:
        settings = ExchangeSettings(**{**settings.model_dump(), **overrides})
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Driver entry point; returns the process exit status."""
    args = parse_arguments(argv)
    try:
        settings = resolve_settings(args)
    except (TwoLayerDHError, ValueError) as e:
        print(f"Invalid settings: {e}")
        return 1

    print(f"Modulus P: {settings.prime}")
    print(f"Mode: {settings.mode}")

    try:
        alice, bob = build_sessions(settings, args.alice, args.bob)
        alice_secret, bob_secret = run_exchange(alice, bob)
    except TwoLayerDHError as e:
        print(f"Exchange failed: {e}")
        return 1

    print(f"Alice: derived base {alice.derived_base}, a2 {alice.a2}, secret {alice_secret}")
    print(f"Bob:   derived base {bob.derived_base}, a2 {bob.a2}, secret {bob_secret}")

    if alice_secret != bob_secret:
        print("Shared secrets DO NOT match")
        return 1

    print("Shared secrets match")
    return 0


if __name__ == "__main__":
    sys.exit(main())
