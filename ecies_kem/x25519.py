# Copyright (c) 2026 Signer — MIT License

"""X25519 Diffie-Hellman (RFC 7748) over raw 32-byte buffers.

Montgomery curve: y^2 = x^3 + 486662*x^2 + x  over GF(2^255 - 19).

Scalar multiplication is delegated to libsodium through pynacl, which runs
the Montgomery ladder in constant time and clamps the scalar itself.

Sizes:
    Private scalar: 32 bytes
    Public value:   32 bytes (u-coordinate)
    Shared secret:  32 bytes

libsodium refuses to return an all-zero shared secret, which is what every
low-order public value (including the all-zero u-coordinate) produces. That
refusal surfaces here as InvalidArgumentError.
"""

import nacl.bindings
import nacl.exceptions

from .errors import InvalidArgumentError

# ── Exported Size Constants ────────────────────────────────────────
X25519_SCALAR_SIZE = nacl.bindings.crypto_scalarmult_SCALARBYTES   # 32
X25519_PUBLIC_VALUE_SIZE = nacl.bindings.crypto_scalarmult_BYTES   # 32
X25519_SHARED_SECRET_SIZE = nacl.bindings.crypto_scalarmult_BYTES  # 32


def x25519(scalar, public_value):
    """Compute the X25519 shared secret.

    Args:
        scalar: 32-byte private scalar (clamped or unclamped).
        public_value: 32-byte peer u-coordinate.

    Returns:
        32-byte shared secret.

    Raises:
        InvalidArgumentError: On wrong input sizes or a low-order public value.
    """
    if len(scalar) != X25519_SCALAR_SIZE:
        raise InvalidArgumentError(
            f"X25519 scalar must be {X25519_SCALAR_SIZE} bytes, got {len(scalar)}"
        )
    if len(public_value) != X25519_PUBLIC_VALUE_SIZE:
        raise InvalidArgumentError(
            f"X25519 public value must be {X25519_PUBLIC_VALUE_SIZE} bytes, "
            f"got {len(public_value)}"
        )
    try:
        return nacl.bindings.crypto_scalarmult(bytes(scalar), bytes(public_value))
    except nacl.exceptions.RuntimeError:
        raise InvalidArgumentError(
            "X25519: low-order public value (all-zero shared secret)"
        ) from None


def x25519_public_value(scalar):
    """Compute the public u-coordinate [scalar] * basepoint 9."""
    if len(scalar) != X25519_SCALAR_SIZE:
        raise InvalidArgumentError(
            f"X25519 scalar must be {X25519_SCALAR_SIZE} bytes, got {len(scalar)}"
        )
    return nacl.bindings.crypto_scalarmult_base(bytes(scalar))
