# Copyright (c) 2026 Signer — MIT License

"""Curve domain parameters, SEC1 point decoding and ECDH for NIST P-curves.

Encoded point sizes for a field of f bytes:

    UNCOMPRESSED                     1 + 2f   0x04 || x || y
    COMPRESSED                       1 + f    0x02/0x03 || x
    DO_NOT_USE_CRUNCHY_UNCOMPRESSED  2f       x || y

CURVE25519 public values are always the 32-byte u-coordinate and are only
valid with COMPRESSED.
"""

from dataclasses import dataclass

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives.asymmetric import ec

from .enums import CurveType, PointFormat
from .errors import InternalError, InvalidArgumentError, UnsupportedCurveError

# curve class, field size in bytes, group order n (FIPS 186-4, D.1.2)
_NIST_CURVES = {
    CurveType.NIST_P256: (ec.SECP256R1, 32, int(
        "ffffffff00000000ffffffffffffffff"
        "bce6faada7179e84f3b9cac2fc632551", 16)),
    CurveType.NIST_P384: (ec.SECP384R1, 48, int(
        "ffffffffffffffffffffffffffffffff"
        "ffffffffffffffffc7634d81f4372ddf"
        "581a0db248b0a77aecec196accc52973", 16)),
    CurveType.NIST_P521: (ec.SECP521R1, 66, int(
        "01ff"
        "ffffffffffffffffffffffffffffffff"
        "fffffffffffffffffffffffffffffffa"
        "51868783bf2f966b7fcc0148f709a5d0"
        "3bb5c9b8899c47aebb6fb71e91386409", 16)),
}

_CURVE25519_FIELD_SIZE = 32


@dataclass(frozen=True)
class EcGroup:
    """Read-only handle on a NIST curve's domain parameters."""
    curve_type: CurveType
    curve: ec.EllipticCurve
    field_size: int
    order: int


def get_ec_group(curve_type):
    """Look up the group for a NIST P-curve.

    Raises:
        UnsupportedCurveError: If ``curve_type`` is not a NIST P-curve.
    """
    try:
        curve_cls, field_size, order = _NIST_CURVES[curve_type]
    except (KeyError, TypeError):
        raise UnsupportedCurveError(f"Unsupported elliptic curve: {curve_type!r}") from None
    return EcGroup(curve_type=curve_type, curve=curve_cls(),
                   field_size=field_size, order=order)


def field_size_in_bytes(curve_type):
    if curve_type == CurveType.CURVE25519:
        return _CURVE25519_FIELD_SIZE
    return get_ec_group(curve_type).field_size


def encoding_size_in_bytes(curve_type, point_format):
    """Expected length of a point encoded in ``point_format``."""
    f = field_size_in_bytes(curve_type)
    if curve_type == CurveType.CURVE25519:
        if point_format != PointFormat.COMPRESSED:
            raise InvalidArgumentError("CURVE25519 only supports the COMPRESSED point format")
        return f
    if point_format == PointFormat.UNCOMPRESSED:
        return 2 * f + 1
    if point_format == PointFormat.COMPRESSED:
        return f + 1
    if point_format == PointFormat.DO_NOT_USE_CRUNCHY_UNCOMPRESSED:
        return 2 * f
    raise InvalidArgumentError(f"Unsupported point format: {point_format!r}")


def ec_point_decode(group, point_format, encoded):
    """Decode and validate a public point.

    Rejects wrong lengths, wrong prefix bytes, points off the curve and the
    point at infinity (which has no encoding in any supported format).

    Returns:
        cryptography EllipticCurvePublicKey on ``group.curve``.

    Raises:
        InvalidArgumentError: With a short description of the failure.
    """
    encoded = bytes(encoded)
    expected = encoding_size_in_bytes(group.curve_type, point_format)
    if len(encoded) != expected:
        raise InvalidArgumentError(
            f"encoded point has {len(encoded)} bytes, expected {expected}"
        )

    if point_format == PointFormat.UNCOMPRESSED:
        if encoded[0] != 0x04:
            raise InvalidArgumentError("uncompressed point must start with 0x04")
    elif point_format == PointFormat.COMPRESSED:
        if encoded[0] not in (0x02, 0x03):
            raise InvalidArgumentError("compressed point must start with 0x02 or 0x03")
    else:
        encoded = b"\x04" + encoded

    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(group.curve, encoded)
    except ValueError:
        raise InvalidArgumentError("point is not on the curve") from None


def compute_ecdh_shared_secret(group, private_value, public_key):
    """x-coordinate of ``private_value * public_key``, ``field_size`` bytes.

    Raises:
        InternalError: If the scalar is not in 1 .. n-1 or the exchange fails.
    """
    if not 0 < private_value < group.order:
        raise InternalError("ECDH private scalar is out of range")
    try:
        private_key = ec.derive_private_key(private_value, group.curve)
        return private_key.exchange(ec.ECDH(), public_key)
    except (ValueError, InvalidKey):
        raise InternalError("ECDH shared secret computation failed") from None
