# Copyright (c) 2026 Signer — MIT License

"""Recipient side of the ECIES-HKDF key encapsulation mechanism.

The sender publishes an ephemeral public value (the "KEM bytes"); the
recipient combines it with its static private key and derives a symmetric
key:

    shared_secret = DH(private_key, decode(kem_bytes))
    key           = HKDF(hash, kem_bytes || shared_secret, salt, info, size)

Two strategies implement ``generate_key``:

    NistPCurveRecipientKem  P-256 / P-384 / P-521, SEC1 point decoding + ECDH
    X25519RecipientKem      Curve25519, raw 32-byte X25519

``new_recipient_kem`` picks one from the curve type. Instances hold only the
immutable private key (and, for P-curves, the group handle), so one instance
may serve concurrent ``generate_key`` calls. Private-key copies and shared
secrets live in wiped buffers for the duration of a single call.
"""

import logging

from .ec_util import compute_ecdh_shared_secret, ec_point_decode, get_ec_group
from .enums import NIST_CURVES, CurveType, PointFormat
from .errors import InvalidArgumentError, UnsupportedCurveError
from .hkdf import compute_ecies_hkdf_symmetric_key
from .secure import secret_buffer
from .x25519 import X25519_PUBLIC_VALUE_SIZE, X25519_SCALAR_SIZE, x25519

logger = logging.getLogger(__name__)


def _check_private_key(private_key):
    if not isinstance(private_key, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(
            f"private key must be bytes, got {type(private_key).__name__}"
        )


class RecipientKem:
    """Recover a symmetric key from KEM bytes and a static private key."""

    __slots__ = ("_curve_type", "_private_key")

    def __init__(self, curve_type, private_key):
        self._curve_type = curve_type
        self._private_key = bytes(private_key)

    @property
    def curve_type(self):
        return self._curve_type

    def generate_key(self, kem_bytes, params):
        """Derive ``params.key_size`` bytes of key material.

        Args:
            kem_bytes: Sender's ephemeral public value, encoded per
                ``params.point_format``.
            params: DerivationParams.

        Raises:
            InvalidArgumentError: Malformed KEM bytes or unsupported format.
            InternalError: The DH primitive failed.
        """
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}(curve_type={self._curve_type.name})"


class NistPCurveRecipientKem(RecipientKem):

    __slots__ = ("_ec_group",)

    def __init__(self, curve_type, private_key, ec_group):
        super().__init__(curve_type, private_key)
        self._ec_group = ec_group

    @classmethod
    def new(cls, curve_type, private_key):
        _check_private_key(private_key)
        if not len(private_key):
            raise InvalidArgumentError("empty private key")
        ec_group = get_ec_group(curve_type)
        logger.debug("created recipient KEM for %s", curve_type.name)
        return cls(curve_type, private_key, ec_group)

    def generate_key(self, kem_bytes, params):
        kem_bytes = bytes(kem_bytes)
        try:
            public_key = ec_point_decode(self._ec_group, params.point_format, kem_bytes)
        except InvalidArgumentError as e:
            logger.debug("rejected KEM bytes for %s", self._curve_type.name)
            raise InvalidArgumentError(f"Invalid KEM bytes: {e}") from None

        with secret_buffer(self._private_key) as sk:
            private_value = int.from_bytes(sk, "big")
            raw = compute_ecdh_shared_secret(self._ec_group, private_value, public_key)
            with secret_buffer(raw) as shared_secret:
                return compute_ecies_hkdf_symmetric_key(
                    params.hash_type, kem_bytes, shared_secret,
                    params.salt, params.info, params.key_size,
                )


class X25519RecipientKem(RecipientKem):

    __slots__ = ()

    @classmethod
    def new(cls, curve_type, private_key):
        if curve_type != CurveType.CURVE25519:
            raise InvalidArgumentError("curve is not CURVE25519")
        _check_private_key(private_key)
        if len(private_key) != X25519_SCALAR_SIZE:
            raise InvalidArgumentError("private key has unexpected length")
        logger.debug("created recipient KEM for %s", curve_type.name)
        return cls(curve_type, private_key)

    def generate_key(self, kem_bytes, params):
        if params.point_format != PointFormat.COMPRESSED:
            raise InvalidArgumentError(
                "X25519 only supports compressed elliptic curve points"
            )
        if len(kem_bytes) != X25519_PUBLIC_VALUE_SIZE:
            logger.debug("rejected KEM bytes for %s", self._curve_type.name)
            raise InvalidArgumentError("kem_bytes has unexpected size")
        kem_bytes = bytes(kem_bytes)

        with secret_buffer(self._private_key) as sk:
            with secret_buffer(x25519(sk, kem_bytes)) as shared_secret:
                return compute_ecies_hkdf_symmetric_key(
                    params.hash_type, kem_bytes, shared_secret,
                    params.salt, params.info, params.key_size,
                )


def new_recipient_kem(curve_type, private_key):
    """Construct the recipient KEM for ``curve_type``.

    Args:
        curve_type: CurveType of the recipient key.
        private_key: Raw private key bytes. For P-curves, the big-endian
            scalar; for CURVE25519, the 32-byte X25519 scalar.

    Raises:
        InvalidArgumentError: Private key is not bytes, is empty or is wrongly
            sized.
        UnsupportedCurveError: No strategy for ``curve_type``.
    """
    if not isinstance(curve_type, CurveType):
        raise UnsupportedCurveError(f"Unsupported elliptic curve: {curve_type!r}")
    if curve_type in NIST_CURVES:
        return NistPCurveRecipientKem.new(curve_type, private_key)
    if curve_type == CurveType.CURVE25519:
        return X25519RecipientKem.new(curve_type, private_key)
    raise UnsupportedCurveError("Unsupported elliptic curve")
