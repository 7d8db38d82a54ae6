# Copyright (c) 2026 Signer — MIT License

"""ECIES-HKDF recipient KEM: recover symmetric keys from KEM bytes.

Curves:
    NIST P-256 / P-384 / P-521  SEC1 point decoding + ECDH (cryptography).
    Curve25519                  X25519 on raw 32-byte values (libsodium).

Derivation:
    key = HKDF(hash, kem_bytes || shared_secret, salt, info, key_size)

Usage:
    kem = new_recipient_kem(CurveType.NIST_P256, private_key_bytes)
    key = kem.generate_key(kem_bytes, DerivationParams(
        hash_type=HashType.SHA256, salt=salt, info=info, key_size=32,
        point_format=PointFormat.COMPRESSED,
    ))
"""

from .enums import CurveType, HashType, PointFormat
from .errors import (
    EciesError, InvalidArgumentError, InternalError, UnsupportedCurveError,
)
from .params import DerivationParams
from .recipient_kem import (
    RecipientKem, NistPCurveRecipientKem, X25519RecipientKem, new_recipient_kem,
)
from .hkdf import hkdf, hkdf_extract, hkdf_expand, compute_ecies_hkdf_symmetric_key
from .ec_util import EcGroup, get_ec_group, field_size_in_bytes, encoding_size_in_bytes
from .x25519 import (
    x25519, x25519_public_value,
    X25519_SCALAR_SIZE, X25519_PUBLIC_VALUE_SIZE, X25519_SHARED_SECRET_SIZE,
)

__all__ = [
    # Enums
    "CurveType", "HashType", "PointFormat",
    # Errors
    "EciesError", "InvalidArgumentError", "InternalError", "UnsupportedCurveError",
    # KEM
    "DerivationParams",
    "RecipientKem", "NistPCurveRecipientKem", "X25519RecipientKem", "new_recipient_kem",
    # KDF
    "hkdf", "hkdf_extract", "hkdf_expand", "compute_ecies_hkdf_symmetric_key",
    # Curves
    "EcGroup", "get_ec_group", "field_size_in_bytes", "encoding_size_in_bytes",
    "x25519", "x25519_public_value",
    "X25519_SCALAR_SIZE", "X25519_PUBLIC_VALUE_SIZE", "X25519_SHARED_SECRET_SIZE",
]

__version__ = "1.0.0"
