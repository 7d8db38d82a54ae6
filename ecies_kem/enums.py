# Copyright (c) 2026 Signer — MIT License

"""Closed enumerations shared by the KEM strategies."""

import enum


class CurveType(enum.Enum):
    UNKNOWN_CURVE = 0
    NIST_P256 = 1
    NIST_P384 = 2
    NIST_P521 = 3
    CURVE25519 = 4


class PointFormat(enum.Enum):
    UNKNOWN_FORMAT = 0
    UNCOMPRESSED = 1
    COMPRESSED = 2
    # Raw x || y without the 0x04 prefix. Legacy interop only.
    DO_NOT_USE_CRUNCHY_UNCOMPRESSED = 3


class HashType(enum.Enum):
    UNKNOWN_HASH = 0
    SHA1 = 1
    SHA224 = 2
    SHA256 = 3
    SHA384 = 4
    SHA512 = 5


NIST_CURVES = frozenset({CurveType.NIST_P256, CurveType.NIST_P384, CurveType.NIST_P521})
