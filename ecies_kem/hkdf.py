# Copyright (c) 2026 Signer — MIT License

"""HKDF (RFC 5869) and the ECIES key binder built on it.

    PRK = HMAC-Hash(salt, IKM)                              # HKDF-Extract
    T(i) = HMAC-Hash(PRK, T(i-1) || info || i)              # HKDF-Expand
    OKM = first L bytes of T(1) || T(2) || ...

ECIES derives the symmetric key with IKM = kem_bytes || shared_secret, so the
ephemeral public value is bound into the key alongside the DH output. Two
different KEM byte strings that happen to yield the same shared secret still
produce unrelated keys.
"""

import hashlib
import hmac

from .enums import HashType
from .errors import InvalidArgumentError
from .secure import secret_buffer

_HASH_NAMES = {
    HashType.SHA1: "sha1",
    HashType.SHA224: "sha224",
    HashType.SHA256: "sha256",
    HashType.SHA384: "sha384",
    HashType.SHA512: "sha512",
}


def _digest_name(hash_type):
    try:
        return _HASH_NAMES[hash_type]
    except (KeyError, TypeError):
        raise InvalidArgumentError(f"Unsupported hash: {hash_type!r}") from None


def digest_size(hash_type):
    """Output size in bytes of the HMAC for ``hash_type``."""
    return hashlib.new(_digest_name(hash_type)).digest_size


def hkdf_extract(hash_type, ikm, salt=b""):
    """HKDF-Extract. An empty salt is the RFC's string of HashLen zeros."""
    name = _digest_name(hash_type)
    if not salt:
        salt = b"\x00" * hashlib.new(name).digest_size
    return hmac.new(bytes(salt), bytes(ikm), name).digest()


def hkdf_expand(hash_type, prk, info, length):
    """HKDF-Expand to ``length`` bytes.

    Raises:
        InvalidArgumentError: If length is not in 1 .. 255 * HashLen.
    """
    name = _digest_name(hash_type)
    hash_len = hashlib.new(name).digest_size
    if length <= 0 or length > 255 * hash_len:
        raise InvalidArgumentError(
            f"HKDF output length must be in 1..{255 * hash_len}, got {length}"
        )

    okm = bytearray()
    t = b""
    for counter in range(1, -(-length // hash_len) + 1):
        t = hmac.new(prk, t + bytes(info) + bytes([counter]), name).digest()
        okm += t
    return bytes(okm[:length])


def hkdf(hash_type, ikm, salt, info, length):
    """One-shot HKDF-Extract + HKDF-Expand."""
    with secret_buffer(hkdf_extract(hash_type, ikm, salt)) as prk:
        return hkdf_expand(hash_type, bytes(prk), info, length)


def compute_ecies_hkdf_symmetric_key(hash_type, kem_bytes, shared_secret,
                                     salt, info, key_size):
    """Derive the ECIES symmetric key.

    Args:
        hash_type: HashType for HKDF.
        kem_bytes: The sender's encoded ephemeral public value.
        shared_secret: Raw DH output.
        salt: HKDF salt.
        info: HKDF info.
        key_size: Requested key length in bytes.

    Returns:
        ``key_size`` bytes of key material.

    Raises:
        InvalidArgumentError: Unsupported hash or unreasonable key_size.
    """
    with secret_buffer(bytes(kem_bytes) + bytes(shared_secret)) as ikm:
        return hkdf(hash_type, ikm, salt, info, key_size)
