# Copyright (c) 2026 Signer — MIT License

"""Secret-buffer hygiene backed by libsodium.

Python ``bytes`` are immutable and cannot be wiped, so every secret the KEM
works with (private scalar copies, shared secrets) is held in a ``bytearray``
for the duration of one call and wiped with ``sodium_memzero`` on the way out.
Pages are additionally locked with ``sodium_mlock`` so the secret is not
swapped to disk while it is live.

Locking is best-effort and page-granular. ``sodium_munlock`` unlocks every
page the region touches, so when nested ``secret_buffer`` blocks share a page
the inner block's exit unlocks that page while the outer buffer is still in
use. Wiping is unaffected: each buffer is zeroed on its own exit.
"""

from contextlib import contextmanager

from nacl._sodium import ffi as _ffi, lib as _lib


def secure_zero(buf):
    """Securely wipe a mutable buffer (bytearray / writable memoryview)."""
    if not isinstance(buf, (bytearray, memoryview)):
        return
    if isinstance(buf, memoryview) and buf.readonly:
        return
    n = len(buf)
    if n == 0:
        return
    _lib.sodium_memzero(_ffi.from_buffer(buf), n)


def _mlock(buf):
    """Lock memory pages to prevent swapping to disk."""
    if len(buf):
        _lib.sodium_mlock(_ffi.from_buffer(buf), len(buf))


def _munlock(buf):
    """Unlock memory pages (also zeros the region)."""
    if len(buf):
        _lib.sodium_munlock(_ffi.from_buffer(buf), len(buf))


@contextmanager
def secret_buffer(data):
    """Hold ``data`` in a locked bytearray that is wiped on every exit path.

    The buffer must not be resized inside the block.

    Usage:
        with secret_buffer(private_key) as sk:
            ...  # sk is a bytearray copy of private_key
    """
    buf = bytearray(data)
    _mlock(buf)
    try:
        yield buf
    finally:
        _munlock(buf)
        secure_zero(buf)
