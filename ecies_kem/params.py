# Copyright (c) 2026 Signer — MIT License

"""HKDF derivation parameters passed to ``RecipientKem.generate_key``.

    hash_type     HashType used by HKDF-Extract / HKDF-Expand
    salt          HKDF salt (may be empty)
    info          HKDF context info (may be empty)
    key_size      length of the derived key in bytes
    point_format  encoding of the KEM bytes (X25519 accepts COMPRESSED only)
"""

from dataclasses import dataclass

from .enums import HashType, PointFormat
from .errors import InvalidArgumentError


def _enum_member(enum_cls, value, field):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            pass
    raise InvalidArgumentError(f"{field}: unknown {enum_cls.__name__} {value!r}")


def _as_bytes(value, field):
    if value is None:
        return b""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return bytes.fromhex(value)
        except ValueError:
            raise InvalidArgumentError(f"{field}: not a hex string") from None
    raise InvalidArgumentError(f"{field}: expected bytes or hex string")


@dataclass(frozen=True)
class DerivationParams:
    hash_type: HashType = HashType.SHA256
    salt: bytes = b""
    info: bytes = b""
    key_size: int = 32
    point_format: PointFormat = PointFormat.UNCOMPRESSED

    def __post_init__(self):
        if not isinstance(self.hash_type, HashType):
            raise InvalidArgumentError(f"hash_type: expected HashType, got {self.hash_type!r}")
        if not isinstance(self.point_format, PointFormat):
            raise InvalidArgumentError(
                f"point_format: expected PointFormat, got {self.point_format!r}")
        # bool is an int subclass
        if not isinstance(self.key_size, int) or isinstance(self.key_size, bool):
            raise InvalidArgumentError(f"key_size: expected an integer, got {self.key_size!r}")
        for field in ("salt", "info"):
            value = getattr(self, field)
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise InvalidArgumentError(
                    f"{field}: expected bytes, got {type(value).__name__}")
            object.__setattr__(self, field, bytes(value))

    @classmethod
    def from_dict(cls, data):
        """Build parameters from plain data (e.g. a parsed JSON/TOML table).

        Enum fields are given by member name (``"SHA256"``, ``"COMPRESSED"``);
        salt and info may be bytes or hex strings (the constructor itself
        takes bytes only). Missing keys take the dataclass defaults.

        Raises:
            InvalidArgumentError: On unknown keys, enum names or bad values.
        """
        unknown = set(data) - {"hash_type", "salt", "info", "key_size", "point_format"}
        if unknown:
            raise InvalidArgumentError(f"unknown derivation parameter(s): {sorted(unknown)}")

        kwargs = {}
        if "hash_type" in data:
            kwargs["hash_type"] = _enum_member(HashType, data["hash_type"], "hash_type")
        if "point_format" in data:
            kwargs["point_format"] = _enum_member(PointFormat, data["point_format"], "point_format")
        if "salt" in data:
            kwargs["salt"] = _as_bytes(data["salt"], "salt")
        if "info" in data:
            kwargs["info"] = _as_bytes(data["info"], "info")
        if "key_size" in data:
            try:
                kwargs["key_size"] = int(data["key_size"])
            except (TypeError, ValueError):
                raise InvalidArgumentError("key_size: expected an integer") from None
        return cls(**kwargs)
