"""64-bit FNV-1a hashing with a reverse lookup of hashed inputs."""

from __future__ import annotations

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK = (1 << 64) - 1

_reverse_lookup: dict[int, bytes] = {}


def fnv1a(data) -> int:
    """Return the 64-bit FNV-1a hash of a bytes-like object and remember it."""
    raw = memoryview(data).tobytes()
    value = _FNV_OFFSET
    for byte in raw:
        value = ((value ^ byte) * _FNV_PRIME) & _MASK
    _reverse_lookup.setdefault(value, raw)
    return value


def lookup_fnv1a(hash_value: int) -> bytes | None:
    """Return the first input seen for ``hash_value``, if any."""
    return _reverse_lookup.get(hash_value)