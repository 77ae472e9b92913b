"""Bob Jenkins' lookup3 ``hashlittle`` hash for byte strings."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_SEED = 0xDEADBEEF
_BLOCK = 12
_WORDS = struct.Struct("<3I")


def _rot(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _MASK


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    a = (a - c) & _MASK; a ^= _rot(c, 4); c = (c + b) & _MASK
    b = (b - a) & _MASK; b ^= _rot(a, 6); a = (a + c) & _MASK
    c = (c - b) & _MASK; c ^= _rot(b, 8); b = (b + a) & _MASK
    a = (a - c) & _MASK; a ^= _rot(c, 16); c = (c + b) & _MASK
    b = (b - a) & _MASK; b ^= _rot(a, 19); a = (a + c) & _MASK
    c = (c - b) & _MASK; c ^= _rot(b, 4); b = (b + a) & _MASK
    return a, b, c


def _final(a: int, b: int, c: int) -> int:
    c ^= b; c = (c - _rot(b, 14)) & _MASK
    a ^= c; a = (a - _rot(c, 11)) & _MASK
    b ^= a; b = (b - _rot(a, 25)) & _MASK
    c ^= b; c = (c - _rot(b, 16)) & _MASK
    a ^= c; a = (a - _rot(c, 4)) & _MASK
    b ^= a; b = (b - _rot(a, 14)) & _MASK
    c ^= b; c = (c - _rot(b, 24)) & _MASK
    return c


def jenkins_hash(key: bytes | bytearray | memoryview | str, initval: int = 0) -> int:
    """Return the 32-bit lookup3 hash of ``key`` seeded with ``initval``.

    Strings are hashed as their UTF-8 encoding.  Byte order is little-endian,
    so the result matches ``hashlittle`` on every platform.
    """
    if isinstance(key, str):
        data = key.encode("utf-8")
    elif isinstance(key, (bytes, bytearray, memoryview)):
        data = bytes(key)
    else:
        raise TypeError(f"cannot hash object of type {type(key).__name__}")

    length = len(data)
    a = b = c = (_SEED + length + initval) & _MASK

    if length == 0:
        return c

    offset = 0
    while length - offset > _BLOCK:
        ka, kb, kc = _WORDS.unpack_from(data, offset)
        a = (a + ka) & _MASK
        b = (b + kb) & _MASK
        c = (c + kc) & _MASK
        a, b, c = _mix(a, b, c)
        offset += _BLOCK

    tail = data[offset:].ljust(_BLOCK, b"\x00")
    ka, kb, kc = _WORDS.unpack(tail)
    a = (a + ka) & _MASK
    b = (b + kb) & _MASK
    c = (c + kc) & _MASK
    return _final(a, b, c)