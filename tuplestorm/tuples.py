"""Fixed-size stream tuples and their binary wire format.

A tuple carries its destination task, the task that emitted it, a timestamp
and ``MAX_VECTOR`` string/integer pairs.  On the wire it is a fixed-size
little-endian record so that a byte stream can be cut into tuples without
any framing.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from dataclasses import field as dc_field

MAX_VECTOR = 5
MAX_STR = 32

_HEADER = struct.Struct("<iiQ")
_FIELD = struct.Struct(f"<{MAX_STR}si")
TUPLE_SIZE = _HEADER.size + MAX_VECTOR * _FIELD.size


@dataclass
class Field:
    """One string/integer pair of a tuple."""

    str: str = ""
    integer: int = 0

    def _pack(self) -> bytes:
        raw = self.str.encode("utf-8")
        if len(raw) >= MAX_STR:
            raise ValueError(
                f"string {self.str!r} needs {len(raw)} bytes; at most {MAX_STR - 1} fit"
            )
        try:
            return _FIELD.pack(raw, self.integer)
        except struct.error as exc:
            raise ValueError(f"integer {self.integer} does not fit in 32 bits") from exc


@dataclass
class StormTuple:
    """A tuple travelling between tasks.

    ``task`` 0 means "no destination": such a tuple is dropped on send and
    marks a free slot in a queue.
    """

    task: int = 0
    fromtask: int = 0
    starttime: int = 0
    values: list[Field] = dc_field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.values) > MAX_VECTOR:
            raise ValueError(
                f"a tuple holds at most {MAX_VECTOR} values, got {len(self.values)}"
            )
        self.values = list(self.values) + [
            Field() for _ in range(MAX_VECTOR - len(self.values))
        ]

    @property
    def key(self) -> str:
        """The string of the first value, used for fields grouping."""
        return self.values[0].str

    def pack(self) -> bytes:
        """Encode the tuple into its fixed-size wire record."""
        try:
            header = _HEADER.pack(self.task, self.fromtask, self.starttime)
        except struct.error as exc:
            raise ValueError(f"header field out of range: {exc}") from exc
        return header + b"".join(value._pack() for value in self.values)


def decode_tuple(data: bytes | bytearray | memoryview) -> StormTuple:
    """Decode one wire record produced by :meth:`StormTuple.pack`."""
    raw = bytes(data)
    if len(raw) != TUPLE_SIZE:
        raise ValueError(f"a tuple record is {TUPLE_SIZE} bytes, got {len(raw)}")
    task, fromtask, starttime = _HEADER.unpack_from(raw, 0)
    values = [
        Field(text.split(b"\x00", 1)[0].decode("utf-8"), integer)
        for text, integer in _FIELD.iter_unpack(raw[_HEADER.size:])
    ]
    return StormTuple(task=task, fromtask=fromtask, starttime=starttime, values=values)