"""Fixed-block memory slab with a LIFO freelist.

Each block holds a small header followed by the key and value payload::

    [ TTL (8 bytes) ][ KeyLen (2 bytes) ][ ValLen (2 bytes) ][ Key ][ Value ]

All integers are stored little-endian.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

BLOCK_SIZE = 512
"""Size in bytes of every block in the slab."""

_HEADER = struct.Struct("<QHH")
HEADER_SIZE = _HEADER.size  # 12
_U16_MAX = 0xFFFF
_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF
_DUMP_WIDTH = 16


@dataclass(frozen=True)
class Handle:
    """Opaque reference to a block inside a :class:`Slab`."""

    index: int


class DoubleFreeError(RuntimeError):
    """Raised when a block that is already free is released again."""


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


class Slab:
    """Preallocated region split into fixed-size blocks."""

    def __init__(self, capacity_bytes: int) -> None:
        if capacity_bytes < 0:
            raise ValueError("capacity_bytes must not be negative")
        self._total_blocks = capacity_bytes // BLOCK_SIZE
        self._region = bytearray(self._total_blocks * BLOCK_SIZE)
        # Popping from the end hands out the lowest index first.
        self._free_list = list(reversed(range(self._total_blocks)))
        self._free_set = set(self._free_list)

    @property
    def total_blocks(self) -> int:
        """Number of blocks in the slab."""
        return self._total_blocks

    @property
    def free_blocks(self) -> int:
        """Number of blocks currently available for allocation."""
        return len(self._free_list)

    def _block(self, handle: Handle) -> memoryview | None:
        index = handle.index
        if not 0 <= index < self._total_blocks:
            return None
        offset = index * BLOCK_SIZE
        return memoryview(self._region)[offset : offset + BLOCK_SIZE]

    def allocate(self, key: bytes, value: bytes, ttl: int) -> Handle | None:
        """Store ``key``/``value`` with ``ttl`` in a free block.

        Returns the block's handle, or ``None`` when the slab is full or the
        payload does not fit in one block.
        """
        key = bytes(key)
        value = bytes(value)
        if not 0 <= ttl <= _U64_MAX:
            raise ValueError("ttl must fit in an unsigned 64-bit integer")
        if len(key) > _U16_MAX or len(value) > _U16_MAX:
            return None
        if HEADER_SIZE + len(key) + len(value) > BLOCK_SIZE:
            return None
        if not self._free_list:
            return None

        index = self._free_list.pop()
        self._free_set.discard(index)
        offset = index * BLOCK_SIZE
        _HEADER.pack_into(self._region, offset, ttl, len(key), len(value))
        key_start = offset + HEADER_SIZE
        val_start = key_start + len(key)
        self._region[key_start:val_start] = key
        self._region[val_start : val_start + len(value)] = value
        return Handle(index)

    def _decode(self, handle: Handle) -> tuple[int, bytes, bytes] | None:
        block = self._block(handle)
        if block is None:
            return None
        ttl, key_len, val_len = _HEADER.unpack_from(block)
        key_end = HEADER_SIZE + key_len
        val_end = key_end + val_len
        if val_end > BLOCK_SIZE:
            return None
        return ttl, bytes(block[HEADER_SIZE:key_end]), bytes(block[key_end:val_end])

    def get_value(self, handle: Handle) -> bytes | None:
        """Return the value stored in the block, or ``None`` if unavailable."""
        decoded = self._decode(handle)
        return None if decoded is None else decoded[2]

    def get_meta(self, handle: Handle) -> tuple[int, bytes, bytes] | None:
        """Return ``(ttl, key, value)`` for the block, or ``None``."""
        return self._decode(handle)

    def deallocate(self, handle: Handle) -> None:
        """Zero the block and return it to the freelist.

        Handles outside the slab are ignored; freeing a free block raises
        :class:`DoubleFreeError`.
        """
        index = handle.index
        if not 0 <= index < self._total_blocks:
            return
        if index in self._free_set:
            raise DoubleFreeError("block already freed")
        offset = index * BLOCK_SIZE
        self._region[offset : offset + BLOCK_SIZE] = bytes(BLOCK_SIZE)
        self._free_list.append(index)
        self._free_set.add(index)

    def debug_dump(self, handle: Handle) -> str | None:
        """Return a hex and ASCII dump of the block, or ``None``."""
        block = self._block(handle)
        if block is None:
            return None
        lines = []
        for start in range(0, BLOCK_SIZE, _DUMP_WIDTH):
            chunk = block[start : start + _DUMP_WIDTH]
            hex_part = "".join(f"{b:02x} " for b in chunk)
            ascii_part = "".join(_printable(b) for b in chunk)
            lines.append(f"{start:04x}: {hex_part:<48} {ascii_part}\n")
        return "".join(lines)