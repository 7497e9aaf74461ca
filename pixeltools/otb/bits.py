from __future__ import annotations

from typing import Iterable, List


def read_bit(data: bytes, index: int) -> int:
    """Read bit `index` of an MSB-first bitstream."""
    return (data[index // 8] >> (7 - index % 8)) & 1


def has_bit(data: bytes, index: int) -> bool:
    return index // 8 < len(data)


def pack_bits(bits: Iterable[int]) -> bytes:
    """Pack 0/1 values MSB-first; the last byte is zero-filled on the right."""
    out = bytearray()
    value = 0
    count = 0
    for bit in bits:
        if bit:
            value |= 1 << (7 - count)
        count += 1
        if count == 8:
            out.append(value)
            value = 0
            count = 0
    if count:
        out.append(value)
    return bytes(out)


def unpack_bits(data: bytes, count: int) -> List[int]:
    """Unpack the first `count` bits of an MSB-first bitstream."""
    if count > len(data) * 8:
        raise ValueError(f"Need {count} bits, got {len(data) * 8}")
    return [read_bit(data, i) for i in range(count)]
