"""Decompression of the LZSS variant used for compressed demo payloads."""

from __future__ import annotations


def decompress(data: bytes) -> bytes:
    """Decompress ``data``: a little endian u32 target length, then LZSS commands.

    Decoding stops quietly when the input runs out, when a back reference has a
    length of one, or when a back reference would exceed the target length.
    """
    if len(data) < 4:
        raise ValueError("lzss input is shorter than its 4 byte length prefix")
    target_len = int.from_bytes(data[:4], "little")
    output = bytearray()
    source = iter(data[4:])

    for cmd in source:
        for _ in range(8):
            if cmd & 0x01:
                high = next(source, None)
                mixed = next(source, None)
                if high is None or mixed is None:
                    return bytes(output)
                distance = (high << 4) | (mixed >> 4)
                count = (mixed & 0x0F) + 1
                if count == 1 or len(output) + count > target_len:
                    return bytes(output)
                start = len(output) - distance - 1
                if start < 0:
                    raise ValueError("lzss back reference points before the start of the output")
                # the copied range may overlap the bytes being produced
                for offset in range(count):
                    output.append(output[start + offset])
            else:
                literal = next(source, None)
                if literal is None:
                    return bytes(output)
                output.append(literal)
            cmd >>= 1
    return bytes(output)