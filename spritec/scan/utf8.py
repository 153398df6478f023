"""
UTF-8 Codepoint Decoder
=======================
Decodes one codepoint at a byte offset. The caller guarantees well-formed
UTF-8; only the leading byte is inspected to find the sequence length.

    0xxxxxxx                              1 byte
    110xxxxx 10xxxxxx                     2 bytes
    1110xxxx 10xxxxxx 10xxxxxx            3 bytes
    11110xxx 10xxxxxx 10xxxxxx 10xxxxxx   4 bytes
"""

_CONT_MASK = 0b0011_1111


def decode_first(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode the codepoint starting at ``data[offset]``.

    Args:
        data: UTF-8 encoded bytes
        offset: Byte position of the leading byte

    Returns:
        (consumed_byte_count, codepoint) tuple

    Raises:
        ValueError: If the leading byte is not a valid UTF-8 lead byte
    """
    first = data[offset]

    if first & 0b1000_0000 == 0:
        return 1, first

    if first & 0b1110_0000 == 0b1100_0000:
        b1 = first & 0b0001_1111
        b2 = data[offset + 1] & _CONT_MASK
        return 2, (b1 << 6) | b2

    if first & 0b1111_0000 == 0b1110_0000:
        b1 = first & 0b0000_1111
        b2 = data[offset + 1] & _CONT_MASK
        b3 = data[offset + 2] & _CONT_MASK
        return 3, (b1 << 12) | (b2 << 6) | b3

    if first & 0b1111_1000 == 0b1111_0000:
        b1 = first & 0b0000_0111
        b2 = data[offset + 1] & _CONT_MASK
        b3 = data[offset + 2] & _CONT_MASK
        b4 = data[offset + 3] & _CONT_MASK
        return 4, (b1 << 18) | (b2 << 12) | (b3 << 6) | b4

    raise ValueError(f"invalid UTF-8 leading byte 0x{first:02X} at offset {offset}")
