def int_to_bytes(value: int) -> bytes:
    """Minimal big-endian encoding, no sign byte. Zero encodes as b""."""
    if value < 0:
        raise ValueError("cannot encode a negative integer")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, "big")
