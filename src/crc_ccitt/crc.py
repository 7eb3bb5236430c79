"""Table-free CRC-16/CCITT byte update and bit reflection helpers.

The register is kept least-significant-bit first: bit 0 holds the coefficient
that is shifted out next. MSB-first variants reverse each input byte and the
final register (see :class:`crc_ccitt.algorithm.Algorithm`).
"""


def update(crc: int, data: int) -> int:
    """Fold one byte into a 16-bit LSB-first CRC register.

    Closed form of eight shift-register steps against the reflected
    polynomial 0x8408. Byte-wide intermediates are truncated to 8 bits.
    """
    data = (data ^ crc) & 0xFF
    data = (data ^ (data << 4)) & 0xFF
    return (((data << 8) | (crc >> 8)) ^ (data >> 4) ^ (data << 3)) & 0xFFFF


def reflect8(value: int) -> int:
    """Reverse the bit order of an 8-bit value."""
    value = ((value & 0xF0) >> 4) | ((value & 0x0F) << 4)
    value = ((value & 0xCC) >> 2) | ((value & 0x33) << 2)
    return ((value & 0xAA) >> 1) | ((value & 0x55) << 1)


def reflect16(value: int) -> int:
    """Reverse the bit order of a 16-bit value."""
    return (reflect8(value & 0xFF) << 8) | reflect8((value >> 8) & 0xFF)
