"""CRC-16/CCITT constants."""

WIDTH = 16
POLY = 0x1021  # x^16 + x^12 + x^5 + 1, MSB-first, implicit x^16
REFLECTED_POLY = 0x8408
CHECK_INPUT = b"123456789"
