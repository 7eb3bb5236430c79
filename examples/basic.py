"""Basic example: one-shot and streaming CRC-16 computation.

Prints the check value of every catalogued variant, then shows that
feeding a frame in pieces gives the same CRC as a single call.
"""

from crc_ccitt import (
    ALGORITHMS,
    Algorithm,
    CHECK_INPUT,
    CRC_16_X_25,
    by_name,
)


def main() -> None:
    # ── Catalog ────────────────────────────────────────────────────
    for name, algorithm in ALGORITHMS.items():
        value = algorithm.checksum(CHECK_INPUT)
        status = "ok" if value == algorithm.check else "MISMATCH"
        print(f"{name:<26} 0x{value:04X}  {status}")

    # ── Streaming ──────────────────────────────────────────────────
    frame = bytes([0x7E, 0x03, 0x3F]) + b"hello, world"
    digest = CRC_16_X_25.digest()
    for i in range(0, len(frame), 4):
        digest.update(frame[i : i + 4])
    streamed = digest.finalize()
    print(f"X.25 FCS of {frame!r}: 0x{streamed:04X}")
    assert streamed == CRC_16_X_25.checksum(frame)

    # Little-endian FCS appended to the frame yields the constant residue.
    codeword = frame + streamed.to_bytes(2, "little")
    residue = CRC_16_X_25.checksum(codeword) ^ CRC_16_X_25.xorout
    print(f"Residue: 0x{residue:04X} (expected 0x{CRC_16_X_25.residue:04X})")

    # ── Custom variant ─────────────────────────────────────────────
    custom = Algorithm(init=0x1D0F, refin=False, refout=False, xorout=0x0000, check=0xE5CC, residue=0x0000)
    print(f"Custom matches SPI-FUJITSU: {custom == by_name('CRC-16/SPI-FUJITSU')}")


if __name__ == "__main__":
    main()
