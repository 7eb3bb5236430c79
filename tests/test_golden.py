"""Golden tests: published check values, empty input and residues."""

import pytest

from crc_ccitt import (
    ALGORITHMS,
    CHECK_INPUT,
    CRC_16_XMODEM,
    CRC_16_KERMIT,
    CRC_16_IBM_SDLC,
    CRC_16_GENIBUS,
    CRC_16_GSM,
    CRC_16_IBM_3740,
    CRC_16_ISO_IEC_14443_3_A,
    CRC_16_SPI_FUJITSU,
    CRC_16_MCRF4XX,
    CRC_16_RIELLO,
    CRC_16_TMS37157,
)


# ── Published check values for b"123456789" ─────────────────────────

CHECK_VALUES = [
    (CRC_16_XMODEM, 0x31C3),
    (CRC_16_KERMIT, 0x2189),
    (CRC_16_IBM_SDLC, 0x906E),
    (CRC_16_GENIBUS, 0xD64E),
    (CRC_16_GSM, 0xCE3C),
    (CRC_16_IBM_3740, 0x29B1),
    (CRC_16_ISO_IEC_14443_3_A, 0xBF05),
    (CRC_16_SPI_FUJITSU, 0xE5CC),
    (CRC_16_MCRF4XX, 0x6F91),
    (CRC_16_RIELLO, 0x63D0),
    (CRC_16_TMS37157, 0x26B1),
]

# finalize(initial_register()) with nothing folded in
EMPTY_VALUES = [
    (CRC_16_XMODEM, 0x0000),
    (CRC_16_KERMIT, 0x0000),
    (CRC_16_GENIBUS, 0x0000),
    (CRC_16_GSM, 0xFFFF),
    (CRC_16_IBM_3740, 0xFFFF),
    (CRC_16_IBM_SDLC, 0x0000),
    (CRC_16_ISO_IEC_14443_3_A, 0x6363),
    (CRC_16_SPI_FUJITSU, 0x1D0F),
    (CRC_16_MCRF4XX, 0xFFFF),
    (CRC_16_RIELLO, 0x554D),
    (CRC_16_TMS37157, 0x3791),
]


@pytest.mark.parametrize("algorithm, expected", CHECK_VALUES)
def test_check_value(algorithm, expected):
    assert algorithm.check == expected
    assert algorithm.checksum(CHECK_INPUT) == expected


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_catalog_entry_self_test(name):
    assert ALGORITHMS[name].self_test(), name


@pytest.mark.parametrize("algorithm, expected", EMPTY_VALUES)
def test_empty_input(algorithm, expected):
    assert algorithm.checksum(b"") == expected
    assert algorithm.finalize(algorithm.initial_register()) == expected


def test_non_reflected_init_is_still_reflected_into_register():
    # SPI-FUJITSU: refin=false with an init that is not a bit palindrome.
    assert CRC_16_SPI_FUJITSU.initial_register() == 0xF0B8
    assert CRC_16_SPI_FUJITSU.checksum(CHECK_INPUT) == 0xE5CC


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_residue_of_valid_codeword(name):
    algorithm = ALGORITHMS[name]
    crc = algorithm.check
    byteorder = "little" if algorithm.refout else "big"
    codeword = CHECK_INPUT + crc.to_bytes(2, byteorder)
    assert algorithm.checksum(codeword) ^ algorithm.xorout == algorithm.residue


def test_accepts_bytes_like_inputs():
    expected = CRC_16_XMODEM.checksum(CHECK_INPUT)
    assert CRC_16_XMODEM.checksum(bytearray(CHECK_INPUT)) == expected
    assert CRC_16_XMODEM.checksum(memoryview(CHECK_INPUT)) == expected


def test_checksum_equals_init_update_finalize():
    data = bytes(range(256)) * 3
    for algorithm in ALGORITHMS.values():
        register = algorithm.initial_register()
        register = algorithm.update(register, data)
        assert algorithm.finalize(register) == algorithm.checksum(data)


def test_all_zero_buffer_is_valid():
    for algorithm in ALGORITHMS.values():
        assert 0 <= algorithm.checksum(bytes(4096)) <= 0xFFFF
