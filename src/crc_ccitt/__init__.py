"""Table-free CRC-16 over the CCITT polynomial 0x1021."""

from crc_ccitt.crc import update, reflect8, reflect16
from crc_ccitt.algorithm import Algorithm, Digest
from crc_ccitt.catalog import (
    ALGORITHMS,
    by_name,
    CRC_16_XMODEM,
    CRC_16_LORA,
    CRC_16_GENIBUS,
    CRC_16_GSM,
    CRC_16_IBM_3740,
    CRC_16_AUTOSAR,
    CRC_16_SPI_FUJITSU,
    CRC_16_AUG_CCITT,
    CRC_16_IBM_SDLC,
    CRC_16_ISO_HDLC,
    CRC_16_ISO_IEC_14443_3_B,
    CRC_16_X_25,
    CRC_16_ISO_IEC_14443_3_A,
    CRC_16_KERMIT,
    CRC_16_CCITT,
    CRC_16_MCRF4XX,
    CRC_16_RIELLO,
    CRC_16_TMS37157,
)
from crc_ccitt.constants import (
    WIDTH,
    POLY,
    REFLECTED_POLY,
    CHECK_INPUT,
)

__all__ = [
    "update",
    "reflect8",
    "reflect16",
    "Algorithm",
    "Digest",
    "ALGORITHMS",
    "by_name",
    "CRC_16_XMODEM",
    "CRC_16_LORA",
    "CRC_16_GENIBUS",
    "CRC_16_GSM",
    "CRC_16_IBM_3740",
    "CRC_16_AUTOSAR",
    "CRC_16_SPI_FUJITSU",
    "CRC_16_AUG_CCITT",
    "CRC_16_IBM_SDLC",
    "CRC_16_ISO_HDLC",
    "CRC_16_ISO_IEC_14443_3_B",
    "CRC_16_X_25",
    "CRC_16_ISO_IEC_14443_3_A",
    "CRC_16_KERMIT",
    "CRC_16_CCITT",
    "CRC_16_MCRF4XX",
    "CRC_16_RIELLO",
    "CRC_16_TMS37157",
    "WIDTH",
    "POLY",
    "REFLECTED_POLY",
    "CHECK_INPUT",
]
