"""Catalog of CRC-16 variants over polynomial 0x1021.

Parameters are taken from the `RevEng catalogue`_. Each entry lists its
defining parameter string; aliases share the same object.

.. _RevEng catalogue: https://reveng.sourceforge.io/crc-catalogue/16.htm
"""

from __future__ import annotations

import logging

from crc_ccitt.algorithm import Algorithm

logger = logging.getLogger(__name__)

CRC_16_XMODEM = CRC_16_LORA = Algorithm(
    init=0x0000,
    refin=False,
    refout=False,
    xorout=0x0000,
    check=0x31C3,
    residue=0x0000,
)
"""width=16 poly=0x1021 init=0x0000 refin=false refout=false xorout=0x0000 check=0x31c3 residue=0x0000 name="CRC-16/XMODEM" """

CRC_16_GENIBUS = Algorithm(
    init=0xFFFF,
    refin=False,
    refout=False,
    xorout=0xFFFF,
    check=0xD64E,
    residue=0x1D0F,
)
"""width=16 poly=0x1021 init=0xffff refin=false refout=false xorout=0xffff check=0xd64e residue=0x1d0f name="CRC-16/GENIBUS" """

CRC_16_GSM = Algorithm(
    init=0x0000,
    refin=False,
    refout=False,
    xorout=0xFFFF,
    check=0xCE3C,
    residue=0x1D0F,
)
"""width=16 poly=0x1021 init=0x0000 refin=false refout=false xorout=0xffff check=0xce3c residue=0x1d0f name="CRC-16/GSM" """

CRC_16_IBM_3740 = CRC_16_AUTOSAR = Algorithm(
    init=0xFFFF,
    refin=False,
    refout=False,
    xorout=0x0000,
    check=0x29B1,
    residue=0x0000,
)
"""width=16 poly=0x1021 init=0xffff refin=false refout=false xorout=0x0000 check=0x29b1 residue=0x0000 name="CRC-16/IBM-3740" """

CRC_16_SPI_FUJITSU = CRC_16_AUG_CCITT = Algorithm(
    init=0x1D0F,
    refin=False,
    refout=False,
    xorout=0x0000,
    check=0xE5CC,
    residue=0x0000,
)
"""width=16 poly=0x1021 init=0x1d0f refin=false refout=false xorout=0x0000 check=0xe5cc residue=0x0000 name="CRC-16/SPI-FUJITSU" """

CRC_16_IBM_SDLC = CRC_16_ISO_HDLC = CRC_16_ISO_IEC_14443_3_B = CRC_16_X_25 = Algorithm(
    init=0xFFFF,
    refin=True,
    refout=True,
    xorout=0xFFFF,
    check=0x906E,
    residue=0xF0B8,
)
"""width=16 poly=0x1021 init=0xffff refin=true refout=true xorout=0xffff check=0x906e residue=0xf0b8 name="CRC-16/IBM-SDLC" """

CRC_16_ISO_IEC_14443_3_A = Algorithm(
    init=0xC6C6,
    refin=True,
    refout=True,
    xorout=0x0000,
    check=0xBF05,
    residue=0x0000,
)
"""width=16 poly=0x1021 init=0xc6c6 refin=true refout=true xorout=0x0000 check=0xbf05 residue=0x0000 name="CRC-16/ISO-IEC-14443-3-A" """

CRC_16_KERMIT = CRC_16_CCITT = Algorithm(
    init=0x0000,
    refin=True,
    refout=True,
    xorout=0x0000,
    check=0x2189,
    residue=0x0000,
)
"""width=16 poly=0x1021 init=0x0000 refin=true refout=true xorout=0x0000 check=0x2189 residue=0x0000 name="CRC-16/KERMIT" """

CRC_16_MCRF4XX = Algorithm(
    init=0xFFFF,
    refin=True,
    refout=True,
    xorout=0x0000,
    check=0x6F91,
    residue=0x0000,
)
"""width=16 poly=0x1021 init=0xffff refin=true refout=true xorout=0x0000 check=0x6f91 residue=0x0000 name="CRC-16/MCRF4XX" """

CRC_16_RIELLO = Algorithm(
    init=0xB2AA,
    refin=True,
    refout=True,
    xorout=0x0000,
    check=0x63D0,
    residue=0x0000,
)
"""width=16 poly=0x1021 init=0xb2aa refin=true refout=true xorout=0x0000 check=0x63d0 residue=0x0000 name="CRC-16/RIELLO" """

CRC_16_TMS37157 = Algorithm(
    init=0x89EC,
    refin=True,
    refout=True,
    xorout=0x0000,
    check=0x26B1,
    residue=0x0000,
)
"""width=16 poly=0x1021 init=0x89ec refin=true refout=true xorout=0x0000 check=0x26b1 residue=0x0000 name="CRC-16/TMS37157" """


# Canonical catalogue names first, then aliases.
ALGORITHMS: dict[str, Algorithm] = {
    "CRC-16/XMODEM": CRC_16_XMODEM,
    "CRC-16/GENIBUS": CRC_16_GENIBUS,
    "CRC-16/GSM": CRC_16_GSM,
    "CRC-16/IBM-3740": CRC_16_IBM_3740,
    "CRC-16/SPI-FUJITSU": CRC_16_SPI_FUJITSU,
    "CRC-16/IBM-SDLC": CRC_16_IBM_SDLC,
    "CRC-16/ISO-IEC-14443-3-A": CRC_16_ISO_IEC_14443_3_A,
    "CRC-16/KERMIT": CRC_16_KERMIT,
    "CRC-16/MCRF4XX": CRC_16_MCRF4XX,
    "CRC-16/RIELLO": CRC_16_RIELLO,
    "CRC-16/TMS37157": CRC_16_TMS37157,
    "CRC-16/LORA": CRC_16_LORA,
    "CRC-16/AUTOSAR": CRC_16_AUTOSAR,
    "CRC-16/AUG-CCITT": CRC_16_AUG_CCITT,
    "CRC-16/ISO-HDLC": CRC_16_ISO_HDLC,
    "CRC-16/ISO-IEC-14443-3-B": CRC_16_ISO_IEC_14443_3_B,
    "CRC-16/X-25": CRC_16_X_25,
    "CRC-16/CCITT": CRC_16_CCITT,
}

_BY_UPPER_NAME = {name.upper(): algorithm for name, algorithm in ALGORITHMS.items()}


def by_name(name: str) -> Algorithm:
    """Look up a catalogued algorithm, e.g. ``by_name("crc-16/x-25")``."""
    algorithm = _BY_UPPER_NAME.get(name.upper())
    if algorithm is None:
        raise ValueError(f"Unknown CRC algorithm: {name!r}")
    logger.debug("Resolved %s to %r", name, algorithm)
    return algorithm
