"""Parameterized CRC-16/CCITT engine and incremental digest."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

from crc_ccitt import crc
from crc_ccitt.constants import CHECK_INPUT
from crc_ccitt.crc import reflect8, reflect16
from crc_ccitt.types import U16, Flag


class Algorithm(BaseModel):
    """A CRC-16 variant over the fixed polynomial 0x1021.

    Parameters follow the RevEng catalogue conventions: ``init`` is given in
    MSB-first form, ``check`` is the CRC of ``b"123456789"`` and ``residue``
    is informational only.
    """

    model_config = ConfigDict(frozen=True)

    init: U16
    refin: Flag
    refout: Flag
    xorout: U16
    check: U16
    residue: U16

    def checksum(self, data: bytes | bytearray | memoryview) -> int:
        """Compute the CRC of a complete buffer."""
        return self.finalize(self.update(self.initial_register(), data))

    def initial_register(self) -> int:
        # The register is always LSB-first, so init is reflected regardless of refin.
        return reflect16(self.init)

    def update(self, register: int, data: bytes | bytearray | memoryview) -> int:
        """Fold ``data`` into ``register`` and return the new register."""
        if self.refin:
            for byte in data:
                register = crc.update(register, byte)
        else:
            for byte in data:
                register = crc.update(register, reflect8(byte))
        return register

    def finalize(self, register: int) -> int:
        """Turn a register into the published output value."""
        if not self.refout:
            register = reflect16(register)
        return register ^ self.xorout

    def digest(self) -> Digest:
        return Digest(self)

    def self_test(self) -> bool:
        """Return True if the parameters reproduce their own check value."""
        return self.checksum(CHECK_INPUT) == self.check


@dataclass
class Digest:
    """Running CRC over data fed in arbitrary chunks.

    Call :meth:`update` any number of times, then :meth:`finalize` once.
    """

    algorithm: Algorithm
    value: int = field(init=False)
    finalized: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.value = self.algorithm.initial_register()

    def update(self, data: bytes | bytearray | memoryview) -> None:
        self._check_live()
        self.value = self.algorithm.update(self.value, data)

    def finalize(self) -> int:
        self._check_live()
        self.finalized = True
        return self.algorithm.finalize(self.value)

    def copy(self) -> Digest:
        """Return an independent digest with the same running state."""
        self._check_live()
        clone = Digest(self.algorithm)
        clone.value = self.value
        return clone

    def _check_live(self) -> None:
        if self.finalized:
            raise RuntimeError("Digest already finalized")
