import typing

import numpy as np
from numba import njit
from numpy import typing as npt

from .consts import CRC6_POLYNOMIAL, CRC6_SEED, CRC6_MASK, CRC6_TABLE_SIZE, FRAME_BYTES
from .tools import as_frame, as_frames


@njit
def _build_table(polynomial: int) -> npt.NDArray[np.uint8]:
    table = np.zeros(CRC6_TABLE_SIZE, dtype=np.uint8)
    for i in range(CRC6_TABLE_SIZE):
        val = i
        for _ in range(8):
            if val & 0x80:
                val = ((val << 1) ^ (polynomial << 2)) & 0xffff
            else:
                val = (val << 1) & 0xffff
        # 6-bit remainder sits in bits [7:2] of the byte lane
        table[i] = (val >> 2) & CRC6_MASK
    return table


@njit
def table_residual(frame: npt.NDArray[np.uint8], table: npt.NDArray[np.uint8]) -> int:
    crc = CRC6_SEED
    for i in range(FRAME_BYTES):
        crc = np.int64(table[((crc << 2) ^ frame[i]) & 0xff])
    return crc


def build_table() -> npt.NDArray[np.uint8]:
    """
    Build the 256-entry CRC-6 lookup table for polynomial 0x67.

    Each call returns a new read-only array; build it once and hand it to
    every caller of verify_table.
    """
    table = _build_table(CRC6_POLYNOMIAL)
    table.flags.writeable = False
    return table


def crc6_table(frame: typing.Iterable[int], table: npt.NDArray[np.uint8]) -> int:
    return table_residual(as_frame(frame), table)


def verify_table(frame: typing.Iterable[int], table: npt.NDArray[np.uint8]) -> bool:
    return crc6_table(frame, table) == 0


def verify_table_many(frames, table: npt.NDArray[np.uint8]) -> npt.NDArray[np.bool_]:
    data = as_frames(frames)

    crc = np.full(len(data), CRC6_SEED, dtype=np.uint8)
    for i in range(FRAME_BYTES):
        crc = table[((crc.astype(np.uint16) << 2) ^ data[:, i]) & 0xff]

    return crc == 0
