import typing

import numpy as np
from numba import njit
from numpy import typing as npt

from .consts import CRC6_WIDTH, DIRECT_GROUP_BITS, DIRECT_SEED_STATE, DIRECT_STATE_BITS, DIRECT_STEPS, FRAME_BITS
from .tools import as_frame, as_frames, frame_word


@njit
def direct_state(frame: npt.NDArray[np.uint8]) -> npt.NDArray[np.bool_]:
    c = np.zeros(DIRECT_STATE_BITS, dtype=np.bool_)
    for i in range(DIRECT_STATE_BITS):
        c[i] = DIRECT_SEED_STATE[i]

    d = np.zeros(DIRECT_GROUP_BITS, dtype=np.bool_)
    word = frame_word(frame)

    for step in range(DIRECT_STEPS):
        # Group 0 holds bits 23..18, d[0] is the group's top bit
        group = (word >> (FRAME_BITS - DIRECT_GROUP_BITS * (step + 1))) & 0x3f
        for k in range(DIRECT_GROUP_BITS):
            d[k] = ((group >> (DIRECT_GROUP_BITS - 1 - k)) & 1) == 1

        ch = c.copy()

        c[6] = ch[5]
        c[5] = ch[0] ^ ch[1] ^ ch[2] ^ ch[5] ^ d[0] ^ d[3] ^ d[4] ^ d[5]
        c[4] = ch[2] ^ ch[4] ^ ch[5] ^ d[0] ^ d[1] ^ d[3]
        c[3] = ch[1] ^ ch[3] ^ ch[4] ^ d[1] ^ d[2] ^ d[4]
        c[2] = ch[0] ^ ch[2] ^ ch[3] ^ ch[5] ^ d[0] ^ d[2] ^ d[3] ^ d[5]
        c[1] = ch[0] ^ ch[4] ^ d[1] ^ d[5]
        c[0] = ch[0] ^ ch[1] ^ ch[2] ^ ch[3] ^ d[2] ^ d[3] ^ d[4] ^ d[5]

    return c


@njit
def direct_residual(frame: npt.NDArray[np.uint8]) -> int:
    c = direct_state(frame)

    # c[6] is carry state, not part of the remainder
    residual = 0
    for i in range(CRC6_WIDTH):
        if c[i]:
            residual |= 1 << i
    return residual


@njit
def _verify_rows(frames: npt.NDArray[np.uint8]) -> npt.NDArray[np.bool_]:
    result = np.zeros(frames.shape[0], dtype=np.bool_)
    for i in range(frames.shape[0]):
        result[i] = direct_residual(frames[i]) == 0
    return result


def crc6_direct(frame: typing.Iterable[int]) -> int:
    return direct_residual(as_frame(frame))


def verify_direct(frame: typing.Iterable[int]) -> bool:
    """
    Check a frame by running the shift register six input bits per step,
    without a lookup table. Agrees with verify_table on every frame.
    """
    return crc6_direct(frame) == 0


def verify_direct_many(frames) -> npt.NDArray[np.bool_]:
    return _verify_rows(as_frames(frames))
