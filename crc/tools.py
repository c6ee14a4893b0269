import typing

import numpy as np
import numpy.typing as npt
from numba import njit

from .consts import FRAME_BYTES
from .exceptions import CRC6FrameError, CRC6FrameLengthError


def byte(i: int) -> int:
    return i & 0xff


def as_frame(frame: typing.Iterable[int]) -> npt.NDArray[np.uint8]:
    try:
        data = bytes(list(frame))
    except (TypeError, ValueError) as e:
        raise CRC6FrameError(f"Frame must be a sequence of byte values: {e}") from e

    if len(data) != FRAME_BYTES:
        raise CRC6FrameLengthError(f"Frame must be {FRAME_BYTES} bytes long, got {len(data)}")

    return np.frombuffer(data, dtype=np.uint8)


def as_frames(frames: typing.Iterable[typing.Iterable[int]]) -> npt.NDArray[np.uint8]:
    if isinstance(frames, np.ndarray):
        if frames.dtype != np.uint8:
            if not np.issubdtype(frames.dtype, np.integer):
                raise CRC6FrameError(f"Frames must hold integer byte values, got {frames.dtype}")
            if frames.size and (frames.min() < 0 or frames.max() > 0xff):
                raise CRC6FrameError("Frame byte values must be in range 0..255")
        data = np.ascontiguousarray(frames, dtype=np.uint8)
    else:
        rows = [as_frame(frame) for frame in frames]
        data = np.stack(rows) if rows else np.empty((0, FRAME_BYTES), dtype=np.uint8)

    if data.ndim != 2 or data.shape[1] != FRAME_BYTES:
        raise CRC6FrameLengthError(f"Frames must have shape (N, {FRAME_BYTES}), got {data.shape}")

    return data


@njit
def frame_word(frame: npt.NDArray[np.uint8]) -> int:
    return (np.int64(frame[0]) << 16) | (np.int64(frame[1]) << 8) | np.int64(frame[2])


def word_frame(word: int) -> bytes:
    return bytes([byte(word >> 16), byte(word >> 8), byte(word)])
