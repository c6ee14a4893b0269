import typing
from dataclasses import dataclass, field

import numpy as np
import numpy.typing as npt
from numba import njit

from crc.consts import FRAME_BITS, FRAME_BYTES
from crc.direct import direct_residual, verify_direct_many
from crc.table import table_residual, verify_table_many
from crc.tools import as_frames, word_frame

MAX_RECORDED_MISMATCHES = 16

KNOWN_GOOD = (
    bytes([0b11111101, 0b01000010, 0b11011001]),
    bytes([0b11111101, 0b01101111, 0b11011100]),
    bytes([0b11111111, 0b11111101, 0b11011010]),
    bytes([0b11111101, 0b01011101, 0b11000000]),
    bytes([0b11111101, 0b10000110, 0b11100000]),
)

KNOWN_BAD = (
    bytes([0b11111101, 0b01000000, 0b11011001]),
    bytes([0b11111101, 0b01101101, 0b11011100]),
    bytes([0b11111111, 0b11111111, 0b11011010]),
    bytes([0b11111001, 0b01011101, 0b11000000]),
    bytes([0b11111101, 0b10000110, 0b11100010]),
)


@dataclass
class CrossCheckReport:
    passed: int = 0
    failed: int = 0
    mismatches: typing.List[bytes] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def record(self, good: bool, frame: bytes):
        if good:
            self.passed += 1
            return

        self.failed += 1
        if len(self.mismatches) < MAX_RECORDED_MISMATCHES:
            self.mismatches.append(bytes(frame))

    def merge(self, other: "CrossCheckReport") -> "CrossCheckReport":
        self.passed += other.passed
        self.failed += other.failed
        room = MAX_RECORDED_MISMATCHES - len(self.mismatches)
        self.mismatches.extend(other.mismatches[:max(room, 0)])
        return self


@njit
def _find_disagreements(table: npt.NDArray[np.uint8], start: int, stop: int) -> npt.NDArray[np.int64]:
    frame = np.zeros(FRAME_BYTES, dtype=np.uint8)
    found = np.zeros(MAX_RECORDED_MISMATCHES + 1, dtype=np.int64)
    count = 0

    for word in range(start, stop):
        frame[0] = (word >> 16) & 0xff
        frame[1] = (word >> 8) & 0xff
        frame[2] = word & 0xff

        if (table_residual(frame, table) == 0) != (direct_residual(frame) == 0):
            if count < MAX_RECORDED_MISMATCHES:
                found[count + 1] = word
            count += 1

    # slot 0 carries the total count
    found[0] = count
    return found


def check_known_vectors(table: npt.NDArray[np.uint8], frames: typing.Iterable[bytes],
                        expected: bool) -> CrossCheckReport:
    report = CrossCheckReport()
    data = as_frames(frames)

    for frame, direct, tabled in zip(data, verify_direct_many(data), verify_table_many(data, table)):
        report.record(bool(direct) == expected, frame.tobytes())
        report.record(bool(tabled) == expected, frame.tobytes())

    return report


def check_random(table: npt.NDArray[np.uint8], count: int = 100_000, seed: int = 42) -> CrossCheckReport:
    rng = np.random.default_rng(seed)
    data = rng.integers(0, 256, size=(count, FRAME_BYTES), dtype=np.uint8)

    report = CrossCheckReport()
    agree = verify_direct_many(data) == verify_table_many(data, table)
    report.passed = int(np.count_nonzero(agree))
    report.failed = count - report.passed
    report.mismatches = [row.tobytes() for row in data[~agree][:MAX_RECORDED_MISMATCHES]]

    return report


def check_exhaustive(table: npt.NDArray[np.uint8], start: int = 0, stop: int = 1 << FRAME_BITS) -> CrossCheckReport:
    found = _find_disagreements(table, start, stop)
    failed = int(found[0])

    return CrossCheckReport(
        passed=(stop - start) - failed,
        failed=failed,
        mismatches=[word_frame(int(word)) for word in found[1:1 + min(failed, MAX_RECORDED_MISMATCHES)]]
    )


def flip_bit(frame: bytes, bit: int) -> bytes:
    """Flip bit `bit` of a frame, bit 0 being the LSB of the last byte."""
    flipped = bytearray(frame)
    flipped[FRAME_BYTES - 1 - bit // 8] ^= 1 << (bit % 8)
    return bytes(flipped)


def check_single_bit_flips(table: npt.NDArray[np.uint8],
                           frames: typing.Iterable[bytes]) -> CrossCheckReport:
    flipped = [flip_bit(frame, bit) for frame in frames for bit in range(FRAME_BITS)]
    return check_known_vectors(table, flipped, expected=False)


def run_crosscheck(table: npt.NDArray[np.uint8], count: int = 100_000, seed: int = 42,
                   exhaustive: bool = False) -> CrossCheckReport:
    report = CrossCheckReport()

    report.merge(check_known_vectors(table, KNOWN_GOOD, expected=True))
    report.merge(check_known_vectors(table, KNOWN_BAD, expected=False))
    report.merge(check_random(table, count, seed))

    if exhaustive:
        report.merge(check_exhaustive(table))

    return report
