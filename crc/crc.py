import typing

from .consts import CRC6_MASK, CRC6_POLYNOMIAL, CRC6_SEED, CRC6_TOP_BIT, CRC6_WIDTH, FRAME_DATA_BITS, FRAME_DATA_MAX
from .exceptions import CRC6DataRangeError
from .tools import as_frame, frame_word, word_frame


def compute_crc(data: int, num_bits: int = FRAME_DATA_BITS) -> int:
    remainder = CRC6_SEED

    for idx_bit in reversed(range(num_bits)):
        bit = (data >> idx_bit) & 1

        if bool(remainder & CRC6_TOP_BIT) != bool(bit):
            remainder = (remainder << 1) ^ CRC6_POLYNOMIAL
        else:
            remainder = remainder << 1

        remainder &= CRC6_MASK

    return remainder


def extract_crc(frame: typing.Iterable[int]) -> int:
    return frame_word(as_frame(frame)) & CRC6_MASK


def extract_data(frame: typing.Iterable[int]) -> int:
    return frame_word(as_frame(frame)) >> CRC6_WIDTH


def add_crc(data: int) -> bytes:
    """Pack 18 data bits and their CRC-6 into a 3-byte frame."""
    if not 0 <= data <= FRAME_DATA_MAX:
        raise CRC6DataRangeError(f"Data must fit {FRAME_DATA_BITS} bits, got 0x{data:x}")

    return word_frame((data << CRC6_WIDTH) | compute_crc(data))


def check_crc(frame: typing.Iterable[int]) -> bool:
    return compute_crc(extract_data(frame)) == extract_crc(frame)
