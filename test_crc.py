import numpy as np
import pytest

from crc import add_crc, build_table, check_crc, compute_crc, extract_crc, extract_data, verify_direct, verify_table
from crosscheck import KNOWN_BAD, KNOWN_GOOD
from crc.exceptions import CRC6DataRangeError


@pytest.mark.parametrize("frame", KNOWN_GOOD)
def test_compute_matches_known_good(frame):
    assert compute_crc(extract_data(frame)) == extract_crc(frame)
    assert check_crc(frame)
    assert add_crc(extract_data(frame)) == frame


@pytest.mark.parametrize("frame", KNOWN_BAD)
def test_check_rejects_known_bad(frame):
    assert not check_crc(frame)


def test_extract():
    frame = bytes([0xFD, 0x42, 0xD9])

    assert extract_crc(frame) == 0x19
    assert extract_data(frame) == 0xFD42D9 >> 6


def test_added_crc_verifies():
    table = build_table()
    rng = np.random.default_rng(7)

    for data in rng.integers(0, 1 << 18, size=2000):
        frame = add_crc(int(data))
        assert len(frame) == 3
        assert verify_table(frame, table)
        assert verify_direct(frame)


def test_data_range():
    add_crc(0)
    add_crc((1 << 18) - 1)

    with pytest.raises(CRC6DataRangeError):
        add_crc(1 << 18)
    with pytest.raises(CRC6DataRangeError):
        add_crc(-1)
