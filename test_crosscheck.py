import numpy as np
import pytest

from crc import add_crc, build_table
from crosscheck import (KNOWN_BAD, KNOWN_GOOD, MAX_RECORDED_MISMATCHES, CrossCheckReport, check_exhaustive,
                        check_known_vectors, check_random, check_single_bit_flips, flip_bit, run_crosscheck)
from demo_crosscheck import main


@pytest.fixture(scope="module")
def table():
    return build_table()


def test_known_good(table):
    report = check_known_vectors(table, KNOWN_GOOD, expected=True)

    assert report.passed == 10
    assert report.failed == 0


def test_known_bad(table):
    report = check_known_vectors(table, KNOWN_BAD, expected=False)

    assert report.passed == 10
    assert report.ok


def test_wrong_expectation_is_reported(table):
    report = check_known_vectors(table, KNOWN_BAD, expected=True)

    assert report.passed == 0
    assert report.failed == 10
    assert report.mismatches[0] == KNOWN_BAD[0]


def test_random(table):
    report = check_random(table, count=100_000, seed=42)

    assert report.passed == 100_000
    assert report.failed == 0
    assert report.mismatches == []


def test_exhaustive(table):
    report = check_exhaustive(table)

    assert report.passed == 1 << 24
    assert report.failed == 0


def test_flip_bit():
    assert flip_bit(b"\x00\x00\x00", 0) == b"\x00\x00\x01"
    assert flip_bit(b"\x00\x00\x00", 23) == b"\x80\x00\x00"
    assert flip_bit(b"\xff\x00\x00", 16) == b"\xfe\x00\x00"


def test_single_bit_flips_known_good(table):
    report = check_single_bit_flips(table, KNOWN_GOOD)

    assert report.passed == len(KNOWN_GOOD) * 24 * 2
    assert report.ok


def test_single_bit_flips_random_valid(table):
    rng = np.random.default_rng(2023)
    frames = [add_crc(int(data)) for data in rng.integers(0, 1 << 18, size=500)]

    report = check_single_bit_flips(table, frames)

    assert report.failed == 0


def test_report_merge():
    first = CrossCheckReport(passed=2, failed=1, mismatches=[b"\x00\x00\x01"])
    second = CrossCheckReport(passed=3, failed=MAX_RECORDED_MISMATCHES,
                              mismatches=[b"\x00\x00\x02"] * MAX_RECORDED_MISMATCHES)

    first.merge(second)

    assert first.passed == 5
    assert first.failed == MAX_RECORDED_MISMATCHES + 1
    assert len(first.mismatches) == MAX_RECORDED_MISMATCHES
    assert not first.ok


def test_run_crosscheck(table):
    report = run_crosscheck(table, count=1000, seed=42)

    assert report.passed == 20 + 1000
    assert report.failed == 0


def test_main(capsys):
    assert main(["--samples", "1000"]) == 0

    out = capsys.readouterr().out
    assert "Passed: 1020" in out
    assert "Failed: 0" in out
