import argparse
import sys
import time

from crc import build_table
from crosscheck import run_crosscheck


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Cross-check table-driven and bit-serial CRC-6 (AD4134)")
    parser.add_argument("-n", "--samples", type=int, default=100_000, help="number of random frames")
    parser.add_argument("-s", "--seed", type=int, default=42, help="random generator seed")
    parser.add_argument("-x", "--exhaustive", action="store_true", help="also compare every 24-bit frame")
    args = parser.parse_args(argv)

    table = build_table()

    ts1 = time.monotonic()
    report = run_crosscheck(table, args.samples, args.seed, args.exhaustive)
    ts2 = time.monotonic()

    print(f"Passed: {report.passed}")
    print(f"Failed: {report.failed}")

    for frame in report.mismatches:
        print("Mismatch:", frame.hex().upper())

    print("-" * 20, "checked @", ts2 - ts1, "sec")

    return 0 if report.ok else 1


if __name__ == '__main__':
    sys.exit(main())
