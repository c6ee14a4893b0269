from .crc import add_crc, check_crc, compute_crc, extract_crc, extract_data
from .direct import crc6_direct, verify_direct, verify_direct_many
from .table import build_table, crc6_table, verify_table, verify_table_many

__all__ = [
    "build_table",
    "verify_table",
    "verify_table_many",
    "crc6_table",
    "verify_direct",
    "verify_direct_many",
    "crc6_direct",
    "compute_crc",
    "add_crc",
    "extract_crc",
    "extract_data",
    "check_crc"
]
