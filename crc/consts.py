# CRC-6 used by the AD4134 serial output: poly = 1100111, seed = 100101
CRC6_POLYNOMIAL = 0x67  # x^6 + x^5 + x^2 + x + 1
CRC6_SEED = 0x25
CRC6_WIDTH = 6
CRC6_TOP_BIT = 1 << (CRC6_WIDTH - 1)
CRC6_MASK = (1 << CRC6_WIDTH) - 1

CRC6_TABLE_SIZE = 256

FRAME_BYTES = 3
FRAME_BITS = FRAME_BYTES * 8
FRAME_DATA_BITS = FRAME_BITS - CRC6_WIDTH
FRAME_DATA_MAX = (1 << FRAME_DATA_BITS) - 1

# Bit-serial register: six output bits plus the c6 carry, seed re-expressed as c[0..6]
DIRECT_STATE_BITS = 7
DIRECT_SEED_STATE = (True, False, True, False, False, True, False)
DIRECT_GROUP_BITS = 6
DIRECT_STEPS = FRAME_BITS // DIRECT_GROUP_BITS
