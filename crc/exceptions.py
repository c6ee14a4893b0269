class CRC6Exception(Exception):
    pass


class CRC6FrameError(CRC6Exception):
    pass


class CRC6FrameLengthError(CRC6FrameError):
    pass


class CRC6DataRangeError(CRC6Exception):
    pass
