import os

SERIAL_NUMBER_BYTES = 9


def to_positive_hex(hex_string: str) -> str:
    # RFC 5280 4.1.2.2: serial numbers must be positive, a set top bit
    # would read as negative.
    leading = int(hex_string[0], 16)
    if leading < 8:
        return hex_string
    return f"{leading - 8:x}{hex_string[1:]}"


def random_serial_hex(size=SERIAL_NUMBER_BYTES) -> str:
    return to_positive_hex(os.urandom(size).hex())
