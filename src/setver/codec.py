"""
The integralternative of a SetVer version: every brace of the text is one bit,
"{" being 0 and "}" being 1, with the first brace as the most significant bit.
"""
from __future__ import annotations

from setver.objects.version import SetVersion, format_version


# the width of the integralternative, i.e., a 128-bit unsigned integer
INTEGRALTERNATIVE_BYTES = 16

BRACE_BITS = {
    '{': 0,
    '}': 1,
}


class IntegralternativeOverflowError(OverflowError):
    def __init__(self, n_bytes: int, width: int):
        self.n_bytes: int = n_bytes
        self.width: int = width
        super().__init__(
            f"The encoding takes {n_bytes} bytes, "
            f"which does not fit into a {width * 8}-bit integer."
        )


def string_to_bytes(text: str) -> bytes:
    """
    Pack the braces of a text into bytes, the most significant byte first

    The text is not required to be a valid version, any string of braces is accepted.

    :param text: the brace string
    :return: the packed bytes, one byte per 8 braces (rounded up)
    """
    encoded = []
    byte = 0
    n_bits = 0
    # the last brace is the least significant bit
    for char in reversed(text):
        if char not in BRACE_BITS:
            raise ValueError(f"Cannot encode the non-brace character '{char}'.")
        byte |= BRACE_BITS[char] << n_bits
        n_bits += 1
        if n_bits == 8:
            encoded.append(byte)
            byte = 0
            n_bits = 0
    if n_bits > 0:
        encoded.append(byte)
    encoded.reverse()
    return bytes(encoded)


def bytes_to_integer(data: bytes, width: int = INTEGRALTERNATIVE_BYTES) -> int:
    if len(data) > width:
        raise IntegralternativeOverflowError(len(data), width)
    value = 0
    for byte in data:
        value = (value << 8) | byte
    return value


def text_to_byte_encoding(text: str) -> bytes:
    return string_to_bytes(text)


def text_to_integer_encoding(text: str, width: int = INTEGRALTERNATIVE_BYTES) -> int:
    return bytes_to_integer(string_to_bytes(text), width)


def to_byte_encoding(version: SetVersion) -> bytes:
    return string_to_bytes(format_version(version))


def to_integer_encoding(version: SetVersion, width: int = INTEGRALTERNATIVE_BYTES) -> int:
    return bytes_to_integer(to_byte_encoding(version), width)
