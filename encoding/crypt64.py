import base64

# unix crypt(3) radix-64 alphabet, not the RFC 4648 one
ALPHABET = "./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
_STD = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# membership set for decode
_ALPH_SET = frozenset(ALPHABET)

_TO_CRYPT = str.maketrans(_STD, ALPHABET)
_TO_STD = str.maketrans(ALPHABET, _STD)


class DecodeError(ValueError):
    """Raised when text is not valid crypt64; ``position`` is the offending offset."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"illegal crypt64 data at input byte {position}")


def encode(data: bytes) -> str:
    """Encode bytes with the crypt alphabet. Padding is never emitted."""
    return base64.b64encode(data).decode("ascii").rstrip("=").translate(_TO_CRYPT)


def decode(text: str) -> bytes:
    for pos, ch in enumerate(text):
        if ch not in _ALPH_SET:
            raise DecodeError(pos)
    # a lone trailing character carries only 6 bits, never a whole byte
    if len(text) % 4 == 1:
        raise DecodeError(len(text) - 1)
    padded = text.translate(_TO_STD) + "=" * (-len(text) % 4)
    return base64.b64decode(padded)
