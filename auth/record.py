"""Textual record layout for argon2id hashes.

A record looks like ``$argon2id19$1,65536,4$<salt>$<hash>`` where salt and
hash are crypt64 text. The digit counts in the grammar only bound its size;
the numeric limits are enforced separately by :func:`parse`.
"""
import re
from dataclasses import dataclass

from argon2.low_level import ARGON2_VERSION

from encoding.crypt64 import decode
from .errors import InvalidArgon2VersionError, InvalidComplexityError, InvalidHashError

MAX_UINT32 = 2**32 - 1
MAX_UINT8 = 2**8 - 1

_RX = re.compile(
    r"\$argon2id([0-9]{1,4})\$([0-9]{1,10}),([0-9]{1,10}),([0-9]{1,3})"
    r"\$([./a-zA-Z0-9]+)\$([./a-zA-Z0-9]+)"
)


@dataclass
class HashParameters:
    version: int
    time: int
    memory: int
    threads: int
    salt: bytes
    hash: bytes

    @property
    def key_len(self) -> int:
        return len(self.hash)


def format_hash(version: int, time: int, memory: int, threads: int, salt: str, hash: str) -> str:
    """Build a record from already-encoded salt and hash text."""
    return f"$argon2id{version}${time},{memory},{threads}${salt}${hash}"


def is_valid(text) -> bool:
    """True if ``text`` has the record shape. Values are not range-checked."""
    return isinstance(text, str) and _RX.fullmatch(text) is not None


def check_complexity(time: int, memory: int, threads: int) -> None:
    """Raise InvalidComplexityError unless the costs fit argon2's native widths."""
    # memory has no lower bound; zero only gets a default on the hashing side
    if not (1 <= time <= MAX_UINT32 and 0 <= memory <= MAX_UINT32 and 1 <= threads <= MAX_UINT8):
        raise InvalidComplexityError()


def parse(text: str) -> HashParameters:
    m = _RX.fullmatch(text) if isinstance(text, str) else None
    if m is None:
        raise InvalidHashError()

    # the grammar guarantees plain ascii digits, int() cannot fail here
    version, time, memory, threads = (int(g) for g in m.group(1, 2, 3, 4))
    salt = decode(m.group(5))
    hash_ = decode(m.group(6))

    if version != ARGON2_VERSION:
        raise InvalidArgon2VersionError(version)

    check_complexity(time, memory, threads)

    return HashParameters(version=version, time=time, memory=memory,
                          threads=threads, salt=salt, hash=hash_)
