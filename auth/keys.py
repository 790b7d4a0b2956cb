from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw
from os import urandom
from typing import Callable, Optional, Union

import structlog

from .errors import RandomnessError

logger = structlog.get_logger(__name__)

# 16 bytes is the recommended salt size for password hashing (RFC 9106, section 3.1)
SALT_LEN = 16

# t=1 is the recommended choice for the argon2id variant when memory dominates (RFC 9106, section 4)
DEFAULT_TIME = 1
DEFAULT_MEMORY = 64 * 1024  # KiB, 64 MiB
DEFAULT_THREADS = 4
DEFAULT_KEY_LEN = 32

RandomSource = Callable[[int], bytes]


def _as_bytes(password: Union[str, bytes]) -> bytes:
    return password.encode("utf-8") if isinstance(password, str) else password


def derive(password: Union[str, bytes], salt: bytes, time: int, memory: int,
           threads: int, key_len: int) -> bytes:
    """Run argon2id with this library's pinned version and return the raw key."""
    return hash_secret_raw(_as_bytes(password), salt, time_cost=time, memory_cost=memory,
                           parallelism=threads, hash_len=key_len, type=Type.ID,
                           version=ARGON2_VERSION)


def generate_salt(rand: Optional[RandomSource] = None) -> bytes:
    """Read SALT_LEN bytes from ``rand`` (``os.urandom`` when omitted).

    A source that raises ``OSError`` or hands back a short read is reported
    as RandomnessError; nothing is retried.
    """
    read = rand or urandom
    try:
        salt = read(SALT_LEN)
    except OSError as exc:
        logger.debug("salt_generation_failed", error_type=type(exc).__name__)
        raise RandomnessError(f"argon2id: could not read salt: {exc}") from exc
    if len(salt) != SALT_LEN:
        logger.debug("salt_generation_failed", error_type="short_read", got=len(salt))
        raise RandomnessError("unexpected EOF")
    return bytes(salt)
