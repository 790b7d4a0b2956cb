import hmac
from typing import Optional, Union

import structlog
from argon2.low_level import ARGON2_VERSION

from encoding.crypt64 import encode
from .errors import Argon2idError, InvalidComplexityError, MismatchedHashAndPasswordError
from .keys import (DEFAULT_KEY_LEN, DEFAULT_MEMORY, DEFAULT_THREADS, DEFAULT_TIME,
                   RandomSource, derive, generate_salt)
from .record import MAX_UINT32, check_complexity, format_hash, is_valid, parse

logger = structlog.get_logger(__name__)

Password = Union[str, bytes]


def is_hashed_password(hashed_password) -> bool:
    """True if ``hashed_password`` looks like a record produced by hash_password."""
    return is_valid(hashed_password)


def default_hash_password(password: Password, rand: Optional[RandomSource] = None) -> str:
    return hash_password(password, 0, 0, 0, 0, rand=rand)


def hash_password(password: Password, time: int = 0, memory: int = 0, threads: int = 0,
                  key_len: int = 0, rand: Optional[RandomSource] = None) -> str:
    """Hash ``password`` into a self-describing record.

    Any cost value left at 0 falls back to the library default
    (time=1, memory=64 MiB, threads=4, key_len=32). The salt is read from
    ``rand``, which defaults to ``os.urandom``. Costs outside argon2's
    native ranges raise InvalidComplexityError before any salt is read.
    """
    time = time or DEFAULT_TIME
    memory = memory or DEFAULT_MEMORY
    threads = threads or DEFAULT_THREADS
    key_len = key_len or DEFAULT_KEY_LEN

    check_complexity(time, memory, threads)
    if not 1 <= key_len <= MAX_UINT32:
        raise InvalidComplexityError()

    salt = generate_salt(rand)
    key = derive(password, salt, time, memory, threads, key_len)
    logger.debug("password_hashed", time=time, memory=memory, threads=threads, key_len=key_len)
    return format_hash(ARGON2_VERSION, time, memory, threads, encode(salt), encode(key))


def compare(hashed_password: str, password: Password) -> None:
    """Check ``password`` against ``hashed_password``.

    Returns None on a match. Raises MismatchedHashAndPasswordError when the
    password is wrong, and lets every parse error (InvalidHashError,
    DecodeError, InvalidArgon2VersionError, InvalidComplexityError) through
    unchanged.
    """
    try:
        h = parse(hashed_password)
    except (Argon2idError, ValueError) as exc:
        logger.debug("password_compare_rejected", error_type=type(exc).__name__)
        raise

    candidate = derive(password, h.salt, h.time, h.memory, h.threads, h.key_len)
    if hmac.compare_digest(h.hash, candidate):
        return None

    logger.debug("password_compare_rejected", error_type=MismatchedHashAndPasswordError.__name__)
    raise MismatchedHashAndPasswordError()


def verify_password(hashed_password: str, password: Password) -> bool:
    try:
        compare(hashed_password, password)
    except MismatchedHashAndPasswordError:
        return False
    return True
