"""Environment driven settings for the argon2id command-line tool.

Values come from the process environment, optionally seeded from a ``.env``
file. The hashing functions themselves never read configuration; callers
pass cost values explicitly.
"""
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _int_env(name: str, default: int = 0) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_json: bool = False
    time: int = 0
    memory: int = 0
    threads: int = 0
    key_len: int = 0


def load_settings(dotenv: bool = True) -> Settings:
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        log_level=os.getenv("ARGON2ID_LOG_LEVEL", "WARNING").upper(),
        log_json=os.getenv("ARGON2ID_LOG_JSON", "").strip().lower() in _TRUTHY,
        time=_int_env("ARGON2ID_TIME"),
        memory=_int_env("ARGON2ID_MEMORY"),
        threads=_int_env("ARGON2ID_THREADS"),
        key_len=_int_env("ARGON2ID_KEYLEN"),
    )
