"""
argon2id command-line tool

Prompts for a password and prints its argon2id hash, or, with ``-c``,
checks the password against an existing hash.

Exit status: 0 on success, 1 on any error, 2 when the password does not
match the given hash.
"""
import argparse
import getpass
import sys
from typing import Callable, Optional, TextIO

import structlog
from argon2.exceptions import HashingError

from auth import Argon2idError, MismatchedHashAndPasswordError, compare, hash_password
from auth.config import Settings, load_settings
from auth.log import configure_logging
from auth.record import MAX_UINT32, MAX_UINT8
from encoding import DecodeError

logger = structlog.get_logger(__name__)

PROG = "argon2id"
PROMPT = "Password:"

EXIT_STATUS_NORMAL = 0
EXIT_STATUS_ERROR = 1
EXIT_STATUS_MISMATCH_HASH_AND_PASSWORD = 2


class UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    # keep argparse from exiting or writing to the real sys.stderr
    def error(self, message):
        raise UsageError(message)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = _Parser(prog=PROG, add_help=False, allow_abbrev=False)
    ap.add_argument("-c", dest="compare", default="", metavar="HASHED_PASSWORD",
                    help="a hashed password to compare the password to")
    ap.add_argument("-q", dest="quiet", action="store_true",
                    help=f"do not print the {PROMPT} text")
    ap.add_argument("-n", dest="omit_newline", action="store_true",
                    help="do not print a trailing newline character")
    ap.add_argument("-time", type=int, default=settings.time,
                    help="time complexity when generating hash")
    ap.add_argument("-memory", type=int, default=settings.memory,
                    help="memory complexity when generating hash")
    ap.add_argument("-threads", type=int, default=settings.threads,
                    help="number of threads to use when generating hash")
    ap.add_argument("-keylen", type=int, default=settings.key_len,
                    help="keyLen when generating hash")
    ap.add_argument("-h", dest="help", action="store_true", help="show help information")
    return ap


def _usage(ap: argparse.ArgumentParser, stderr: TextIO) -> None:
    stderr.write(f"usage of {PROG}...\n")
    stderr.write(f"         {PROG} # prompt for password, output a hash of the password\n")
    stderr.write(f"         {PROG} -c <hashed-password> [-n] [-time <time-complexity>] "
                 "[-memory <memory-complexity>] [-threads <num-threads>] [-keylen <key-length>] "
                 "# compare the password (via prompt) to the hashed-password\n")
    stderr.write(ap.format_help())


def _check_costs(args) -> Optional[str]:
    for name, limit in (("time", MAX_UINT32), ("memory", MAX_UINT32),
                        ("threads", MAX_UINT8), ("keylen", MAX_UINT32)):
        value = getattr(args, name)
        if not 0 <= value <= limit:
            return f"-{name} must be between 0 and {limit}"
    return None


def read_password(stdin: Optional[TextIO] = None) -> str:
    """Read a password without echo on a terminal, or one line from piped stdin."""
    stdin = stdin or sys.stdin
    if stdin.isatty():
        return getpass.getpass(prompt="")
    return stdin.readline().rstrip("\r\n")


def run_command(argv, stdout: TextIO, stderr: TextIO,
                read_password: Callable[[], str] = read_password,
                settings: Optional[Settings] = None) -> int:
    settings = settings or Settings()
    ap = _build_parser(settings)
    try:
        args = ap.parse_args(argv)
    except UsageError as exc:
        stderr.write(f"{exc}\n")
        _usage(ap, stderr)
        return EXIT_STATUS_ERROR

    if args.help:
        _usage(ap, stderr)
        return EXIT_STATUS_ERROR

    problem = _check_costs(args)
    if problem:
        stderr.write(f"{problem}\n")
        return EXIT_STATUS_ERROR

    if not args.quiet:
        stdout.write(PROMPT)
        stdout.flush()

    try:
        password = read_password()
    except (OSError, EOFError) as exc:
        stderr.write(f"could not read password: {exc}\n")
        return EXIT_STATUS_ERROR

    if not password:
        stderr.write("a password is required\n")
        return EXIT_STATUS_ERROR

    if not args.quiet:
        stdout.write("\n")

    if args.compare:
        try:
            compare(args.compare, password)
        except MismatchedHashAndPasswordError as exc:
            stderr.write(f"{exc}\n")
            return EXIT_STATUS_MISMATCH_HASH_AND_PASSWORD
        except (Argon2idError, DecodeError, HashingError) as exc:
            stderr.write(f"{exc}\n")
            return EXIT_STATUS_ERROR

        stdout.write("OK - password matches hashed password\n")
        return EXIT_STATUS_NORMAL

    try:
        hashed = hash_password(password, args.time, args.memory, args.threads, args.keylen)
    except (Argon2idError, HashingError) as exc:
        logger.debug("hash_failed", error_type=type(exc).__name__)
        stderr.write(f"could not hash password: {exc}")
        return EXIT_STATUS_ERROR

    stdout.write(hashed)
    if not args.omit_newline:
        stdout.write("\n")
    return EXIT_STATUS_NORMAL


def main(argv=None) -> int:
    settings = load_settings()
    configure_logging(settings.log_level, settings.log_json)
    return run_command(sys.argv[1:] if argv is None else argv, sys.stdout, sys.stderr,
                       settings=settings)


if __name__ == "__main__":
    raise SystemExit(main())
