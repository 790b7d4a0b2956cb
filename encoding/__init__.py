"""Encoding package: crypt alphabet radix-64 codec used by hash records."""
from .crypt64 import ALPHABET, DecodeError, decode, encode
