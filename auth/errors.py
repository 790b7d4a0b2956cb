from argon2.low_level import ARGON2_VERSION


class Argon2idError(Exception):
    """Base class for every error raised by the auth package."""


class InvalidHashError(Argon2idError):
    def __init__(self):
        super().__init__("argon2id: the hashed password is not a valid hash")


class InvalidComplexityError(Argon2idError):
    """A time, memory or threads value in a record is out of range."""

    def __init__(self):
        super().__init__("argon2id: the hashed password has invalid complexity values")


class InvalidArgon2VersionError(Argon2idError):
    def __init__(self, version: int):
        self.version = version
        super().__init__(f"argon2id: argon2 version is not {ARGON2_VERSION}")


class MismatchedHashAndPasswordError(Argon2idError):
    def __init__(self):
        super().__init__("argon2id: hashed password is not the hash of the given password")


class RandomnessError(Argon2idError):
    """The randomness source could not supply a full salt."""
