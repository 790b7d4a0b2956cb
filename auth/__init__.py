"""Auth package: handles argon2id password hashing and verification."""
from .errors import (Argon2idError, InvalidArgon2VersionError, InvalidComplexityError,
                     InvalidHashError, MismatchedHashAndPasswordError, RandomnessError)
from .record import HashParameters, format_hash, parse
from .login import (compare, default_hash_password, hash_password, is_hashed_password,
                    verify_password)
