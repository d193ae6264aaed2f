"""bcrypt password hashing and comparison."""

import bcrypt

__all__ = [
    "DEFAULT_ROUNDS",
    "MAX_PASSWORD_BYTES",
    "check_password",
    "hash_password",
]

DEFAULT_ROUNDS = 12
"""bcrypt cost factor used for newly generated hashes."""

MAX_PASSWORD_BYTES = 72
"""bcrypt only uses this many bytes of the encoded password."""


def hash_password(password: str, *, rounds: int = DEFAULT_ROUNDS) -> bytes:
    """Hash a password with a freshly generated bcrypt salt.

    Parameters
    ----------
    password
        The plaintext password.
    rounds
        bcrypt cost factor (log2 of the number of iterations).

    Returns
    -------
    bytes
        The self-describing bcrypt token, such as ``$2b$12$...``.
    """
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds))


def check_password(password: str, password_hash: bytes) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Only the first `MAX_PASSWORD_BYTES` bytes of the password are compared,
    as bcrypt has always done.  A hash that bcrypt cannot parse is treated
    as a mismatch.
    """
    try:
        return bcrypt.checkpw(
            password.encode()[:MAX_PASSWORD_BYTES], password_hash
        )
    except ValueError:
        return False
