import bcrypt

# Work factor for every digest this service produces.
BCRYPT_ROUNDS = 10

# bcrypt ignores (or rejects, in recent releases) anything past 72 bytes.
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """One-way password hashing with a per-call random salt."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt directly."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        try:
            return bcrypt.checkpw(_encode(password), hashed_password.encode("utf-8"))
        except ValueError:
            # Not a bcrypt digest.
            return False
