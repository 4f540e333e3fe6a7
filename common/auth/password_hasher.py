"""
bcrypt password hashing.

Passwords are pre-hashed with SHA-256 before bcrypt. bcrypt only reads the
first 72 bytes of its input, so without pre-hashing two long passwords that
share a 72-byte prefix would verify against each other. The pre-hash turns
any UTF-8 password into a fixed 44-byte value, so no input is truncated or
rejected for length.

Example:
    hasher = BcryptPasswordHasher(rounds=12)
    record = hasher.hash("Password1!")
    assert hasher.verify("Password1!", record)
"""

import base64
import hashlib
import logging

import bcrypt as bcrypt_lib

from common.auth.base import PasswordHasher

logger = logging.getLogger(__name__)


class BcryptPasswordHasher(PasswordHasher):
    """
    bcrypt hasher with SHA-256 pre-hashing.

    Only pre-hashed records verify. The raw password is never handed to
    bcrypt, so the pre-hash value itself is not a usable password.
    """

    def __init__(self, rounds: int = 12):
        """
        Initialize the hasher.

        Args:
            rounds: bcrypt cost factor (log2 of iterations), 4-31
        """
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        self.rounds = rounds
        self._dummy_record = self.hash("dummy-password-for-timing")

    def _prehash_password(self, password: str) -> bytes:
        sha256_hash = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(sha256_hash)

    def hash(self, plaintext: str) -> str:
        """Hash a password using bcrypt with SHA-256 pre-hashing."""
        salt = bcrypt_lib.gensalt(rounds=self.rounds)
        return bcrypt_lib.hashpw(self._prehash_password(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, hash_record: str) -> bool:
        """
        Verify a password against its hash.

        bcrypt.checkpw does the digest comparison in constant time.
        """
        if not hash_record:
            return False

        try:
            hashed_bytes = hash_record.encode("utf-8")
        except (AttributeError, UnicodeEncodeError):
            return False

        try:
            return bcrypt_lib.checkpw(self._prehash_password(plaintext), hashed_bytes)
        except ValueError:
            # Not a bcrypt record at all
            logger.warning("Rejected malformed password hash record")
            return False

    def dummy_verify(self, plaintext: str) -> None:
        """
        Spend one verification's worth of work against a fixed record.

        Called when no account matches, so an unknown identifier costs the
        same time as a wrong password.
        """
        self.verify(plaintext, self._dummy_record)
