"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import hmac
import secrets
import string

from communion_hub.domain.users.exceptions import MalformedCredentialError
from communion_hub.domain.users.repositories import PasswordHasher

KEY_LENGTH = 64
SALT_BYTES = 16
_SEPARATOR = "."


class ScryptPasswordHasher(PasswordHasher):
    """Salted scrypt credentials stored as ``"<derived_hex>.<salt_hex>"``.

    The hex salt string itself (not its decoded bytes) is fed to scrypt, which
    keeps hashes interchangeable with ones produced by Node's ``crypto.scrypt``
    using its default cost parameters.
    """

    def __init__(self, *, n: int = 16384, r: int = 8, p: int = 1) -> None:
        self._n = n
        self._r = r
        self._p = p
        # 128 * r * n bytes of working memory plus headroom
        self._maxmem = 129 * r * n + 1024 * 1024

    def _derive(self, password: str, salt_hex: str) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt_hex.encode("ascii"),
            n=self._n,
            r=self._r,
            p=self._p,
            maxmem=self._maxmem,
            dklen=KEY_LENGTH,
        )

    def hash(self, password: str) -> str:
        salt_hex = secrets.token_hex(SALT_BYTES)
        derived = self._derive(password, salt_hex)
        return f"{derived.hex()}{_SEPARATOR}{salt_hex}"

    def verify(self, password: str, hashed: str) -> bool:
        derived_hex, salt_hex = _split(hashed)
        if not _is_hex(derived_hex):
            raise MalformedCredentialError()
        if len(derived_hex) % 2:
            # truncated or padded key material is a length mismatch
            return False
        expected = bytes.fromhex(derived_hex)
        supplied = self._derive(password, salt_hex)
        # compare_digest returns False on a length mismatch without short-circuiting
        return hmac.compare_digest(expected, supplied)


def _is_hex(value: str) -> bool:
    return all(char in string.hexdigits for char in value)


def _split(hashed: str) -> tuple[str, str]:
    parts = hashed.split(_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise MalformedCredentialError()
    derived_hex, salt_hex = parts
    if not _is_hex(salt_hex) or len(salt_hex) % 2:
        raise MalformedCredentialError()
    return derived_hex, salt_hex
