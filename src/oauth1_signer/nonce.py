"""Nonce and timestamp sources for OAuth1 requests."""

import secrets
import time


def generate_nonce() -> str:
    """Generate a unique nonce for a request.

    Returns:
        A random 40-character lowercase hex string.
    """
    return secrets.token_hex(20)


def unix_timestamp() -> str:
    """Return the current Unix time in whole seconds, as a string."""
    return str(int(time.time()))


class FixedNonce:
    """Nonce source that always returns the same value.

    Meant for reproducing known signatures; never use it for live traffic.
    """

    def __init__(self, value: str) -> None:
        self._value = value

    def __call__(self) -> str:
        return self._value
