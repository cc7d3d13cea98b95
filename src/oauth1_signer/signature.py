"""Signature strategies and signing key derivation."""

import base64
import hashlib
import hmac
from abc import ABC, abstractmethod
from collections.abc import Callable

from .exceptions import UnsupportedSignatureMethodError
from .parameters import percent_encode

HMAC_SHA1 = "HMAC-SHA1"


class SignatureStrategy(ABC):
    """Computes the raw signature bytes for a base string."""

    @abstractmethod
    def sign(self, base_string: str, key: str) -> bytes:
        """Sign a base string.

        Args:
            base_string: The signature base string.
            key: The signing key (``consumer_secret&token_secret``).

        Returns:
            The raw signature, before base64 encoding.
        """


class HmacSha1Signature(SignatureStrategy):
    """The HMAC-SHA1 signature method."""

    def sign(self, base_string: str, key: str) -> bytes:
        hashed = hmac.new(
            key.encode("utf-8"),
            base_string.encode("utf-8"),
            hashlib.sha1,
        )
        return hashed.digest()


class CallableSignature(SignatureStrategy):
    """Adapts a plain ``(base_string, key)`` function to a strategy.

    A ``str`` result is UTF-8 encoded so it can be base64-encoded like a digest.
    """

    def __init__(self, func: Callable[[str, str], bytes | str]) -> None:
        self._func = func

    def sign(self, base_string: str, key: str) -> bytes:
        result = self._func(base_string, key)
        if isinstance(result, str):
            return result.encode("utf-8")
        return result


def signing_key(consumer_secret: str, token_secret: str = "") -> str:
    """Create the signing key (``consumer_secret&token_secret``).

    For two-legged OAuth the token secret is empty and the key ends with ``&``.
    """
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"


def resolve_strategy(
    signature_method: str, override: SignatureStrategy | None = None
) -> SignatureStrategy:
    """Pick the strategy for a signature method.

    Raises:
        UnsupportedSignatureMethodError: If the method is not HMAC-SHA1 and
            no override is given.
    """
    if override is not None:
        return override
    if signature_method == HMAC_SHA1:
        return HmacSha1Signature()
    raise UnsupportedSignatureMethodError(signature_method)


def generate_signature(
    base_string: str,
    key: str,
    strategy: SignatureStrategy,
) -> str:
    """Sign a base string and base64-encode the result.

    Returns:
        Base64-encoded signature.
    """
    raw = strategy.sign(base_string, key)
    return base64.b64encode(raw).decode("utf-8")
