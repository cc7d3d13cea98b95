"""OAuth 1.0a request signing for httpx."""

from .config import OAuth1Settings, get_settings
from .exceptions import (
    ConfigurationError,
    InvalidRequestError,
    OAuth1Error,
    UnsupportedSignatureMethodError,
)
from .hook import OAuth1Hook
from .nonce import FixedNonce, generate_nonce, unix_timestamp
from .signature import CallableSignature, HmacSha1Signature, SignatureStrategy

__all__ = [
    "CallableSignature",
    "ConfigurationError",
    "FixedNonce",
    "HmacSha1Signature",
    "InvalidRequestError",
    "OAuth1Error",
    "OAuth1Hook",
    "OAuth1Settings",
    "SignatureStrategy",
    "UnsupportedSignatureMethodError",
    "generate_nonce",
    "get_settings",
    "unix_timestamp",
]
