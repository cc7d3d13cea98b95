"""Custom exceptions for the OAuth1 signer."""


class OAuth1Error(Exception):
    """Base exception for OAuth1 signing errors."""

    pass


class ConfigurationError(OAuth1Error):
    """Raised when signer configuration is invalid or missing."""

    pass


class UnsupportedSignatureMethodError(OAuth1Error):
    """Raised when no strategy exists for the configured signature method."""

    def __init__(self, signature_method: str):
        super().__init__(
            f"Unsupported signature method '{signature_method}'. "
            "Use HMAC-SHA1 or configure a signer_override."
        )
        self.signature_method = signature_method


class InvalidRequestError(OAuth1Error):
    """Raised when a request cannot be signed, e.g. its URL is malformed."""

    pass
