"""
Pydantic models for the request view and the OAuth parameter set.
"""

import urllib.parse
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, field_validator

from .base_string import normalize_url
from .exceptions import InvalidRequestError
from .parameters import is_form_encoded

Scalar = str | bool | int | float | None
ParamValue = Scalar | list[Scalar]

# ============================================================================
# Request View
# ============================================================================


class RequestView(BaseModel):
    """The parts of an outgoing request that take part in signing."""

    method: str
    url: str
    query_params: list[tuple[str, ParamValue]] = []
    body_params: list[tuple[str, ParamValue]] = []
    content_type: str | None = None

    @field_validator("query_params", "body_params", mode="before")
    @classmethod
    def _mapping_to_pairs(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return list(value.items())
        return value

    @classmethod
    def from_httpx(cls, request: httpx.Request) -> "RequestView":
        """Build a view of an httpx request.

        Body parameters are parsed only for form-encoded (or untyped) bodies.
        An untyped body that is not UTF-8 text contributes no parameters.

        Raises:
            InvalidRequestError: If the URL is malformed, or a body declared
                as form-encoded is not valid UTF-8.
        """
        content_type = request.headers.get("Content-Type")

        body_params: list[tuple[str, ParamValue]] = []
        if is_form_encoded(content_type):
            try:
                content = request.content
            except httpx.RequestNotRead:
                content = request.read()
            if content:
                try:
                    body = content.decode("utf-8")
                except UnicodeDecodeError as e:
                    if content_type is not None:
                        raise InvalidRequestError(
                            "Form-encoded request body is not valid UTF-8"
                        ) from e
                    body = ""
                body_params = list(urllib.parse.parse_qsl(body, keep_blank_values=True))

        return cls(
            method=request.method,
            url=normalize_url(request.url),
            query_params=list(request.url.params.multi_items()),
            body_params=body_params,
            content_type=content_type,
        )


# ============================================================================
# OAuth Parameters
# ============================================================================


class OAuthParameters(BaseModel):
    """The oauth_* protocol parameters for a single request.

    Never holds the signature; use ``with_signature`` once it is computed.
    """

    model_config = ConfigDict(frozen=True)

    oauth_consumer_key: str
    oauth_nonce: str
    oauth_signature_method: str
    oauth_timestamp: str
    oauth_version: str
    oauth_token: str | None = None
    oauth_callback: str | None = None
    oauth_verifier: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Return the parameters that are set, skipping empty optional ones."""
        return {k: v for k, v in self.model_dump().items() if v}

    def with_signature(self, signature: str) -> dict[str, str]:
        """Return the parameters plus ``oauth_signature``."""
        params = self.as_dict()
        params["oauth_signature"] = signature
        return params
