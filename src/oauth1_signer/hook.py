"""OAuth1 signing hook for httpx requests."""

import logging
from collections.abc import Callable, Generator, Mapping
from typing import Any

import httpx

from .base_string import build_base_string
from .config import OAuth1Settings, get_settings
from .header import build_authorization_header
from .models import OAuthParameters, RequestView
from .nonce import generate_nonce, unix_timestamp
from .parameters import normalize_parameters
from .signature import generate_signature, resolve_strategy, signing_key

logger = logging.getLogger(__name__)


class OAuth1Hook(httpx.Auth):
    """Signs requests using OAuth1 and sets the Authorization header.

    Works both as a request event hook and as an httpx auth flow::

        hook = OAuth1Hook({"consumer_key": "...", "consumer_secret": "..."})
        httpx.Client(event_hooks={"request": [hook]})
        httpx.AsyncClient(auth=hook)

    The hook keeps no per-request state, so one instance can sign requests
    from many threads or tasks at once.
    """

    requires_request_body = True

    def __init__(
        self,
        config: OAuth1Settings | Mapping[str, Any],
        nonce: Callable[[], str] = generate_nonce,
        clock: Callable[[], str] = unix_timestamp,
    ) -> None:
        """Initialize the signing hook.

        Args:
            config: Settings, or a mapping of options to build them from.
                A mapping is used as-is; the environment is not consulted.
            nonce: Zero-argument callable returning a fresh nonce.
            clock: Zero-argument callable returning the Unix time as a string.

        Raises:
            ConfigurationError: If the options are invalid.
        """
        if isinstance(config, OAuth1Settings):
            self._settings = config
        else:
            self._settings = get_settings(from_environment=False, **config)
        self._nonce = nonce
        self._clock = clock

    @property
    def settings(self) -> OAuth1Settings:
        """The settings this hook signs with (read-only)."""
        return self._settings

    @staticmethod
    def subscribed_events() -> dict[str, str]:
        """Map the httpx events this hook handles to its handler methods."""
        return {"request": "on_request_before_send"}

    def oauth_parameters(
        self, timestamp: str | int | None = None, nonce: str | None = None
    ) -> OAuthParameters:
        """Build the oauth_* parameters for one request, without the signature."""
        settings = self._settings
        return OAuthParameters(
            oauth_consumer_key=settings.consumer_key,
            oauth_nonce=nonce or self._nonce(),
            oauth_signature_method=settings.signature_method,
            oauth_timestamp=str(timestamp) if timestamp is not None else self._clock(),
            oauth_version=settings.version,
            oauth_token=settings.token or None,
            oauth_callback=settings.callback,
            oauth_verifier=settings.verifier,
        )

    def get_string_to_sign(
        self,
        request: httpx.Request | RequestView,
        timestamp: str | int | None = None,
        nonce: str | None = None,
    ) -> str:
        """Create the signature base string for a request."""
        view = self._view(request)
        return self._base_string(view, self.oauth_parameters(timestamp, nonce))

    def get_signature(
        self,
        request: httpx.Request | RequestView,
        timestamp: str | int | None = None,
        nonce: str | None = None,
    ) -> str:
        """Compute the base64-encoded signature for a request."""
        return self._sign(self.get_string_to_sign(request, timestamp, nonce))

    def authorization_header(
        self,
        request: httpx.Request | RequestView,
        timestamp: str | int | None = None,
        nonce: str | None = None,
    ) -> str:
        """Compute the full Authorization header value for a request."""
        view = self._view(request)
        signed = self._signed_parameters(view, self.oauth_parameters(timestamp, nonce))
        return build_authorization_header(signed, realm=self._settings.realm)

    def sign(self, request: httpx.Request, timestamp: str | int | None = None) -> None:
        """Sign a request in place.

        The request is only modified once signing has fully succeeded.

        Args:
            request: The outgoing request.
            timestamp: Optional fixed timestamp; defaults to the clock.

        Raises:
            InvalidRequestError: If the request URL is malformed.
            UnsupportedSignatureMethodError: If no strategy can sign the request.
        """
        view = RequestView.from_httpx(request)
        signed = self._signed_parameters(view, self.oauth_parameters(timestamp))
        request.headers["Authorization"] = build_authorization_header(
            signed, realm=self._settings.realm
        )

    def on_request_before_send(
        self, request: httpx.Request, timestamp: str | int | None = None
    ) -> None:
        """Handle the pre-send event for a request."""
        self.sign(request, timestamp)

    def __call__(self, request: httpx.Request) -> None:
        """Sign a request from an httpx ``"request"`` event hook."""
        self.on_request_before_send(request)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        """Sign a request as part of an httpx auth flow."""
        self.sign(request)
        yield request

    def _view(self, request: httpx.Request | RequestView) -> RequestView:
        if isinstance(request, RequestView):
            return request
        return RequestView.from_httpx(request)

    def _base_string(self, view: RequestView, oauth_params: OAuthParameters) -> str:
        parameters = normalize_parameters(
            view.query_params,
            view.body_params,
            view.content_type,
            oauth_params.as_dict(),
        )
        base_string = build_base_string(view.method, view.url, parameters)
        logger.debug("Signing %s %s", view.method.upper(), view.url)
        logger.debug("Signature base string: %s", base_string)
        return base_string

    def _sign(self, base_string: str) -> str:
        settings = self._settings
        strategy = resolve_strategy(settings.signature_method, settings.signer_override)
        key = signing_key(settings.consumer_secret, settings.token_secret)
        return generate_signature(base_string, key, strategy)

    def _signed_parameters(
        self, view: RequestView, oauth_params: OAuthParameters
    ) -> dict[str, str]:
        signature = self._sign(self._base_string(view, oauth_params))
        return oauth_params.with_signature(signature)
