"""Signature base string construction."""

import httpx

from .exceptions import InvalidRequestError
from .parameters import percent_encode

DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_url(url: str | httpx.URL) -> str:
    """Reduce a request URL to the base string URI.

    Query and fragment are dropped, scheme and host are lowercased and the
    default port for the scheme is removed. The path keeps its encoding.

    Args:
        url: The request URL.

    Returns:
        The normalized ``scheme://host[:port]/path`` string.

    Raises:
        InvalidRequestError: If scheme, host and path cannot be separated.
    """
    try:
        parsed = url if isinstance(url, httpx.URL) else httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidRequestError(f"Malformed request URL: {url!r}") from e

    scheme = parsed.scheme.lower()
    if scheme not in DEFAULT_PORTS or not parsed.host:
        raise InvalidRequestError(
            f"Request URL must be an absolute http(s) URL: {str(url)!r}"
        )

    host = parsed.host.lower()
    if ":" in host:
        host = f"[{host}]"
    if parsed.port is not None and parsed.port != DEFAULT_PORTS[scheme]:
        host = f"{host}:{parsed.port}"

    path = parsed.raw_path.split(b"?", 1)[0].decode("ascii") or "/"

    return f"{scheme}://{host}{path}"


def build_base_string(method: str, url: str | httpx.URL, parameters: str) -> str:
    """Create the OAuth1 signature base string.

    Args:
        method: HTTP method.
        url: The request URL; query and fragment are stripped.
        parameters: The normalized parameter string.

    Returns:
        ``METHOD&encoded_url&encoded_parameters``.
    """
    return "&".join(
        [
            method.upper(),
            percent_encode(normalize_url(url)),
            percent_encode(parameters),
        ]
    )
