"""OAuth1 signer MCP server implementation using FastMCP."""

from contextlib import asynccontextmanager
from typing import Any

import httpx
from mcp.server.fastmcp import FastMCP

from .config import get_settings
from .exceptions import ConfigurationError, InvalidRequestError, OAuth1Error
from .hook import OAuth1Hook
from .models import RequestView

# Module-level holder for lifespan management
_hook: OAuth1Hook | None = None


@asynccontextmanager
async def lifespan(app: Any):
    """Lifespan context manager for the MCP server.

    Loads credentials from the environment and creates the signing hook.
    """
    global _hook

    try:
        settings = get_settings()
    except ConfigurationError as e:
        raise ConfigurationError(
            f"Failed to load settings. Ensure OAUTH1_CONSUMER_KEY and "
            f"OAUTH1_CONSUMER_SECRET environment variables are set: {e}"
        ) from e

    _hook = OAuth1Hook(settings)

    try:
        yield
    finally:
        _hook = None


# Create FastMCP server with lifespan
mcp = FastMCP("oauth1-signer", lifespan=lifespan)


def _get_hook() -> OAuth1Hook:
    """Get the OAuth1Hook from module state."""
    if _hook is None:
        raise RuntimeError("OAuth1Hook not initialized - server not running")
    return _hook


def _build_view(
    method: str,
    url: str,
    body: dict[str, str] | None,
    content_type: str | None,
) -> RequestView:
    """Build a request view from tool arguments.

    Query parameters are taken from the URL itself.
    """
    try:
        request = httpx.Request(method, url, data=body or None)
    except httpx.InvalidURL as e:
        raise InvalidRequestError(f"Malformed request URL: {url!r}") from e
    if content_type is not None:
        request.headers["Content-Type"] = content_type
    return RequestView.from_httpx(request)


# ============================================================================
# Signing Tools
# ============================================================================


@mcp.tool()
async def build_signature_base_string(
    method: str,
    url: str,
    body: dict[str, str] | None = None,
    content_type: str | None = None,
    timestamp: str | None = None,
    nonce: str | None = None,
) -> str:
    """Build the OAuth1 signature base string for a request.

    Useful for comparing against what a server reports when it rejects a
    signature.

    Args:
        method: HTTP method (e.g., "GET", "POST")
        url: Full request URL, including any query string
        body: Optional form body parameters
        content_type: Optional Content-Type header; any value other than
            application/x-www-form-urlencoded leaves the body unsigned
        timestamp: Optional fixed oauth_timestamp (Unix seconds)
        nonce: Optional fixed oauth_nonce

    Returns:
        The signature base string
    """
    try:
        hook = _get_hook()
        view = _build_view(method, url, body, content_type)
        return hook.get_string_to_sign(view, timestamp, nonce)
    except OAuth1Error as e:
        return f"Error: {str(e)}"


@mcp.tool()
async def compute_signature(
    method: str,
    url: str,
    body: dict[str, str] | None = None,
    content_type: str | None = None,
    timestamp: str | None = None,
    nonce: str | None = None,
) -> str:
    """Compute the OAuth1 signature for a request.

    Args:
        method: HTTP method (e.g., "GET", "POST")
        url: Full request URL, including any query string
        body: Optional form body parameters
        content_type: Optional Content-Type header
        timestamp: Optional fixed oauth_timestamp (Unix seconds)
        nonce: Optional fixed oauth_nonce

    Returns:
        The base64-encoded oauth_signature value
    """
    try:
        hook = _get_hook()
        view = _build_view(method, url, body, content_type)
        return hook.get_signature(view, timestamp, nonce)
    except OAuth1Error as e:
        return f"Error: {str(e)}"


@mcp.tool()
async def build_authorization_header(
    method: str,
    url: str,
    body: dict[str, str] | None = None,
    content_type: str | None = None,
    timestamp: str | None = None,
    nonce: str | None = None,
) -> str:
    """Build the signed OAuth1 Authorization header for a request.

    Args:
        method: HTTP method (e.g., "GET", "POST")
        url: Full request URL, including any query string
        body: Optional form body parameters
        content_type: Optional Content-Type header
        timestamp: Optional fixed oauth_timestamp (Unix seconds)
        nonce: Optional fixed oauth_nonce

    Returns:
        The Authorization header value, starting with "OAuth "
    """
    try:
        hook = _get_hook()
        view = _build_view(method, url, body, content_type)
        return hook.authorization_header(view, timestamp, nonce)
    except OAuth1Error as e:
        return f"Error: {str(e)}"


def main() -> None:
    """Run the OAuth1 signer MCP server."""
    mcp.run()


if __name__ == "__main__":
    main()
