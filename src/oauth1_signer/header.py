"""Rendering of the signed oauth_* parameters as an Authorization header."""

from collections.abc import Mapping

from .parameters import encode_pairs, percent_encode


def build_authorization_header(
    oauth_params: Mapping[str, str], realm: str | None = None
) -> str:
    """Create the Authorization header value.

    Args:
        oauth_params: The oauth_* parameters, including ``oauth_signature``.
        realm: Optional realm, rendered first and never signed. It is
            percent-encoded like every other value.

    Returns:
        ``OAuth key="value", ...`` with keys in ascending order.
    """
    pairs = [f'{k}="{v}"' for k, v in encode_pairs(oauth_params)]
    if realm is not None:
        pairs.insert(0, f'realm="{percent_encode(realm)}"')
    return "OAuth " + ", ".join(pairs)
